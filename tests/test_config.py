# tests/test_config.py
import os

import pytest

from logomark.config import (
    CANDIDATES_PER_VARIANT,
    DEFAULT_MIN_QUALITY,
    FORMAT_VERSION,
    LEDGER_CAPACITY,
    EngineCfg,
    load_config,
)
from logomark.core import BASE

EXAMPLE = os.path.join(BASE, "conf", "logomark.example.yaml")


def test_constants():
    assert CANDIDATES_PER_VARIANT == 5
    assert DEFAULT_MIN_QUALITY == 80
    assert LEDGER_CAPACITY == 1000
    assert FORMAT_VERSION == "v4"


def test_defaults():
    cfg = EngineCfg()
    assert cfg.candidates_per_variant == 5
    assert cfg.min_quality_score == 80
    assert cfg.ledger_capacity == 1000
    assert cfg.format_version == "v4"
    assert cfg.canvas_size == 100
    assert cfg.log_level == "INFO"


def test_example_config_matches_defaults(monkeypatch):
    monkeypatch.delenv("LOGOMARK_LEDGER_PATH", raising=False)
    cfg = load_config(EXAMPLE)
    assert cfg == EngineCfg()


def test_missing_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("LOGOMARK_LEDGER_PATH", raising=False)
    assert load_config(str(tmp_path / "absent.yaml")) == EngineCfg()


def test_nested_and_flat_layouts(tmp_path):
    nested = tmp_path / "nested.yaml"
    nested.write_text("engine:\n  candidates_per_variant: 3\n  format_version: v5\n", encoding="utf-8")
    flat = tmp_path / "flat.yaml"
    flat.write_text("min_quality_score: 60\n", encoding="utf-8")

    cfg = load_config(str(nested))
    assert cfg.candidates_per_variant == 3
    assert cfg.format_version == "v5"
    assert load_config(str(flat)).min_quality_score == 60


def test_env_overrides(tmp_path, monkeypatch):
    path = tmp_path / "cfg.yaml"
    path.write_text("engine:\n  ledger_path: from-file.json\n  log_level: info\n", encoding="utf-8")
    monkeypatch.setenv("LOGOMARK_LEDGER_PATH", "/tmp/override.json")
    monkeypatch.setenv("LOGOMARK_LOG_LEVEL", "debug")
    cfg = load_config(str(path))
    assert cfg.ledger_path == "/tmp/override.json"
    assert cfg.log_level == "DEBUG"


def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("engine:\n  default_variations: 7\n", encoding="utf-8")
    monkeypatch.setenv("LOGOMARK_CONFIG", str(path))
    assert load_config().default_variations == 7


@pytest.mark.parametrize(
    "body",
    [
        "engine:\n  candidates_per_variant: 0\n",
        "engine:\n  min_quality_score: 120\n",
        "engine:\n  log_level: loud\n",
        "engine:\n  ledger_capacity: -5\n",
    ],
)
def test_invalid_config_raises(tmp_path, body):
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_non_mapping_yaml_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_resolved_ledger_path():
    assert EngineCfg(ledger_path="data/x.json").resolved_ledger_path() == os.path.join(BASE, "data", "x.json")
    assert EngineCfg(ledger_path="/abs/x.json").resolved_ledger_path() == "/abs/x.json"
