"""
Test configuration and fixtures for the logo engine.

Keeps every test isolated from the on-disk ledger and any local
``conf/logomark.yaml`` by pointing the environment at temp paths.
"""

import os
import sys

import pytest

# Ensure repo root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from logomark.ledger import HashLedger, MemoryLedgerStore
from logomark.params import GenerationRequest


@pytest.fixture
def acme_request():
    """Single-variant request used by the determinism scenarios"""
    return GenerationRequest(
        brand_name="Acme",
        primary_color="#3b82f6",
        variations=1,
        seed="acme-seed",
    )


@pytest.fixture
def memory_ledger():
    return HashLedger(MemoryLedgerStore())


@pytest.fixture
def tmp_ledger_path(tmp_path):
    return tmp_path / "ledger" / "logo_hashes.json"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep config and ledger lookups away from the working tree"""
    monkeypatch.delenv("LOGOMARK_CONFIG", raising=False)
    monkeypatch.delenv("LOGOMARK_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOGOMARK_LEDGER_PATH", str(tmp_path / "default_ledger.json"))
