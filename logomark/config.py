"""
Engine configuration.

Named constants for the candidate loop, quality threshold, ledger capacity and
hash format version, plus the YAML-backed ``EngineCfg`` model. Values resolve in
this order: built-in defaults, ``conf/logomark.example.yaml``,
``conf/logomark.yaml`` (or the file named by ``LOGOMARK_CONFIG``), then
environment overrides.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, validator

from .core import BASE, get_logger, read_yaml

log = get_logger("logomark.config")

# ============================================================================
# CONSTANTS
# ============================================================================

CANDIDATES_PER_VARIANT = 5
DEFAULT_MIN_QUALITY = 80
LEDGER_CAPACITY = 1000
FORMAT_VERSION = "v4"
DEFAULT_VARIATIONS = 3
CANVAS_SIZE = 100
LEDGER_STORAGE_KEY = "parametric-logo-engine-hashes"


# ============================================================================
# MODELS
# ============================================================================


class EngineCfg(BaseModel):
    """Runtime settings for generation and the hash ledger."""

    candidates_per_variant: int = Field(default=CANDIDATES_PER_VARIANT, description="Max candidates per variant")
    min_quality_score: float = Field(default=DEFAULT_MIN_QUALITY, description="Early-stop quality threshold")
    ledger_capacity: int = Field(default=LEDGER_CAPACITY, description="Max records kept in the ledger")
    format_version: str = Field(default=FORMAT_VERSION, description="Tag mixed into every hash")
    default_variations: int = Field(default=DEFAULT_VARIATIONS, description="Variants when none requested")
    canvas_size: int = Field(default=CANVAS_SIZE, description="Square viewBox edge")
    ledger_path: str = Field(default="data/logo_hashes.json", description="JSON ledger location")
    log_level: str = Field(default="INFO", description="Package log level")

    @validator("candidates_per_variant", "ledger_capacity", "canvas_size")
    def validate_positive(cls, v):
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @validator("min_quality_score")
    def validate_score(cls, v):
        if v < 0 or v > 100:
            raise ValueError("min_quality_score must be between 0 and 100")
        return v

    @validator("log_level")
    def validate_level(cls, v):
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return v

    def resolved_ledger_path(self) -> str:
        if os.path.isabs(self.ledger_path):
            return self.ledger_path
        return os.path.join(BASE, self.ledger_path)


# ============================================================================
# LOADING
# ============================================================================


def _config_path() -> Optional[str]:
    env_path = os.environ.get("LOGOMARK_CONFIG")
    if env_path:
        return env_path
    path = os.path.join(BASE, "conf", "logomark.yaml")
    if not os.path.exists(path):
        path = os.path.join(BASE, "conf", "logomark.example.yaml")
    return path if os.path.exists(path) else None


def load_config(path: Optional[str] = None) -> EngineCfg:
    """Load ``EngineCfg`` from YAML, applying ``LOGOMARK_*`` environment overrides."""
    load_dotenv(os.path.join(BASE, ".env"))
    path = path or _config_path()
    raw = read_yaml(path) if path else {}
    # Allow either a flat mapping or one nested under "engine"
    if isinstance(raw.get("engine"), dict):
        raw = raw["engine"]

    if os.environ.get("LOGOMARK_LEDGER_PATH"):
        raw["ledger_path"] = os.environ["LOGOMARK_LEDGER_PATH"]
    if os.environ.get("LOGOMARK_LOG_LEVEL"):
        raw["log_level"] = os.environ["LOGOMARK_LOG_LEVEL"]

    try:
        cfg = EngineCfg(**raw)
    except ValidationError as e:
        log.error(f"Config validation failed: {e}")
        raise ValueError(f"Invalid logomark configuration in {path}: {e}") from e
    return cfg


__all__ = [
    "CANDIDATES_PER_VARIANT",
    "DEFAULT_MIN_QUALITY",
    "LEDGER_CAPACITY",
    "FORMAT_VERSION",
    "DEFAULT_VARIATIONS",
    "CANVAS_SIZE",
    "LEDGER_STORAGE_KEY",
    "EngineCfg",
    "load_config",
]
