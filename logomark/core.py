import logging
import logging.handlers
import os
import sys
from typing import Any, Dict

import yaml

BASE = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# ---------------- Logging ----------------


def get_logger(name="logomark", log_file=None):
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(os.environ.get("LOGOMARK_LOG_LEVEL", "INFO").upper())
    fmt = logging.Formatter(
        '{"ts":"%(asctime)s","level":"%(levelname)s","step":"%(name)s","msg":"%(message)s"}'
    )
    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(fmt)
    logger.addHandler(sh)
    if log_file:
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=5)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return logger


def set_log_level(level: str) -> None:
    """Apply a level to every logomark logger created so far."""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and (name == "logomark" or name.startswith("logomark")):
            logger.setLevel(level.upper())


# ---------------- Errors ----------------


class LogoEngineError(Exception):
    """Base class for errors raised by the logo engine."""


class UnknownAlgorithmError(LogoEngineError, ValueError):
    """Raised when an algorithm name is not registered."""


# ---------------- YAML ----------------


def read_yaml(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise ValueError(f"YAML at {path} must be a mapping/object.")
        return data
