#!/usr/bin/env python3
"""
Hash & Dedup Ledger

Canonical content hash for a logo configuration plus a bounded, advisory record
of what has already been produced. Storage is an injected port so generation
never touches ambient state; an in-memory store serves tests and a JSON file
store serves the CLI.

The ledger is an optimization only. Any storage failure is logged as a warning
and treated as an empty ledger (reads) or a skipped write.
"""

import json
import os
import threading
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ValidationError

from .config import FORMAT_VERSION, LEDGER_CAPACITY, LEDGER_STORAGE_KEY
from .core import get_logger
from .params import HashRecord
from .rng import cyrb53_base36

log = get_logger("logomark.ledger")


# ============================================================================
# HASHING
# ============================================================================


def canonical_params(params: Union[BaseModel, Dict[str, Any], None]) -> Dict[str, Any]:
    if params is None:
        return {}
    if isinstance(params, BaseModel):
        return params.model_dump(mode="json")
    return dict(params)


def generate_hash(
    brand_name: str,
    algorithm: str,
    variant: int,
    params: Union[BaseModel, Dict[str, Any], None],
    format_version: str = FORMAT_VERSION,
) -> str:
    """
    Content hash of one configuration.

    The brand name is lower-cased and trimmed; the record is serialized with
    sorted keys so dict ordering never changes the result.
    """
    record = {
        "brandName": brand_name.lower().strip(),
        "algorithm": str(getattr(algorithm, "value", algorithm)),
        "variant": variant,
        "params": canonical_params(params),
        "version": format_version,
    }
    payload = json.dumps(record, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return cyrb53_base36(payload)


# ============================================================================
# STORAGE PORT
# ============================================================================


class LedgerStore(ABC):
    """Persists the ledger blob: ``{"hashes": [...], "records": [...]}``."""

    @abstractmethod
    def load(self) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def save(self, data: Dict[str, Any]) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...


class MemoryLedgerStore(LedgerStore):
    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = json.loads(json.dumps(data)) if data is not None else None

    def load(self) -> Optional[Dict[str, Any]]:
        return json.loads(json.dumps(self._data)) if self._data is not None else None

    def save(self, data: Dict[str, Any]) -> None:
        self._data = json.loads(json.dumps(data))

    def clear(self) -> None:
        self._data = None


class JsonFileLedgerStore(LedgerStore):
    """JSON document on disk, keyed under ``LEDGER_STORAGE_KEY``."""

    def __init__(self, path: Union[str, Path], key: str = LEDGER_STORAGE_KEY):
        self.path = Path(path)
        self.key = key

    def load(self) -> Optional[Dict[str, Any]]:
        if not self.path.exists():
            return None
        with open(self.path, "r", encoding="utf-8") as f:
            document = json.load(f)
        if not isinstance(document, dict):
            raise ValueError(f"Ledger file {self.path} must hold a JSON object")
        return document.get(self.key)

    def save(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump({self.key: data}, f, indent=2)
        os.replace(tmp, self.path)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


# ============================================================================
# LEDGER
# ============================================================================


class HashLedger:
    """Bounded FIFO record of produced hashes."""

    def __init__(self, store: LedgerStore, capacity: int = LEDGER_CAPACITY):
        self.store = store
        self.capacity = max(1, capacity)
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, List[Any]]:
        try:
            data = self.store.load()
        except (OSError, ValueError) as e:
            log.warning(f"Ledger read failed, treating as empty: {e}")
            return {"hashes": [], "records": []}
        if data is None:
            return {"hashes": [], "records": []}
        hashes = data.get("hashes") if isinstance(data, dict) else None
        records = data.get("records") if isinstance(data, dict) else None
        if not isinstance(hashes, list) or not isinstance(records, list):
            log.warning("Ledger data malformed, treating as empty")
            return {"hashes": [], "records": []}
        return {"hashes": hashes, "records": records}

    def is_duplicate(self, hash_value: str) -> bool:
        return hash_value in self._read()["hashes"]

    def hashes(self) -> List[str]:
        return list(self._read()["hashes"])

    def records(self) -> List[HashRecord]:
        out = []
        for raw in self._read()["records"]:
            try:
                out.append(HashRecord(**raw))
            except (TypeError, ValidationError) as e:
                log.warning(f"Skipping malformed ledger record: {e}")
        return out

    def records_for_brand(self, brand_name: str) -> List[HashRecord]:
        name = brand_name.lower()
        return [r for r in self.records() if r.brand_name.lower() == name]

    def record(self, entry: HashRecord) -> bool:
        """Append ``entry`` unless already present; returns True when written."""
        with self._lock:
            data = self._read()
            if entry.hash in data["hashes"]:
                return False
            data["hashes"].append(entry.hash)
            data["records"].append(entry.model_dump())
            overflow = len(data["hashes"]) - self.capacity
            if overflow > 0:
                data["hashes"] = data["hashes"][overflow:]
                data["records"] = data["records"][overflow:]
            try:
                self.store.save(data)
            except (OSError, TypeError, ValueError) as e:
                log.warning(f"Failed to store logo hash {entry.hash}: {e}")
                return False
            return True

    def record_logo(self, logo, created_at: Optional[int] = None) -> bool:
        quality = logo.quality.score if logo.quality is not None else None
        return self.record(
            HashRecord(
                hash=logo.hash,
                brand_name=logo.meta.brand_name,
                algorithm=logo.algorithm.value,
                variant=logo.variant,
                created_at=created_at if created_at is not None else int(time.time() * 1000),
                quality_score=quality,
            )
        )

    def clear(self) -> None:
        with self._lock:
            try:
                self.store.clear()
            except OSError as e:
                log.warning(f"Failed to clear ledger: {e}")


def open_file_ledger(path: Union[str, Path], capacity: int = LEDGER_CAPACITY) -> HashLedger:
    return HashLedger(JsonFileLedgerStore(path), capacity=capacity)


__all__ = [
    "canonical_params",
    "generate_hash",
    "LedgerStore",
    "MemoryLedgerStore",
    "JsonFileLedgerStore",
    "HashLedger",
    "open_file_ledger",
]
