# tests/test_ledger.py
import json
import threading
import time

from logomark.config import LEDGER_STORAGE_KEY
from logomark.ledger import (
    HashLedger,
    JsonFileLedgerStore,
    LedgerStore,
    MemoryLedgerStore,
    generate_hash,
    open_file_ledger,
)
from logomark.params import HashRecord

PARAMS = {"arm_count": 8, "arm_length": 32.5, "base": {"stroke_width": 3.1}}


def _record(i, brand="Acme"):
    return HashRecord(hash=f"h{i}", brand_name=brand, algorithm="starburst", variant=1, created_at=i)


class BrokenStore(LedgerStore):
    """Store whose every operation fails like an unavailable disk"""

    def load(self):
        raise OSError("storage unavailable")

    def save(self, data):
        raise OSError("quota exceeded")

    def clear(self):
        raise OSError("storage unavailable")


class CorruptStore(MemoryLedgerStore):
    def load(self):
        return {"hashes": "not-a-list", "records": None}


class SlowStore(MemoryLedgerStore):
    """Yields between read and write so unsynchronised writers would overlap"""

    def load(self):
        data = super().load()
        time.sleep(0.001)
        return data


def test_hash_is_deterministic_and_key_order_free():
    a = generate_hash("Acme", "starburst", 1, PARAMS)
    b = generate_hash("Acme", "starburst", 1, dict(reversed(list(PARAMS.items()))))
    assert a == b


def test_hash_normalizes_brand_case_and_whitespace():
    assert generate_hash("Acme", "starburst", 1, PARAMS) == generate_hash("  ACME ", "starburst", 1, PARAMS)


def test_hash_sensitive_to_every_field():
    reference = generate_hash("Acme", "starburst", 1, PARAMS)
    assert generate_hash("Acmf", "starburst", 1, PARAMS) != reference
    assert generate_hash("Acme", "monogram-blend", 1, PARAMS) != reference
    assert generate_hash("Acme", "starburst", 2, PARAMS) != reference
    assert generate_hash("Acme", "starburst", 1, {**PARAMS, "arm_count": 9}) != reference


def test_format_version_bump_changes_hash():
    assert generate_hash("Acme", "starburst", 1, PARAMS, "v4") != generate_hash("Acme", "starburst", 1, PARAMS, "v5")


def test_record_and_duplicate(memory_ledger):
    assert memory_ledger.record(_record(1))
    assert memory_ledger.is_duplicate("h1")
    assert not memory_ledger.is_duplicate("h2")
    # duplicates are not re-recorded
    assert not memory_ledger.record(_record(1))
    assert memory_ledger.hashes() == ["h1"]


def test_eviction_keeps_newest_thousand(memory_ledger):
    for i in range(1001):
        memory_ledger.record(_record(i))
    hashes = memory_ledger.hashes()
    assert len(hashes) == 1000
    assert hashes[0] == "h1"
    assert hashes[-1] == "h1000"
    assert not memory_ledger.is_duplicate("h0")
    assert len(memory_ledger.records()) == 1000


def test_small_capacity():
    ledger = HashLedger(MemoryLedgerStore(), capacity=3)
    for i in range(5):
        ledger.record(_record(i))
    assert ledger.hashes() == ["h2", "h3", "h4"]


def test_concurrent_records_are_not_lost():
    ledger = HashLedger(SlowStore(), capacity=1000)
    threads_n, per_thread = 8, 20

    def writer(t):
        for i in range(per_thread):
            ledger.record(_record(t * 100 + i))

    threads = [threading.Thread(target=writer, args=(t,)) for t in range(threads_n)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    hashes = ledger.hashes()
    assert len(hashes) == threads_n * per_thread
    assert set(hashes) == {f"h{t * 100 + i}" for t in range(threads_n) for i in range(per_thread)}


def test_records_for_brand_case_insensitive(memory_ledger):
    memory_ledger.record(_record(1, "Acme"))
    memory_ledger.record(_record(2, "Globex"))
    memory_ledger.record(_record(3, "ACME"))
    found = memory_ledger.records_for_brand("acme")
    assert [r.hash for r in found] == ["h1", "h3"]


def test_broken_store_is_tolerated():
    """Storage failures read as an empty ledger and skip writes."""
    ledger = HashLedger(BrokenStore())
    assert ledger.hashes() == []
    assert not ledger.is_duplicate("h1")
    assert ledger.record(_record(1)) is False
    ledger.clear()


def test_corrupt_data_reads_empty():
    ledger = HashLedger(CorruptStore())
    assert ledger.hashes() == []
    assert ledger.records() == []


def test_clear(memory_ledger):
    memory_ledger.record(_record(1))
    memory_ledger.clear()
    assert memory_ledger.hashes() == []


def test_file_store_roundtrip(tmp_ledger_path):
    ledger = open_file_ledger(tmp_ledger_path, capacity=10)
    ledger.record(_record(1))

    document = json.loads(tmp_ledger_path.read_text(encoding="utf-8"))
    assert document[LEDGER_STORAGE_KEY]["hashes"] == ["h1"]

    reopened = open_file_ledger(tmp_ledger_path)
    assert reopened.is_duplicate("h1")
    reopened.clear()
    assert not tmp_ledger_path.exists()


def test_file_store_corrupt_json(tmp_ledger_path):
    tmp_ledger_path.parent.mkdir(parents=True)
    tmp_ledger_path.write_text("{not json", encoding="utf-8")
    ledger = HashLedger(JsonFileLedgerStore(tmp_ledger_path))
    assert ledger.hashes() == []
    # a write replaces the corrupt document
    assert ledger.record(_record(7))
    assert ledger.hashes() == ["h7"]


def test_file_store_non_object(tmp_ledger_path):
    tmp_ledger_path.parent.mkdir(parents=True)
    tmp_ledger_path.write_text("[1, 2, 3]", encoding="utf-8")
    assert HashLedger(JsonFileLedgerStore(tmp_ledger_path)).hashes() == []
