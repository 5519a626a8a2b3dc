"""
Tests for the record store backends.
"""

import json
import threading

import pytest

from models import RecordType, TransactionRecord
from record_store import (
    InMemoryRecordStore, JsonFileRecordStore, RecordStoreError,
    UnknownRecordTypeError, create_store,
)


def txn(i):
    return TransactionRecord(
        id=f"TXN{i}", user_id="F1001", requester_id="F1001",
        amount=100 * i, purpose="seed_purchase", timestamp="2024-07-15T10:30:00+00:00",
    )


class TestInMemoryStore:

    def test_append_keeps_order(self):
        store = InMemoryRecordStore()
        for i in range(3):
            store.append(RecordType.TRANSACTIONS, txn(i))
        assert [r["id"] for r in store.list(RecordType.TRANSACTIONS)] == ["TXN0", "TXN1", "TXN2"]

    def test_types_are_separate(self):
        store = InMemoryRecordStore()
        store.append(RecordType.TRANSACTIONS, txn(1))
        assert store.list(RecordType.LEDGER) == []

    def test_list_returns_copies(self):
        store = InMemoryRecordStore()
        store.append(RecordType.TRANSACTIONS, txn(1))
        store.list(RecordType.TRANSACTIONS)[0]["amount"] = 0
        assert store.list(RecordType.TRANSACTIONS)[0]["amount"] == 100

    def test_string_record_types(self):
        store = InMemoryRecordStore()
        store.append("qrcodes", {"id": "Q1"})
        assert store.list(" QRCodes ") == [{"id": "Q1"}]

    def test_unknown_record_type(self):
        store = InMemoryRecordStore()
        with pytest.raises(UnknownRecordTypeError):
            store.list("invoices")
        with pytest.raises(UnknownRecordTypeError):
            store.append("invoices", {"id": 1})

    def test_rejects_unserialisable_records(self):
        with pytest.raises(RecordStoreError):
            InMemoryRecordStore().append(RecordType.LEDGER, object())


class TestJsonFileStore:

    def test_file_layout(self, tmp_path):
        store = JsonFileRecordStore(directory=str(tmp_path), prefix="test-")
        store.append(RecordType.TRANSACTIONS, txn(1))
        path = tmp_path / "test-transactions.json"
        assert store.path_for("transactions") == path
        rows = json.loads(path.read_text(encoding="utf-8"))
        assert rows[0]["id"] == "TXN1"

    def test_missing_file_is_empty(self, tmp_path):
        assert JsonFileRecordStore(directory=str(tmp_path)).list(RecordType.NOTIFICATIONS) == []

    def test_survives_new_instance(self, tmp_path):
        JsonFileRecordStore(directory=str(tmp_path)).append(RecordType.TRANSACTIONS, txn(1))
        JsonFileRecordStore(directory=str(tmp_path)).append(RecordType.TRANSACTIONS, txn(2))
        rows = JsonFileRecordStore(directory=str(tmp_path)).list(RecordType.TRANSACTIONS)
        assert [r["id"] for r in rows] == ["TXN1", "TXN2"]

    def test_corrupt_file_raises(self, tmp_path):
        store = JsonFileRecordStore(directory=str(tmp_path))
        store.path_for(RecordType.LEDGER).write_text("{not json", encoding="utf-8")
        with pytest.raises(RecordStoreError):
            store.list(RecordType.LEDGER)
        with pytest.raises(RecordStoreError):
            store.append(RecordType.LEDGER, {"id": "0x1"})

    def test_non_array_file_raises(self, tmp_path):
        store = JsonFileRecordStore(directory=str(tmp_path))
        store.path_for(RecordType.LEDGER).write_text('{"id": 1}', encoding="utf-8")
        with pytest.raises(RecordStoreError):
            store.list(RecordType.LEDGER)

    def test_concurrent_appends_are_not_lost(self, tmp_path):
        store = JsonFileRecordStore(directory=str(tmp_path))
        threads = [
            threading.Thread(target=store.append, args=(RecordType.TRANSACTIONS, txn(i)))
            for i in range(20)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        rows = store.list(RecordType.TRANSACTIONS)
        assert len(rows) == 20
        assert len({r["id"] for r in rows}) == 20

    def test_no_temp_files_left_behind(self, tmp_path):
        store = JsonFileRecordStore(directory=str(tmp_path))
        store.append(RecordType.QRCODES, {"id": "Q1"})
        assert [p.name for p in tmp_path.iterdir()] == [store.path_for("qrcodes").name]


class TestCreateStore:

    def test_memory_backend(self):
        assert isinstance(create_store("memory"), InMemoryRecordStore)

    def test_json_backend(self):
        assert isinstance(create_store("json"), JsonFileRecordStore)

    def test_unknown_backend_falls_back_to_memory(self):
        assert isinstance(create_store("redis"), InMemoryRecordStore)
