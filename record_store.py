"""
Append-only storage for the records handlers produce.

Two backends share one interface: an in-process store (default, used by
tests) and a JSON-file store that keeps one array per record type under
STORE_DIR. Both serialise appends with a lock, so concurrent conversations
never lose each other's records.
"""

import os
import json
import tempfile
import threading
from pathlib import Path
from typing import Dict, List, Any, Union

from models import RecordType
from chat_logger import get_logger
from config.settings import STORE_BACKEND, STORE_DIR, STORE_KEY_PREFIX

logger = get_logger("greenledger_chat")


class RecordStoreError(Exception):
    """Raised when a record cannot be read or written."""


class UnknownRecordTypeError(RecordStoreError):
    """Raised for record types outside RecordType."""


def _record_type(value: Union[RecordType, str]) -> RecordType:
    if isinstance(value, RecordType):
        return value
    try:
        return RecordType(str(value).strip().lower())
    except ValueError:
        raise UnknownRecordTypeError(f"Unknown record type: {value!r}") from None


def _as_dict(record: Any) -> Dict[str, Any]:
    if hasattr(record, "to_dict"):
        return record.to_dict()
    if isinstance(record, dict):
        return dict(record)
    raise RecordStoreError(f"Cannot store record of type {type(record).__name__}")


class RecordStore:
    """Interface: append a record, list all records of a type (oldest first)."""

    def append(self, record_type: Union[RecordType, str], record: Any) -> Dict[str, Any]:
        raise NotImplementedError

    def list(self, record_type: Union[RecordType, str]) -> List[Dict[str, Any]]:
        raise NotImplementedError


class InMemoryRecordStore(RecordStore):

    def __init__(self):
        self._records: Dict[RecordType, List[Dict[str, Any]]] = {t: [] for t in RecordType}
        self._lock = threading.Lock()

    def append(self, record_type, record):
        rtype = _record_type(record_type)
        row = _as_dict(record)
        with self._lock:
            self._records[rtype].append(row)
        return row

    def list(self, record_type):
        rtype = _record_type(record_type)
        with self._lock:
            return [dict(r) for r in self._records[rtype]]


class JsonFileRecordStore(RecordStore):
    """
    One JSON array per record type: <directory>/<prefix><type>.json.

    Appends read-modify-write the whole file under a lock and replace it
    atomically through a temp file in the same directory.

    The lock is per instance, so appends are only safe within one process
    sharing one store. Two worker processes pointed at the same STORE_DIR
    can overwrite each other's appends. File I/O is blocking and runs on
    the event loop thread of the calling handler.
    """

    def __init__(self, directory: str = STORE_DIR, prefix: str = STORE_KEY_PREFIX):
        self.directory = Path(directory)
        self.prefix = prefix
        self._lock = threading.Lock()

    def path_for(self, record_type) -> Path:
        return self.directory / f"{self.prefix}{_record_type(record_type).value}.json"

    def _read(self, path: Path) -> List[Dict[str, Any]]:
        if not path.exists():
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                rows = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RecordStoreError(f"Could not read {path.name}: {e}") from e
        if not isinstance(rows, list):
            raise RecordStoreError(f"{path.name} does not hold a JSON array")
        return rows

    def _write(self, path: Path, rows: List[Dict[str, Any]]) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=path.name, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(rows, f, ensure_ascii=False, indent=2)
                os.replace(tmp, path)
            except BaseException:
                if os.path.exists(tmp):
                    os.remove(tmp)
                raise
        except (OSError, TypeError, ValueError) as e:
            raise RecordStoreError(f"Could not write {path.name}: {e}") from e

    def append(self, record_type, record):
        path = self.path_for(record_type)
        row = _as_dict(record)
        with self._lock:
            rows = self._read(path)
            rows.append(row)
            self._write(path, rows)
        return row

    def list(self, record_type):
        path = self.path_for(record_type)
        with self._lock:
            return self._read(path)


def create_store(backend: str = STORE_BACKEND) -> RecordStore:
    """Build the store selected by STORE_BACKEND (memory | json)."""
    if backend == "json":
        logger.info(f"Record store | backend=json | dir={STORE_DIR}")
        return JsonFileRecordStore()
    if backend != "memory":
        logger.warning(f"Record store | unknown backend={backend} | using memory")
    return InMemoryRecordStore()
