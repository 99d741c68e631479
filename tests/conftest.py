from __future__ import annotations

import os
import sys
import uuid
from pathlib import Path
from typing import List, Optional, Set

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'tracker.controller'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings():
    # Settings are cached per process; tests change env between cases
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class MemoryStore:
    """In-process store double; `fail` names operations that raise StoreError."""

    def __init__(self, records=None) -> None:
        self.records = list(records or [])
        self.fail: Set[str] = set()
        self.calls: List[tuple] = []

    def _check(self, op: str, record_id: Optional[str] = None) -> None:
        from ports.repos import StoreError
        if op in self.fail:
            raise StoreError(op, "simulated network error", record_id)

    def list_all(self):
        self.calls.append(("list",))
        self._check("list")
        return list(self.records)

    def insert(self, fields):
        from models.company_record import CompanyRecord
        self.calls.append(("insert", fields))
        self._check("insert")
        record = CompanyRecord(id=uuid.uuid4().hex[:8], **fields.model_dump())
        self.records.insert(0, record)
        return record

    def update_by_id(self, record_id, fields):
        self.calls.append(("update", record_id, fields))
        self._check("update", record_id)
        self.records = [r.with_fields(fields) if r.id == record_id else r for r in self.records]

    def delete_by_id(self, record_id):
        self.calls.append(("delete", record_id))
        self._check("delete", record_id)
        self.records = [r for r in self.records if r.id != record_id]


@pytest.fixture
def memory_store():
    return MemoryStore()
