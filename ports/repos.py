from __future__ import annotations

from typing import List, Optional, Protocol

from models.company_record import CompanyFields, CompanyRecord


class StoreError(RuntimeError):
    """A store operation did not take effect (transport, validation or not-found)."""

    def __init__(self, operation: str, message: str, record_id: Optional[str] = None) -> None:
        self.operation = operation
        self.record_id = record_id
        prefix = f"{operation} failed"
        if record_id is not None:
            prefix = f"{prefix} for id={record_id}"
        super().__init__(f"{prefix}: {message}")


class CompaniesStorePort(Protocol):
    def list_all(self) -> List[CompanyRecord]:
        """All records, newest first."""
        ...

    def insert(self, fields: CompanyFields) -> CompanyRecord:
        ...

    def update_by_id(self, record_id: str, fields: CompanyFields) -> None:
        ...

    def delete_by_id(self, record_id: str) -> None:
        ...
