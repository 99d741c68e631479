from __future__ import annotations

import logging
import time
from typing import Callable, Dict, List, Optional

from models.company_record import CompanyRecord
from ports.repos import CompaniesStorePort, StoreError
from tracker.card import CompanyCard
from tracker.commands import (
    CloseForm,
    Command,
    CreateCompany,
    DeleteCompany,
    OpenForm,
    RefreshCompanies,
    SetSearch,
    UpdateCompany,
)
from tracker.form import CompanyEntryForm
from tracker.state import TrackerState
from utils.logging_setup import init_logging, log_store_call

logger = logging.getLogger(__name__)


class ShellController:
    """Single owner of TrackerState.

    Store calls happen here and local state is patched only after the store
    reports success. A StoreError is logged and the command becomes a no-op.
    """

    def __init__(self, store: CompaniesStorePort, state: Optional[TrackerState] = None) -> None:
        init_logging()
        self.store = store
        self.state = state or TrackerState()
        self._handlers: Dict[type, Callable[[Command], bool]] = {
            RefreshCompanies: self._refresh,
            OpenForm: self._open_form,
            CloseForm: self._close_form,
            CreateCompany: self._create,
            UpdateCompany: self._update,
            DeleteCompany: self._delete,
            SetSearch: self._set_search,
        }

    def dispatch(self, command: Command) -> bool:
        """Apply a command; False when a store failure left state unchanged."""
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command: {type(command).__name__}")
        return handler(command)

    def _call_store(self, op: str, fn: Callable, *args, record_id: Optional[str] = None):
        t0 = time.time()
        try:
            result = fn(*args)
        except StoreError as e:
            duration_ms = int((time.time() - t0) * 1000)
            log_store_call(logger, op=op, status="error", duration_ms=duration_ms, record_id=record_id, error=str(e))
            raise
        duration_ms = int((time.time() - t0) * 1000)
        log_store_call(logger, op=op, status="ok", duration_ms=duration_ms, record_id=record_id)
        return result

    # --- handlers ---
    def _refresh(self, command: RefreshCompanies) -> bool:
        try:
            companies = self._call_store("list", self.store.list_all)
        except StoreError:
            return False
        self.state.companies = list(companies)
        return True

    def _open_form(self, command: OpenForm) -> bool:
        self.state.form_visible = True
        return True

    def _close_form(self, command: CloseForm) -> bool:
        self.state.form_visible = False
        return True

    def _create(self, command: CreateCompany) -> bool:
        try:
            created = self._call_store("insert", self.store.insert, command.fields)
        except StoreError:
            return False
        self.state.companies = [created, *self.state.companies]
        self.state.form_visible = False
        return True

    def _update(self, command: UpdateCompany) -> bool:
        try:
            self._call_store("update", self.store.update_by_id, command.id, command.fields, record_id=command.id)
        except StoreError:
            return False
        self.state.companies = [
            c.with_fields(command.fields) if c.id == command.id else c for c in self.state.companies
        ]
        return True

    def _delete(self, command: DeleteCompany) -> bool:
        try:
            self._call_store("delete", self.store.delete_by_id, command.id, record_id=command.id)
        except StoreError:
            return False
        self.state.companies = [c for c in self.state.companies if c.id != command.id]
        return True

    def _set_search(self, command: SetSearch) -> bool:
        self.state.search = command.term
        return True

    # --- derived views ---
    def visible_companies(self) -> List[CompanyRecord]:
        """Case-insensitive name/role filter; the collection itself is untouched."""
        if not self.state.search.strip():
            return list(self.state.companies)
        term = self.state.search.lower()
        return [
            c for c in self.state.companies
            if term in c.name.lower() or term in c.role.lower()
        ]

    def summary(self) -> Dict[str, int]:
        companies = self.state.companies
        return {
            "total": len(companies),
            "shown": len(self.visible_companies()),
            "with_website": sum(1 for c in companies if c.website),
            "with_linkedin": sum(1 for c in companies if c.linkedin),
            "with_role": sum(1 for c in companies if c.role),
        }

    def find(self, record_id: str) -> Optional[CompanyRecord]:
        for c in self.state.companies:
            if c.id == record_id:
                return c
        return None

    # --- view wiring ---
    def form_for(self) -> CompanyEntryForm:
        return CompanyEntryForm(
            on_add=lambda fields: self.dispatch(CreateCompany(fields)),
            on_cancel=lambda: self.dispatch(CloseForm()),
        )

    def card_for(self, company: CompanyRecord) -> CompanyCard:
        return CompanyCard(
            company,
            on_update=lambda record_id, fields: self.dispatch(UpdateCompany(record_id, fields)),
            on_delete=lambda record_id: self.dispatch(DeleteCompany(record_id)),
        )
