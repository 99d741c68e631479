from __future__ import annotations

from typing import Callable, Dict, Optional

from models.company_record import EDITABLE_FIELDS, CompanyFields


class CompanyEntryForm:
    """Collects the four fields of a new company.

    Only the name is checked: submit is a silent no-op while it is blank.
    Values are handed over exactly as typed.
    """

    def __init__(
        self,
        on_add: Callable[[CompanyFields], object],
        on_cancel: Optional[Callable[[], object]] = None,
    ) -> None:
        self.on_add = on_add
        self.on_cancel = on_cancel
        self.values: Dict[str, str] = {}
        self.reset()

    def reset(self) -> None:
        self.values = {name: "" for name in EDITABLE_FIELDS}

    def set_field(self, name: str, value: str) -> None:
        if name not in self.values:
            raise KeyError(f"Unknown form field: {name}")
        self.values[name] = value

    def can_submit(self) -> bool:
        return bool(self.values["name"].strip())

    def submit(self) -> bool:
        if not self.can_submit():
            return False
        self.on_add(CompanyFields(**self.values))
        self.reset()
        return True

    def cancel(self) -> None:
        self.reset()
        if self.on_cancel is not None:
            self.on_cancel()
