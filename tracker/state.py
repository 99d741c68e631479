from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from models.company_record import CompanyRecord


@dataclass
class TrackerState:
    """Everything the shell renders from. Only ShellController mutates it."""

    companies: List[CompanyRecord] = field(default_factory=list)
    form_visible: bool = False
    search: str = ""
