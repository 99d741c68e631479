from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from models.company_record import CompanyFields


@dataclass(frozen=True)
class RefreshCompanies:
    pass


@dataclass(frozen=True)
class OpenForm:
    pass


@dataclass(frozen=True)
class CloseForm:
    pass


@dataclass(frozen=True)
class CreateCompany:
    fields: CompanyFields


@dataclass(frozen=True)
class UpdateCompany:
    id: str
    fields: CompanyFields


@dataclass(frozen=True)
class DeleteCompany:
    id: str


@dataclass(frozen=True)
class SetSearch:
    term: str = ""


Command = Union[
    RefreshCompanies,
    OpenForm,
    CloseForm,
    CreateCompany,
    UpdateCompany,
    DeleteCompany,
    SetSearch,
]
