from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


EDITABLE_FIELDS: tuple[str, ...] = ("name", "website", "role", "linkedin")


class CompanyFields(BaseModel):
    """The four editable fields: payload of insert and update."""

    name: str = ""
    website: str = ""
    role: str = ""
    linkedin: str = ""

    model_config = ConfigDict(extra="ignore")

    @field_validator("name", "website", "role", "linkedin", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        # Stores may hand back NULL for optional columns
        return "" if value is None else value


class CompanyRecord(CompanyFields):
    """App/store record shape: one tracked company with its store-assigned id."""

    id: str

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value):
        # Integer primary keys are still opaque identifiers to the app
        return value if isinstance(value, str) or value is None else str(value)

    def editable_fields(self) -> CompanyFields:
        return CompanyFields(**self.model_dump(include=set(EDITABLE_FIELDS)))

    def with_fields(self, fields: CompanyFields) -> "CompanyRecord":
        """Full replacement of the editable fields; id untouched."""
        return CompanyRecord(id=self.id, **fields.model_dump())
