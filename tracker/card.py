from __future__ import annotations

from typing import Callable, Dict, List, Optional

from models.company_record import EDITABLE_FIELDS, CompanyFields, CompanyRecord
from services.domain_utils import display_linkedin, display_website, linkedin_href, website_href


ROLE_PLACEHOLDER = "Not specified"


class CompanyCard:
    """One company, shown either in view mode or as an inline edit."""

    def __init__(
        self,
        company: CompanyRecord,
        on_update: Callable[[str, CompanyFields], object],
        on_delete: Callable[[str], object],
    ) -> None:
        self.company = company
        self.on_update = on_update
        self.on_delete = on_delete
        self.editing = False
        self.edit_data: Optional[Dict[str, str]] = None

    # --- view mode ---
    def role_text(self) -> str:
        return self.company.role or ROLE_PLACEHOLDER

    def website_link(self) -> Optional[tuple[str, str]]:
        """(href, text) or None when no website is stored."""
        if not self.company.website:
            return None
        return website_href(self.company.website), display_website(self.company.website)

    def linkedin_link(self) -> Optional[tuple[str, str]]:
        if not self.company.linkedin:
            return None
        return linkedin_href(self.company.linkedin), display_linkedin(self.company.linkedin)

    def render(self) -> List[str]:
        if self.editing:
            return [f"{name.capitalize()}: {self.edit_data[name]}" for name in EDITABLE_FIELDS]
        lines = [self.company.name, f"  Role:     {self.role_text()}"]
        website = self.website_link()
        if website:
            href, text = website
            lines.append(f"  Website:  {text} <{href}>")
        linkedin = self.linkedin_link()
        if linkedin:
            href, text = linkedin
            lines.append(f"  LinkedIn: {text} <{href}>")
        return lines

    def delete(self):
        if self.editing:
            raise RuntimeError("Cannot delete while editing")
        return self.on_delete(self.company.id)

    # --- edit mode ---
    def start_edit(self) -> None:
        self.edit_data = self.company.editable_fields().model_dump()
        self.editing = True

    def set_field(self, name: str, value: str) -> None:
        if not self.editing:
            raise RuntimeError("Card is not in edit mode")
        if name not in self.edit_data:
            raise KeyError(f"Unknown card field: {name}")
        self.edit_data[name] = value

    def save(self):
        """Hand the edited copy to the parent and return to view mode.

        No validation here; the parent decides what the store accepted.
        """
        if not self.editing:
            raise RuntimeError("Card is not in edit mode")
        fields = CompanyFields(**self.edit_data)
        self.editing = False
        self.edit_data = None
        return self.on_update(self.company.id, fields)

    def cancel_edit(self) -> None:
        self.editing = False
        self.edit_data = None
