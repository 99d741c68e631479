from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from models.company_record import CompanyRecord
from tracker.commands import OpenForm, RefreshCompanies, SetSearch
from tracker.controller import ShellController
from tracker.render import print_cards, print_header, print_summary


HELP_TEXT = """Commands:
  list               Show companies (current search applies)
  add                Add a new company
  edit <n|id>        Edit a company by list position or id
  delete <n|id>      Delete a company by list position or id
  search [term]      Filter by name or role; no term clears the filter
  clear              Clear the search filter
  help               Show this help
  quit               Leave the tracker"""

FORM_LABELS = {
    "name": "Company name *",
    "website": "Website",
    "role": "Role/Position",
    "linkedin": "LinkedIn URL or username",
}


class InteractiveShell:
    """Line-oriented front end over ShellController."""

    def __init__(
        self,
        controller: ShellController,
        input_fn: Callable[[str], str] = input,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.controller = controller
        self.input_fn = input_fn
        self.stream = stream if stream is not None else sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream)

    def _ask(self, label: str) -> Optional[str]:
        """One line of input; None on end of input or Ctrl-C."""
        try:
            return self.input_fn(f"{label}: ")
        except (EOFError, KeyboardInterrupt):
            return None

    def show(self) -> None:
        print_cards(self.controller, self.stream)
        print_summary(self.controller, self.stream)

    def resolve(self, ref: str) -> Optional[CompanyRecord]:
        """Position in the current view (1-based) or a record id."""
        ref = ref.strip()
        if ref.isdigit():
            visible = self.controller.visible_companies()
            pos = int(ref)
            if 1 <= pos <= len(visible):
                return visible[pos - 1]
        return self.controller.find(ref)

    def run(self) -> None:
        self.controller.dispatch(RefreshCompanies())
        print_header(self.stream)
        self.show()
        self._print("Type 'help' for commands.")
        while True:
            try:
                line = self.input_fn("> ")
            except (EOFError, KeyboardInterrupt):
                break
            line = line.strip()
            if not line:
                continue
            cmd, _, rest = line.partition(" ")
            cmd = cmd.lower()
            if cmd in ("quit", "exit"):
                break
            self.handle(cmd, rest.strip())
        self._print("Goodbye!")

    def handle(self, cmd: str, arg: str) -> None:
        if cmd == "list":
            self.show()
        elif cmd == "add":
            self.add_company()
        elif cmd == "edit":
            self.edit_company(arg)
        elif cmd == "delete":
            self.delete_company(arg)
        elif cmd == "search":
            self.controller.dispatch(SetSearch(arg))
            self.show()
        elif cmd == "clear":
            self.controller.dispatch(SetSearch(""))
            self.show()
        elif cmd == "help":
            self._print(HELP_TEXT)
        else:
            self._print(f"Unknown command: {cmd}. Type 'help' for commands.")

    def add_company(self) -> None:
        """Show the entry form until a company is created or the form is cancelled.

        A blank name is a silent no-op; a second blank name in a row cancels.
        """
        self.controller.dispatch(OpenForm())
        form = self.controller.form_for()
        self._print("Add New Company (leave the name blank twice to cancel)")
        blank_before = False
        while self.controller.state.form_visible:
            name = self._ask(FORM_LABELS["name"])
            if name is None or (blank_before and not name.strip()):
                form.cancel()
                break
            form.set_field("name", name)
            if form.can_submit():
                for field in ("website", "role", "linkedin"):
                    form.set_field(field, self._ask(FORM_LABELS[field]) or "")
            blank_before = not form.submit()
        self.show()

    def edit_company(self, ref: str) -> None:
        company = self.resolve(ref) if ref else None
        if company is None:
            self._print(f"No company matches '{ref}'")
            return
        card = self.controller.card_for(company)
        card.start_edit()
        self._print(f"Editing {company.name} (enter keeps a value, '-' clears it)")
        for field, label in FORM_LABELS.items():
            answer = self._ask(f"{label.rstrip(' *')} [{card.edit_data[field]}]")
            if answer is None:
                card.cancel_edit()
                self.show()
                return
            if answer.strip() == "-":
                card.set_field(field, "")
            elif answer != "":
                card.set_field(field, answer)
        card.save()
        self.show()

    def delete_company(self, ref: str) -> None:
        company = self.resolve(ref) if ref else None
        if company is None:
            self._print(f"No company matches '{ref}'")
            return
        self.controller.card_for(company).delete()
        self.show()
