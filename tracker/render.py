from __future__ import annotations

import json
import sys
from typing import Optional, TextIO

from tracker.controller import ShellController


def _out(stream: Optional[TextIO]) -> TextIO:
    return stream if stream is not None else sys.stdout


def print_header(stream: Optional[TextIO] = None) -> None:
    out = _out(stream)
    print("=" * 60, file=out)
    print("JOB APPLICATION TRACKER", file=out)
    print("Keep track of companies you're applying to", file=out)
    print("=" * 60, file=out)


def print_cards(controller: ShellController, stream: Optional[TextIO] = None) -> None:
    """Print the visible cards, numbered by their position in the current view."""
    out = _out(stream)
    state = controller.state
    if not state.companies and not state.form_visible:
        print("No companies yet", file=out)
        print("Add your first company to start tracking your applications", file=out)
        return
    if state.search.strip():
        print(f"Search: {state.search}", file=out)
    visible = controller.visible_companies()
    if state.companies and not visible:
        print("No companies match your search", file=out)
    for pos, company in enumerate(visible, start=1):
        lines = controller.card_for(company).render()
        print(f"[{pos}] {lines[0]}  (id={company.id})", file=out)
        for line in lines[1:]:
            print(line, file=out)
        print(file=out)


def print_summary(controller: ShellController, stream: Optional[TextIO] = None) -> None:
    out = _out(stream)
    counts = controller.summary()
    print("-" * 60, file=out)
    print(
        f"Companies: {counts['total']}  Shown: {counts['shown']}  "
        f"With role: {counts['with_role']}  With website: {counts['with_website']}  "
        f"With LinkedIn: {counts['with_linkedin']}",
        file=out,
    )


def print_json(controller: ShellController, stream: Optional[TextIO] = None) -> None:
    rows = [c.model_dump() for c in controller.visible_companies()]
    print(json.dumps(rows, indent=2, ensure_ascii=False), file=_out(stream))
