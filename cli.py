import argparse
import dataclasses
import sys

from config.settings import get_settings
from db.connection import open_tracker_db
from stores.registry import available_stores, get_store
from tracker.commands import OpenForm, RefreshCompanies, SetSearch
from tracker.controller import ShellController
from tracker.interactive import InteractiveShell
from tracker.render import print_cards, print_json, print_summary
from utils.logging_setup import init_logging


def _controller(args) -> ShellController:
    settings = dataclasses.replace(get_settings(), store_backend=args.backend, db_path=args.db)
    store = get_store(args.backend, settings)
    return ShellController(store)


def cmd_bootstrap(args):
	settings = get_settings()
	conn = open_tracker_db(args.db, settings.store_table)
	conn.close()
	print("Schema ready")
	return 0


def cmd_list(args):
	controller = _controller(args)
	if not controller.dispatch(RefreshCompanies()):
		print("Could not load companies", file=sys.stderr)
		return 1
	if args.search:
		controller.dispatch(SetSearch(args.search))
	if args.json:
		print_json(controller)
		return 0
	print_cards(controller)
	print_summary(controller)
	return 0


def cmd_add(args):
	controller = _controller(args)
	controller.dispatch(OpenForm())
	form = controller.form_for()
	form.set_field("name", args.name)
	form.set_field("website", args.website)
	form.set_field("role", args.role)
	form.set_field("linkedin", args.linkedin)
	if not form.submit():
		print("Company name is required", file=sys.stderr)
		return 1
	# The form only closes once the store accepted the insert
	if controller.state.form_visible:
		print("Could not add company", file=sys.stderr)
		return 1
	created = controller.state.companies[0]
	print(f"Added {created.name} (id={created.id})")
	return 0


def cmd_update(args):
	controller = _controller(args)
	if not controller.dispatch(RefreshCompanies()):
		print("Could not load companies", file=sys.stderr)
		return 1
	company = controller.find(args.id)
	if company is None:
		print(f"No company with id={args.id}", file=sys.stderr)
		return 1
	card = controller.card_for(company)
	card.start_edit()
	for field in ("name", "website", "role", "linkedin"):
		value = getattr(args, field)
		if value is not None:
			card.set_field(field, value)
	if not card.save():
		print(f"Could not update company id={args.id}", file=sys.stderr)
		return 1
	print(f"Updated {args.id}")
	return 0


def cmd_delete(args):
	controller = _controller(args)
	if not controller.dispatch(RefreshCompanies()):
		print("Could not load companies", file=sys.stderr)
		return 1
	company = controller.find(args.id)
	if company is None:
		print(f"No company with id={args.id}", file=sys.stderr)
		return 1
	if not controller.card_for(company).delete():
		print(f"Could not delete company id={args.id}", file=sys.stderr)
		return 1
	print(f"Deleted {company.name}")
	return 0


def cmd_shell(args):
	InteractiveShell(_controller(args)).run()
	return 0


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Job application tracker")
    parser.add_argument("--db", default=settings.db_path, help="Path to SQLite DB (default from settings)")
    parser.add_argument("--backend", choices=sorted(available_stores()), default=settings.store_backend, help="Record store backend (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_boot = sub.add_parser("bootstrap", help="Create the SQLite companies table")
    p_boot.set_defaults(func=cmd_bootstrap)

    p_list = sub.add_parser("list", help="Show tracked companies, newest first")
    p_list.add_argument("--search", "-s", default="", help="Filter by name or role (case-insensitive)")
    p_list.add_argument("--json", action="store_true", help="Print records as a JSON array")
    p_list.set_defaults(func=cmd_list)

    p_add = sub.add_parser("add", help="Add a company")
    p_add.add_argument("--name", required=True, help="Company name")
    p_add.add_argument("--website", default="", help="Company website")
    p_add.add_argument("--role", default="", help="Role/position applied for")
    p_add.add_argument("--linkedin", default="", help="LinkedIn URL or username")
    p_add.set_defaults(func=cmd_add)

    p_upd = sub.add_parser("update", help="Replace fields of a company by id")
    p_upd.add_argument("id", help="Company id")
    p_upd.add_argument("--name", default=None)
    p_upd.add_argument("--website", default=None)
    p_upd.add_argument("--role", default=None)
    p_upd.add_argument("--linkedin", default=None)
    p_upd.set_defaults(func=cmd_update)

    p_del = sub.add_parser("delete", help="Delete a company by id")
    p_del.add_argument("id", help="Company id")
    p_del.set_defaults(func=cmd_delete)

    p_sh = sub.add_parser("shell", help="Interactive tracker")
    p_sh.set_defaults(func=cmd_shell)

    args = parser.parse_args()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
