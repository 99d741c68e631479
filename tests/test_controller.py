from __future__ import annotations

import logging

import pytest

from models.company_record import CompanyFields, CompanyRecord
from tracker.commands import (
    CloseForm,
    CreateCompany,
    DeleteCompany,
    OpenForm,
    RefreshCompanies,
    SetSearch,
    UpdateCompany,
)
from tracker.controller import ShellController


def _rec(record_id: str, name: str, role: str = "", website: str = "", linkedin: str = "") -> CompanyRecord:
    return CompanyRecord(id=record_id, name=name, role=role, website=website, linkedin=linkedin)


@pytest.fixture
def seeded(memory_store):
    memory_store.records = [_rec("1", "Acme", role="Eng"), _rec("2", "Globex", role="PM"), _rec("3", "Initech")]
    controller = ShellController(memory_store)
    assert controller.dispatch(RefreshCompanies()) is True
    return controller, memory_store


def test_refresh_replaces_collection(seeded):
    controller, store = seeded
    assert [c.id for c in controller.state.companies] == ["1", "2", "3"]
    store.records = [_rec("9", "Hooli")]
    controller.dispatch(RefreshCompanies())
    assert [c.id for c in controller.state.companies] == ["9"]


def test_refresh_failure_keeps_prior_state(seeded, caplog):
    controller, store = seeded
    before = list(controller.state.companies)
    store.fail.add("list")
    with caplog.at_level(logging.ERROR):
        assert controller.dispatch(RefreshCompanies()) is False
    assert controller.state.companies == before
    assert any(getattr(r, "op", None) == "list" and r.status == "error" for r in caplog.records)


def test_initial_load_failure_leaves_collection_empty(memory_store):
    memory_store.fail.add("list")
    controller = ShellController(memory_store)
    assert controller.dispatch(RefreshCompanies()) is False
    assert controller.state.companies == []


def test_scenario_create_on_empty_collection(memory_store):
    controller = ShellController(memory_store)
    controller.dispatch(RefreshCompanies())
    controller.dispatch(OpenForm())
    form = controller.form_for()
    form.set_field("name", "Acme")
    assert form.submit() is True

    (created,) = controller.state.companies
    assert created.name == "Acme"
    assert (created.website, created.role, created.linkedin) == ("", "", "")
    assert controller.state.form_visible is False


def test_create_prepends_exactly_one(seeded):
    controller, _ = seeded
    before = list(controller.state.companies)
    assert controller.dispatch(CreateCompany(CompanyFields(name="Hooli"))) is True
    assert len(controller.state.companies) == len(before) + 1
    assert controller.state.companies[0].name == "Hooli"
    assert controller.state.companies[1:] == before


def test_blank_name_never_reaches_store(seeded):
    controller, store = seeded
    controller.dispatch(OpenForm())
    form = controller.form_for()
    form.set_field("name", " \t ")
    form.set_field("website", "acme.com")
    assert form.submit() is False
    assert not any(call[0] == "insert" for call in store.calls)
    assert form.values["website"] == "acme.com"
    assert controller.state.form_visible is True


def test_create_failure_keeps_form_open_and_collection(seeded):
    controller, store = seeded
    before = list(controller.state.companies)
    controller.dispatch(OpenForm())
    store.fail.add("insert")
    assert controller.dispatch(CreateCompany(CompanyFields(name="Hooli"))) is False
    assert controller.state.companies == before
    assert controller.state.form_visible is True


def test_form_cancel_closes_form(seeded):
    controller, _ = seeded
    controller.dispatch(OpenForm())
    controller.form_for().cancel()
    assert controller.state.form_visible is False
    controller.dispatch(CloseForm())
    assert controller.state.form_visible is False


def test_scenario_update_role(memory_store):
    memory_store.records = [_rec("1", "Acme", role="Eng")]
    controller = ShellController(memory_store)
    controller.dispatch(RefreshCompanies())
    card = controller.card_for(controller.state.companies[0])
    card.start_edit()
    card.set_field("role", "Manager")
    assert card.save() is True

    assert memory_store.calls[-1] == (
        "update", "1", CompanyFields(name="Acme", website="", role="Manager", linkedin="")
    )
    assert controller.state.companies == [_rec("1", "Acme", role="Manager")]


def test_update_preserves_ids_length_and_order(seeded):
    controller, _ = seeded
    ids_before = [c.id for c in controller.state.companies]
    controller.dispatch(UpdateCompany("2", CompanyFields(name="Globex Corp", role="Lead")))
    assert [c.id for c in controller.state.companies] == ids_before
    assert controller.state.companies[1].name == "Globex Corp"
    assert controller.state.companies[0] == _rec("1", "Acme", role="Eng")


def test_scenario_update_failure_changes_nothing(seeded):
    controller, store = seeded
    before = list(controller.state.companies)
    store.fail.add("update")
    assert controller.dispatch(UpdateCompany("1", CompanyFields(name="Acme", role="Manager"))) is False
    assert controller.state.companies == before


def test_scenario_delete(memory_store):
    memory_store.records = [_rec("1", "Acme"), _rec("2", "Globex")]
    controller = ShellController(memory_store)
    controller.dispatch(RefreshCompanies())
    controller.card_for(controller.state.companies[1]).delete()
    assert controller.state.companies == [_rec("1", "Acme")]


def test_delete_failure_keeps_record(seeded):
    controller, store = seeded
    before = list(controller.state.companies)
    store.fail.add("delete")
    assert controller.dispatch(DeleteCompany("2")) is False
    assert controller.state.companies == before


def test_scenario_search_is_a_pure_view(memory_store):
    memory_store.records = [_rec("1", "Acme"), _rec("2", "Globex")]
    controller = ShellController(memory_store)
    controller.dispatch(RefreshCompanies())
    before = list(controller.state.companies)

    controller.dispatch(SetSearch("glob"))
    assert [c.id for c in controller.visible_companies()] == ["2"]
    assert controller.state.companies == before

    controller.dispatch(SetSearch(""))
    assert controller.visible_companies() == before


def test_search_matches_role_case_insensitively(seeded):
    controller, _ = seeded
    controller.dispatch(SetSearch("pm"))
    assert [c.id for c in controller.visible_companies()] == ["2"]
    assert controller.summary()["shown"] == 1
    assert controller.summary()["total"] == 3


def test_summary_counts(memory_store):
    memory_store.records = [
        _rec("1", "Acme", role="Eng", website="acme.com"),
        _rec("2", "Globex", linkedin="jdoe"),
    ]
    controller = ShellController(memory_store)
    controller.dispatch(RefreshCompanies())
    assert controller.summary() == {
        "total": 2, "shown": 2, "with_website": 1, "with_linkedin": 1, "with_role": 1,
    }


def test_unknown_command_rejected(memory_store):
    controller = ShellController(memory_store)
    with pytest.raises(TypeError):
        controller.dispatch(object())


def test_search_term_is_matched_as_typed(memory_store):
    memory_store.records = [_rec("1", "Acme")]
    controller = ShellController(memory_store)
    controller.dispatch(RefreshCompanies())
    controller.dispatch(SetSearch("acme "))
    assert controller.visible_companies() == []
    controller.dispatch(SetSearch("   "))
    assert [c.id for c in controller.visible_companies()] == ["1"]
