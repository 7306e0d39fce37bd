"""Tests for the application services."""

from datetime import date, datetime

import pytest

from worklog.application.entry_service import (
    delete_entry,
    log_time,
    log_timer_session,
    resolve_entry,
    stop_timer,
    update_entry,
)
from worklog.application.iteration_service import (
    create_iteration,
    delete_iteration,
    resolve_iteration,
    update_iteration,
)
from worklog.application.project_service import (
    create_project,
    delete_project,
    get_project_summary,
    resolve_project,
    update_project,
)
from worklog.application.ticket_service import (
    create_ticket,
    delete_ticket,
    import_tickets,
    resolve_ticket,
    update_ticket,
)
from worklog.domain.entry import EntrySource
from worklog.domain.iteration import IterationType
from worklog.domain.shared import Err, Ok
from worklog.domain.timer import Timer, TimerSession


class TestProjectService:
    def test_create(self, store):
        result = create_project(store, "  Website  ", "Marketing site")
        assert isinstance(result, Ok)
        project, event = result.value
        assert project.name == "Website"
        assert event.project_id == project.id
        assert store.find_project(project.id) is project

    def test_empty_name_rejected(self, store):
        assert isinstance(create_project(store, "   "), Err)
        assert store.projects == {}

    def test_duplicate_name_rejected(self, store):
        create_project(store, "Website")
        result = create_project(store, "Website")
        assert isinstance(result, Err)
        assert "already exists" in result.error

    def test_rename_to_own_name_is_allowed(self, store):
        project, _ = create_project(store, "Website").value
        assert isinstance(update_project(store, project.id, name="Website", detail="new"), Ok)
        assert project.detail == "new"

    def test_rename_to_other_project_name_rejected(self, store):
        create_project(store, "Website")
        mobile, _ = create_project(store, "Mobile").value
        assert isinstance(update_project(store, mobile.id, name="Website"), Err)
        assert mobile.name == "Mobile"

    def test_delete_reports_counts(self, populated):
        result = delete_project(populated["store"], populated["web"].id)
        assert result.value.tickets_deleted == 2
        assert result.value.iterations_deleted == 1
        assert result.value.entries_deleted == 3

    def test_resolve_by_name_or_id(self, populated):
        store, web = populated["store"], populated["web"]
        assert resolve_project(store, "Website").value is web
        assert resolve_project(store, web.id).value is web
        assert isinstance(resolve_project(store, "Nope"), Err)

    def test_summary(self, populated):
        summary = get_project_summary(populated["store"], populated["web"])
        assert summary.ticket_count == 2
        assert summary.iteration_count == 1
        assert summary.total_hours == 4.0


class TestIterationService:
    def test_create(self, populated):
        store = populated["store"]
        result = create_iteration(
            store,
            populated["mobile"].id,
            "Beta",
            date(2024, 4, 1),
            date(2024, 5, 1),
            IterationType.MILESTONE,
        )
        iteration, event = result.value
        assert iteration.type is IterationType.MILESTONE
        assert event.project_id == populated["mobile"].id

    @pytest.mark.parametrize("due", [date(2024, 4, 1), date(2024, 3, 31)])
    def test_due_must_be_after_start(self, store, due):
        result = create_iteration(store, None, "Sprint", date(2024, 4, 1), due)
        assert isinstance(result, Err)
        assert "after the start" in result.error

    def test_empty_name_rejected(self, store):
        assert isinstance(create_iteration(store, None, " ", date(2024, 4, 1), date(2024, 4, 2)), Err)

    def test_unknown_project_rejected(self, store):
        assert isinstance(create_iteration(store, "missing", "S", date(2024, 4, 1), date(2024, 4, 2)), Err)

    def test_update_checks_dates(self, populated):
        sprint = populated["sprint"]
        result = update_iteration(populated["store"], sprint.id, due_date=date(2024, 2, 1))
        assert isinstance(result, Err)
        assert sprint.due_date == date(2024, 3, 15)

    def test_is_active(self, populated):
        sprint = populated["sprint"]
        assert sprint.is_active(date(2024, 3, 1))
        assert sprint.is_active(date(2024, 3, 15))
        assert not sprint.is_active(date(2024, 3, 16))

    def test_delete_detaches_tickets(self, populated):
        result = delete_iteration(populated["store"], populated["sprint"].id)
        assert result.value.tickets_detached == 1
        assert populated["web1"].iteration_id is None

    def test_resolve_by_name_within_project(self, populated):
        store = populated["store"]
        create_iteration(store, populated["mobile"].id, "Sprint 1", date(2024, 3, 1), date(2024, 3, 8))

        assert isinstance(resolve_iteration(store, "Sprint 1"), Err)
        found = resolve_iteration(store, "Sprint 1", populated["web"].id)
        assert found.value is populated["sprint"]


class TestTicketService:
    def test_create_defaults_start_to_today(self, store):
        ticket, event = create_ticket(store, "A-1", "Fix bug").value
        assert ticket.start_date == date.today()
        assert ticket.due_date is None
        assert event.ticket_id == "A-1"

    @pytest.mark.parametrize("key,name", [("", "Title"), ("A-1", "  ")])
    def test_required_fields(self, store, key, name):
        assert isinstance(create_ticket(store, key, name), Err)

    def test_ticket_id_unique(self, populated):
        result = create_ticket(populated["store"], "WEB-1", "Again")
        assert isinstance(result, Err)
        assert "already exists" in result.error

    def test_update_to_taken_ticket_id_rejected(self, populated):
        result = update_ticket(populated["store"], populated["web2"].id, new_ticket_id="WEB-1")
        assert isinstance(result, Err)
        assert populated["web2"].ticket_id == "WEB-2"

    def test_update_fields(self, populated):
        web2 = populated["web2"]
        result = update_ticket(
            populated["store"],
            web2.id,
            new_ticket_id="WEB-20",
            name="Footer",
            due_date=date(2024, 6, 1),
            iteration_id=populated["sprint"].id,
        )
        assert isinstance(result, Ok)
        assert (web2.ticket_id, web2.name, web2.due_date) == ("WEB-20", "Footer", date(2024, 6, 1))
        assert web2.iteration_id == populated["sprint"].id

    def test_update_can_clear_optional_fields(self, populated):
        web1 = populated["web1"]
        update_ticket(populated["store"], web1.id, iteration_id=None, due_date=None)
        assert web1.iteration_id is None
        assert web1.project_id == populated["web"].id

    def test_iteration_from_other_project_is_allowed(self, populated):
        app1 = populated["app1"]
        result = update_ticket(populated["store"], app1.id, iteration_id=populated["sprint"].id)
        assert isinstance(result, Ok)
        assert app1.iteration_id == populated["sprint"].id

    def test_delete_cascades(self, populated):
        result = delete_ticket(populated["store"], populated["web1"].id)
        assert result.value.entries_deleted == 2

    def test_resolve(self, populated):
        assert resolve_ticket(populated["store"], "WEB-2").value is populated["web2"]
        assert isinstance(resolve_ticket(populated["store"], "WEB-9"), Err)


class TestImportTickets:
    def test_imports_into_selected_project(self, populated):
        store, web = populated["store"], populated["web"]

        created, event = import_tickets(store, "A-1 | Fix bug | urgent\nA-2 | Polish UI", web.id).value

        assert len(created) == 2
        assert created[0].detail == "urgent"
        assert created[1].detail == ""
        assert all(t.project_id == web.id for t in created)
        assert event.ticket_ids == ["A-1", "A-2"]
        assert event.skipped == []

    def test_shares_iteration(self, populated):
        sprint = populated["sprint"]
        created, _ = import_tickets(populated["store"], "A-1 | One\nA-2 | Two", None, sprint.id).value
        assert {t.iteration_id for t in created} == {sprint.id}

    def test_skips_duplicates_and_empty_ids(self, populated):
        store = populated["store"]
        text = "WEB-1 | Duplicate\n | No id\nA-3 | Fresh\nA-3 | Fresh again"

        created, event = import_tickets(store, text).value

        assert [t.ticket_id for t in created] == ["A-3"]
        assert len(event.skipped) == 3

    def test_nothing_parsable(self, store):
        assert isinstance(import_tickets(store, "\n\njust text\n"), Err)

    def test_unknown_project(self, store):
        assert isinstance(import_tickets(store, "A-1 | x", "missing"), Err)


class TestLogTime:
    def test_half_hour(self, populated):
        store, web2 = populated["store"], populated["web2"]
        entry, event = log_time(store, web2.id, "0", "30", "0").value
        assert entry.hours == 0.5
        assert event.source is EntrySource.MANUAL
        assert store.ticket_hours(web2.id) == 1.0

    def test_zero_rejected_and_not_persisted(self, populated):
        store = populated["store"]
        result = log_time(store, populated["web2"].id, "0", "0", "0")
        assert isinstance(result, Err)
        assert len(store.entries) == 4

    def test_empty_note_is_none(self, populated):
        entry, _ = log_time(populated["store"], populated["web2"].id, "1", "0", "0", note="").value
        assert entry.note is None

    def test_logged_at(self, populated):
        when = datetime(2024, 5, 5, 14, 0)
        entry, _ = log_time(populated["store"], populated["web2"].id, "1", "0", "0", logged_at=when).value
        assert entry.logged_at == when

    def test_unknown_ticket(self, store):
        assert isinstance(log_time(store, "missing", "1", "0", "0"), Err)


class TestTimerLogging:
    def test_stop_logs_session(self, populated, clock):
        store, web2 = populated["store"], populated["web2"]
        timer = Timer(clock=clock)
        timer.start(web2)
        clock.advance(1800)

        entry, event = stop_timer(store, timer, note="pairing")

        assert entry.hours == 0.5
        assert entry.note == "pairing"
        assert entry.logged_at == clock.now
        assert event.source is EntrySource.TIMER

    def test_zero_length_session_discarded(self, populated, clock):
        store = populated["store"]
        timer = Timer(clock=clock)
        timer.start(populated["web2"])
        assert stop_timer(store, timer) is None
        assert len(store.entries) == 4

    def test_idle_timer_logs_nothing(self, store, clock):
        assert stop_timer(store, Timer(clock=clock)) is None

    def test_deleted_ticket_discarded(self, populated):
        store, web2 = populated["store"], populated["web2"]
        session = TimerSession(web2, datetime(2024, 1, 1, 9), datetime(2024, 1, 1, 10))
        store.delete_ticket(web2.id)
        assert log_timer_session(store, session) is None

    def test_negative_session_discarded(self, populated):
        session = TimerSession(populated["web2"], datetime(2024, 1, 1, 10), datetime(2024, 1, 1, 9))
        assert log_timer_session(populated["store"], session) is None


class TestEditEntries:
    def test_update(self, populated):
        store = populated["store"]
        entry = populated["entries"][0]

        result = update_entry(store, entry.id, "1", "15", "30", note="", logged_at=datetime(2024, 1, 2))

        assert isinstance(result, Ok)
        assert entry.hours == pytest.approx(1 + 15 / 60 + 30 / 3600)
        assert entry.note is None
        assert entry.logged_at == datetime(2024, 1, 2)

    def test_update_rejects_zero(self, populated):
        entry = populated["entries"][0]
        assert isinstance(update_entry(populated["store"], entry.id, "0", "0", "0"), Err)
        assert entry.hours == 1.0

    def test_delete(self, populated):
        store = populated["store"]
        entry = populated["entries"][0]
        assert isinstance(delete_entry(store, entry.id), Ok)
        assert isinstance(delete_entry(store, entry.id), Err)

    def test_resolve_by_prefix(self, populated):
        entry = populated["entries"][0]
        assert resolve_entry(populated["store"], entry.id[:8]).value is entry
        assert isinstance(resolve_entry(populated["store"], ""), Err)
