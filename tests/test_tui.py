"""Tests for the Textual TUI."""

import asyncio

import pytest
from textual.widgets import Select

from worklog.domain.report import GroupingMode
from worklog.infrastructure.storage import WorklogRepository
from worklog.tui import WorklogApp
from worklog.tui.screens import LogTimeModal, MainScreen, ReportsScreen
from worklog.tui.screens.reports import (
    grouping_options,
    iteration_options,
    project_options,
    report_cells,
    selected_value,
)
from worklog.application.report_service import store_report
from worklog.tui.widgets import TicketList, TimerBar


class TestOptionHelpers:
    def test_selected_value(self):
        assert selected_value("abc") == "abc"
        assert selected_value(GroupingMode.BY_TICKET) is GroupingMode.BY_TICKET

    @pytest.mark.parametrize("blank", [None, False, object()])
    def test_non_string_values_are_blank(self, blank):
        assert selected_value(blank) is None

    def test_grouping_options_cover_every_mode(self):
        assert [mode for _, mode in grouping_options()] == list(GroupingMode)
        assert grouping_options()[1][0] == "By Ticket"

    def test_project_options(self, populated):
        assert [name for name, _ in project_options(populated["store"])] == ["Mobile", "Website"]

    def test_iteration_options_label_project_when_unfiltered(self, populated):
        store = populated["store"]
        assert iteration_options(store, None) == [("Sprint 1 (Website)", populated["sprint"].id)]
        assert iteration_options(store, populated["web"].id) == [("Sprint 1", populated["sprint"].id)]
        assert iteration_options(store, populated["mobile"].id) == []

    def test_report_cells_grouped(self, populated):
        report = store_report(populated["store"], mode=GroupingMode.BY_PROJECT)
        columns, rows = report_cells(report)
        assert columns == ("Name", "Detail", "Entries", "Time")
        assert rows[0] == ("Website", "3 tickets", "3", "4h 0min 0s")


class TestWorklogApp:
    """Drive the app headless through Textual's pilot."""

    def test_log_dialog_logs_default_duration(self, tmp_path, populated):
        store = populated["store"]
        web1 = populated["web1"]

        async def scenario():
            app = WorklogApp(data_dir=tmp_path, store=store)
            async with app.run_test() as pilot:
                await pilot.press("l")
                await pilot.pause()
                assert isinstance(app.screen, LogTimeModal)
                await pilot.press("enter")
                await pilot.pause()
                assert not isinstance(app.screen, LogTimeModal)

        asyncio.run(scenario())

        assert store.ticket_hours(web1.id) == 4.0
        saved = WorklogRepository(tmp_path / "worklog.json").load().value
        assert saved.ticket_hours(web1.id) == 4.0

    def test_timer_start_stop_logs_entry(self, tmp_path, populated, clock):
        store = populated["store"]
        web1 = populated["web1"]

        async def scenario():
            app = WorklogApp(data_dir=tmp_path, store=store, clock=clock)
            async with app.run_test() as pilot:
                await pilot.press("s")
                await pilot.pause()
                assert app.timer.ticket is web1
                clock.advance(900)
                await pilot.press("s")
                await pilot.pause()
                assert not app.timer.is_running

        asyncio.run(scenario())

        assert store.ticket_hours(web1.id) == 3.75

    def test_reports_screen_opens(self, tmp_path, populated):
        async def scenario():
            app = WorklogApp(data_dir=tmp_path, store=populated["store"])
            async with app.run_test() as pilot:
                await pilot.press("r")
                await pilot.pause()
                assert isinstance(app.screen, ReportsScreen)
                await pilot.press("escape")
                await pilot.pause()
                assert not isinstance(app.screen, ReportsScreen)

        asyncio.run(scenario())

    def test_all_projects_lists_every_ticket(self, tmp_path, populated):
        async def scenario():
            app = WorklogApp(data_dir=tmp_path, store=populated["store"])
            async with app.run_test() as pilot:
                await pilot.pause()
                assert isinstance(app.screen, MainScreen)
                assert app.screen.project_id is None
                assert app.screen.query_one("#ticket-list", TicketList).row_count == 3

        asyncio.run(scenario())

    def test_clear_filters_resets_report_controls(self, tmp_path, populated):
        web = populated["web"]

        async def scenario():
            app = WorklogApp(data_dir=tmp_path, store=populated["store"])
            async with app.run_test() as pilot:
                await pilot.press("r")
                await pilot.pause()
                screen = app.screen
                assert isinstance(screen, ReportsScreen)

                screen.query_one("#report-project-select", Select).value = web.id
                await pilot.pause()
                assert screen._filters.project_id == web.id

                screen.action_clear_filters()
                await pilot.pause()
                assert screen._filters.is_empty()
                assert selected_value(screen.query_one("#report-project-select", Select).value) is None
                assert selected_value(screen.query_one("#report-iteration-select", Select).value) is None

        asyncio.run(scenario())

    def test_timer_keeps_ticking_under_modal(self, tmp_path, populated, clock):
        async def scenario():
            app = WorklogApp(data_dir=tmp_path, store=populated["store"], clock=clock)
            async with app.run_test() as pilot:
                await pilot.press("s")
                await pilot.pause()
                assert app.timer.is_running
                bar = app.screen.query_one("#timer-bar", TimerBar)
                before = bar.shown_text

                await pilot.press("l")
                await pilot.pause()
                assert isinstance(app.screen, LogTimeModal)

                clock.advance(5)
                await pilot.pause(1.3)

                assert app.timer.elapsed_seconds >= 5
                assert bar.shown_text != before
                assert "0h 0min 5s" in bar.shown_text

        asyncio.run(scenario())
