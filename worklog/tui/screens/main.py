"""Main screen for the Worklog TUI.

Layout:
+------------------------------------------------+
| Project filter                                  |
|-------------------------------------------------|
| Ticket table                                    |
|-------------------------------------------------|
| Timer bar                                       |
+------------------------------------------------+
| Footer with keybindings                         |
+------------------------------------------------+
"""

from typing import TYPE_CHECKING, Optional

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Header, Select

from worklog.application.ticket_service import delete_ticket
from worklog.domain.shared import Err
from worklog.domain.ticket import Ticket
from worklog.tui.screens.confirm import ConfirmModal
from worklog.tui.screens.log_time import LogTimeModal
from worklog.tui.screens.reports import project_options, selected_value
from worklog.tui.widgets import TicketList, TimerBar

if TYPE_CHECKING:
    from worklog.tui.app import WorklogApp


class MainScreen(Screen):
    """Ticket list with the live timer."""

    BINDINGS = [
        ("s", "toggle_timer", "Start/Stop Timer"),
        ("l", "log_time", "Log Time"),
        ("x", "delete_ticket", "Delete Ticket"),
    ]

    CSS = """
    #project-select {
        margin: 0 1;
    }
    """

    def compose(self) -> ComposeResult:
        app: "WorklogApp" = self.app  # type: ignore
        yield Header()
        yield Select(project_options(app.store), prompt="All projects", id="project-select")
        yield TicketList(id="ticket-list")
        yield TimerBar(app.timer, id="timer-bar")
        yield Footer()

    def on_mount(self) -> None:
        app: "WorklogApp" = self.app  # type: ignore
        last_project = app.store.find_project(app.settings.last_project_id)
        if last_project is not None:
            self.query_one("#project-select", Select).value = last_project.id
        self.refresh_tickets()
        self.query_one("#ticket-list", TicketList).focus()

    @property
    def project_id(self) -> Optional[str]:
        return selected_value(self.query_one("#project-select", Select).value)

    def on_select_changed(self, event: Select.Changed) -> None:
        app: "WorklogApp" = self.app  # type: ignore
        app.remember_project(selected_value(event.value))
        self.refresh_tickets()

    def refresh_tickets(self) -> None:
        """Reload the ticket table from the store."""
        app: "WorklogApp" = self.app  # type: ignore
        self.query_one("#ticket-list", TicketList).show_tickets(app.store, self.project_id)

    def selected_ticket(self) -> Optional[Ticket]:
        app: "WorklogApp" = self.app  # type: ignore
        ticket_id = self.query_one("#ticket-list", TicketList).selected_ticket_id
        return app.store.find_ticket(ticket_id)

    # =========================================================================
    # Actions
    # =========================================================================

    def action_toggle_timer(self) -> None:
        """Stop the running timer, or start it on the selected ticket.

        With the timer running on another ticket, the timer moves to the
        selected ticket and the time counted so far is dropped.
        """
        app: "WorklogApp" = self.app  # type: ignore
        ticket = self.selected_ticket()
        running = app.timer.ticket

        if running is not None and (ticket is None or ticket.id == running.id):
            app.stop_timer()
            return
        if ticket is None:
            self.notify("Select a ticket first", severity="warning")
            return
        app.start_timer(ticket)

    def action_log_time(self) -> None:
        app: "WorklogApp" = self.app  # type: ignore
        ticket = self.selected_ticket()
        if ticket is None:
            self.notify("Select a ticket first", severity="warning")
            return

        def handle_logged(logged: Optional[bool]) -> None:
            if logged:
                self.refresh_tickets()

        app.push_screen(
            LogTimeModal(
                ticket,
                default_hours=app.settings.default_log_hours,
                default_minutes=app.settings.default_log_minutes,
            ),
            handle_logged,
        )

    def action_delete_ticket(self) -> None:
        app: "WorklogApp" = self.app  # type: ignore
        ticket = self.selected_ticket()
        if ticket is None:
            self.notify("Select a ticket first", severity="warning")
            return

        def handle_confirm(confirmed: Optional[bool]) -> None:
            if not confirmed:
                return
            result = delete_ticket(app.store, ticket.id)
            if isinstance(result, Err):
                self.notify(result.error, severity="error")
                return
            if app.save():
                self.notify(
                    f"Deleted {ticket.ticket_id} ({result.value.entries_deleted} time entries)"
                )
            self.refresh_tickets()

        app.push_screen(
            ConfirmModal(
                "Delete Ticket?",
                f"{ticket.ticket_id} {ticket.name} and all its time entries",
            ),
            handle_confirm,
        )


__all__ = ["MainScreen"]
