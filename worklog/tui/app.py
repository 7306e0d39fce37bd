"""Main Worklog TUI Application.

The WorklogApp class owns the in-memory store and the one Timer of the
process. It drives the timer's one second tick from an app-level
interval, so the timer keeps counting while dialogs and the reports
screen are shown.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from textual.app import App
from textual.binding import Binding

from worklog.application.entry_service import stop_timer
from worklog.config import get_database_path, get_settings, save_settings
from worklog.domain.shared import Err
from worklog.domain.ticket import Ticket
from worklog.domain.timer import Clock, Timer
from worklog.domain.types import format_duration
from worklog.infrastructure.storage import WorklogRepository, WorklogStore

logger = logging.getLogger(__name__)

TICK_SECONDS = 1.0


class WorklogApp(App):
    """Worklog time tracking TUI Application."""

    TITLE = "Worklog"
    SUB_TITLE = "Time Tracking"

    CSS = """
    /* Global application styles */
    Screen {
        background: $surface;
    }

    /* Footer styling */
    Footer {
        dock: bottom;
        height: 1;
        background: $primary;
    }
    """

    BINDINGS = [
        Binding("r", "show_reports", "Reports", show=True),
        Binding("q", "request_quit", "Quit", show=True),
    ]

    def __init__(
        self,
        data_dir: Path,
        store: Optional[WorklogStore] = None,
        clock: Clock = datetime.now,
    ) -> None:
        """Initialize the Worklog TUI application.

        Args:
            data_dir: Data directory holding the database and settings.
            store: Already loaded store; an empty one if None.
            clock: Clock for the timer. Injected for tests.
        """
        super().__init__()
        self.data_dir = data_dir
        self.repository = WorklogRepository(get_database_path(data_dir))
        self.settings = get_settings(data_dir)
        self.store = store if store is not None else WorklogStore()
        self.timer = Timer(clock=clock)
        self._main_screen = None

    def on_mount(self) -> None:
        """Show the main screen and start ticking."""
        from worklog.tui.screens import MainScreen

        self._main_screen = MainScreen()
        self.push_screen(self._main_screen)
        self.set_interval(TICK_SECONDS, self.timer.tick)

    # =========================================================================
    # Store and timer operations used by the screens
    # =========================================================================

    def save(self) -> bool:
        """Write the store to disk. Notifies and returns False on failure."""
        result = self.repository.save(self.store)
        if isinstance(result, Err):
            self.notify(f"Failed to save: {result.error}", severity="error")
            return False
        return True

    def start_timer(self, ticket: Ticket) -> None:
        event = self.timer.start(ticket)
        if event.discarded_seconds is not None:
            self.notify(
                f"Timer moved to {ticket.ticket_id}; "
                f"{format_duration(max(event.discarded_seconds, 0))} not logged",
                severity="warning",
            )
        else:
            self.notify(f"Timer started on {ticket.ticket_id}")

    def stop_timer(self) -> None:
        """Stop the timer and log its session on the ticket."""
        ticket = self.timer.ticket
        logged = stop_timer(self.store, self.timer)
        if logged is None:
            self.notify("Timer stopped; nothing logged", severity="warning")
            return

        entry, _event = logged
        if self.save() and ticket is not None:
            self.notify(f"Logged {entry.duration} on {ticket.ticket_id}")
        self.refresh_tickets()

    def refresh_tickets(self) -> None:
        if self._main_screen is not None and self._main_screen.is_mounted:
            self._main_screen.refresh_tickets()

    def remember_project(self, project_id: Optional[str]) -> None:
        """Store the project filter in settings for the next start."""
        if self.settings.last_project_id == project_id:
            return
        self.settings.last_project_id = project_id
        save_settings(self.data_dir, self.settings)

    # =========================================================================
    # Actions
    # =========================================================================

    def action_show_reports(self) -> None:
        from worklog.tui.screens import ReportsScreen

        if isinstance(self.screen, ReportsScreen):
            return
        self.push_screen(ReportsScreen())

    def action_request_quit(self) -> None:
        """Quit, confirming first if the timer is running."""
        if not self.timer.is_running:
            self.exit()
            return

        from worklog.tui.screens import ConfirmModal

        def handle_confirm(confirmed: Optional[bool]) -> None:
            if confirmed:
                logger.info(f"Quitting with timer running ({self.timer.format_elapsed()} lost)")
                self.exit()

        self.push_screen(
            ConfirmModal(
                "Timer Running",
                f"Quit and lose {self.timer.format_elapsed()} on {self.timer.ticket.ticket_id}?",
                confirm_label="Quit",
            ),
            handle_confirm,
        )


# Export for easy importing
__all__ = ["WorklogApp"]
