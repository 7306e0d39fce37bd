"""Manual time logging dialog."""

from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

from worklog.application.entry_service import log_time
from worklog.domain.shared import Err
from worklog.domain.ticket import Ticket

if TYPE_CHECKING:
    from worklog.tui.app import WorklogApp


class LogTimeModal(ModalScreen[bool]):
    """Dialog for logging hours, minutes and seconds on a ticket.

    Invalid input keeps the dialog open with a warning. Dismisses with
    True once an entry was logged and saved.
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    CSS = """
    LogTimeModal {
        align: center middle;
    }

    #log-modal {
        width: 60;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    #log-modal-title {
        text-style: bold;
        text-align: center;
        margin-bottom: 1;
    }

    #duration-row {
        height: auto;
    }

    #duration-row Input {
        width: 1fr;
    }

    #log-note-input {
        margin: 1 0;
    }

    #log-buttons {
        margin-top: 1;
        align: center middle;
        height: 3;
    }

    #log-buttons Button {
        margin: 0 1;
    }
    """

    def __init__(self, ticket: Ticket, default_hours: int = 0, default_minutes: int = 30) -> None:
        super().__init__()
        self.ticket = ticket
        self._default_hours = default_hours
        self._default_minutes = default_minutes

    def compose(self) -> ComposeResult:
        with Container(id="log-modal"):
            yield Label(f"Log Time: {self.ticket.ticket_id} {self.ticket.name}", id="log-modal-title")
            yield Label("Hours / Minutes / Seconds:")
            with Horizontal(id="duration-row"):
                yield Input(str(self._default_hours), id="log-hours-input", type="integer")
                yield Input(str(self._default_minutes), id="log-minutes-input", type="integer")
                yield Input("0", id="log-seconds-input", type="integer")
            yield Label("Note (optional):")
            yield Input(placeholder="What did you work on?", id="log-note-input")
            with Horizontal(id="log-buttons"):
                yield Button("Log", variant="primary", id="btn-log")
                yield Button("Cancel", id="btn-cancel")

    def on_mount(self) -> None:
        self.query_one("#log-hours-input", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-log":
            self._log()
        elif event.button.id == "btn-cancel":
            self.action_cancel()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._log()

    def _log(self) -> None:
        app: "WorklogApp" = self.app  # type: ignore
        result = log_time(
            app.store,
            self.ticket.id,
            self.query_one("#log-hours-input", Input).value,
            self.query_one("#log-minutes-input", Input).value,
            self.query_one("#log-seconds-input", Input).value,
            note=self.query_one("#log-note-input", Input).value,
        )
        if isinstance(result, Err):
            self.notify(result.error, severity="warning")
            return

        entry, _event = result.value
        if app.save():
            self.notify(f"Logged {entry.duration} on {self.ticket.ticket_id}")
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)


__all__ = ["LogTimeModal"]
