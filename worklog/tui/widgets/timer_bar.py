"""Timer bar widget for the Worklog TUI."""

from collections.abc import Callable
from typing import Optional

from textual.widgets import Static

from worklog.domain.shared import DomainEvent
from worklog.domain.timer import Timer

IDLE_TEXT = "[dim]Timer idle. Select a ticket and press [b]s[/b] to start.[/dim]"


class TimerBar(Static):
    """One-line display of the running timer.

    Subscribes to the app's Timer while mounted and redraws on every
    timer event, so it keeps counting while dialogs are open on top.
    """

    DEFAULT_CSS = """
    TimerBar {
        height: 3;
        padding: 1 2;
        background: $primary-darken-2;
    }

    TimerBar.running {
        background: $success-darken-2;
        text-style: bold;
    }
    """

    def __init__(self, timer: Timer, id: Optional[str] = None) -> None:
        super().__init__(IDLE_TEXT, id=id)
        self.shown_text = IDLE_TEXT
        self._timer = timer
        self._unsubscribe: Optional[Callable[[], None]] = None

    def on_mount(self) -> None:
        self._unsubscribe = self._timer.subscribe(self._on_timer_event)
        self.refresh_display()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_timer_event(self, event: DomainEvent) -> None:
        self.refresh_display()

    def refresh_display(self) -> None:
        """Redraw from the timer's current state."""
        ticket = self._timer.ticket
        if ticket is None:
            self.remove_class("running")
            self.shown_text = IDLE_TEXT
        else:
            self.add_class("running")
            self.shown_text = f"● {ticket.ticket_id}  {ticket.name}    {self._timer.format_elapsed()}"
        self.update(self.shown_text)
