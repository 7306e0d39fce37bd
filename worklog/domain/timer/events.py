"""Timer notifications.

Pushed to timer subscribers so displays can refresh without polling
the timer's state.
"""

from datetime import datetime

from worklog.domain.shared.events import DomainEvent


class TimerStarted(DomainEvent):
    """The timer started on a ticket.

    ``discarded_seconds`` is set when a running session for another
    ticket was replaced; that time is gone.
    """

    ticket_id: str
    ticket_name: str
    started_at: datetime
    discarded_seconds: float | None = None


class TimerTicked(DomainEvent):
    """Periodic elapsed-time refresh while running."""

    ticket_id: str
    elapsed_seconds: float


class TimerStopped(DomainEvent):
    """The timer stopped and produced a session."""

    ticket_id: str
    elapsed_seconds: float
