"""Two-state live timer.

The timer is either idle or running for exactly one ticket. It never
writes to storage: ``stop()`` hands back a TimerSession and the caller
decides whether to persist it (see
``worklog.application.entry_service.log_timer_session``).

Ticking is driven from outside on a one second cadence (the TUI's
interval timer, or the CLI's live loop); ``tick()`` only refreshes the
elapsed value used for display.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from worklog.domain.shared.events import DomainEvent
from worklog.domain.ticket.models import Ticket
from worklog.domain.timer.events import TimerStarted, TimerStopped, TimerTicked
from worklog.domain.types import Duration, format_duration

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
TimerListener = Callable[[DomainEvent], None]


class TimerState(str, Enum):
    """Timer state."""

    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True)
class TimerSession:
    """A finished timing session.

    Attributes:
        ticket: Ticket the time was spent on
        started_at: When the timer was started
        ended_at: When the timer was stopped
    """

    ticket: Ticket
    started_at: datetime
    ended_at: datetime

    @property
    def duration(self) -> Duration:
        """Time between start and stop."""
        return Duration.between(self.started_at, self.ended_at)


class Timer:
    """Live timer for a single ticket.

    Starting while already running replaces the current session and
    its elapsed time is dropped, not saved.

    Example:
        timer = Timer()
        timer.start(ticket)
        ...
        session = timer.stop()
        if session and session.duration.is_positive():
            ...  # persist session.duration.hours
    """

    def __init__(self, clock: Clock = datetime.now) -> None:
        """Initialize an idle timer.

        Args:
            clock: Returns the current time. Injected for tests.
        """
        self._clock = clock
        self._ticket: Ticket | None = None
        self._started_at: datetime | None = None
        self._elapsed: float = 0.0
        self._listeners: list[TimerListener] = []

    @property
    def state(self) -> TimerState:
        """Current state."""
        if self._ticket is None:
            return TimerState.IDLE
        return TimerState.RUNNING

    @property
    def is_running(self) -> bool:
        return self.state is TimerState.RUNNING

    @property
    def ticket(self) -> Ticket | None:
        """Ticket being timed, or None while idle."""
        return self._ticket

    @property
    def started_at(self) -> datetime | None:
        return self._started_at

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed seconds as of the last start or tick."""
        return self._elapsed

    def subscribe(self, listener: TimerListener) -> Callable[[], None]:
        """Register a listener for timer events.

        Args:
            listener: Called with each TimerStarted/TimerTicked/TimerStopped

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self, ticket: Ticket) -> TimerStarted:
        """Start timing a ticket.

        Args:
            ticket: Ticket to time

        Returns:
            The TimerStarted event that was emitted.
        """
        discarded: float | None = None
        if self.is_running:
            discarded = self._seconds_since_start()
            logger.info(
                f"Timer restarted on {ticket.ticket_id}; "
                f"discarding {format_duration(max(discarded, 0))} on {self._ticket.ticket_id}"
            )

        self._ticket = ticket
        self._started_at = self._clock()
        self._elapsed = 0.0

        event = TimerStarted(
            ticket_id=ticket.ticket_id,
            ticket_name=ticket.name,
            started_at=self._started_at,
            discarded_seconds=discarded,
        )
        self._emit(event)
        return event

    def tick(self) -> float:
        """Refresh the elapsed time while running.

        Returns:
            Elapsed seconds; 0.0 while idle.
        """
        if not self.is_running:
            return 0.0

        self._elapsed = self._seconds_since_start()
        self._emit(TimerTicked(ticket_id=self._ticket.ticket_id, elapsed_seconds=self._elapsed))
        return self._elapsed

    def stop(self) -> TimerSession | None:
        """Stop the timer.

        Returns:
            The finished session, or None if the timer was idle.
        """
        if self._ticket is None or self._started_at is None:
            self._reset()
            return None

        session = TimerSession(
            ticket=self._ticket,
            started_at=self._started_at,
            ended_at=self._clock(),
        )
        self._reset()

        self._emit(
            TimerStopped(
                ticket_id=session.ticket.ticket_id,
                elapsed_seconds=session.duration.seconds,
            )
        )
        return session

    def format_elapsed(self) -> str:
        """Elapsed time as "{h}h {m}min {s}s"."""
        return format_duration(max(self._elapsed, 0.0))

    def _seconds_since_start(self) -> float:
        return (self._clock() - self._started_at).total_seconds()

    def _reset(self) -> None:
        self._ticket = None
        self._started_at = None
        self._elapsed = 0.0

    def _emit(self, event: DomainEvent) -> None:
        for listener in list(self._listeners):
            listener(event)
