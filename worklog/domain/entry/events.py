"""Time entry domain events."""

from enum import Enum

from worklog.domain.shared.events import DomainEvent


class EntrySource(str, Enum):
    """How an entry was created."""

    MANUAL = "manual"
    TIMER = "timer"


class TimeLogged(DomainEvent):
    """Hours were logged against a ticket."""

    entry_id: str
    ticket_id: str | None
    hours: float
    source: EntrySource = EntrySource.MANUAL


class EntryUpdated(DomainEvent):
    """An entry's hours, note or timestamp were edited."""

    entry_id: str
    hours: float


class EntryDeleted(DomainEvent):
    """An entry was deleted."""

    entry_id: str
