"""Ticket domain events."""

from worklog.domain.shared.events import DomainEvent


class TicketCreated(DomainEvent):
    """A ticket was created."""

    ticket_id: str
    name: str
    project_id: str | None = None


class TicketUpdated(DomainEvent):
    """A ticket's fields or assignments changed."""

    ticket_id: str
    name: str


class TicketDeleted(DomainEvent):
    """A ticket was deleted together with its time entries."""

    ticket_id: str
    entries_deleted: int = 0


class TicketsImported(DomainEvent):
    """A bulk import created several tickets at once.

    Skipped lines are kept as human-readable reasons.
    """

    ticket_ids: list[str]
    project_id: str | None = None
    iteration_id: str | None = None
    skipped: list[str] = []
