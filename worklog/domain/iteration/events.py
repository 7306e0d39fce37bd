"""Iteration domain events."""

from worklog.domain.shared.events import DomainEvent


class IterationCreated(DomainEvent):
    """A new iteration was added to a project."""

    iteration_id: str
    project_id: str | None
    name: str


class IterationUpdated(DomainEvent):
    """An iteration's name, type or dates changed."""

    iteration_id: str
    name: str


class IterationDeleted(DomainEvent):
    """An iteration was deleted; its tickets were detached, not removed."""

    iteration_id: str
    tickets_detached: int = 0
