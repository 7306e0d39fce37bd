"""Project domain events."""

from worklog.domain.shared.events import DomainEvent


class ProjectCreated(DomainEvent):
    """A new project was created."""

    project_id: str
    name: str


class ProjectUpdated(DomainEvent):
    """A project was renamed or its detail edited."""

    project_id: str
    name: str


class ProjectDeleted(DomainEvent):
    """A project was deleted together with everything it owns.

    The counts record what the cascade removed.
    """

    project_id: str
    tickets_deleted: int = 0
    iterations_deleted: int = 0
    entries_deleted: int = 0
