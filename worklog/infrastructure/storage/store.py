"""In-memory entity store.

Holds every project, iteration, ticket and time entry in ordered maps
keyed by entity ID. Relationships are plain ID fields; the delete
methods walk the graph explicitly:

- deleting a project deletes its tickets and iterations, and the
  entries of those tickets
- deleting an iteration clears ``iteration_id`` on its tickets
- deleting a ticket deletes its entries

The store performs no validation and no I/O. Services in
``worklog.application`` validate; WorklogRepository persists.
"""

import logging
from dataclasses import dataclass

from pydantic import BaseModel, Field

from worklog.domain.entry.models import TimeEntry
from worklog.domain.iteration.models import Iteration
from worklog.domain.project.models import Project
from worklog.domain.shared.result import Err, Ok, Result
from worklog.domain.ticket.models import Ticket

logger = logging.getLogger(__name__)

STORE_FORMAT_VERSION = 1


class StoreData(BaseModel):
    """Serializable snapshot of the whole store."""

    version: int = STORE_FORMAT_VERSION
    projects: list[Project] = Field(default_factory=list)
    iterations: list[Iteration] = Field(default_factory=list)
    tickets: list[Ticket] = Field(default_factory=list)
    entries: list[TimeEntry] = Field(default_factory=list)


@dataclass(frozen=True)
class DeleteCounts:
    """What a delete removed or detached."""

    projects: int = 0
    iterations: int = 0
    tickets: int = 0
    entries: int = 0
    tickets_detached: int = 0


class WorklogStore:
    """Ordered maps of all entities with cascade-aware deletes."""

    def __init__(self) -> None:
        self.projects: dict[str, Project] = {}
        self.iterations: dict[str, Iteration] = {}
        self.tickets: dict[str, Ticket] = {}
        self.entries: dict[str, TimeEntry] = {}

    # =========================================================================
    # Snapshot conversion
    # =========================================================================

    @classmethod
    def from_data(cls, data: StoreData) -> "WorklogStore":
        store = cls()
        store.projects = {p.id: p for p in data.projects}
        store.iterations = {i.id: i for i in data.iterations}
        store.tickets = {t.id: t for t in data.tickets}
        store.entries = {e.id: e for e in data.entries}
        return store

    def to_data(self) -> StoreData:
        return StoreData(
            projects=list(self.projects.values()),
            iterations=list(self.iterations.values()),
            tickets=list(self.tickets.values()),
            entries=list(self.entries.values()),
        )

    # =========================================================================
    # Lookups
    # =========================================================================

    def find_project(self, project_id: str | None) -> Project | None:
        if project_id is None:
            return None
        return self.projects.get(project_id)

    def find_iteration(self, iteration_id: str | None) -> Iteration | None:
        if iteration_id is None:
            return None
        return self.iterations.get(iteration_id)

    def find_ticket(self, ticket_id: str | None) -> Ticket | None:
        """Find a ticket by its internal ID."""
        if ticket_id is None:
            return None
        return self.tickets.get(ticket_id)

    def find_entry(self, entry_id: str | None) -> TimeEntry | None:
        if entry_id is None:
            return None
        return self.entries.get(entry_id)

    def find_project_by_name(self, name: str) -> Project | None:
        for project in self.projects.values():
            if project.name == name:
                return project
        return None

    def find_ticket_by_key(self, ticket_key: str) -> Ticket | None:
        """Find a ticket by its user-facing ticket ID (e.g. "ABC-12")."""
        for ticket in self.tickets.values():
            if ticket.ticket_id == ticket_key:
                return ticket
        return None

    # =========================================================================
    # Queries
    # =========================================================================

    def list_projects(self) -> list[Project]:
        """All projects sorted by name."""
        return sorted(self.projects.values(), key=lambda p: p.name.casefold())

    def list_iterations(self, project_id: str | None = None) -> list[Iteration]:
        """Iterations, newest start date first.

        Args:
            project_id: Only iterations of this project; None for all
        """
        iterations = [
            i for i in self.iterations.values()
            if project_id is None or i.project_id == project_id
        ]
        return sorted(iterations, key=lambda i: i.start_date, reverse=True)

    def list_tickets(
        self,
        project_id: str | None = None,
        iteration_id: str | None = None,
    ) -> list[Ticket]:
        """Tickets in insertion order, optionally filtered."""
        return [
            t for t in self.tickets.values()
            if (project_id is None or t.project_id == project_id)
            and (iteration_id is None or t.iteration_id == iteration_id)
        ]

    def list_entries(self, ticket_id: str | None = None) -> list[TimeEntry]:
        """Entries newest first.

        Args:
            ticket_id: Only entries of this ticket (internal ID); None for all
        """
        entries = [
            e for e in self.entries.values()
            if ticket_id is None or e.ticket_id == ticket_id
        ]
        return sorted(entries, key=lambda e: e.logged_at, reverse=True)

    def ticket_hours(self, ticket_id: str) -> float:
        """Total hours logged on a ticket."""
        return sum(e.hours for e in self.entries.values() if e.ticket_id == ticket_id)

    # =========================================================================
    # Inserts
    # =========================================================================

    def add_project(self, project: Project) -> Project:
        self.projects[project.id] = project
        return project

    def add_iteration(self, iteration: Iteration) -> Iteration:
        self.iterations[iteration.id] = iteration
        return iteration

    def add_ticket(self, ticket: Ticket) -> Ticket:
        self.tickets[ticket.id] = ticket
        return ticket

    def add_entry(self, entry: TimeEntry) -> TimeEntry:
        self.entries[entry.id] = entry
        return entry

    # =========================================================================
    # Deletes
    # =========================================================================

    def delete_entry(self, entry_id: str) -> Result[DeleteCounts, str]:
        if self.entries.pop(entry_id, None) is None:
            return Err(f"Time entry not found: {entry_id}")
        return Ok(DeleteCounts(entries=1))

    def delete_ticket(self, ticket_id: str) -> Result[DeleteCounts, str]:
        """Delete a ticket and all of its entries."""
        if ticket_id not in self.tickets:
            return Err(f"Ticket not found: {ticket_id}")

        entry_ids = [e.id for e in self.entries.values() if e.ticket_id == ticket_id]
        for entry_id in entry_ids:
            del self.entries[entry_id]
        del self.tickets[ticket_id]

        return Ok(DeleteCounts(tickets=1, entries=len(entry_ids)))

    def delete_iteration(self, iteration_id: str) -> Result[DeleteCounts, str]:
        """Delete an iteration, detaching its tickets."""
        if iteration_id not in self.iterations:
            return Err(f"Iteration not found: {iteration_id}")

        detached = 0
        for ticket in self.tickets.values():
            if ticket.iteration_id == iteration_id:
                ticket.iteration_id = None
                detached += 1
        del self.iterations[iteration_id]

        return Ok(DeleteCounts(iterations=1, tickets_detached=detached))

    def delete_project(self, project_id: str) -> Result[DeleteCounts, str]:
        """Delete a project with its tickets, iterations and their entries."""
        if project_id not in self.projects:
            return Err(f"Project not found: {project_id}")

        tickets = entries = iterations = detached = 0

        for ticket_id in [t.id for t in self.tickets.values() if t.project_id == project_id]:
            counts = self.delete_ticket(ticket_id)
            if isinstance(counts, Ok):
                tickets += counts.value.tickets
                entries += counts.value.entries

        for iteration_id in [i.id for i in self.iterations.values() if i.project_id == project_id]:
            # Tickets of other projects may still point here
            counts = self.delete_iteration(iteration_id)
            if isinstance(counts, Ok):
                iterations += counts.value.iterations
                detached += counts.value.tickets_detached

        del self.projects[project_id]
        logger.debug(
            f"Deleted project {project_id}: {tickets} tickets, "
            f"{iterations} iterations, {entries} entries"
        )

        return Ok(
            DeleteCounts(
                projects=1,
                iterations=iterations,
                tickets=tickets,
                entries=entries,
                tickets_detached=detached,
            )
        )
