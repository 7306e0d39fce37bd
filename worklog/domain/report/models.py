"""Report domain models."""

from collections.abc import Iterable
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

UNKNOWN_TICKET = "Unknown"
NO_ITERATION = "No Iteration"
NO_PROJECT = "No Project"


class GroupingMode(str, Enum):
    """How report rows are built from entries."""

    INDIVIDUAL = "individual"
    BY_TICKET = "ticket"
    BY_ITERATION = "iteration"
    BY_PROJECT = "project"

    @property
    def label(self) -> str:
        """Display label for pickers and headers."""
        return _GROUPING_LABELS[self]


_GROUPING_LABELS = {
    GroupingMode.INDIVIDUAL: "Individual Time Entries",
    GroupingMode.BY_TICKET: "By Ticket",
    GroupingMode.BY_ITERATION: "By Iteration",
    GroupingMode.BY_PROJECT: "By Project",
}


class ReportFilters(BaseModel):
    """Active report filters. All set filters must match (AND).

    Filters are immutable; the ``with_*`` methods return a changed copy.
    """

    project_id: str | None = None
    iteration_id: str | None = None
    search: str = ""

    model_config = {"frozen": True}

    @property
    def search_term(self) -> str:
        """Search text as typed, or empty when it is only whitespace."""
        return self.search if self.search.strip() else ""

    def is_empty(self) -> bool:
        """True when no filter is set."""
        return self.project_id is None and self.iteration_id is None and not self.search_term

    def with_project(
        self,
        project_id: str | None,
        project_iteration_ids: Iterable[str] = (),
    ) -> "ReportFilters":
        """Select a project (None for all projects).

        The iteration filter is cleared unless it is one of the new
        project's iterations.

        Args:
            project_id: Project to filter on, or None
            project_iteration_ids: IDs of the iterations of that project
        """
        iteration_id = self.iteration_id
        if iteration_id is not None and iteration_id not in set(project_iteration_ids):
            iteration_id = None
        return self.model_copy(update={"project_id": project_id, "iteration_id": iteration_id})

    def with_iteration(self, iteration_id: str | None) -> "ReportFilters":
        return self.model_copy(update={"iteration_id": iteration_id})

    def with_search(self, search: str) -> "ReportFilters":
        return self.model_copy(update={"search": search})

    def cleared(self) -> "ReportFilters":
        """Drop every filter."""
        return ReportFilters()


class ReportRow(BaseModel):
    """One line of a report.

    In individual mode a row stands for a single entry and carries its
    date, note, project and iteration; grouped rows leave those unset.
    """

    name: str
    subtitle: str | None = None
    hours: float = 0.0
    entry_ids: list[str] = Field(default_factory=list)
    logged_at: datetime | None = None
    note: str | None = None
    project_name: str | None = None
    iteration_name: str | None = None

    @property
    def entry_count(self) -> int:
        return len(self.entry_ids)


class Report(BaseModel):
    """A computed report: rows plus totals over the filtered entries."""

    mode: GroupingMode
    filters: ReportFilters = Field(default_factory=ReportFilters)
    rows: list[ReportRow] = Field(default_factory=list)
    total_hours: float = 0.0
    entry_count: int = 0

    @property
    def summary(self) -> str:
        """Count line shown above the rows."""
        if self.mode is GroupingMode.INDIVIDUAL:
            return f"{self.entry_count} time entries"
        return f"{len(self.rows)} groups"
