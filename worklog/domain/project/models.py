"""Project domain models.

Pure data structures with no I/O or side effects.
"""

from pydantic import BaseModel, Field

from worklog.domain.ids import new_id


class Project(BaseModel):
    """A project grouping tickets and iterations.

    Project names are unique across the store.
    """

    id: str = Field(default_factory=new_id)
    name: str = Field(description="Unique, human-readable name")
    detail: str = ""


class ProjectSummary(BaseModel):
    """Lightweight view of a project for listings."""

    id: str
    name: str
    detail: str = ""
    ticket_count: int = 0
    iteration_count: int = 0
    total_hours: float = 0.0
