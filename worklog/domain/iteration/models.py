"""Iteration domain models."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field

from worklog.domain.ids import new_id


class IterationType(str, Enum):
    """Kind of iteration."""

    SPRINT = "Sprint"
    MILESTONE = "Milestone"


class Iteration(BaseModel):
    """A sprint or milestone with a date range.

    The due date must fall strictly after the start date. The project
    reference is optional and non-owning.
    """

    id: str = Field(default_factory=new_id)
    name: str
    type: IterationType = IterationType.SPRINT
    start_date: date
    due_date: date
    project_id: str | None = None

    def is_active(self, today: date) -> bool:
        """Check whether today falls inside the iteration, bounds included."""
        return self.start_date <= today <= self.due_date
