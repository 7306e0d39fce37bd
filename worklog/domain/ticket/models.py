"""Ticket domain models."""

from datetime import date

from pydantic import BaseModel, Field

from worklog.domain.ids import new_id


class Ticket(BaseModel):
    """A unit of work that time is logged against.

    ``ticket_id`` is the user-facing key (e.g. "ABC-123") and must be
    unique; ``id`` is the internal storage key so the ticket ID can be
    edited without breaking references.
    """

    id: str = Field(default_factory=new_id)
    ticket_id: str
    name: str
    detail: str = ""
    start_date: date = Field(default_factory=date.today)
    due_date: date | None = None
    project_id: str | None = None
    iteration_id: str | None = None
