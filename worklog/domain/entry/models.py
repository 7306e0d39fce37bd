"""Time entry domain model."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from worklog.domain.ids import new_id
from worklog.domain.types import Duration


class TimeEntry(BaseModel):
    """Hours logged against a ticket.

    Entries without a ticket are allowed; reports list them as
    "Unknown". An empty note is stored as None.
    """

    id: str = Field(default_factory=new_id)
    hours: float = Field(ge=0, description="Fractional hours, 1.5 == 90 minutes")
    logged_at: datetime = Field(default_factory=datetime.now)
    ticket_id: str | None = None
    note: str | None = None

    @field_validator("note")
    @classmethod
    def _empty_note_is_none(cls, value: str | None) -> str | None:
        if value is not None and value == "":
            return None
        return value

    @property
    def duration(self) -> Duration:
        """The logged time as a Duration."""
        return Duration.from_hours(self.hours)
