"""Base domain event.

Events are immutable records of something that happened to a project,
ticket, time entry or the timer. Services return them next to the entity
they touched; the timer pushes them to its subscribers.
"""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field


class DomainEvent(BaseModel):
    """Base class for all domain events.

    Each event has a unique ID and the UTC time it occurred.
    """

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = {"frozen": True}
