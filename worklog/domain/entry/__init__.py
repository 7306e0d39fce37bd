"""Time entry domain package."""

from worklog.domain.entry.events import EntryDeleted, EntrySource, EntryUpdated, TimeLogged
from worklog.domain.entry.models import TimeEntry

__all__ = [
    "EntryDeleted",
    "EntrySource",
    "EntryUpdated",
    "TimeEntry",
    "TimeLogged",
]
