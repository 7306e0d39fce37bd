"""Domain value objects for Worklog.

Immutable value objects for durations. Time entries store fractional
hours (1.5 == 90 minutes); the UI shows and accepts hours, minutes and
seconds. These types convert between the two.
"""

from dataclasses import dataclass
from datetime import datetime

from worklog.domain.shared.result import Err, Ok, Result

SECONDS_PER_HOUR = 3600

# Float noise from hours * 3600 is dropped at this precision before truncating
_SECONDS_PRECISION = 6


def format_duration(seconds: float) -> str:
    """Format a duration as "{hours}h {minutes}min {seconds}s".

    Each component is truncated, never rounded.

    Example:
        format_duration(9045)  # -> "2h 30min 45s"
    """
    total = int(seconds)
    hours = total // 3600
    minutes = total // 60 % 60
    secs = total % 60
    return f"{hours}h {minutes}min {secs}s"


def split_hours(hours: float) -> tuple[int, int, int]:
    """Split fractional hours into whole (hours, minutes, seconds).

    Example:
        split_hours(1.5)  # -> (1, 30, 0)
    """
    total = int(round(hours * SECONDS_PER_HOUR, _SECONDS_PRECISION))
    return total // 3600, total % 3600 // 60, total % 60


@dataclass(frozen=True)
class Duration:
    """A span of time measured in seconds.

    Attributes:
        seconds: Length of the span; negative when the end precedes the start
    """

    seconds: float

    @classmethod
    def from_hours(cls, hours: float) -> "Duration":
        """Create a Duration from fractional hours as stored on entries."""
        return cls(seconds=round(hours * SECONDS_PER_HOUR, _SECONDS_PRECISION))

    @classmethod
    def between(cls, start: datetime, end: datetime) -> "Duration":
        """Create the Duration from start to end."""
        return cls(seconds=(end - start).total_seconds())

    @property
    def hours(self) -> float:
        """The duration in fractional hours."""
        return self.seconds / SECONDS_PER_HOUR

    def is_positive(self) -> bool:
        """Check whether the duration is long enough to be logged."""
        return self.seconds > 0

    def __str__(self) -> str:
        """Return the duration as "{h}h {m}min {s}s"."""
        return format_duration(self.seconds)


@dataclass(frozen=True)
class ManualDuration:
    """Hours, minutes and seconds typed in by the user.

    Attributes:
        hours: Whole hours, zero or more
        minutes: Whole minutes, 0-59
        seconds: Whole seconds, 0-59
    """

    hours: int
    minutes: int
    seconds: int

    @classmethod
    def parse(cls, hours: str, minutes: str, seconds: str) -> Result["ManualDuration", str]:
        """Parse and validate the three input fields.

        All three must be integers, minutes and seconds below 60, none
        negative, and at least one of them non-zero.

        Args:
            hours: Hours field text
            minutes: Minutes field text
            seconds: Seconds field text

        Returns:
            Ok(ManualDuration) or Err(str) describing the invalid input
        """
        try:
            h = int(str(hours).strip())
            m = int(str(minutes).strip())
            s = int(str(seconds).strip())
        except ValueError:
            return Err("Hours, minutes and seconds must be whole numbers")

        if h < 0 or m < 0 or s < 0:
            return Err("Time values cannot be negative")
        if m >= 60 or s >= 60:
            return Err("Minutes and seconds must be below 60")
        if h == 0 and m == 0 and s == 0:
            return Err("Duration must be greater than zero")

        return Ok(cls(hours=h, minutes=m, seconds=s))

    @classmethod
    def from_hours(cls, hours: float) -> "ManualDuration":
        """Build the editable fields for an existing entry's hours."""
        h, m, s = split_hours(hours)
        return cls(hours=h, minutes=m, seconds=s)

    @property
    def total_hours(self) -> float:
        """The duration as fractional hours."""
        return self.hours + self.minutes / 60 + self.seconds / SECONDS_PER_HOUR
