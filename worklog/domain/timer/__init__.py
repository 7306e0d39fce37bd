"""Live timer domain package.

At most one running session, bound to a single ticket. Stopping yields
a TimerSession that the caller may turn into a time entry.
"""

from worklog.domain.timer.events import TimerStarted, TimerStopped, TimerTicked
from worklog.domain.timer.timer import (
    Clock,
    Timer,
    TimerListener,
    TimerSession,
    TimerState,
)

__all__ = [
    "Clock",
    "Timer",
    "TimerListener",
    "TimerSession",
    "TimerStarted",
    "TimerState",
    "TimerStopped",
    "TimerTicked",
]
