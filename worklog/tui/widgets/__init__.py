"""TUI widgets for Worklog."""

from .ticket_list import TicketList
from .timer_bar import TimerBar

__all__ = [
    "TicketList",
    "TimerBar",
]
