"""TUI screens for Worklog."""

from .confirm import ConfirmModal
from .log_time import LogTimeModal
from .main import MainScreen
from .reports import ReportsScreen

__all__ = [
    "ConfirmModal",
    "LogTimeModal",
    "MainScreen",
    "ReportsScreen",
]
