"""Textual terminal UI for Worklog."""

from worklog.tui.app import WorklogApp

__all__ = ["WorklogApp"]
