"""Worklog - time tracking for projects, iterations and tickets."""

__version__ = "0.1.0"
