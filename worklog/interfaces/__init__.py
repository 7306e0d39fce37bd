"""Interfaces layer for Worklog.

This layer contains adapters for user interaction:
- CLI: Command-line interface using Typer
- TUI: Terminal UI using Textual (in worklog/tui/)

The interfaces layer is responsible for:
- Accepting user input and validating it
- Calling application services
- Formatting output for the user
"""

from worklog.interfaces.cli import app

__all__ = ["app"]
