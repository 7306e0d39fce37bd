"""Shared utilities for Worklog CLI commands.

- Loading and saving the store for a command
- Unwrapping service Results into output or exit codes
- Formatted output helpers (error, success, info, warning)
- Date parsing and reusable options
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Annotated, Optional, TypeVar

import typer

from worklog.config import get_backup_path, get_database_path, get_settings, Settings
from worklog.domain.shared import Err, Result
from worklog.infrastructure.storage import WorklogRepository, WorklogStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

PROJECT_ENV = "WORKLOG_PROJECT"

# Reusable project option for CLI commands
# Usage: def my_command(project: ProjectOption = None) -> None:
ProjectOption = Annotated[Optional[str], typer.Option(
    "--project", "-p",
    help=f"Project name or ID (or set {PROJECT_ENV} env var)",
    envvar=PROJECT_ENV,
)]

YesOption = Annotated[bool, typer.Option("--yes", "-y", help="Skip the confirmation prompt")]


@dataclass
class CliContext:
    """Per-invocation state set up by the top-level callback."""

    data_dir: Path

    @property
    def database_path(self) -> Path:
        return get_database_path(self.data_dir)

    @property
    def backup_path(self) -> Path:
        return get_backup_path(self.data_dir)

    @property
    def repository(self) -> WorklogRepository:
        return WorklogRepository(self.database_path)

    @property
    def settings(self) -> Settings:
        return get_settings(self.data_dir)


def get_context(ctx: typer.Context) -> CliContext:
    """Return the CliContext stored on the root Typer context."""
    return ctx.find_root().obj


def load_store(ctx: typer.Context) -> WorklogStore:
    """Load the store or exit with an error.

    Raises:
        typer.Exit: If the store file exists but cannot be read.
    """
    result = get_context(ctx).repository.load()
    if isinstance(result, Err):
        logger.error(f"Failed to load store: {result.error}")
        print_error(result.error)
        raise typer.Exit(1)
    return result.value


def save_store(ctx: typer.Context, store: WorklogStore) -> None:
    """Persist the store or exit with an error.

    Raises:
        typer.Exit: If writing fails. The failure is already logged.
    """
    result = get_context(ctx).repository.save(store)
    if isinstance(result, Err):
        print_error(f"Failed to save: {result.error}")
        raise typer.Exit(1)


def unwrap(result: Result[T, str]) -> T:
    """Return the Ok value, or print the error and exit 1."""
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    return result.value


def parse_date(value: str | None, option: str = "date") -> date | None:
    """Parse an ISO date (YYYY-MM-DD) given on the command line."""
    if value is None:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise typer.BadParameter(f"Invalid {option} '{value}', expected YYYY-MM-DD")


def parse_datetime(value: str | None, option: str = "timestamp") -> datetime | None:
    """Parse an ISO timestamp (YYYY-MM-DDTHH:MM[:SS]) given on the command line."""
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        raise typer.BadParameter(f"Invalid {option} '{value}', expected YYYY-MM-DDTHH:MM")


def confirm(message: str, yes: bool) -> bool:
    """Ask for confirmation unless --yes was given."""
    if yes:
        return True
    return typer.confirm(message, default=False)


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message.

    Args:
        msg: Success message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message.

    Args:
        msg: Info message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_warning(msg: str) -> None:
    """Print a formatted warning message.

    Args:
        msg: Warning message to display
    """
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW))


def print_separator(char: str = "=", width: int = 60) -> None:
    """Print a separator line."""
    typer.echo(char * width)


def print_header(title: str) -> None:
    """Print a title framed by separator lines."""
    print_separator()
    typer.echo(title)
    print_separator()


__all__ = [
    "CliContext",
    "ProjectOption",
    "YesOption",
    "get_context",
    "load_store",
    "save_store",
    "unwrap",
    "parse_date",
    "parse_datetime",
    "confirm",
    "print_error",
    "print_success",
    "print_info",
    "print_warning",
    "print_separator",
    "print_header",
]
