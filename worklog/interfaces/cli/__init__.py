"""CLI interface for Worklog using Typer.

Usage:
    worklog project add "Website"           # Create a project
    worklog ticket add ABC-12 "Fix login"   # Create a ticket
    worklog log ABC-12 -H 1 -m 30           # Log time manually
    worklog timer ABC-12                    # Time work live
    worklog report --group ticket           # Show a report
    worklog tui                             # Open the terminal UI

The CLI is structured as:
- app: Main Typer application
- commands/: Individual command groups (project, ticket, entry, ...)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from worklog import __version__
from worklog.config import DATA_DIR_ENV, get_data_dir
from worklog.interfaces.cli.commands import db, entry, iteration, project, report, ticket, timer
from worklog.interfaces.cli.common import CliContext, get_context, load_store

app = typer.Typer(
    name="worklog",
    help="Track time spent on project tickets",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"worklog version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        help=f"Directory holding the database (or set {DATA_DIR_ENV} env var)",
        envvar=DATA_DIR_ENV,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Worklog - time tracking for projects, iterations and tickets.

    Log time manually or with a live timer, then report on it by
    ticket, iteration or project.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.obj = CliContext(data_dir=get_data_dir(data_dir))


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(project.app, name="project")
app.add_typer(iteration.app, name="iteration")
app.add_typer(ticket.app, name="ticket")
app.add_typer(entry.app, name="entry")
app.add_typer(db.app, name="db")


# =============================================================================
# Top-Level Commands
# =============================================================================

app.command("log")(entry.log)
app.command("timer")(timer.run_timer)
app.command("report")(report.report)


@app.command("tui")
def tui(ctx: typer.Context) -> None:
    """Open the terminal UI."""
    # Textual is imported lazily so plain CLI commands start fast
    from worklog.tui import WorklogApp

    WorklogApp(data_dir=get_context(ctx).data_dir, store=load_store(ctx)).run()


__all__ = ["app"]
