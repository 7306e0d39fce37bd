"""CLI command groups for Worklog.

Each module provides a set of related commands. Groups are Typer apps
registered with the main app using app.add_typer(); single commands
(log, timer, report) are registered directly.

Command groups:
- project: Project management
- iteration: Sprints and milestones
- ticket: Tickets and bulk import
- entry: Time entries (plus the top-level `log` command)
- timer: Foreground live timer
- report: Filtered and grouped time reports
- db: Whole-database export / import
"""

from worklog.interfaces.cli.commands import db, entry, iteration, project, report, ticket, timer

__all__ = ["project", "iteration", "ticket", "entry", "timer", "report", "db"]
