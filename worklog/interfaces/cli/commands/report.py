"""Report CLI command."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from worklog.application.iteration_service import resolve_iteration
from worklog.application.project_service import resolve_project
from worklog.application.report_service import select_project, store_report
from worklog.domain.report import GroupingMode, Report, ReportFilters
from worklog.domain.types import Duration
from worklog.infrastructure.storage.report_csv import write_report_csv
from worklog.interfaces.cli.common import (
    ProjectOption,
    load_store,
    print_success,
    print_warning,
    unwrap,
)


def _report_table(report: Report) -> Table:
    """Render report rows with the grand total in the footer."""
    total = str(Duration.from_hours(report.total_hours))
    table = Table(title=report.mode.label, caption=report.summary, show_footer=True)

    if report.mode is GroupingMode.INDIVIDUAL:
        table.add_column("Date")
        table.add_column("Ticket", footer="Total")
        table.add_column("ID")
        table.add_column("Note")
        table.add_column("Time", justify="right", footer=total)
        for row in report.rows:
            table.add_row(
                f"{row.logged_at:%Y-%m-%d %H:%M}" if row.logged_at else "",
                row.name,
                row.subtitle or "",
                row.note or "",
                str(Duration.from_hours(row.hours)),
            )
        return table

    table.add_column("Name", footer="Total")
    table.add_column("Detail")
    table.add_column("Entries", justify="right", footer=str(report.entry_count))
    table.add_column("Time", justify="right", footer=total)
    for row in report.rows:
        table.add_row(
            row.name,
            row.subtitle or "",
            str(row.entry_count),
            str(Duration.from_hours(row.hours)),
        )
    return table


def report(
    ctx: typer.Context,
    group: GroupingMode = typer.Option(
        GroupingMode.INDIVIDUAL, "--group", "-g", help="Row grouping", case_sensitive=False
    ),
    project: ProjectOption = None,
    iteration: str | None = typer.Option(None, "--iteration", "-i", help="Iteration name or ID"),
    search: str = typer.Option("", "--search", "-s", help="Match ticket name, ticket ID or note"),
    csv: Path | None = typer.Option(None, "--csv", help="Also write the rows to this CSV file"),
) -> None:
    """Show logged time, optionally filtered and grouped.

    Examples:
        worklog report --group ticket -p Website
        worklog report -g project --search review --csv review.csv
    """
    store = load_store(ctx)

    filters = ReportFilters(search=search)
    if project:
        filters = select_project(store, filters, unwrap(resolve_project(store, project)).id)
    if iteration:
        found = unwrap(resolve_iteration(store, iteration, filters.project_id))
        filters = filters.with_iteration(found.id)

    result = store_report(store, filters, group)

    if not result.rows:
        print_warning("No time entries match")
    else:
        Console().print(_report_table(result))

    if csv is not None:
        written = unwrap(write_report_csv(result, csv))
        print_success(f"Wrote {written} rows to {csv}")
