"""Iteration (sprint / milestone) CLI commands."""

from datetime import date, timedelta

import typer

from worklog.application.iteration_service import (
    create_iteration,
    delete_iteration,
    resolve_iteration,
    update_iteration,
)
from worklog.application.project_service import resolve_project
from worklog.domain.iteration import IterationType
from worklog.interfaces.cli.common import (
    ProjectOption,
    YesOption,
    confirm,
    load_store,
    parse_date,
    print_info,
    print_success,
    save_store,
    unwrap,
)

app = typer.Typer(help="Iteration management commands")

# New iterations default to a two week sprint starting today
DEFAULT_LENGTH_DAYS = 14


def _project_id(store, project: str | None) -> str | None:
    if project is None:
        return None
    return unwrap(resolve_project(store, project)).id


@app.command("add")
def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Iteration name, e.g. 'Sprint 12'"),
    project: ProjectOption = None,
    iteration_type: IterationType = typer.Option(
        IterationType.SPRINT, "--type", "-t", help="Sprint or Milestone", case_sensitive=False
    ),
    start: str | None = typer.Option(None, "--start", help="Start date (YYYY-MM-DD), default today"),
    due: str | None = typer.Option(None, "--due", help="Due date (YYYY-MM-DD), default start + 14 days"),
) -> None:
    """Create a sprint or milestone.

    Example:
        worklog iteration add "Sprint 12" -p Website --start 2024-03-01 --due 2024-03-15
    """
    store = load_store(ctx)
    start_date = parse_date(start, "start date") or date.today()
    due_date = parse_date(due, "due date") or start_date + timedelta(days=DEFAULT_LENGTH_DAYS)

    iteration, _event = unwrap(
        create_iteration(
            store,
            _project_id(store, project),
            name,
            start_date,
            due_date,
            iteration_type,
        )
    )
    save_store(ctx, store)
    print_success(f"Created {iteration.type.value.lower()}: {iteration.name}")


@app.command("list")
def list_iterations(ctx: typer.Context, project: ProjectOption = None) -> None:
    """List iterations, newest first."""
    store = load_store(ctx)
    iterations = store.list_iterations(_project_id(store, project))
    if not iterations:
        typer.echo("No iterations found.")
        return

    today = date.today()
    typer.echo(f"{'':<2}{'Name':<24} {'Type':<10} {'Start':<10}  {'Due':<10}  Project")
    typer.echo("-" * 70)
    for iteration in iterations:
        marker = "* " if iteration.is_active(today) else "  "
        owner = store.find_project(iteration.project_id)
        typer.echo(
            f"{marker}{iteration.name[:24]:<24} {iteration.type.value:<10} "
            f"{iteration.start_date}  {iteration.due_date}  {owner.name if owner else '-'}"
        )
    typer.echo("\n* active today")


@app.command("edit")
def edit(
    ctx: typer.Context,
    iteration: str = typer.Argument(..., help="Iteration name or ID"),
    project: ProjectOption = None,
    name: str | None = typer.Option(None, "--name", "-n", help="New name"),
    iteration_type: IterationType | None = typer.Option(
        None, "--type", "-t", help="Sprint or Milestone", case_sensitive=False
    ),
    start: str | None = typer.Option(None, "--start", help="New start date (YYYY-MM-DD)"),
    due: str | None = typer.Option(None, "--due", help="New due date (YYYY-MM-DD)"),
) -> None:
    """Edit an iteration's name, type or dates."""
    store = load_store(ctx)
    found = unwrap(resolve_iteration(store, iteration, _project_id(store, project)))
    updated, _event = unwrap(
        update_iteration(
            store,
            found.id,
            name=name,
            start_date=parse_date(start, "start date"),
            due_date=parse_date(due, "due date"),
            iteration_type=iteration_type,
        )
    )
    save_store(ctx, store)
    print_success(f"Updated iteration: {updated.name}")


@app.command("delete")
def delete(
    ctx: typer.Context,
    iteration: str = typer.Argument(..., help="Iteration name or ID"),
    project: ProjectOption = None,
    yes: YesOption = False,
) -> None:
    """Delete an iteration. Its tickets are kept without an iteration."""
    store = load_store(ctx)
    found = unwrap(resolve_iteration(store, iteration, _project_id(store, project)))

    if not confirm(f"Delete iteration '{found.name}'?", yes):
        print_info("Cancelled")
        return

    event = unwrap(delete_iteration(store, found.id))
    save_store(ctx, store)
    print_success(f"Deleted iteration: {found.name}")
    if event.tickets_detached:
        typer.echo(f"  {event.tickets_detached} tickets no longer have an iteration")
