"""Project management CLI commands."""

import logging

import typer

from worklog.application.project_service import (
    create_project,
    delete_project,
    get_project_summary,
    resolve_project,
    update_project,
)
from worklog.domain.types import Duration
from worklog.interfaces.cli.common import (
    YesOption,
    confirm,
    load_store,
    print_header,
    print_info,
    print_success,
    save_store,
    unwrap,
)

logger = logging.getLogger(__name__)

app = typer.Typer(help="Project management commands")


@app.command("add")
def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Unique project name"),
    detail: str = typer.Option("", "--detail", "-d", help="Project description"),
) -> None:
    """Create a new project.

    Example:
        worklog project add "Website Relaunch" -d "Q3 marketing site"
    """
    store = load_store(ctx)
    project, event = unwrap(create_project(store, name, detail))
    save_store(ctx, store)
    logger.info(f"Project created: {event.project_id}")
    print_success(f"Created project: {project.name}")


@app.command("list")
def list_projects(ctx: typer.Context) -> None:
    """List all projects with ticket counts and logged time."""
    store = load_store(ctx)
    projects = store.list_projects()
    if not projects:
        typer.echo("No projects yet. Create one with: worklog project add NAME")
        return

    typer.echo(f"{'Project':<30} {'Tickets':>7} {'Iters':>5}  Logged")
    typer.echo("-" * 70)
    for project in projects:
        summary = get_project_summary(store, project)
        typer.echo(
            f"{summary.name[:30]:<30} {summary.ticket_count:>7} {summary.iteration_count:>5}  "
            f"{Duration.from_hours(summary.total_hours)}"
        )


@app.command("show")
def show(
    ctx: typer.Context,
    project: str = typer.Argument(..., help="Project name or ID"),
) -> None:
    """Show a project's details, iterations and tickets."""
    store = load_store(ctx)
    found = unwrap(resolve_project(store, project))
    summary = get_project_summary(store, found)

    print_header(f"PROJECT: {found.name}")
    if found.detail:
        typer.echo(found.detail)
    typer.echo(f"Logged: {Duration.from_hours(summary.total_hours)}")

    typer.echo(f"\n## Iterations ({summary.iteration_count})")
    for iteration in store.list_iterations(found.id):
        typer.echo(
            f"- {iteration.name} [{iteration.type.value}] "
            f"{iteration.start_date} -> {iteration.due_date}"
        )

    typer.echo(f"\n## Tickets ({summary.ticket_count})")
    for ticket in store.list_tickets(project_id=found.id):
        typer.echo(
            f"- {ticket.ticket_id}: {ticket.name} "
            f"({Duration.from_hours(store.ticket_hours(ticket.id))})"
        )


@app.command("edit")
def edit(
    ctx: typer.Context,
    project: str = typer.Argument(..., help="Project name or ID"),
    name: str | None = typer.Option(None, "--name", "-n", help="New name"),
    detail: str | None = typer.Option(None, "--detail", "-d", help="New description"),
) -> None:
    """Rename a project or change its description."""
    store = load_store(ctx)
    found = unwrap(resolve_project(store, project))
    updated, _event = unwrap(update_project(store, found.id, name=name, detail=detail))
    save_store(ctx, store)
    print_success(f"Updated project: {updated.name}")


@app.command("delete")
def delete(
    ctx: typer.Context,
    project: str = typer.Argument(..., help="Project name or ID"),
    yes: YesOption = False,
) -> None:
    """Delete a project with all its tickets, iterations and time entries."""
    store = load_store(ctx)
    found = unwrap(resolve_project(store, project))

    if not confirm(f"Delete project '{found.name}' and everything in it?", yes):
        print_info("Cancelled")
        return

    event = unwrap(delete_project(store, found.id))
    save_store(ctx, store)
    print_success(f"Deleted project: {found.name}")
    typer.echo(
        f"  Removed {event.tickets_deleted} tickets, {event.iterations_deleted} iterations, "
        f"{event.entries_deleted} time entries"
    )
