"""Ticket CLI commands, including bulk import."""

import sys
from pathlib import Path

import typer

from worklog.application.entry_service import short_id
from worklog.application.iteration_service import resolve_iteration
from worklog.application.project_service import resolve_project
from worklog.application.ticket_service import (
    UNCHANGED,
    create_ticket,
    delete_ticket,
    import_tickets,
    resolve_ticket,
    update_ticket,
)
from worklog.domain.types import Duration
from worklog.interfaces.cli.common import (
    ProjectOption,
    YesOption,
    confirm,
    load_store,
    parse_date,
    print_header,
    print_info,
    print_success,
    print_warning,
    save_store,
    unwrap,
)

app = typer.Typer(help="Ticket management commands")

# Passed to --iteration / --due / --project on edit to clear the field
NONE_VALUE = "none"


def _resolve_assignment(store, project: str | None, iteration: str | None) -> tuple[str | None, str | None]:
    project_id = unwrap(resolve_project(store, project)).id if project else None
    iteration_id = unwrap(resolve_iteration(store, iteration, project_id)).id if iteration else None
    return project_id, iteration_id


@app.command("add")
def add(
    ctx: typer.Context,
    ticket_id: str = typer.Argument(..., help="Unique ticket ID, e.g. ABC-12"),
    name: str = typer.Argument(..., help="Ticket title"),
    detail: str = typer.Option("", "--detail", "-d", help="Ticket description"),
    project: ProjectOption = None,
    iteration: str | None = typer.Option(None, "--iteration", "-i", help="Iteration name or ID"),
    start: str | None = typer.Option(None, "--start", help="Start date (YYYY-MM-DD), default today"),
    due: str | None = typer.Option(None, "--due", help="Due date (YYYY-MM-DD)"),
) -> None:
    """Create a ticket.

    Example:
        worklog ticket add ABC-12 "Fix login redirect" -p Website -i "Sprint 12"
    """
    store = load_store(ctx)
    project_id, iteration_id = _resolve_assignment(store, project, iteration)
    ticket, _event = unwrap(
        create_ticket(
            store,
            ticket_id,
            name,
            detail=detail,
            start_date=parse_date(start, "start date"),
            due_date=parse_date(due, "due date"),
            project_id=project_id,
            iteration_id=iteration_id,
        )
    )
    save_store(ctx, store)
    print_success(f"Created ticket: {ticket.ticket_id} - {ticket.name}")


@app.command("list")
def list_tickets(
    ctx: typer.Context,
    project: ProjectOption = None,
    iteration: str | None = typer.Option(None, "--iteration", "-i", help="Iteration name or ID"),
) -> None:
    """List tickets with their tracked time."""
    store = load_store(ctx)
    project_id, iteration_id = _resolve_assignment(store, project, iteration)
    tickets = store.list_tickets(project_id=project_id, iteration_id=iteration_id)
    if not tickets:
        typer.echo("No tickets found.")
        return

    typer.echo(f"{'ID':<12} {'Name':<36} {'Due':<10}  Logged")
    typer.echo("-" * 75)
    for ticket in tickets:
        due = str(ticket.due_date) if ticket.due_date else "-"
        typer.echo(
            f"{ticket.ticket_id[:12]:<12} {ticket.name[:36]:<36} {due:<10}  "
            f"{Duration.from_hours(store.ticket_hours(ticket.id))}"
        )


@app.command("show")
def show(
    ctx: typer.Context,
    ticket: str = typer.Argument(..., help="Ticket ID"),
) -> None:
    """Show a ticket with its time entries."""
    store = load_store(ctx)
    found = unwrap(resolve_ticket(store, ticket))
    project = store.find_project(found.project_id)
    iteration = store.find_iteration(found.iteration_id)

    print_header(f"{found.ticket_id}: {found.name}")
    typer.echo(f"Project:   {project.name if project else '-'}")
    typer.echo(f"Iteration: {iteration.name if iteration else '-'}")
    typer.echo(f"Start:     {found.start_date}")
    typer.echo(f"Due:       {found.due_date or '-'}")
    if found.detail:
        typer.echo(f"\n{found.detail}")

    entries = store.list_entries(found.id)
    typer.echo(f"\n## Time entries ({len(entries)})")
    for entry in entries:
        note = f"  {entry.note}" if entry.note else ""
        typer.echo(
            f"  {short_id(entry)}  {entry.logged_at:%Y-%m-%d %H:%M}  "
            f"{str(entry.duration):>14}{note}"
        )
    typer.echo(f"\nTotal: {Duration.from_hours(store.ticket_hours(found.id))}")


@app.command("edit")
def edit(
    ctx: typer.Context,
    ticket: str = typer.Argument(..., help="Ticket ID"),
    new_ticket_id: str | None = typer.Option(None, "--id", help="New ticket ID"),
    name: str | None = typer.Option(None, "--name", "-n", help="New title"),
    detail: str | None = typer.Option(None, "--detail", "-d", help="New description"),
    project: str | None = typer.Option(
        None, "--project", "-p", help=f"Project name or ID ('{NONE_VALUE}' to clear)"
    ),
    iteration: str | None = typer.Option(
        None, "--iteration", "-i", help=f"Iteration name or ID ('{NONE_VALUE}' to clear)"
    ),
    start: str | None = typer.Option(None, "--start", help="New start date (YYYY-MM-DD)"),
    due: str | None = typer.Option(
        None, "--due", help=f"New due date (YYYY-MM-DD, '{NONE_VALUE}' to clear)"
    ),
) -> None:
    """Edit a ticket's fields or move it to another project or iteration."""
    store = load_store(ctx)
    found = unwrap(resolve_ticket(store, ticket))

    project_id = UNCHANGED
    if project is not None:
        project_id = None if project.lower() == NONE_VALUE else unwrap(resolve_project(store, project)).id

    iteration_id = UNCHANGED
    if iteration is not None:
        if iteration.lower() == NONE_VALUE:
            iteration_id = None
        else:
            scope = found.project_id if project_id is UNCHANGED else project_id
            iteration_id = unwrap(resolve_iteration(store, iteration, scope)).id

    due_date = UNCHANGED
    if due is not None:
        due_date = None if due.lower() == NONE_VALUE else parse_date(due, "due date")

    updated, _event = unwrap(
        update_ticket(
            store,
            found.id,
            new_ticket_id=new_ticket_id,
            name=name,
            detail=detail,
            start_date=parse_date(start, "start date"),
            due_date=due_date,
            project_id=project_id,
            iteration_id=iteration_id,
        )
    )
    save_store(ctx, store)
    print_success(f"Updated ticket: {updated.ticket_id} - {updated.name}")


@app.command("delete")
def delete(
    ctx: typer.Context,
    ticket: str = typer.Argument(..., help="Ticket ID"),
    yes: YesOption = False,
) -> None:
    """Delete a ticket and all of its time entries."""
    store = load_store(ctx)
    found = unwrap(resolve_ticket(store, ticket))

    if not confirm(f"Delete ticket {found.ticket_id} and its time entries?", yes):
        print_info("Cancelled")
        return

    event = unwrap(delete_ticket(store, found.id))
    save_store(ctx, store)
    print_success(f"Deleted ticket: {found.ticket_id} ({event.entries_deleted} time entries removed)")


@app.command("import")
def import_file(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Text file with one 'ID | Title | Description' per line, or '-' for stdin"),
    project: ProjectOption = None,
    iteration: str | None = typer.Option(None, "--iteration", "-i", help="Iteration for every imported ticket"),
    yes: YesOption = False,
) -> None:
    """Create many tickets at once.

    Each line reads "TICKET-ID | Title | Description"; the description is
    optional. Blank lines and lines without a title are skipped.

    Example:
        worklog ticket import tickets.txt -p Website -i "Sprint 12"
    """
    if source == "-":
        text = sys.stdin.read()
    else:
        path = Path(source)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            raise typer.BadParameter(f"Not a UTF-8 text file: {path}")
        except OSError as e:
            raise typer.BadParameter(f"Cannot read {path}: {e}")

    store = load_store(ctx)
    project_id, iteration_id = _resolve_assignment(store, project, iteration)

    created, event = unwrap(import_tickets(store, text, project_id, iteration_id))
    if not created:
        print_warning("No new tickets to import")
    elif not confirm(f"Import {len(created)} tickets?", yes or source == "-"):
        print_info("Cancelled")
        return
    else:
        save_store(ctx, store)
        print_success(f"Imported {len(created)} tickets")

    for reason in event.skipped:
        print_warning(f"Skipped {reason}")
