"""Time entry CLI commands: manual logging, listing, editing, deleting."""

import logging

import typer

from worklog.application.entry_service import (
    delete_entry,
    log_time,
    resolve_entry,
    short_id,
    update_entry,
)
from worklog.application.ticket_service import resolve_ticket
from worklog.domain.types import Duration, split_hours
from worklog.interfaces.cli.common import (
    YesOption,
    confirm,
    get_context,
    load_store,
    parse_datetime,
    print_info,
    print_success,
    save_store,
    unwrap,
)

logger = logging.getLogger(__name__)

app = typer.Typer(help="Time entry commands")


def log(
    ctx: typer.Context,
    ticket: str = typer.Argument(..., help="Ticket ID to log time on"),
    hours: str | None = typer.Option(None, "--hours", "-H", help="Hours (default from settings)"),
    minutes: str | None = typer.Option(None, "--minutes", "-m", help="Minutes, 0-59 (default from settings)"),
    seconds: str = typer.Option("0", "--seconds", "-s", help="Seconds, 0-59"),
    note: str | None = typer.Option(None, "--note", "-n", help="What the time was spent on"),
    at: str | None = typer.Option(None, "--at", help="When the work was done (YYYY-MM-DDTHH:MM), default now"),
) -> None:
    """Log time on a ticket manually.

    Hours and minutes not given fall back to the defaults in settings.json.

    Example:
        worklog log ABC-12 -H 1 -m 30 -n "Code review"
    """
    settings = get_context(ctx).settings
    store = load_store(ctx)
    found = unwrap(resolve_ticket(store, ticket))

    entry, event = unwrap(
        log_time(
            store,
            found.id,
            hours if hours is not None else str(settings.default_log_hours),
            minutes if minutes is not None else str(settings.default_log_minutes),
            seconds,
            note=note,
            logged_at=parse_datetime(at),
        )
    )
    save_store(ctx, store)
    logger.info(f"Logged {event.hours:.4f}h on {found.ticket_id} ({event.source.value})")
    print_success(f"Logged {entry.duration} on {found.ticket_id}")
    typer.echo(f"  Ticket total: {Duration.from_hours(store.ticket_hours(found.id))}")


@app.command("list")
def list_entries(
    ctx: typer.Context,
    ticket: str | None = typer.Argument(None, help="Only entries of this ticket"),
    limit: int = typer.Option(20, "--limit", "-l", help="Maximum entries to show (0 for all)"),
) -> None:
    """List time entries, newest first."""
    store = load_store(ctx)
    ticket_id = unwrap(resolve_ticket(store, ticket)).id if ticket else None
    entries = store.list_entries(ticket_id)
    if not entries:
        typer.echo("No time entries found.")
        return

    shown = entries[:limit] if limit > 0 else entries
    typer.echo(f"{'Entry':<8}  {'Logged at':<16}  {'Ticket':<12} {'Duration':>14}  Note")
    typer.echo("-" * 75)
    for entry in shown:
        owner = store.find_ticket(entry.ticket_id)
        typer.echo(
            f"{short_id(entry):<8}  {entry.logged_at:%Y-%m-%d %H:%M}  "
            f"{(owner.ticket_id if owner else '-')[:12]:<12} {str(entry.duration):>14}  {entry.note or ''}"
        )
    if len(shown) < len(entries):
        typer.echo(f"... {len(entries) - len(shown)} more (use --limit 0 to show all)")


@app.command("edit")
def edit(
    ctx: typer.Context,
    entry: str = typer.Argument(..., help="Entry ID or unique prefix"),
    hours: str | None = typer.Option(None, "--hours", "-H", help="New hours"),
    minutes: str | None = typer.Option(None, "--minutes", "-m", help="New minutes, 0-59"),
    seconds: str | None = typer.Option(None, "--seconds", "-s", help="New seconds, 0-59"),
    note: str | None = typer.Option(None, "--note", "-n", help="New note ('' clears it)"),
    at: str | None = typer.Option(None, "--at", help="New timestamp (YYYY-MM-DDTHH:MM)"),
) -> None:
    """Edit a time entry. Fields not given keep their current value."""
    store = load_store(ctx)
    found = unwrap(resolve_entry(store, entry))

    current_h, current_m, current_s = split_hours(found.hours)
    updated, _event = unwrap(
        update_entry(
            store,
            found.id,
            hours if hours is not None else str(current_h),
            minutes if minutes is not None else str(current_m),
            seconds if seconds is not None else str(current_s),
            note=note if note is not None else found.note,
            logged_at=parse_datetime(at),
        )
    )
    save_store(ctx, store)
    print_success(f"Updated entry {short_id(updated)}: {updated.duration}")


@app.command("delete")
def delete(
    ctx: typer.Context,
    entry: str = typer.Argument(..., help="Entry ID or unique prefix"),
    yes: YesOption = False,
) -> None:
    """Delete a time entry."""
    store = load_store(ctx)
    found = unwrap(resolve_entry(store, entry))

    if not confirm(f"Delete entry {short_id(found)} ({found.duration})?", yes):
        print_info("Cancelled")
        return

    unwrap(delete_entry(store, found.id))
    save_store(ctx, store)
    print_success(f"Deleted entry {short_id(found)}")
