"""Foreground live timer.

Runs until Ctrl+C, redrawing the elapsed time every second, then logs
the session on the ticket.
"""

import logging
import time

import typer
from rich.console import Console
from rich.live import Live
from rich.text import Text

from worklog.application.entry_service import log_timer_session
from worklog.application.ticket_service import resolve_ticket
from worklog.domain.shared import DomainEvent
from worklog.domain.ticket import Ticket
from worklog.domain.timer import Timer, TimerTicked
from worklog.domain.types import format_duration
from worklog.interfaces.cli.common import load_store, print_success, print_warning, save_store, unwrap

logger = logging.getLogger(__name__)

TICK_SECONDS = 1.0


def _render(timer: Timer, ticket: Ticket) -> Text:
    text = Text()
    text.append("● ", style="bold red")
    text.append(f"{ticket.ticket_id} ", style="bold")
    text.append(f"{ticket.name}  ")
    text.append(timer.format_elapsed(), style="bold green")
    text.append("   (Ctrl+C to stop)", style="dim")
    return text


def run_timer(
    ctx: typer.Context,
    ticket: str = typer.Argument(..., help="Ticket ID to time"),
    note: str | None = typer.Option(None, "--note", "-n", help="Note for the logged entry"),
) -> None:
    """Time work on a ticket until Ctrl+C, then log it.

    Example:
        worklog timer ABC-12 -n "Pairing on login bug"
    """
    store = load_store(ctx)
    found = unwrap(resolve_ticket(store, ticket))

    timer = Timer()
    console = Console()
    timer.start(found)

    with Live(_render(timer, found), console=console, auto_refresh=False) as live:

        def redraw(event: DomainEvent) -> None:
            if isinstance(event, TimerTicked):
                live.update(_render(timer, found), refresh=True)

        unsubscribe = timer.subscribe(redraw)
        try:
            while True:
                time.sleep(TICK_SECONDS)
                timer.tick()
        except KeyboardInterrupt:
            logger.debug(f"Timer interrupted on {found.ticket_id}")
        finally:
            unsubscribe()

    session = timer.stop()
    if session is None:
        return

    # Reload so edits made elsewhere while the timer ran are kept
    store = load_store(ctx)
    logged = log_timer_session(store, session, note)
    if logged is None:
        print_warning(f"Nothing logged ({format_duration(max(session.duration.seconds, 0))})")
        return

    entry, _event = logged
    save_store(ctx, store)
    print_success(f"Logged {entry.duration} on {found.ticket_id}")
