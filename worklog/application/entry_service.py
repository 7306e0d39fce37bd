"""Time entry application service.

Turns manual input and finished timer sessions into time entries.
Only strictly positive durations are ever stored.
"""

import logging
from datetime import datetime

from worklog.domain.entry import EntryDeleted, EntrySource, EntryUpdated, TimeEntry, TimeLogged
from worklog.domain.shared import Err, Ok, Result, flat_map
from worklog.domain.timer import Timer, TimerSession
from worklog.domain.types import ManualDuration
from worklog.infrastructure.storage.store import WorklogStore

logger = logging.getLogger(__name__)

# Entry IDs shown in listings are shortened to this many characters
SHORT_ID_LENGTH = 8


def short_id(entry: TimeEntry) -> str:
    return entry.id[:SHORT_ID_LENGTH]


def _add_entry(
    store: WorklogStore,
    ticket_id: str | None,
    hours: float,
    note: str | None,
    logged_at: datetime | None,
    source: EntrySource,
) -> tuple[TimeEntry, TimeLogged]:
    entry = TimeEntry(
        hours=hours,
        ticket_id=ticket_id,
        note=note,
        logged_at=logged_at or datetime.now(),
    )
    store.add_entry(entry)
    event = TimeLogged(entry_id=entry.id, ticket_id=ticket_id, hours=hours, source=source)
    return entry, event


def log_time(
    store: WorklogStore,
    ticket_id: str,
    hours: str,
    minutes: str,
    seconds: str,
    note: str | None = None,
    logged_at: datetime | None = None,
) -> Result[tuple[TimeEntry, TimeLogged], str]:
    """Log a manually entered duration on a ticket.

    Args:
        store: Store to add the entry to.
        ticket_id: Internal ID of the ticket.
        hours: Hours field text.
        minutes: Minutes field text, below 60.
        seconds: Seconds field text, below 60.
        note: Optional note; empty means none.
        logged_at: Defaults to now.

    Returns:
        Ok((TimeEntry, TimeLogged)) or Err(str) for invalid input.

    Example:
        log_time(store, ticket.id, "0", "30", "0")  # logs 0.5 hours
    """
    if store.find_ticket(ticket_id) is None:
        return Err(f"Ticket not found: {ticket_id}")

    def add(duration: ManualDuration) -> Result[tuple[TimeEntry, TimeLogged], str]:
        return Ok(
            _add_entry(store, ticket_id, duration.total_hours, note, logged_at, EntrySource.MANUAL)
        )

    return flat_map(ManualDuration.parse(hours, minutes, seconds), add)


def log_timer_session(
    store: WorklogStore,
    session: TimerSession,
    note: str | None = None,
) -> tuple[TimeEntry, TimeLogged] | None:
    """Persist a finished timer session as an entry.

    Sessions of zero or negative length, and sessions whose ticket was
    deleted while the timer ran, are dropped.

    Returns:
        (TimeEntry, TimeLogged), or None if the session was dropped.
    """
    duration = session.duration
    if not duration.is_positive():
        logger.debug(f"Discarding empty timer session on {session.ticket.ticket_id}")
        return None

    if store.find_ticket(session.ticket.id) is None:
        logger.warning(
            f"Ticket {session.ticket.ticket_id} no longer exists; "
            f"discarding {duration} of timed work"
        )
        return None

    return _add_entry(
        store,
        session.ticket.id,
        duration.hours,
        note,
        session.ended_at,
        EntrySource.TIMER,
    )


def stop_timer(
    store: WorklogStore,
    timer: Timer,
    note: str | None = None,
) -> tuple[TimeEntry, TimeLogged] | None:
    """Stop the timer and log the session if it has any length.

    Returns:
        The new entry and its event, or None if nothing was logged.
    """
    session = timer.stop()
    if session is None:
        return None
    return log_timer_session(store, session, note)


def update_entry(
    store: WorklogStore,
    entry_id: str,
    hours: str,
    minutes: str,
    seconds: str,
    note: str | None = None,
    logged_at: datetime | None = None,
) -> Result[tuple[TimeEntry, EntryUpdated], str]:
    """Edit an entry's duration, note and timestamp.

    The duration fields follow the same rules as log_time. The note is
    replaced as given (None or "" clears it); logged_at is kept when None.
    """
    entry = store.find_entry(entry_id)
    if entry is None:
        return Err(f"Time entry not found: {entry_id}")

    parsed = ManualDuration.parse(hours, minutes, seconds)
    if isinstance(parsed, Err):
        return parsed

    entry.hours = parsed.value.total_hours
    entry.note = note or None
    if logged_at is not None:
        entry.logged_at = logged_at

    return Ok((entry, EntryUpdated(entry_id=entry.id, hours=entry.hours)))


def delete_entry(store: WorklogStore, entry_id: str) -> Result[EntryDeleted, str]:
    result = store.delete_entry(entry_id)
    if isinstance(result, Err):
        return result
    return Ok(EntryDeleted(entry_id=entry_id))


def resolve_entry(store: WorklogStore, ref: str) -> Result[TimeEntry, str]:
    """Find an entry by full ID or unique ID prefix."""
    ref = ref.strip()
    if not ref:
        return Err("Entry ID cannot be empty")

    entry = store.find_entry(ref)
    if entry is not None:
        return Ok(entry)

    matches = [e for e in store.entries.values() if e.id.startswith(ref)]
    if not matches:
        return Err(f"Time entry not found: {ref}")
    if len(matches) > 1:
        return Err(f"Entry ID prefix '{ref}' matches {len(matches)} entries")
    return Ok(matches[0])
