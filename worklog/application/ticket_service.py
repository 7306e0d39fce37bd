"""Ticket application service.

Creates, edits, deletes and bulk-imports tickets in the in-memory
store. Ticket IDs are user-supplied and must be unique.

An iteration from a different project than the ticket's is accepted;
only pickers narrow the choice to the ticket's project.
"""

from datetime import date
from typing import Any

from worklog.domain.shared import Err, Ok, Result
from worklog.domain.ticket import (
    Ticket,
    TicketCreated,
    TicketDeleted,
    TicketsImported,
    TicketUpdated,
    parse_bulk_tickets,
)
from worklog.infrastructure.storage.store import WorklogStore

# Marks an optional field that update_ticket should leave alone
UNCHANGED: Any = object()


def validate_ticket_fields(
    store: WorklogStore,
    ticket_id: str,
    name: str,
    exclude_id: str | None = None,
) -> Result[tuple[str, str], str]:
    """Check ticket ID and name are non-empty and the ticket ID is free.

    Returns:
        Ok((ticket_id, name)) stripped, or Err(str) with the reason.
    """
    key = ticket_id.strip()
    title = name.strip()
    if not key:
        return Err("Ticket ID cannot be empty")
    if not title:
        return Err("Ticket name cannot be empty")

    existing = store.find_ticket_by_key(key)
    if existing is not None and existing.id != exclude_id:
        return Err(f"Ticket ID '{key}' already exists")

    return Ok((key, title))


def _check_assignment(
    store: WorklogStore,
    project_id: str | None,
    iteration_id: str | None,
) -> Result[None, str]:
    if project_id is not None and store.find_project(project_id) is None:
        return Err(f"Project not found: {project_id}")
    if iteration_id is not None and store.find_iteration(iteration_id) is None:
        return Err(f"Iteration not found: {iteration_id}")
    return Ok(None)


def create_ticket(
    store: WorklogStore,
    ticket_id: str,
    name: str,
    detail: str = "",
    start_date: date | None = None,
    due_date: date | None = None,
    project_id: str | None = None,
    iteration_id: str | None = None,
) -> Result[tuple[Ticket, TicketCreated], str]:
    """Create a ticket and add it to the store.

    Args:
        store: Store to add to.
        ticket_id: User-facing ticket ID, e.g. "ABC-12".
        name: Ticket title.
        detail: Free-text description.
        start_date: Defaults to today.
        due_date: Optional due date.
        project_id: Owning project.
        iteration_id: Iteration the ticket is planned in.

    Returns:
        Ok((Ticket, TicketCreated)) or Err(str).
    """
    checked = validate_ticket_fields(store, ticket_id, name)
    if isinstance(checked, Err):
        return checked
    assignment = _check_assignment(store, project_id, iteration_id)
    if isinstance(assignment, Err):
        return assignment

    key, title = checked.value
    ticket = store.add_ticket(
        Ticket(
            ticket_id=key,
            name=title,
            detail=detail,
            start_date=start_date or date.today(),
            due_date=due_date,
            project_id=project_id,
            iteration_id=iteration_id,
        )
    )
    event = TicketCreated(ticket_id=ticket.ticket_id, name=ticket.name, project_id=project_id)
    return Ok((ticket, event))


def update_ticket(
    store: WorklogStore,
    ticket_id: str,
    *,
    new_ticket_id: str | None = None,
    name: str | None = None,
    detail: str | None = None,
    start_date: date | None = None,
    due_date: date | None = UNCHANGED,
    project_id: str | None = UNCHANGED,
    iteration_id: str | None = UNCHANGED,
) -> Result[tuple[Ticket, TicketUpdated], str]:
    """Edit a ticket.

    Plain fields left as None keep their value. The optional due date,
    project and iteration are cleared by passing None and kept by
    leaving them at UNCHANGED.

    Args:
        store: Store holding the ticket.
        ticket_id: Internal ID of the ticket to edit.
    """
    ticket = store.find_ticket(ticket_id)
    if ticket is None:
        return Err(f"Ticket not found: {ticket_id}")

    checked = validate_ticket_fields(
        store,
        new_ticket_id if new_ticket_id is not None else ticket.ticket_id,
        name if name is not None else ticket.name,
        exclude_id=ticket.id,
    )
    if isinstance(checked, Err):
        return checked

    new_project = ticket.project_id if project_id is UNCHANGED else project_id
    new_iteration = ticket.iteration_id if iteration_id is UNCHANGED else iteration_id
    assignment = _check_assignment(store, new_project, new_iteration)
    if isinstance(assignment, Err):
        return assignment

    ticket.ticket_id, ticket.name = checked.value
    if detail is not None:
        ticket.detail = detail
    if start_date is not None:
        ticket.start_date = start_date
    if due_date is not UNCHANGED:
        ticket.due_date = due_date
    ticket.project_id = new_project
    ticket.iteration_id = new_iteration

    return Ok((ticket, TicketUpdated(ticket_id=ticket.ticket_id, name=ticket.name)))


def delete_ticket(store: WorklogStore, ticket_id: str) -> Result[TicketDeleted, str]:
    """Delete a ticket and its time entries."""
    ticket = store.find_ticket(ticket_id)
    if ticket is None:
        return Err(f"Ticket not found: {ticket_id}")

    result = store.delete_ticket(ticket_id)
    if isinstance(result, Err):
        return result
    return Ok(TicketDeleted(ticket_id=ticket.ticket_id, entries_deleted=result.value.entries))


def import_tickets(
    store: WorklogStore,
    text: str,
    project_id: str | None = None,
    iteration_id: str | None = None,
) -> Result[tuple[list[Ticket], TicketsImported], str]:
    """Create tickets from bulk text, one per line.

    Every ticket gets the same project and iteration. Lines with an
    empty or already used ticket ID are skipped and listed in the event.

    Returns:
        Ok((created tickets, TicketsImported)), or Err(str) if the
        assignment is invalid or no line could be parsed.
    """
    assignment = _check_assignment(store, project_id, iteration_id)
    if isinstance(assignment, Err):
        return assignment

    drafts = parse_bulk_tickets(text)
    if not drafts:
        return Err("No tickets found. Use one 'TICKET-ID | Title | Description' per line")

    created: list[Ticket] = []
    skipped: list[str] = []
    for draft in drafts:
        result = create_ticket(
            store,
            draft.ticket_id,
            draft.name,
            detail=draft.detail,
            project_id=project_id,
            iteration_id=iteration_id,
        )
        if isinstance(result, Err):
            skipped.append(f"{draft.ticket_id or '(no id)'}: {result.error}")
            continue
        created.append(result.value[0])

    event = TicketsImported(
        ticket_ids=[t.ticket_id for t in created],
        project_id=project_id,
        iteration_id=iteration_id,
        skipped=skipped,
    )
    return Ok((created, event))


def resolve_ticket(store: WorklogStore, ref: str) -> Result[Ticket, str]:
    """Find a ticket by its ticket ID (e.g. "ABC-12") or internal ID."""
    ticket = store.find_ticket_by_key(ref.strip()) or store.find_ticket(ref)
    if ticket is None:
        return Err(f"Ticket not found: {ref}")
    return Ok(ticket)
