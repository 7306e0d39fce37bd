"""Ticket domain package.

Tickets carry a user-supplied ticket ID, belong optionally to a project
and an iteration, and own their time entries.
"""

from worklog.domain.ticket.bulk import TicketDraft, parse_bulk_tickets
from worklog.domain.ticket.events import (
    TicketCreated,
    TicketDeleted,
    TicketsImported,
    TicketUpdated,
)
from worklog.domain.ticket.models import Ticket

__all__ = [
    "Ticket",
    "TicketCreated",
    "TicketDeleted",
    "TicketDraft",
    "TicketUpdated",
    "TicketsImported",
    "parse_bulk_tickets",
]
