"""Bulk ticket text format.

One ticket per line, fields separated by ``|``::

    ABC-1 | Fix login bug | Happens on Safari only
    ABC-2 | Polish settings page

The description is optional. Blank lines, lines without a title field
and lines whose title is empty are skipped.
"""

from dataclasses import dataclass

FIELD_SEPARATOR = "|"


@dataclass(frozen=True)
class TicketDraft:
    """A parsed bulk line, not yet validated against the store."""

    ticket_id: str
    name: str
    detail: str = ""


def parse_bulk_tickets(text: str) -> list[TicketDraft]:
    """Parse bulk ticket text into drafts, in input order.

    Example:
        parse_bulk_tickets("A-1 | Fix bug | urgent\\nA-2 | Polish UI")
        # -> [TicketDraft("A-1", "Fix bug", "urgent"),
        #     TicketDraft("A-2", "Polish UI", "")]
    """
    drafts: list[TicketDraft] = []

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        parts = [part.strip() for part in line.split(FIELD_SEPARATOR)]
        if len(parts) < 2:
            continue

        ticket_id, name = parts[0], parts[1]
        detail = parts[2] if len(parts) >= 3 else ""
        if not name:
            continue

        drafts.append(TicketDraft(ticket_id=ticket_id, name=name, detail=detail))

    return drafts
