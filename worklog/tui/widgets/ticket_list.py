"""Ticket table widget for the Worklog TUI."""

from typing import Optional

from textual.widgets import DataTable

from worklog.domain.ticket import Ticket
from worklog.domain.types import Duration
from worklog.infrastructure.storage import WorklogStore

COLUMNS = ("ID", "Name", "Iteration", "Due", "Logged")


class TicketList(DataTable):
    """Table of tickets with their tracked time.

    Row keys are internal ticket IDs.
    """

    DEFAULT_CSS = """
    TicketList {
        height: 1fr;
    }
    """

    def __init__(self, id: Optional[str] = None) -> None:
        super().__init__(id=id, cursor_type="row", zebra_stripes=True)
        self._ticket_ids: list[str] = []

    def show_tickets(self, store: WorklogStore, project_id: Optional[str] = None) -> None:
        """Replace the rows with the tickets of a project (all if None)."""
        if not self.columns:
            self.add_columns(*COLUMNS)

        selected = self.selected_ticket_id
        self.clear()
        self._ticket_ids = []

        for ticket in store.list_tickets(project_id=project_id):
            self.add_row(*self._cells(store, ticket), key=ticket.id)
            self._ticket_ids.append(ticket.id)

        if selected in self._ticket_ids:
            self.move_cursor(row=self._ticket_ids.index(selected))

    def _cells(self, store: WorklogStore, ticket: Ticket) -> tuple[str, ...]:
        iteration = store.find_iteration(ticket.iteration_id)
        return (
            ticket.ticket_id,
            ticket.name,
            iteration.name if iteration else "",
            str(ticket.due_date) if ticket.due_date else "",
            str(Duration.from_hours(store.ticket_hours(ticket.id))),
        )

    @property
    def selected_ticket_id(self) -> Optional[str]:
        """Internal ID of the ticket under the cursor."""
        if not self._ticket_ids or not 0 <= self.cursor_row < len(self._ticket_ids):
            return None
        return self._ticket_ids[self.cursor_row]
