"""Application services for Worklog.

Services validate user input against the store and apply changes to
the in-memory store. They never write files; callers persist with
WorklogRepository afterwards.

Services:
    project_service - Projects and their summaries
    iteration_service - Sprints and milestones
    ticket_service - Tickets, including bulk import
    entry_service - Manual logging, timer sessions, entry edits
    report_service - Reports over the whole store

Example usage:
    >>> from worklog.application import create_project, create_ticket
    >>> from worklog.domain.shared import is_ok
    >>>
    >>> result = create_project(store, "Website")
    >>> if is_ok(result):
    ...     project, event = result.value
"""

from worklog.application.entry_service import (
    delete_entry,
    log_time,
    log_timer_session,
    resolve_entry,
    stop_timer,
    update_entry,
)
from worklog.application.iteration_service import (
    create_iteration,
    delete_iteration,
    resolve_iteration,
    update_iteration,
)
from worklog.application.project_service import (
    create_project,
    delete_project,
    get_project_summary,
    resolve_project,
    update_project,
)
from worklog.application.report_service import select_project, store_report
from worklog.application.ticket_service import (
    UNCHANGED,
    create_ticket,
    delete_ticket,
    import_tickets,
    resolve_ticket,
    update_ticket,
)

__all__ = [
    # Project service
    "create_project",
    "update_project",
    "delete_project",
    "resolve_project",
    "get_project_summary",
    # Iteration service
    "create_iteration",
    "update_iteration",
    "delete_iteration",
    "resolve_iteration",
    # Ticket service
    "UNCHANGED",
    "create_ticket",
    "update_ticket",
    "delete_ticket",
    "import_tickets",
    "resolve_ticket",
    # Entry service
    "log_time",
    "log_timer_session",
    "stop_timer",
    "update_entry",
    "delete_entry",
    "resolve_entry",
    # Report service
    "store_report",
    "select_project",
]
