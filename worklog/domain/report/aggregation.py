"""Report aggregation.

Pure functions from (entries, filters, grouping mode) to a Report.
Nothing is mutated, so a report can be rebuilt on every filter change.

Entries reference tickets by ID, and tickets reference projects and
iterations by ID; an EntityLookup (the store) resolves them.
"""

from collections.abc import Callable, Hashable, Iterable
from typing import Protocol

from worklog.domain.entry.models import TimeEntry
from worklog.domain.iteration.models import Iteration
from worklog.domain.project.models import Project
from worklog.domain.report.models import (
    NO_ITERATION,
    NO_PROJECT,
    UNKNOWN_TICKET,
    GroupingMode,
    Report,
    ReportFilters,
    ReportRow,
)
from worklog.domain.ticket.models import Ticket


class EntityLookup(Protocol):
    """Read access to related entities by ID."""

    def find_ticket(self, ticket_id: str | None) -> Ticket | None: ...

    def find_project(self, project_id: str | None) -> Project | None: ...

    def find_iteration(self, iteration_id: str | None) -> Iteration | None: ...


def matches_search(entry: TimeEntry, ticket: Ticket | None, term: str) -> bool:
    """Case-insensitive match of term against ticket name, ticket ID or note.

    An empty or whitespace-only term matches everything. Other terms are
    matched as given, surrounding spaces included. An entry without a
    ticket never matches a non-empty term.
    """
    if not term.strip():
        return True
    if ticket is None:
        return False

    needle = term.casefold()
    if needle in ticket.name.casefold() or needle in ticket.ticket_id.casefold():
        return True
    return entry.note is not None and needle in entry.note.casefold()


def filter_entries(
    entries: Iterable[TimeEntry],
    lookup: EntityLookup,
    filters: ReportFilters,
) -> list[TimeEntry]:
    """Apply project, iteration and search filters, keeping input order."""
    term = filters.search_term
    result: list[TimeEntry] = []

    for entry in entries:
        ticket = lookup.find_ticket(entry.ticket_id)

        if filters.project_id is not None:
            if ticket is None or ticket.project_id != filters.project_id:
                continue

        if filters.iteration_id is not None:
            if ticket is None or ticket.iteration_id != filters.iteration_id:
                continue

        if not matches_search(entry, ticket, term):
            continue

        result.append(entry)

    return result


def total_hours(entries: Iterable[TimeEntry]) -> float:
    """Sum of hours over entries."""
    return sum(entry.hours for entry in entries)


def _individual_rows(entries: list[TimeEntry], lookup: EntityLookup) -> list[ReportRow]:
    rows: list[ReportRow] = []
    for entry in entries:
        ticket = lookup.find_ticket(entry.ticket_id)
        project = lookup.find_project(ticket.project_id) if ticket else None
        iteration = lookup.find_iteration(ticket.iteration_id) if ticket else None
        rows.append(
            ReportRow(
                name=ticket.name if ticket else UNKNOWN_TICKET,
                subtitle=ticket.ticket_id if ticket else None,
                hours=entry.hours,
                entry_ids=[entry.id],
                logged_at=entry.logged_at,
                note=entry.note,
                project_name=project.name if project else None,
                iteration_name=iteration.name if iteration else None,
            )
        )
    return rows


def _bucket(
    entries: list[TimeEntry],
    key: Callable[[TimeEntry], Hashable],
) -> dict[Hashable, list[TimeEntry]]:
    """Group entries by key, buckets in first-seen order."""
    buckets: dict[Hashable, list[TimeEntry]] = {}
    for entry in entries:
        buckets.setdefault(key(entry), []).append(entry)
    return buckets


def _ticket_rows(entries: list[TimeEntry], lookup: EntityLookup) -> list[ReportRow]:
    def key(entry: TimeEntry) -> str | None:
        # Missing and dangling ticket references share one "Unknown" row
        ticket = lookup.find_ticket(entry.ticket_id)
        return ticket.id if ticket else None

    rows: list[ReportRow] = []
    for ticket_key, bucket in _bucket(entries, key).items():
        ticket = lookup.find_ticket(ticket_key)
        rows.append(
            ReportRow(
                name=ticket.name if ticket else UNKNOWN_TICKET,
                subtitle=ticket.ticket_id if ticket else None,
                hours=total_hours(bucket),
                entry_ids=[e.id for e in bucket],
            )
        )
    return rows


def _iteration_of(entry: TimeEntry, lookup: EntityLookup) -> Iteration | None:
    ticket = lookup.find_ticket(entry.ticket_id)
    if ticket is None:
        return None
    return lookup.find_iteration(ticket.iteration_id)


def _iteration_rows(entries: list[TimeEntry], lookup: EntityLookup) -> list[ReportRow]:
    def key(entry: TimeEntry) -> str:
        iteration = _iteration_of(entry, lookup)
        return iteration.name if iteration else NO_ITERATION

    rows: list[ReportRow] = []
    for name, bucket in _bucket(entries, key).items():
        iteration = _iteration_of(bucket[0], lookup)
        project = lookup.find_project(iteration.project_id) if iteration else None
        rows.append(
            ReportRow(
                name=name,
                subtitle=project.name if project else None,
                hours=total_hours(bucket),
                entry_ids=[e.id for e in bucket],
            )
        )
    return rows


def _project_rows(entries: list[TimeEntry], lookup: EntityLookup) -> list[ReportRow]:
    def key(entry: TimeEntry) -> str:
        ticket = lookup.find_ticket(entry.ticket_id)
        project = lookup.find_project(ticket.project_id) if ticket else None
        return project.name if project else NO_PROJECT

    return [
        ReportRow(
            name=name,
            subtitle=f"{len(bucket)} tickets",
            hours=total_hours(bucket),
            entry_ids=[e.id for e in bucket],
        )
        for name, bucket in _bucket(entries, key).items()
    ]


_GROUPERS = {
    GroupingMode.BY_TICKET: _ticket_rows,
    GroupingMode.BY_ITERATION: _iteration_rows,
    GroupingMode.BY_PROJECT: _project_rows,
}


def group_entries(
    entries: list[TimeEntry],
    lookup: EntityLookup,
    mode: GroupingMode,
) -> list[ReportRow]:
    """Build report rows for a grouping mode.

    Individual rows keep the entry order. Grouped rows are sorted by
    hours, largest first; equal totals keep first-seen order.
    """
    if mode is GroupingMode.INDIVIDUAL:
        return _individual_rows(entries, lookup)

    rows = _GROUPERS[mode](entries, lookup)
    return sorted(rows, key=lambda row: row.hours, reverse=True)


def build_report(
    entries: Iterable[TimeEntry],
    lookup: EntityLookup,
    filters: ReportFilters | None = None,
    mode: GroupingMode = GroupingMode.INDIVIDUAL,
) -> Report:
    """Filter and group entries into a Report.

    Args:
        entries: Time entries, newest first
        lookup: Resolves tickets, projects and iterations
        filters: Filters to apply; None means no filtering
        mode: Grouping mode

    Returns:
        Report with rows, grand total and filtered entry count.
    """
    filters = filters or ReportFilters()
    filtered = filter_entries(entries, lookup, filters)
    return Report(
        mode=mode,
        filters=filters,
        rows=group_entries(filtered, lookup, mode),
        total_hours=total_hours(filtered),
        entry_count=len(filtered),
    )
