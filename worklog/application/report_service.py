"""Report application service.

Builds reports from the store's current state and keeps report
filters consistent with the store (an iteration filter must belong to
the selected project).
"""

from worklog.domain.report import GroupingMode, Report, ReportFilters, build_report
from worklog.infrastructure.storage.store import WorklogStore


def store_report(
    store: WorklogStore,
    filters: ReportFilters | None = None,
    mode: GroupingMode = GroupingMode.INDIVIDUAL,
) -> Report:
    """Build a report over every entry in the store, newest first."""
    return build_report(store.list_entries(), store, filters, mode)


def select_project(
    store: WorklogStore,
    filters: ReportFilters,
    project_id: str | None,
) -> ReportFilters:
    """Switch the project filter, dropping an iteration from another project.

    Args:
        store: Store to look up the project's iterations in.
        filters: Current filters.
        project_id: Project to select, or None for all projects.
    """
    if project_id is None:
        return filters.with_project(None)
    iteration_ids = [i.id for i in store.list_iterations(project_id)]
    return filters.with_project(project_id, iteration_ids)
