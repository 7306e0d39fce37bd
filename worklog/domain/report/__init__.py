"""Report domain package.

Filters time entries and folds them into summary rows for display.
"""

from worklog.domain.report.aggregation import (
    EntityLookup,
    build_report,
    filter_entries,
    group_entries,
    matches_search,
    total_hours,
)
from worklog.domain.report.models import (
    NO_ITERATION,
    NO_PROJECT,
    UNKNOWN_TICKET,
    GroupingMode,
    Report,
    ReportFilters,
    ReportRow,
)

__all__ = [
    "EntityLookup",
    "GroupingMode",
    "NO_ITERATION",
    "NO_PROJECT",
    "Report",
    "ReportFilters",
    "ReportRow",
    "UNKNOWN_TICKET",
    "build_report",
    "filter_entries",
    "group_entries",
    "matches_search",
    "total_hours",
]
