"""Reports screen for the Worklog TUI.

Shows logged time grouped by entry, ticket, iteration or project,
filtered by project, iteration and a search term. Rows are rebuilt on
every control change.
"""

from typing import TYPE_CHECKING, Any, Optional

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Input, Label, Select, Static

from worklog.application.report_service import select_project, store_report
from worklog.domain.report import GroupingMode, Report, ReportFilters
from worklog.domain.types import Duration
from worklog.infrastructure.storage import WorklogStore

if TYPE_CHECKING:
    from worklog.tui.app import WorklogApp


def selected_value(value: Any) -> Optional[str]:
    """Value of a Select, or None when nothing is selected.

    Every option value here is a string, so anything else is the
    blank sentinel.
    """
    if isinstance(value, str):
        return value
    return None


def grouping_options() -> list[tuple[str, GroupingMode]]:
    return [(mode.label, mode) for mode in GroupingMode]


def project_options(store: WorklogStore) -> list[tuple[str, str]]:
    """(name, id) pairs for every project, sorted by name."""
    return [(project.name, project.id) for project in store.list_projects()]


def iteration_options(store: WorklogStore, project_id: Optional[str]) -> list[tuple[str, str]]:
    """(label, id) pairs for the iterations a filter may choose from.

    With a project selected only its iterations are offered; otherwise
    every iteration, labelled with its project.
    """
    options = []
    for iteration in store.list_iterations(project_id):
        label = iteration.name
        if project_id is None:
            owner = store.find_project(iteration.project_id)
            if owner is not None:
                label = f"{iteration.name} ({owner.name})"
        options.append((label, iteration.id))
    return options


def report_cells(report: Report) -> tuple[tuple[str, ...], list[tuple[str, ...]]]:
    """Column labels and row cells for a report table."""
    if report.mode is GroupingMode.INDIVIDUAL:
        columns = ("Date", "Ticket", "ID", "Project", "Note", "Time")
        rows = [
            (
                f"{row.logged_at:%Y-%m-%d %H:%M}" if row.logged_at else "",
                row.name,
                row.subtitle or "",
                row.project_name or "",
                row.note or "",
                str(Duration.from_hours(row.hours)),
            )
            for row in report.rows
        ]
        return columns, rows

    columns = ("Name", "Detail", "Entries", "Time")
    rows = [
        (row.name, row.subtitle or "", str(row.entry_count), str(Duration.from_hours(row.hours)))
        for row in report.rows
    ]
    return columns, rows


class ReportsScreen(Screen):
    """Filtered, grouped report over all time entries."""

    BINDINGS = [
        ("escape", "app.pop_screen", "Back"),
        ("c", "clear_filters", "Clear Filters"),
    ]

    CSS = """
    #report-controls {
        height: auto;
        padding: 0 1;
    }

    #report-controls Select {
        width: 1fr;
        margin-right: 1;
    }

    #report-search {
        margin: 0 1;
    }

    #report-table {
        height: 1fr;
    }

    #report-total {
        height: 1;
        padding: 0 1;
        text-style: bold;
        background: $primary-darken-2;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._filters = ReportFilters()
        self._mode = GroupingMode.INDIVIDUAL

    @property
    def filters(self) -> ReportFilters:
        return self._filters

    def compose(self) -> ComposeResult:
        app: "WorklogApp" = self.app  # type: ignore
        yield Header()
        with Vertical():
            with Horizontal(id="report-controls"):
                yield Select(
                    grouping_options(),
                    value=GroupingMode.INDIVIDUAL,
                    allow_blank=False,
                    id="grouping-select",
                )
                yield Select(project_options(app.store), prompt="All projects", id="report-project-select")
                yield Select(
                    iteration_options(app.store, None),
                    prompt="All iterations",
                    id="report-iteration-select",
                )
            yield Input(placeholder="Search ticket name, ID or note", id="report-search")
            yield Label("", id="report-summary")
            yield DataTable(id="report-table", zebra_stripes=True)
            yield Static("", id="report-total")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_report()

    def on_select_changed(self, event: Select.Changed) -> None:
        app: "WorklogApp" = self.app  # type: ignore
        value = selected_value(event.value)

        if event.select.id == "grouping-select":
            self._mode = GroupingMode(value or GroupingMode.INDIVIDUAL)
        elif event.select.id == "report-project-select":
            if value == self._filters.project_id:
                return
            self._filters = select_project(app.store, self._filters, value)
            self._reload_iterations()
        elif event.select.id == "report-iteration-select":
            self._filters = self._filters.with_iteration(value)

        self.refresh_report()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "report-search":
            self._filters = self._filters.with_search(event.value)
            self.refresh_report()

    def _reload_iterations(self) -> None:
        """Offer the selected project's iterations, keeping a still valid choice."""
        app: "WorklogApp" = self.app  # type: ignore
        iteration_select = self.query_one("#report-iteration-select", Select)
        iteration_select.set_options(iteration_options(app.store, self._filters.project_id))
        if self._filters.iteration_id is not None:
            iteration_select.value = self._filters.iteration_id

    def refresh_report(self) -> None:
        """Rebuild the table from the current filters and grouping."""
        app: "WorklogApp" = self.app  # type: ignore
        report = store_report(app.store, self._filters, self._mode)
        columns, rows = report_cells(report)

        table = self.query_one("#report-table", DataTable)
        table.clear(columns=True)
        table.add_columns(*columns)
        for cells in rows:
            table.add_row(*cells)

        self.query_one("#report-summary", Label).update(f"{self._mode.label}: {report.summary}")
        self.query_one("#report-total", Static).update(
            f"Total: {Duration.from_hours(report.total_hours)}  ({report.entry_count} entries)"
        )

    def action_clear_filters(self) -> None:
        self.query_one("#report-project-select", Select).clear()
        self.query_one("#report-iteration-select", Select).clear()
        self.query_one("#report-search", Input).value = ""
        self._filters = self._filters.cleared()
        self._reload_iterations()
        self.refresh_report()


__all__ = ["ReportsScreen"]
