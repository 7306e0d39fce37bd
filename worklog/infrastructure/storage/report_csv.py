"""CSV export of report rows."""

import csv
from pathlib import Path

from worklog.domain.report import GroupingMode, Report
from worklog.domain.shared.result import Err, Ok, Result
from worklog.domain.types import Duration


def write_report_csv(report: Report, destination: Path) -> Result[int, str]:
    """Write a report's rows to a CSV file.

    Individual reports get one line per entry with its date, project,
    iteration and note; grouped reports get one line per group.

    Returns:
        Ok(number of rows written) or Err(str).
    """
    individual = report.mode is GroupingMode.INDIVIDUAL
    if individual:
        header = ["Date", "Ticket", "Ticket ID", "Project", "Iteration", "Note", "Hours", "Duration"]
    else:
        header = ["Name", "Subtitle", "Entries", "Hours", "Duration"]

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(header)
            for row in report.rows:
                duration = str(Duration.from_hours(row.hours))
                if individual:
                    writer.writerow([
                        row.logged_at.isoformat(timespec="seconds") if row.logged_at else "",
                        row.name,
                        row.subtitle or "",
                        row.project_name or "",
                        row.iteration_name or "",
                        row.note or "",
                        f"{row.hours:.4f}",
                        duration,
                    ])
                else:
                    writer.writerow([
                        row.name,
                        row.subtitle or "",
                        row.entry_count,
                        f"{row.hours:.4f}",
                        duration,
                    ])
    except PermissionError:
        return Err(f"Permission denied writing {destination}")
    except OSError as e:
        return Err(f"Error writing {destination}: {e}")

    return Ok(len(report.rows))
