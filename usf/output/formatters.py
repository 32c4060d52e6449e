"""
Console formatters for USF documents.

- Subjects and periods as tables
- Timetable as a week grid (rows = periods, columns = days)
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..data.models import WeekType

if TYPE_CHECKING:
    from ..data.models import TimetableEntry, USFDocument


# =============================================================================
# Constants
# =============================================================================

DAY_ABBREV = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# Suffix shown after a subject in the grid
WEEK_MARKERS = {
    WeekType.ALL: "",
    WeekType.EVEN: " (even)",
    WeekType.ODD: " (odd)",
}


def day_label(day: int) -> str:
    """Short label for a day; 1 is Monday."""
    if 1 <= day <= len(DAY_ABBREV):
        return DAY_ABBREV[day - 1]
    return f"Day {day}"


def period_label(doc: USFDocument, period: int) -> str:
    """'P1 08:00:00-08:45:00', or just 'P1' when the period is unknown."""
    labels = doc.get_period(period)
    if not labels:
        return f"P{period}"
    return f"P{period} " + "-".join(labels)


def _cell_text(doc: USFDocument, entries: list[TimetableEntry]) -> str:
    parts = []
    for entry in entries:
        subject = doc.get_subject(entry.subject_name)
        name = subject.simplified_name if subject else entry.subject_name
        parts.append(name + WEEK_MARKERS[entry.week_type])
    return "\n".join(parts)


def _grid(doc: USFDocument) -> tuple[list[int], list[int], dict[tuple[int, int], list[TimetableEntry]]]:
    """Group entries by (period, day) and list the days and periods in use."""
    cells: dict[tuple[int, int], list[TimetableEntry]] = {}
    for entry in doc.timetable:
        cells.setdefault((entry.period, entry.day), []).append(entry)

    days = sorted({entry.day for entry in doc.timetable})
    periods = sorted(set(range(1, len(doc.periods) + 1)) | {entry.period for entry in doc.timetable})
    return days, periods, cells


# =============================================================================
# Formatter
# =============================================================================

class DocumentFormatter:
    """Formats a USF document for the terminal."""

    def __init__(self, use_colors: bool = True, width: int = 120):
        """
        Initialize document formatter.

        Args:
            use_colors: Render rich tables; plain text otherwise
            width: Console width for rich output
        """
        self.use_colors = use_colors
        self.width = width

    def format(self, doc: USFDocument) -> str:
        """Format subjects, periods and the week grid."""
        if self.use_colors:
            return self._format_rich(doc)
        else:
            return self._format_plain(doc)

    def _format_plain(self, doc: USFDocument) -> str:
        lines = [f"USF version {doc.version}", ""]

        lines.append("Subjects:")
        if not doc.subjects:
            lines.append("  (none)")
        for name in sorted(doc.subjects):
            lines.append(f"  {name}: {doc.subjects[name]}")

        lines.append("")
        lines.append("Periods:")
        if not doc.periods:
            lines.append("  (none)")
        for i in range(1, len(doc.periods) + 1):
            lines.append(f"  {period_label(doc, i)}")

        lines.append("")
        lines.append("Timetable:")
        days, periods, cells = _grid(doc)
        if not days:
            lines.append("  (empty)")
            return "\n".join(lines)

        cell_width = 16
        header = "".ljust(8) + "".join(day_label(d).center(cell_width) for d in days)
        lines.append(header)
        lines.append("-" * len(header))
        for period in periods:
            row = f"P{period}".ljust(8)
            for day in days:
                text = _cell_text(doc, cells.get((period, day), [])).replace("\n", " / ")
                row += text[:cell_width - 2].center(cell_width)
            lines.append(row)

        return "\n".join(lines)

    def _format_rich(self, doc: USFDocument) -> str:
        console = Console(record=True, width=self.width, file=StringIO())

        subjects = Table(title="Subjects", show_header=True, header_style="bold cyan")
        subjects.add_column("Name", style="bold")
        subjects.add_column("Short name")
        subjects.add_column("Teacher")
        subjects.add_column("Room", justify="right")
        for name in sorted(doc.subjects):
            subject = doc.subjects[name]
            subjects.add_row(
                escape(name), escape(subject.simplified_name), escape(subject.teacher), escape(subject.room)
            )
        console.print(subjects)

        grid = Table(title="Timetable", show_header=True, header_style="bold cyan")
        grid.add_column("Period", style="dim")
        days, periods, cells = _grid(doc)
        for day in days:
            grid.add_column(day_label(day), justify="center")
        for period in periods:
            grid.add_row(
                escape(period_label(doc, period)),
                *(escape(_cell_text(doc, cells.get((period, day), []))) for day in days),
            )
        console.print(grid)

        return console.export_text()


def format_document(doc: USFDocument, use_colors: bool = True) -> str:
    """Format a document for the console."""
    return DocumentFormatter(use_colors=use_colors).format(doc)
