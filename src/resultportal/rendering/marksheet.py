"""
Console marksheet rendering.

Formats a student record with Rich: header with the overall status, student
details, and the subject marks table.
"""

from pathlib import Path

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from resultportal.config.settings import MarksConfig
from resultportal.schemas.record import Number, StudentRecord


def format_score(value: Number | None) -> str:
    """Format a score for display; unset scores show as a dash."""
    if value is None:
        return "-"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class MarksheetRenderer:
    """Renders student records as marksheets on a Rich console."""

    def __init__(self, console: Console, marks: MarksConfig | None = None) -> None:
        """
        Initialize marksheet renderer.

        Args:
            console: Rich Console instance for output.
            marks: Pass mark and maximum total; defaults to 35 / 500.
        """
        self.console = console
        self.marks = marks or MarksConfig()

    def subject_passed(self, score: Number | None) -> bool:
        """A subject is passed at or above the pass mark."""
        return score is not None and score >= self.marks.pass_mark

    def _format_status(self, passed: bool, text: str | None = None) -> str:
        label = escape(text) if text else ("Pass" if passed else "Fail")
        color = "green" if passed else "red"
        return f"[{color}]{label}[/{color}]"

    def build_info_table(self, record: StudentRecord, college_name: str) -> Table:
        """Student details: name, roll number, standard, college."""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Field", style="dim")
        table.add_column("Value", style="bold")

        table.add_row("Student Name", escape(record.student_name or "-"))
        table.add_row("Roll Number", format_score(record.roll_no))
        table.add_row("Standard", f"{format_score(record.standard)}th")
        table.add_row("College", escape(college_name))
        return table

    def build_marks_table(self, record: StudentRecord) -> Table:
        """Subject marks with per-subject status and the total row."""
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Subject")
        table.add_column("Marks Obtained", justify="right")
        table.add_column("Status", justify="center")

        for label, score in record.subject_scores:
            table.add_row(
                label,
                format_score(score),
                self._format_status(self.subject_passed(score)),
            )

        table.add_section()
        table.add_row(
            "[bold]Total Marks[/bold]",
            f"[bold]{format_score(record.total)}/{format_score(self.marks.max_total)}[/bold]",
            self._format_status(record.passed, record.result or "-"),
        )
        return table

    def render(self, record: StudentRecord, college_name: str) -> None:
        """
        Print a marksheet.

        Args:
            record: The student's record.
            college_name: Shown in the title and the details table.
        """
        status = self._format_status(record.passed, record.result or "-")
        panel = Panel(
            Group(
                self.build_info_table(record, college_name),
                "",
                self.build_marks_table(record),
            ),
            title=f"Marksheet - {escape(college_name)}",
            subtitle=status,
            expand=False,
        )
        self.console.print(panel)

    def export_html(self, path: Path) -> Path:
        """
        Save everything rendered so far as HTML.

        The console must have been created with ``record=True``.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        self.console.save_html(str(path))
        return path
