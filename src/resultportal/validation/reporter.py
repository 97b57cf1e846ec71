"""
Console reporter for sheet validation results.

Formats validation results using Rich for clear, colored output.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from resultportal.validation.core import SheetValidationResult


class ConsoleReporter:
    """Formats and displays sheet validation results."""

    def __init__(self, console: Console) -> None:
        """
        Initialize console reporter.

        Args:
            console: Rich Console instance for output.
        """
        self.console = console

    def print_results(self, results: list[SheetValidationResult]) -> None:
        """
        Print validation results as a table, then a summary and any errors.

        Args:
            results: List of validation results to display.
        """
        table = Table(title="Results Sheet Validation", show_header=True)
        table.add_column("College", style="cyan", no_wrap=True)
        table.add_column("Status", justify="center")
        table.add_column("Records", justify="right")
        table.add_column("Dropped", justify="right")
        table.add_column("Duplicates", justify="right")
        table.add_column("Source", style="dim")

        for result in results:
            table.add_row(
                result.college_id,
                self._format_status(result),
                self._format_count(result.record_count),
                self._format_count(result.skipped_rows),
                str(len(result.duplicate_keys)) if result.loaded else "-",
                result.source,
            )

        self.console.print(table)
        self._print_summary(results)
        self._print_details(results)

    def _format_count(self, value: int | None) -> str:
        return str(value) if value is not None else "-"

    def _format_status(self, result: SheetValidationResult) -> str:
        """Status cell with color markup."""
        if not result.loaded:
            return "[yellow]Unreachable[/yellow]"
        if result.schema_valid:
            return "[green]Pass[/green]"
        return "[red]Fail[/red]"

    def _print_summary(self, results: list[SheetValidationResult]) -> None:
        total = len(results)
        passed = sum(1 for r in results if r.schema_valid is True)
        failed = sum(1 for r in results if r.schema_valid is False)
        unreachable = sum(1 for r in results if not r.loaded)

        self.console.print()
        self.console.print("[bold]Summary:[/bold]")
        self.console.print(f"  Total sheets: {total}")
        self.console.print(f"  [green]Passed: {passed}[/green]")
        self.console.print(f"  [red]Failed: {failed}[/red]")
        self.console.print(f"  [yellow]Unreachable: {unreachable}[/yellow]")

    def _print_details(self, results: list[SheetValidationResult]) -> None:
        """Errors for failed sheets and warnings for duplicate keys."""
        for result in results:
            if result.error_message:
                color = "red" if result.loaded else "yellow"
                self.console.print()
                self.console.print(f"[bold {color}]{result.college_id}:[/bold {color}]")
                for line in result.error_message.split("\n"):
                    self.console.print(f"  {line}")

            if result.duplicate_keys:
                keys = ", ".join(
                    escape(f"standard {s} / roll {r}") for s, r in result.duplicate_keys
                )
                self.console.print(
                    f"[yellow]{result.college_id}: duplicate keys, only the first "
                    f"row is used: {keys}[/yellow]"
                )
