"""Command-line interface for the result portal."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from resultportal.config.settings import PortalConfig

app = typer.Typer(
    name="resultportal",
    help="Look up exam results from published spreadsheets.",
    no_args_is_help=True,
)

console = Console()

ConfigOption = Annotated[
    Path,
    typer.Option(
        "--config",
        "-c",
        help="Path to portal configuration YAML file.",
        exists=True,
        dir_okay=False,
    ),
]


def _load_portal_config(config: Path) -> "PortalConfig":
    """Load the config and set up logging from it."""
    from pydantic import ValidationError

    from resultportal.config.loader import load_config
    from resultportal.utils.logging import configure_logging

    try:
        portal_config = load_config(config)
    except (ValueError, ValidationError) as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(code=1) from e

    configure_logging(
        level=portal_config.logging.level,
        json_output=portal_config.logging.json_output,
    )
    return portal_config


@app.command()
def lookup(
    config: ConfigOption,
    college: Annotated[
        str,
        typer.Option("--college", help="College id from the configuration."),
    ],
    standard: Annotated[
        str,
        typer.Option("--standard", "-s", help="Standard / class, e.g. 5."),
    ],
    roll: Annotated[
        str,
        typer.Option("--roll", "-r", help="Roll number (digits only)."),
    ],
    export: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Also save the marksheet as an HTML file.",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Look up a student's result and print the marksheet."""
    from resultportal.ingestion.source import SheetFetchError
    from resultportal.lookup.service import QueryError, check_result, validate_query
    from resultportal.rendering.marksheet import MarksheetRenderer

    portal_config = _load_portal_config(config)

    try:
        query = validate_query(portal_config, college, standard, roll)
    except QueryError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[dim]Selected: {query.college.name}[/dim]")

    try:
        with console.status("Fetching results..."):
            outcome = check_result(portal_config, query)
    except SheetFetchError as e:
        console.print(
            "[red]Failed to fetch result data. "
            "Please check your connection and try again.[/red]"
        )
        console.print(f"[dim]{e}[/dim]")
        raise typer.Exit(code=1) from e
    except FileNotFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e

    if outcome.record is None:
        console.print(f"[yellow]{outcome.message}[/yellow]")
        raise typer.Exit(code=1)

    if export is not None:
        sheet_console = Console(record=True)
        renderer = MarksheetRenderer(sheet_console, portal_config.marks)
        renderer.render(outcome.record, query.college.name)
        saved = renderer.export_html(export)
        console.print(f"\n[green]Saved to: {saved}[/green]")
    else:
        MarksheetRenderer(console, portal_config.marks).render(
            outcome.record, query.college.name
        )


@app.command()
def colleges(config: ConfigOption) -> None:
    """List configured colleges and their sheet sources."""
    portal_config = _load_portal_config(config)

    table = Table(title="Configured Colleges")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Source", style="dim")

    for college_id, college in portal_config.colleges.items():
        table.add_row(college_id, college.name, college.source)

    console.print(table)
    console.print(f"[dim]Standards: {', '.join(portal_config.standards)}[/dim]")


@app.command()
def validate(
    config: ConfigOption,
    college: Annotated[
        list[str] | None,
        typer.Option(
            "--college",
            help="College id to check; repeat for several. Checks all by default.",
        ),
    ] = None,
) -> None:
    """Check that the configured results sheets load and match the schema."""
    from resultportal.validation import ConsoleReporter, SheetValidator

    portal_config = _load_portal_config(config)

    console.print("[blue]Validating results sheets...[/blue]")

    try:
        results = SheetValidator(portal_config).run(college)
    except KeyError as e:
        console.print(f"[red]Error: {e.args[0]}[/red]")
        raise typer.Exit(code=1) from e

    ConsoleReporter(console).print_results(results)

    if any(r.schema_valid is not True for r in results):
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show version information."""
    from resultportal import __version__

    console.print(f"resultportal version {__version__}")


if __name__ == "__main__":
    app()
