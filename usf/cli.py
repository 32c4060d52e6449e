"""
Command-line interface for USF timetable files.

Usage:
    python -m usf new timetable.usf
    python -m usf validate timetable.usf --strict
    python -m usf show timetable.usf
    python -m usf add-subject timetable.usf Math --simplified-name 数学 --teacher 张老师 --room 101
    python -m usf add-entry timetable.usf --day 1 --week-type all --subject Math --period 1
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .data.models import CURRENT_VERSION, USFDocument, WeekType
from .data.storage import load_usf, save_usf
from .errors import DecodeError, Result
from .operations import add_subject, add_timetable_entry, find_dangling_references
from .output.formatters import format_document

# Create Typer app
app = typer.Typer(
    name="usf",
    help="Create, inspect and edit USF school timetable files.",
    add_completion=False,
)

# Rich console for pretty output
console = Console()


# =============================================================================
# Helper Functions
# =============================================================================

def fail(message: str) -> NoReturn:
    """Print an error and exit with code 1."""
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


def load_document(path: Path) -> USFDocument:
    """Load a document or exit with an error."""
    if not path.exists():
        fail(f"File not found: {path}")

    result = load_usf(path)
    if not result.ok:
        fail(str(result.error))
    return result.value


def check(result: Result) -> None:
    """Exit with the result's error if it failed."""
    if not result.ok:
        fail(str(result.error))


# =============================================================================
# Commands
# =============================================================================

@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Create, inspect and edit USF school timetable files."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def new(
    path: Path = typer.Argument(..., help="Path of the file to create"),
    format_version: int = typer.Option(
        CURRENT_VERSION,
        "--version",
        help="Format version to write",
    ),
    force: bool = typer.Option(
        False,
        "--force", "-f",
        help="Overwrite an existing file",
    ),
) -> None:
    """
    Create an empty USF document.

    Example:
        python -m usf new timetable.usf
    """
    if path.exists() and not force:
        fail(f"File already exists: {path} (use --force to overwrite)")

    check(save_usf(USFDocument.empty(version=format_version), path))
    console.print(f"[green]Created:[/green] {escape(str(path))}")


@app.command()
def validate(
    path: Path = typer.Argument(..., help="Path to the USF file to validate"),
    strict: bool = typer.Option(
        False,
        "--strict", "-s",
        help="Also fail on entries referencing unknown subjects or periods",
    ),
) -> None:
    """
    Check that a file is a valid USF document.

    Example:
        python -m usf validate timetable.usf --strict
    """
    console.print(f"\n[bold]Validating:[/bold] {escape(str(path))}\n")

    if not path.exists():
        fail(f"File not found: {path}")

    result = load_usf(path)
    if not result.ok:
        console.print("[red]Invalid USF document[/red]")
        if isinstance(result.error, DecodeError):
            for line in result.error.details:
                console.print(f"   - {escape(line)}")
        else:
            console.print(f"   {escape(str(result.error))}")
        raise typer.Exit(code=1)

    doc = result.value
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    for field, value in doc.summary().items():
        table.add_row(field.replace("_", " ").capitalize(), str(value))
    console.print(table)

    problems = find_dangling_references(doc)
    if problems:
        colour = "red" if strict else "yellow"
        console.print(f"\n[{colour}]Unresolved references:[/{colour}]")
        for problem in problems:
            console.print(f"   - {escape(problem)}")
        if strict:
            raise typer.Exit(code=1)

    console.print("\n[green]Valid USF document.[/green]\n")


@app.command()
def show(
    path: Path = typer.Argument(..., help="Path to the USF file"),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain text instead of tables",
    ),
) -> None:
    """
    Print the subjects and the week grid of a file.

    Example:
        python -m usf show timetable.usf
    """
    doc = load_document(path)
    if plain:
        typer.echo(format_document(doc, use_colors=False))
    else:
        console.print(f"[bold]USF version {doc.version}[/bold]")
        typer.echo(format_document(doc))


@app.command("add-subject")
def add_subject_command(
    path: Path = typer.Argument(..., help="Path to the USF file"),
    name: str = typer.Argument(..., help="Subject name (unique key)"),
    simplified_name: str = typer.Option(..., "--simplified-name", "-n", help="Short display name"),
    teacher: str = typer.Option(..., "--teacher", "-t", help="Teacher name"),
    room: str = typer.Option(..., "--room", "-r", help="Room label"),
) -> None:
    """
    Add a subject to a file.

    Example:
        python -m usf add-subject timetable.usf Math -n 数学 -t 张老师 -r 101
    """
    doc = load_document(path)
    check(add_subject(doc, name, simplified_name, teacher, room))
    check(save_usf(doc, path))
    console.print(f"[green]Added subject:[/green] {escape(name)}")


@app.command("add-entry")
def add_entry_command(
    path: Path = typer.Argument(..., help="Path to the USF file"),
    day: int = typer.Option(..., "--day", "-d", help="Day of week (1 = Monday)"),
    week_type: WeekType = typer.Option(WeekType.ALL, "--week-type", "-w", help="Week parity"),
    subject: str = typer.Option(..., "--subject", "-s", help="Subject name"),
    period: int = typer.Option(..., "--period", "-p", help="1-based period index"),
) -> None:
    """
    Add a timetable entry to a file.

    Example:
        python -m usf add-entry timetable.usf --day 1 --week-type even --subject Math --period 2
    """
    doc = load_document(path)
    if not doc.subject_exists(subject):
        console.print(f"[yellow]Warning:[/yellow] unknown subject '{escape(subject)}'")
    if doc.get_period(period) is None:
        console.print(f"[yellow]Warning:[/yellow] period {period} is not defined")

    check(add_timetable_entry(doc, day, week_type, subject, period))
    check(save_usf(doc, path))
    console.print(
        f"[green]Added entry:[/green] day {day}, {week_type.value}, {escape(subject)}, period {period}"
    )


# =============================================================================
# Main Entry Point
# =============================================================================

def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
