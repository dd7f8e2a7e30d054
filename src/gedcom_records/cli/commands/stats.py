from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from gedcom_records.cli.utils import console, load_gedcom, parser_options


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Tolerate unknown SEX/PEDI values and skip faulty records",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show record counts for a GEDCOM file.
    """
    result = load_gedcom(gedcom, options=parser_options(lenient=lenient), verbose=verbose)
    data = result.data

    table = Table(title="GEDCOM Statistics")
    table.add_column("Record", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Individuals", str(len(data.individuals)))
    table.add_row("Families", str(len(data.families)))
    table.add_row("Sources", str(len(data.sources)))
    table.add_row("Repositories", str(len(data.repositories)))
    table.add_row("Submitters", str(len(data.submitters)))
    table.add_row("Warnings", str(len(result.warnings)))
    table.add_row("Errors", str(len(result.errors)))

    console.print(table)

    if not result.ok:
        raise typer.Exit(code=1)
