from __future__ import annotations

from pathlib import Path

import typer

from gedcom_records.cli.utils import console, load_gedcom, parser_options, print_diagnostic


def check_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
):
    """
    Parse a GEDCOM file and list every diagnostic with its line number.

    Faulty records are skipped so that all faults in the file are reported;
    the exit code is 1 when any of them was fatal.
    """
    result = load_gedcom(gedcom, options=parser_options(accumulate=True))

    for diagnostic in result.diagnostics:
        print_diagnostic(diagnostic)

    console.print(
        f"{gedcom.name}: {len(result.data)} records, "
        f"{len(result.errors)} errors, {len(result.warnings)} warnings"
    )

    if not result.ok:
        raise typer.Exit(code=1)
