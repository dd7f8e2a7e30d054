from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom_records.cli.utils import err_console, load_gedcom, parser_options, write_json
from gedcom_records.exporter import build_data_dict


def export_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
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
    Export GEDCOM data to JSON (stdout by default).
    """
    result = load_gedcom(gedcom, options=parser_options(lenient=lenient), verbose=verbose)

    if verbose:
        err_console.log("Exporting JSON")

    write_json(build_data_dict(result.data), out=out, pretty=pretty)

    if verbose:
        err_console.log("Export complete")

    if not result.ok:
        raise typer.Exit(code=1)
