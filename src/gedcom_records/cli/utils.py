from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from gedcom_records.config import get_config
from gedcom_records.core.diagnostics import Diagnostic, ParseResult
from gedcom_records.core.exceptions import GedcomParseError
from gedcom_records.parser import ParserOptions, parse_file

console = Console()
err_console = Console(stderr=True)


def parser_options(*, lenient: bool = False, accumulate: bool = False) -> ParserOptions:
    """
    Options for a CLI run: the configured ones, or fully lenient with --lenient.
    """
    if lenient:
        return ParserOptions.lenient()
    options = ParserOptions.from_config(get_config())
    if accumulate:
        options.accumulate_errors = True
    return options


def load_gedcom(path: Path, *, options: ParserOptions, verbose: bool = False) -> ParseResult:
    """
    Load and parse one GEDCOM file.

    A fatal fault is reported and turned into exit code 1.
    """
    t0 = time.perf_counter()

    try:
        result = parse_file(path, options)
    except GedcomParseError as exc:
        abort(f"{path}: {exc}")

    elapsed = time.perf_counter() - t0

    if verbose:
        err_console.log(f"Parsed {path.name} in {elapsed:.2f}s: {len(result.data)} records")
        for diagnostic in result.diagnostics:
            print_diagnostic(diagnostic, err_console)

    return result


def print_diagnostic(diagnostic: Diagnostic, out: Console = console) -> None:
    style = "red" if diagnostic.fatal else "yellow"
    out.print(escape(str(diagnostic)), style=style)


def abort(message: str) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    raise typer.Exit(code=1)


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
