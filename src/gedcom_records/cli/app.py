from __future__ import annotations

import typer

from gedcom_records.cli.commands.check import check_command
from gedcom_records.cli.commands.export import export_command
from gedcom_records.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom-records",
    help="GEDCOM record parser, checker, and JSON exporter",
    add_completion=False,
)

app.command("stats")(stats_command)
app.command("export")(export_command)
app.command("check")(check_command)


def main():
    app()


if __name__ == "__main__":
    main()
