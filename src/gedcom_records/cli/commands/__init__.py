"""
CLI command modules for gedcom_records.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_records.cli.commands.check import check_command
from gedcom_records.cli.commands.export import export_command
from gedcom_records.cli.commands.stats import stats_command

__all__ = [
    "check_command",
    "export_command",
    "stats_command",
]
