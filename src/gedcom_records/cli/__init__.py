"""
CLI package for gedcom_records.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_records.cli.app import app, main

__all__ = [
    "app",
    "main",
]
