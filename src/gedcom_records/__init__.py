"""
gedcom-records: parse GEDCOM documents into typed records.

    from gedcom_records import parse_file

    result = parse_file("family.ged")
    print(result.data.stats())
"""

from gedcom_records.core.diagnostics import Diagnostic, DiagnosticKind, ParseResult
from gedcom_records.core.exceptions import GedcomError, GedcomParseError
from gedcom_records.parser import Parser, ParserOptions, parse_file, parse_gedcom
from gedcom_records.tree import GedcomData

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "GedcomData",
    "GedcomError",
    "GedcomParseError",
    "ParseResult",
    "Parser",
    "ParserOptions",
    "parse_file",
    "parse_gedcom",
]
