"""
Level-bounded recursive-descent parser for GEDCOM documents.

    from gedcom_records.parser import parse_gedcom, ParserOptions

    result = parse_gedcom(text, ParserOptions(strict_gender=False))
    for person in result.data.individuals:
        ...
"""

from .options import ParserOptions
from .parser import Parser, parse_file, parse_gedcom

__all__ = [
    "Parser",
    "ParserOptions",
    "parse_file",
    "parse_gedcom",
]
