# src/gedcom_records/parser/parser.py

"""
Top-level GEDCOM parser.

``Parser.parse()`` walks the level-0 records of a document and hands each one
to its record routine. Known record types are FAM, INDI, REPO, SOUR and SUBM,
plus HEAD and TRLR; anything else at level 0 is skipped with an UNSUPPORTED
warning.

Faults:
    - Lexical faults (GedcomSyntaxError) always end the parse.
    - Any other fault ends the parse too, unless ``accumulate_errors`` is set:
      then the faulty record is dropped and parsing resumes at the next
      level-0 line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from gedcom_records.config import get_config
from gedcom_records.core.diagnostics import DiagnosticKind, ParseResult
from gedcom_records.core.exceptions import (
    GedcomParseError,
    GedcomSyntaxError,
    MissingLevelError,
    UnexpectedTokenError,
)
from gedcom_records.loader import load_file
from gedcom_records.loader.tokenizer import Source, Tokenizer, TokenKind
from gedcom_records.logging import get_logger
from gedcom_records.parser.cursor import Cursor
from gedcom_records.parser.family import parse_family
from gedcom_records.parser.header import parse_header
from gedcom_records.parser.individual import parse_individual
from gedcom_records.parser.options import ParserOptions
from gedcom_records.parser.source import parse_repository, parse_source
from gedcom_records.parser.submitter import parse_submitter
from gedcom_records.tree import GedcomData

log = get_logger("parser")


class Parser:
    def __init__(self, source: Source, options: Optional[ParserOptions] = None) -> None:
        self.options = options if options is not None else ParserOptions.from_config(get_config())
        self.cursor = Cursor(Tokenizer(source), self.options)
        self.data = GedcomData()
        self._seen_header = False
        self._seen_trailer = False

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def parse(self) -> ParseResult:
        cursor = self.cursor

        while not cursor.done():
            try:
                if not self._parse_record():
                    break
            except GedcomSyntaxError:
                raise
            except GedcomParseError as exc:
                if not self.options.accumulate_errors:
                    raise
                cursor.record_fault(exc)
                cursor.skip_block(0)

        if not self._seen_trailer:
            cursor.warn(DiagnosticKind.FORMAT_WARNING, "end of input reached without a TRLR record")

        stats = self.data.stats()
        log.info(
            "Parsed %d records (%d individuals, %d families, %d sources, "
            "%d repositories, %d submitters); %d diagnostics",
            len(self.data),
            stats["individuals"],
            stats["families"],
            stats["sources"],
            stats["repositories"],
            stats["submitters"],
            len(cursor.diagnostics),
        )
        return ParseResult(data=self.data, diagnostics=cursor.diagnostics, faults=cursor.faults)

    # ------------------------------------------------------------------ #
    # Level-0 dispatch
    # ------------------------------------------------------------------ #

    def _parse_record(self) -> bool:
        """Parse one level-0 record. Returns False once TRLR is reached."""
        cursor = self.cursor
        token = cursor.current

        if token.kind != TokenKind.LEVEL:
            raise MissingLevelError(f"expected Level, found {token!r}", line=token.lineno, token=token)
        if token.value != 0:
            raise UnexpectedTokenError(
                f"expected Level(0) at top level, found {token!r}", line=token.lineno, token=token
            )

        token = cursor.advance()
        xref: Optional[str] = None
        if token.kind == TokenKind.POINTER:
            xref = token.value  # type: ignore[assignment]
            token = cursor.advance()

        if token.kind == TokenKind.TAG:
            tag = token.value
            log.debug("line %d: %s record %s", token.lineno, tag, xref or "")

            if tag == "HEAD":
                if self._seen_header:
                    self._skip("duplicate HEAD record skipped", token.lineno)
                else:
                    self.data.header = parse_header(cursor, 0)
                    self._seen_header = True
            elif tag == "INDI":
                self.data.add_individual(parse_individual(cursor, 0, xref))
            elif tag == "FAM":
                self.data.add_family(parse_family(cursor, 0, xref))
            elif tag == "SOUR":
                self.data.add_source(parse_source(cursor, 0, xref))
            elif tag == "REPO":
                self.data.add_repository(parse_repository(cursor, 0, xref))
            elif tag == "SUBM":
                self.data.add_submitter(parse_submitter(cursor, 0, xref))
            elif tag == "TRLR":
                self._seen_trailer = True
                return False
            else:
                self._skip(f"unhandled top-level record {tag} skipped", token.lineno)
        elif token.kind == TokenKind.CUSTOM_TAG:
            self._skip(f"top-level custom record {token.value} skipped", token.lineno)
        else:
            raise cursor.unexpected(f"expected a record tag, found {token!r}")

        return True

    def _skip(self, message: str, line: int) -> None:
        self.cursor.warn(DiagnosticKind.UNSUPPORTED, message, line=line)
        self.cursor.skip_block(0)


# ---------------------------------------------------------------------- #
# Convenience entry points
# ---------------------------------------------------------------------- #

def parse_gedcom(source: Source, options: Optional[ParserOptions] = None) -> ParseResult:
    """Parse GEDCOM text (a string, text stream or iterable of lines)."""
    return Parser(source, options).parse()


def parse_file(path: Union[str, Path], options: Optional[ParserOptions] = None) -> ParseResult:
    """Read a .ged file through the loader and parse it."""
    return parse_gedcom(load_file(path), options)
