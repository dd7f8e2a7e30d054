"""
Shared parse state: the tokenizer, the current depth, and collected diagnostics.

Every record routine receives the same ``Cursor`` and a *floor*, the level of
the line that introduced the record. ``iter_block`` walks the record's field
lines and stops, without consuming it, on the first level number at or below
the floor (or at end of input). That is the only thing that gives GEDCOM its
nesting, so every routine goes through it.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Type

from gedcom_records.core.diagnostics import Diagnostic
from gedcom_records.core.exceptions import (
    GedcomParseError,
    MalformedValueError,
    UnexpectedTokenError,
    UnknownFieldError,
)
from gedcom_records.loader.tokenizer import Token, Tokenizer, TokenKind
from gedcom_records.logging import get_logger
from gedcom_records.parser.options import ParserOptions
from gedcom_records.records import CustomData

log = get_logger("parser")


class Cursor:
    def __init__(self, tokenizer: Tokenizer, options: Optional[ParserOptions] = None) -> None:
        self.tokenizer = tokenizer
        self.options = options or ParserOptions()
        self.diagnostics: List[Diagnostic] = []
        self.faults: List[GedcomParseError] = []
        # Level of the line the current token belongs to.
        self.depth = tokenizer.current.value if tokenizer.current.kind == TokenKind.LEVEL else 0

    # ------------------------------------------------------------------ #
    # Token access
    # ------------------------------------------------------------------ #

    @property
    def current(self) -> Token:
        return self.tokenizer.current

    @property
    def line(self) -> int:
        return self.tokenizer.line

    def advance(self) -> Token:
        token = self.tokenizer.next()
        if token.kind == TokenKind.LEVEL:
            self.depth = token.value  # type: ignore[assignment]
        return token

    def done(self) -> bool:
        return self.tokenizer.done()

    # ------------------------------------------------------------------ #
    # Faults and warnings
    # ------------------------------------------------------------------ #

    def _error(
        self,
        cls: Type[GedcomParseError],
        message: str,
        line: Optional[int] = None,
        token: Optional[Token] = None,
    ) -> GedcomParseError:
        token = token if token is not None else self.current
        return cls(message, line=line if line is not None else token.lineno or self.line, token=token)

    def unexpected(self, message: str) -> GedcomParseError:
        return self._error(UnexpectedTokenError, message)

    def unknown_field(self, tag: str, context: str) -> GedcomParseError:
        return self._error(UnknownFieldError, f"unhandled {context} tag: {tag}")

    def malformed(self, message: str, line: int, token: Optional[Token] = None) -> GedcomParseError:
        return self._error(MalformedValueError, message, line=line, token=token)

    def warn(self, kind: str, message: str, line: Optional[int] = None, token: Optional[Any] = None) -> None:
        diagnostic = Diagnostic(
            kind=kind,
            message=message,
            line=line if line is not None else self.line,
            token=token,
            fatal=False,
        )
        self.diagnostics.append(diagnostic)
        log.warning("line %d: %s", diagnostic.line, message)

    def record_fault(self, exc: GedcomParseError) -> None:
        self.faults.append(exc)
        self.diagnostics.append(Diagnostic.from_error(exc))
        log.error("%s", exc)

    # ------------------------------------------------------------------ #
    # Line values
    # ------------------------------------------------------------------ #

    def take_line_value(self) -> str:
        """Step past the tag and return its required value."""
        line = self.line
        token = self.advance()
        if token.kind != TokenKind.LINE_VALUE:
            raise self._error(
                UnexpectedTokenError, f"expected LineValue, found {token!r}", line=line, token=token
            )
        self.advance()
        return token.value  # type: ignore[return-value]

    def take_optional_line_value(self) -> Optional[str]:
        """Step past the tag and return its value, or None if the line has none."""
        token = self.advance()
        if token.kind != TokenKind.LINE_VALUE:
            return None
        self.advance()
        return token.value  # type: ignore[return-value]

    def take_xref(self) -> str:
        """Step past the tag and return its ``@XREF@`` value without the ``@``s."""
        line = self.line
        value = self.take_line_value().strip()
        if len(value) < 3 or not (value.startswith("@") and value.endswith("@")):
            raise self.malformed(f"expected a pointer like @X1@, found {value!r}", line=line)
        return value[1:-1]

    # ------------------------------------------------------------------ #
    # Level-bounded blocks
    # ------------------------------------------------------------------ #

    def iter_block(self, floor: int, record: Optional[Any] = None) -> Iterator[str]:
        """
        Yield the tag of every field line of the block above ``floor``.

        The caller must consume the yielded tag (and whatever belongs to it)
        before asking for the next one. Level numbers deeper than the floor
        are stepped over; extension tags are captured into ``record.custom_data``
        when a record is given and are a fault otherwise.
        """
        while True:
            token = self.current
            if token.kind == TokenKind.EOF or token.is_level_at_or_below(floor):
                return

            if token.kind == TokenKind.LEVEL:
                self.advance()
            elif token.kind == TokenKind.TAG:
                yield token.value  # type: ignore[misc]
            elif token.kind == TokenKind.CUSTOM_TAG and record is not None:
                record.custom_data.append(self.take_custom_data())
            else:
                raise self.unexpected(f"unexpected token {token!r}")

    def take_custom_data(self) -> CustomData:
        """
        Capture an extension tag line and everything nested under it.

        Nested lines are kept whatever their tag, known or not.
        """
        floor = self.depth
        data = CustomData(tag=self.current.value)  # type: ignore[arg-type]
        data.value = self.take_optional_line_value()

        while True:
            token = self.current
            if token.kind == TokenKind.EOF or token.is_level_at_or_below(floor):
                return data
            if token.kind == TokenKind.LEVEL:
                self.advance()
            elif token.kind in (TokenKind.TAG, TokenKind.CUSTOM_TAG):
                data.children.append(self.take_custom_data())
            elif token.kind == TokenKind.POINTER:
                xref = token.value
                self.advance()
                child = self.take_custom_data()
                child.xref = xref  # type: ignore[assignment]
                data.children.append(child)
            else:
                raise self.unexpected(f"unexpected token {token!r} under {data.tag}")

    def skip_block(self, floor: int) -> None:
        """Consume every token until a level at or below ``floor`` (or EOF)."""
        while not (self.done() or self.current.is_level_at_or_below(floor)):
            self.advance()
