"""
Structured diagnostics produced while parsing.

Every fault the parser can report is a ``Diagnostic``. Fatal diagnostics come
from a ``GedcomParseError``; non-fatal ones (skipped top-level records, format
warnings, tolerated vocabulary misses) are collected as the parse goes and
returned next to the parsed data in a ``ParseResult``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from gedcom_records.core.exceptions import GedcomParseError
    from gedcom_records.tree import GedcomData


class DiagnosticKind:
    UNEXPECTED_TOKEN = "UnexpectedToken"
    UNKNOWN_FIELD = "UnknownField"
    MALFORMED_VALUE = "MalformedValue"
    MISSING_LEVEL = "MissingLevel"
    INVALID_LINE = "InvalidLine"
    UNSUPPORTED = "Unsupported"
    FORMAT_WARNING = "FormatWarning"


@dataclass(frozen=True)
class Diagnostic:
    kind: str
    message: str
    line: int = 0
    token: Optional[Any] = None
    fatal: bool = False

    @classmethod
    def from_error(cls, exc: "GedcomParseError") -> "Diagnostic":
        return cls(kind=exc.kind, message=exc.message, line=exc.line, token=exc.token, fatal=True)

    def __str__(self) -> str:
        severity = "error" if self.fatal else "warning"
        return f"line {self.line}: {severity} [{self.kind}] {self.message}"


@dataclass
class ParseResult:
    """Parsed data plus every diagnostic gathered on the way."""

    data: "GedcomData"
    diagnostics: List[Diagnostic] = field(default_factory=list)
    faults: List["GedcomParseError"] = field(default_factory=list, repr=False)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.fatal]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if not d.fatal]

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        """Re-raise the first fatal fault, if any."""
        if self.faults:
            raise self.faults[0]
