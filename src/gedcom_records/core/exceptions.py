from __future__ import annotations

from typing import Any, Optional

from gedcom_records.core.diagnostics import DiagnosticKind


class GedcomError(Exception):
    """Base exception for gedcom-records failures."""


class GedcomParseError(GedcomError):
    """
    A fatal fault raised while tokenizing or parsing a GEDCOM document.

    Attributes:
        kind: One of the ``DiagnosticKind`` constants.
        line: 1-based physical line number where the fault was observed.
        token: The offending token, when there is one.
    """

    kind: str = DiagnosticKind.UNEXPECTED_TOKEN

    def __init__(self, message: str, line: int = 0, token: Optional[Any] = None) -> None:
        self.message = message
        self.line = line
        self.token = token
        super().__init__(f"line {line}: {message}" if line else message)


class UnexpectedTokenError(GedcomParseError):
    """The current token's kind is not one the grammar allows here."""

    kind = DiagnosticKind.UNEXPECTED_TOKEN


class UnknownFieldError(GedcomParseError):
    """A known record type met a tag outside its field set."""

    kind = DiagnosticKind.UNKNOWN_FIELD


class MalformedValueError(GedcomParseError):
    """A line value is outside a closed vocabulary (SEX, PEDI, QUAY)."""

    kind = DiagnosticKind.MALFORMED_VALUE


class MissingLevelError(GedcomParseError):
    """The top-level loop expected a level number and found something else."""

    kind = DiagnosticKind.MISSING_LEVEL


class GedcomSyntaxError(GedcomParseError):
    """Raised when a GEDCOM line cannot be split into level, pointer, tag and value."""

    kind = DiagnosticKind.INVALID_LINE


class PipelineError(GedcomError):
    """Base exception for pipeline failures."""


class ParseExecutionError(PipelineError):
    """Raised when the pipeline fails for a reason other than a parse fault."""
