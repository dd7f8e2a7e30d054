# src/gedcom_records/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

Intended usage from other parts of the project and tests:

    from gedcom_records.loader import (
        Token,
        TokenKind,
        Tokenizer,
        GedcomSyntaxError,
        load_file,
        split_line,
        tokenize,
    )
"""

from __future__ import annotations

from gedcom_records.core.exceptions import GedcomSyntaxError

from .file_loader import load_file
from .tokenizer import Token, TokenKind, Tokenizer, split_line, tokenize

__all__ = [
    "Token",
    "TokenKind",
    "Tokenizer",
    "GedcomSyntaxError",
    "load_file",
    "split_line",
    "tokenize",
]
