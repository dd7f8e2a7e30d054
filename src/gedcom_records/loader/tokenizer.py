# src/gedcom_records/loader/tokenizer.py

from __future__ import annotations

import io
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Iterator, List, Optional, TextIO, Tuple, Union

from gedcom_records.core.exceptions import GedcomSyntaxError

Source = Union[str, TextIO, Iterable[str]]

CUSTOM_TAG_PREFIX = "_"
BOM = "\ufeff"


class TokenKind:
    LEVEL = "Level"
    POINTER = "Pointer"
    TAG = "Tag"
    CUSTOM_TAG = "CustomTag"
    LINE_VALUE = "LineValue"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """
    A single syntactic unit of a GEDCOM line.

    Attributes:
        kind: One of the ``TokenKind`` constants.
        value: The level number for LEVEL, the text for every other kind,
            None for EOF. Pointers carry the identifier without its ``@``s.
        lineno: 1-based physical line number the token came from.
    """
    kind: str
    value: Union[int, str, None] = None
    lineno: int = 0

    @property
    def level(self) -> Optional[int]:
        return self.value if self.kind == TokenKind.LEVEL else None  # type: ignore[return-value]

    def is_level_at_or_below(self, floor: int) -> bool:
        return self.kind == TokenKind.LEVEL and self.value <= floor  # type: ignore[operator]

    def __repr__(self) -> str:
        if self.kind == TokenKind.EOF:
            return "EOF"
        return f"{self.kind}({self.value!r})"


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def split_line(raw: str, lineno: int = 0) -> List[Token]:
    """
    Split one physical GEDCOM line into its tokens.

    The line shape is strict about order:
        <level> [@<pointer>@] <tag> [<value>]

    Examples:
        "0 HEAD"                 -> Level(0), Tag(HEAD)
        "0 @I1@ INDI"            -> Level(0), Pointer(I1), Tag(INDI)
        "1 NAME John /Doe/"      -> Level(1), Tag(NAME), LineValue(John /Doe/)
        "1 _MILT served 1914"    -> Level(1), CustomTag(_MILT), LineValue(...)

    The value is everything after the single space that follows the tag and is
    never tokenized further, so "@", "/" or digits inside it are plain text.
    """
    raw = _strip_eol(raw).lstrip(" \t")

    # --- 1. Level ----------------------------------------------------------
    parts = raw.split(" ", 1)
    level_str = parts[0]
    if not (level_str.isascii() and level_str.isdigit()):
        raise GedcomSyntaxError(f"level is not numeric -> {level_str!r} in {raw!r}", line=lineno)

    tokens = [Token(TokenKind.LEVEL, int(level_str), lineno)]
    rest = parts[1].lstrip(" ") if len(parts) == 2 else ""

    if not rest:
        raise GedcomSyntaxError(f"missing tag after level -> {raw!r}", line=lineno)

    # --- 2. Optional pointer ---------------------------------------------
    if rest.startswith("@"):
        pointer, _, rest = rest.partition(" ")
        if len(pointer) < 3 or not pointer.endswith("@"):
            raise GedcomSyntaxError(f"malformed pointer {pointer!r} -> {raw!r}", line=lineno)
        tokens.append(Token(TokenKind.POINTER, pointer[1:-1], lineno))
        rest = rest.lstrip(" ")
        if not rest:
            raise GedcomSyntaxError(f"pointer present but missing tag -> {raw!r}", line=lineno)

    # --- 3. Tag and optional value ----------------------------------------
    tag, _, value = rest.partition(" ")
    kind = TokenKind.CUSTOM_TAG if tag.startswith(CUSTOM_TAG_PREFIX) else TokenKind.TAG
    tokens.append(Token(kind, tag, lineno))

    if value.strip():
        tokens.append(Token(TokenKind.LINE_VALUE, value, lineno))

    return tokens


def _iter_lines(source: Source) -> Iterator[Tuple[int, str]]:
    """Yield (lineno, line) pairs, dropping a leading BOM and blank lines."""
    if isinstance(source, str):
        source = io.StringIO(source)

    for lineno, raw_line in enumerate(source, start=1):
        line = _strip_eol(raw_line)
        if lineno == 1 and line.startswith(BOM):
            line = line.lstrip(BOM)

        if not line.strip():
            # Blank lines are not meaningful in GEDCOM but still count.
            continue

        yield lineno, line


class Tokenizer:
    """
    Forward-only token stream with exactly one token of lookahead.

    Construction primes the first token, so ``current`` is always valid. Once
    the source is exhausted ``current`` stays at EOF for good.
    """

    def __init__(self, source: Source) -> None:
        self._lines = _iter_lines(source)
        self._pending: Deque[Token] = deque()
        self.current: Token = Token(TokenKind.EOF)
        self.line: int = 0
        self._exhausted = False
        self.next()

    def next(self) -> Token:
        """Advance to and return the next token."""
        while not self._pending:
            if self._exhausted:
                return self.current
            try:
                lineno, line = next(self._lines)
            except StopIteration:
                self._exhausted = True
                self.current = Token(TokenKind.EOF, None, self.line)
                return self.current
            self._pending.extend(split_line(line, lineno))

        self.current = self._pending.popleft()
        self.line = self.current.lineno
        return self.current

    def done(self) -> bool:
        return self.current.kind == TokenKind.EOF

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<Tokenizer line={self.line} current={self.current!r}>"


def tokenize(source: Source) -> Iterator[Token]:
    """Yield every token of ``source``, ending with a single EOF token."""
    tokenizer = Tokenizer(source)
    while True:
        yield tokenizer.current
        if tokenizer.done():
            return
        tokenizer.next()
