"""
Substructures used by more than one record type: continuation text, dates,
notes, addresses, citations and friends.

Each routine is entered with the cursor on its introducing tag and ``level``
set to that line's level; it returns with the cursor on the first level number
at or below ``level``.
"""

from __future__ import annotations

from typing import Any, Optional

from gedcom_records.parser.cursor import Cursor
from gedcom_records.records import (
    Address,
    Copyright,
    Corporation,
    Date,
    Note,
    RepoCitation,
    SourceCitation,
    Translation,
)
from gedcom_records.records.common import QUALITY_LEVELS

CONTINUATION_TAGS = ("CONT", "CONC")


# ---------------------------------------------------------------------------
# Continuation text
# ---------------------------------------------------------------------------

def join_continuation(value: Optional[str], tag: str, text: Optional[str]) -> str:
    """
    Append one CONT / CONC line to ``value``.

    CONT starts a new line; CONC continues the current one after a single space.
    """
    text = text or ""
    if value is None:
        return text
    separator = "\n" if tag == "CONT" else " "
    return value + separator + text


def take_continued_text(cursor: Cursor, level: int, record: Any = None) -> str:
    """
    Take the tag's value plus every CONT / CONC line nested under it.

    Extension tags under the text line land on ``record.custom_data``.
    """
    value = cursor.take_optional_line_value()

    for tag in cursor.iter_block(level, record):
        if tag in CONTINUATION_TAGS:
            value = join_continuation(value, tag, cursor.take_optional_line_value())
        else:
            raise cursor.unknown_field(tag, "continuation")

    return value or ""


# ---------------------------------------------------------------------------
# Small value records
# ---------------------------------------------------------------------------

def parse_date(cursor: Cursor, level: int) -> Date:
    date = Date(value=cursor.take_line_value())

    for tag in cursor.iter_block(level, date):
        if tag == "TIME":
            date.time = cursor.take_line_value()
        else:
            raise cursor.unknown_field(tag, "DATE")

    return date


def parse_copyright(cursor: Cursor, level: int) -> Copyright:
    copyright = Copyright(value=cursor.take_line_value())

    for tag in cursor.iter_block(level, copyright):
        if tag in CONTINUATION_TAGS:
            copyright.continued = join_continuation(
                copyright.continued, tag, cursor.take_optional_line_value()
            )
        else:
            raise cursor.unknown_field(tag, "COPR")

    return copyright


def parse_translation(cursor: Cursor, level: int) -> Translation:
    tran = Translation(value=cursor.take_line_value())

    for tag in cursor.iter_block(level, tran):
        if tag == "MIME":
            tran.mime = cursor.take_line_value()
        elif tag == "LANG":
            tran.language = cursor.take_line_value()
        else:
            raise cursor.unknown_field(tag, "TRAN")

    return tran


def parse_note(cursor: Cursor, level: int) -> Note:
    """NOTE text (possibly spread over CONT / CONC lines) with MIME, LANG and TRAN."""
    note = Note()
    value = cursor.take_optional_line_value()

    for tag in cursor.iter_block(level, note):
        if tag in CONTINUATION_TAGS:
            value = join_continuation(value, tag, cursor.take_optional_line_value())
        elif tag == "MIME":
            note.mime = cursor.take_line_value()
        elif tag == "LANG":
            note.language = cursor.take_line_value()
        elif tag == "TRAN":
            note.translation = parse_translation(cursor, cursor.depth)
        else:
            raise cursor.unknown_field(tag, "NOTE")

    if value:
        note.value = value
    return note


def parse_address(cursor: Cursor, level: int) -> Address:
    address = Address()
    value = cursor.take_optional_line_value()

    for tag in cursor.iter_block(level, address):
        if tag in CONTINUATION_TAGS:
            value = join_continuation(value, tag, cursor.take_optional_line_value())
        elif tag == "ADR1":
            address.adr1 = cursor.take_line_value()
        elif tag == "ADR2":
            address.adr2 = cursor.take_line_value()
        elif tag == "ADR3":
            address.adr3 = cursor.take_line_value()
        elif tag == "CITY":
            address.city = cursor.take_line_value()
        elif tag == "STAE":
            address.state = cursor.take_line_value()
        elif tag == "POST":
            address.post = cursor.take_line_value()
        elif tag == "CTRY":
            address.country = cursor.take_line_value()
        else:
            raise cursor.unknown_field(tag, "ADDR")

    if value:
        address.value = value
    return address


def parse_corporation(cursor: Cursor, level: int) -> Corporation:
    """CORP inside HEAD.SOUR: the company behind the producing software."""
    corp = Corporation(value=cursor.take_line_value())

    for tag in cursor.iter_block(level, corp):
        if tag == "ADDR":
            corp.address = parse_address(cursor, cursor.depth)
        elif tag == "PHON":
            corp.phone = cursor.take_line_value()
        elif tag == "EMAIL":
            corp.email = cursor.take_line_value()
        elif tag == "FAX":
            corp.fax = cursor.take_line_value()
        elif tag == "WWW":
            corp.website = cursor.take_line_value()
        else:
            raise cursor.unknown_field(tag, "CORP")

    return corp


# ---------------------------------------------------------------------------
# Citations
# ---------------------------------------------------------------------------

def parse_citation(cursor: Cursor, level: int) -> SourceCitation:
    citation = SourceCitation()
    value = cursor.take_line_value().strip()
    if len(value) > 2 and value.startswith("@") and value.endswith("@"):
        citation.xref = value[1:-1]
    else:
        citation.text = value

    for tag in cursor.iter_block(level, citation):
        if tag == "PAGE":
            citation.page = cursor.take_line_value()
        elif tag == "QUAY":
            line = cursor.line
            quality = cursor.take_line_value().strip()
            if quality not in QUALITY_LEVELS:
                raise cursor.malformed(f"QUAY must be one of 0-3, found {quality!r}", line=line)
            citation.quality = int(quality)
        elif tag in CONTINUATION_TAGS and citation.text is not None:
            citation.text = join_continuation(citation.text, tag, cursor.take_optional_line_value())
        else:
            raise cursor.unknown_field(tag, "citation")

    return citation


def parse_repo_citation(cursor: Cursor, level: int) -> RepoCitation:
    citation = RepoCitation(xref=cursor.take_xref())

    for tag in cursor.iter_block(level, citation):
        if tag == "CALN":
            citation.call_number = cursor.take_line_value()
        else:
            raise cursor.unknown_field(tag, "REPO citation")

    return citation


def parse_change_date(cursor: Cursor, level: int, record) -> Optional[str]:
    """CHAN block: returns the DATE value, keeping its TIME out of the way."""
    cursor.take_optional_line_value()
    changed: Optional[str] = None

    for tag in cursor.iter_block(level, record):
        if tag == "DATE":
            changed = parse_date(cursor, cursor.depth).value
        else:
            raise cursor.unknown_field(tag, "CHAN")

    return changed
