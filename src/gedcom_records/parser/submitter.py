from __future__ import annotations

from typing import Optional

from gedcom_records.parser.common import parse_address, parse_change_date
from gedcom_records.parser.cursor import Cursor
from gedcom_records.records import Submitter


def parse_submitter(cursor: Cursor, level: int, xref: Optional[str]) -> Submitter:
    # skip over SUBM tag name
    cursor.advance()
    submitter = Submitter(xref=xref)

    for tag in cursor.iter_block(level, submitter):
        if tag == "NAME":
            submitter.name = cursor.take_line_value()
        elif tag == "ADDR":
            submitter.address = parse_address(cursor, cursor.depth)
        elif tag == "PHON":
            submitter.phone = cursor.take_line_value()
        elif tag == "EMAIL":
            submitter.email = cursor.take_line_value()
        elif tag == "LANG":
            submitter.language = cursor.take_line_value()
        elif tag == "CHAN":
            submitter.last_updated = parse_change_date(cursor, cursor.depth, submitter)
        else:
            raise cursor.unknown_field(tag, "SUBM")

    return submitter
