from __future__ import annotations

from typing import Optional

from gedcom_records.parser.common import parse_change_date, parse_citation, parse_note
from gedcom_records.parser.cursor import Cursor
from gedcom_records.parser.event import parse_event
from gedcom_records.records import Family, is_family_event_tag


def parse_family(cursor: Cursor, level: int, xref: Optional[str]) -> Family:
    # skip over FAM tag name
    cursor.advance()
    family = Family(xref=xref)

    for tag in cursor.iter_block(level, family):
        if is_family_event_tag(tag):
            family.add_event(parse_event(cursor, tag, cursor.depth))
        elif tag == "HUSB":
            family.individual1 = cursor.take_xref()
        elif tag == "WIFE":
            family.individual2 = cursor.take_xref()
        elif tag == "CHIL":
            family.add_child(cursor.take_xref())
        elif tag == "NOTE":
            family.notes.append(parse_note(cursor, cursor.depth))
        elif tag == "SOUR":
            family.citations.append(parse_citation(cursor, cursor.depth))
        elif tag == "CHAN":
            family.last_updated = parse_change_date(cursor, cursor.depth, family)
        else:
            raise cursor.unknown_field(tag, "FAM")

    return family
