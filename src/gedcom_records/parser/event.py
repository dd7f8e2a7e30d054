from __future__ import annotations

from gedcom_records.parser.common import parse_citation, parse_note
from gedcom_records.parser.cursor import Cursor
from gedcom_records.records import Event


def parse_event(cursor: Cursor, tag: str, level: int) -> Event:
    """
    Parse an event or attribute line (BIRT, MARR, OCCU, DATA.EVEN, ...).

    The event line may carry a value ("1 DEAT Y", "1 OCCU Farmer"); DATE and
    PLAC are kept as the raw strings from the file.
    """
    event = Event.from_tag(tag)
    event.value = cursor.take_optional_line_value()

    for field_tag in cursor.iter_block(level, event):
        if field_tag == "DATE":
            event.date = cursor.take_line_value()
        elif field_tag == "PLAC":
            event.place = cursor.take_line_value()
        elif field_tag == "TYPE":
            event.event_type = cursor.take_line_value()
        elif field_tag == "CAUS":
            event.cause = cursor.take_line_value()
        elif field_tag == "AGE":
            event.age = cursor.take_line_value()
        elif field_tag == "SOUR":
            event.citations.append(parse_citation(cursor, cursor.depth))
        elif field_tag == "NOTE":
            event.notes.append(parse_note(cursor, cursor.depth))
        else:
            raise cursor.unknown_field(field_tag, f"{tag} event")

    return event
