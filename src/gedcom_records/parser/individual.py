from __future__ import annotations

from typing import Optional

from gedcom_records.core.diagnostics import DiagnosticKind
from gedcom_records.parser.common import parse_change_date, parse_citation, parse_note
from gedcom_records.parser.cursor import Cursor
from gedcom_records.parser.event import parse_event
from gedcom_records.records import (
    FamilyLink,
    FamilyLinkType,
    Gender,
    Individual,
    Name,
    Pedigree,
    is_individual_attribute_tag,
    is_individual_event_tag,
)


def parse_individual(cursor: Cursor, level: int, xref: Optional[str]) -> Individual:
    # skip over INDI tag name
    cursor.advance()
    individual = Individual(xref=xref)

    for tag in cursor.iter_block(level, individual):
        if tag == "NAME":
            individual.names.append(parse_name(cursor, cursor.depth))
        elif tag == "SEX":
            individual.sex = parse_gender(cursor)
        elif is_individual_event_tag(tag):
            individual.add_event(parse_event(cursor, tag, cursor.depth))
        elif is_individual_attribute_tag(tag):
            individual.add_attribute(parse_event(cursor, tag, cursor.depth))
        elif tag in ("FAMC", "FAMS"):
            individual.add_family(parse_family_link(cursor, tag, cursor.depth))
        elif tag == "NOTE":
            individual.notes.append(parse_note(cursor, cursor.depth))
        elif tag == "SOUR":
            individual.citations.append(parse_citation(cursor, cursor.depth))
        elif tag == "CHAN":
            individual.last_updated = parse_change_date(cursor, cursor.depth, individual)
        else:
            raise cursor.unknown_field(tag, "INDI")

    return individual


def parse_name(cursor: Cursor, level: int) -> Name:
    name = Name(value=cursor.take_optional_line_value())

    for tag in cursor.iter_block(level, name):
        if tag == "GIVN":
            name.given = cursor.take_line_value()
        elif tag == "NPFX":
            name.prefix = cursor.take_line_value()
        elif tag == "NSFX":
            name.suffix = cursor.take_line_value()
        elif tag == "SPFX":
            name.surname_prefix = cursor.take_line_value()
        elif tag == "SURN":
            name.surname = cursor.take_line_value()
        elif tag == "NICK":
            name.nickname = cursor.take_line_value()
        elif tag == "TYPE":
            name.name_type = cursor.take_line_value()
        else:
            raise cursor.unknown_field(tag, "NAME")

    return name


def parse_gender(cursor: Cursor) -> Gender:
    line = cursor.line
    code = cursor.take_line_value()
    try:
        return Gender.from_code(code)
    except ValueError:
        if cursor.options.strict_gender:
            raise cursor.malformed(f"Unknown gender value {code!r}", line=line) from None

    cursor.warn(
        DiagnosticKind.MALFORMED_VALUE,
        f"Unknown gender value {code!r}, recorded as {Gender.UNKNOWN.value}",
        line=line,
    )
    return Gender.UNKNOWN


def parse_family_link(cursor: Cursor, tag: str, level: int) -> FamilyLink:
    """FAMC / FAMS: a family pointer with an optional PEDI qualifier."""
    link = FamilyLink(xref=cursor.take_xref(), link_type=FamilyLinkType(tag))

    for field_tag in cursor.iter_block(level, link):
        if field_tag == "PEDI":
            link.pedigree = _parse_pedigree(cursor)
        else:
            raise cursor.unknown_field(field_tag, "FamilyLink")

    return link


def _parse_pedigree(cursor: Cursor) -> Optional[Pedigree]:
    line = cursor.line
    text = cursor.take_line_value()
    try:
        return Pedigree.from_text(text)
    except ValueError:
        if cursor.options.strict_pedigree:
            raise cursor.malformed(f"Unrecognized FamilyLink pedigree: {text!r}", line=line) from None

    cursor.warn(DiagnosticKind.MALFORMED_VALUE, f"Unrecognized FamilyLink pedigree: {text!r}", line=line)
    return None
