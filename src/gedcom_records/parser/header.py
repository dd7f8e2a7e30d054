"""HEAD record and its substructures."""

from __future__ import annotations

from gedcom_records.core.diagnostics import DiagnosticKind
from gedcom_records.parser.common import (
    parse_copyright,
    parse_corporation,
    parse_date,
    parse_note,
)
from gedcom_records.parser.cursor import Cursor
from gedcom_records.records import (
    Encoding,
    GedcomDocument,
    HeadPlac,
    HeadSourData,
    HeadSource,
    Header,
)
from gedcom_records.records.header import EXPECTED_GEDCOM_FORM


def parse_header(cursor: Cursor, level: int = 0) -> Header:
    # skip over HEAD tag name
    cursor.advance()
    header = Header()

    for tag in cursor.iter_block(level, header):
        if tag == "GEDC":
            header.gedcom = parse_gedcom_data(cursor, cursor.depth)
        elif tag == "SOUR":
            header.source = parse_head_source(cursor, cursor.depth)
        elif tag == "DEST":
            header.destination = cursor.take_line_value()
        elif tag == "DATE":
            header.date = parse_date(cursor, cursor.depth)
        elif tag == "SUBM":
            header.submitter_tag = cursor.take_xref()
        elif tag == "SUBN":
            header.submission_tag = cursor.take_xref()
        elif tag == "FILE":
            header.filename = cursor.take_line_value()
        elif tag == "COPR":
            header.copyright = parse_copyright(cursor, cursor.depth)
        elif tag == "CHAR":
            header.encoding = parse_encoding(cursor, cursor.depth)
        elif tag == "LANG":
            header.language = cursor.take_line_value()
        elif tag == "NOTE":
            header.note = parse_note(cursor, cursor.depth)
        elif tag == "PLAC":
            header.place = parse_head_plac(cursor, cursor.depth)
        else:
            raise cursor.unknown_field(tag, "HEAD")

    return header


def parse_gedcom_data(cursor: Cursor, level: int) -> GedcomDocument:
    """GEDC: the version and form the file claims to follow."""
    cursor.take_optional_line_value()
    gedc = GedcomDocument()

    for tag in cursor.iter_block(level, gedc):
        if tag == "VERS":
            gedc.version = cursor.take_line_value()
        elif tag == "FORM":
            line = cursor.line
            form = cursor.take_line_value()
            # Only one form makes sense; anything else is kept but flagged.
            if form.strip().upper() != EXPECTED_GEDCOM_FORM:
                cursor.warn(
                    DiagnosticKind.FORMAT_WARNING,
                    f"Unrecognized GEDCOM form. Expected {EXPECTED_GEDCOM_FORM}, found {form}",
                    line=line,
                )
            gedc.form = form
        else:
            raise cursor.unknown_field(tag, "GEDC")

    return gedc


def parse_head_source(cursor: Cursor, level: int) -> HeadSource:
    sour = HeadSource(value=cursor.take_line_value())

    for tag in cursor.iter_block(level, sour):
        if tag == "VERS":
            sour.version = cursor.take_line_value()
        elif tag == "NAME":
            sour.name = cursor.take_line_value()
        elif tag == "CORP":
            sour.corporation = parse_corporation(cursor, cursor.depth)
        elif tag == "DATA":
            sour.data = parse_head_data(cursor, cursor.depth)
        else:
            raise cursor.unknown_field(tag, "HEAD.SOUR")

    return sour


def parse_head_data(cursor: Cursor, level: int) -> HeadSourData:
    data = HeadSourData(value=cursor.take_line_value())

    for tag in cursor.iter_block(level, data):
        if tag == "DATE":
            data.date = parse_date(cursor, cursor.depth)
        elif tag == "COPR":
            data.copyright = parse_copyright(cursor, cursor.depth)
        else:
            raise cursor.unknown_field(tag, "HEAD.SOUR.DATA")

    return data


def parse_head_plac(cursor: Cursor, level: int) -> HeadPlac:
    # In the header PLAC carries no payload, only the FORM of place names.
    cursor.take_optional_line_value()
    h_plac = HeadPlac()

    for tag in cursor.iter_block(level, h_plac):
        if tag == "FORM":
            for title in cursor.take_line_value().split(","):
                h_plac.push_jurisdictional_title(title.strip())
        else:
            raise cursor.unknown_field(tag, "HEAD.PLAC")

    return h_plac


def parse_encoding(cursor: Cursor, level: int) -> Encoding:
    encoding = Encoding(value=cursor.take_line_value())

    for tag in cursor.iter_block(level, encoding):
        if tag == "VERS":
            encoding.version = cursor.take_line_value()
        else:
            raise cursor.unknown_field(tag, "CHAR")

    return encoding
