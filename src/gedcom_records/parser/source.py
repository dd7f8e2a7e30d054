"""SOUR and REPO records."""

from __future__ import annotations

from typing import Optional

from gedcom_records.parser.common import (
    parse_address,
    parse_change_date,
    parse_note,
    parse_repo_citation,
    take_continued_text,
)
from gedcom_records.parser.cursor import Cursor
from gedcom_records.parser.event import parse_event
from gedcom_records.records import OTHER_EVENT, Repository, Source, SourceData


def parse_source(cursor: Cursor, level: int, xref: Optional[str]) -> Source:
    # skip SOUR tag
    cursor.advance()
    source = Source(xref=xref)

    for tag in cursor.iter_block(level, source):
        if tag == "DATA":
            parse_source_data(cursor, cursor.depth, source.data)
        elif tag == "ABBR":
            source.abbreviation = take_continued_text(cursor, cursor.depth, source)
        elif tag == "TITL":
            source.title = take_continued_text(cursor, cursor.depth, source)
        elif tag == "AUTH":
            source.author = take_continued_text(cursor, cursor.depth, source)
        elif tag == "PUBL":
            source.publication = take_continued_text(cursor, cursor.depth, source)
        elif tag == "TEXT":
            source.text = take_continued_text(cursor, cursor.depth, source)
        elif tag == "REPO":
            source.add_repo_citation(parse_repo_citation(cursor, cursor.depth))
        elif tag == "NOTE":
            source.notes.append(parse_note(cursor, cursor.depth))
        elif tag == "CHAN":
            source.last_updated = parse_change_date(cursor, cursor.depth, source)
        else:
            raise cursor.unknown_field(tag, "SOUR")

    return source


def parse_source_data(cursor: Cursor, level: int, data: SourceData) -> SourceData:
    """
    SOUR.DATA: the events a source records and the agency responsible.

    Each ``EVEN`` line lists recorded event types ("BIRT, DEAT") and may carry
    the DATE span and PLAC jurisdiction it covers; it becomes an OTHER event
    whose value is that list.
    """
    cursor.take_optional_line_value()

    for tag in cursor.iter_block(level, data):
        if tag == "EVEN":
            data.add_event(parse_event(cursor, OTHER_EVENT, cursor.depth))
        elif tag == "AGNC":
            data.agency = cursor.take_line_value()
        elif tag == "NOTE":
            data.notes.append(parse_note(cursor, cursor.depth))
        else:
            raise cursor.unknown_field(tag, "SOUR.DATA")

    return data


def parse_repository(cursor: Cursor, level: int, xref: Optional[str]) -> Repository:
    # skip REPO tag
    cursor.advance()
    repo = Repository(xref=xref)

    for tag in cursor.iter_block(level, repo):
        if tag == "NAME":
            repo.name = cursor.take_line_value()
        elif tag == "ADDR":
            repo.address = parse_address(cursor, cursor.depth)
        elif tag == "PHON":
            repo.phone = cursor.take_line_value()
        elif tag == "EMAIL":
            repo.email = cursor.take_line_value()
        elif tag == "WWW":
            repo.website = cursor.take_line_value()
        elif tag == "NOTE":
            repo.notes.append(parse_note(cursor, cursor.depth))
        elif tag == "CHAN":
            repo.last_updated = parse_change_date(cursor, cursor.depth, repo)
        else:
            raise cursor.unknown_field(tag, "REPO")

    return repo
