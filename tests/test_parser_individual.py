# tests/test_parser_individual.py

from __future__ import annotations

import pytest

from gedcom_records.core.diagnostics import DiagnosticKind
from gedcom_records.core.exceptions import MalformedValueError, UnknownFieldError
from gedcom_records.parser import ParserOptions, parse_file, parse_gedcom
from gedcom_records.records import FamilyLinkType, Gender, Pedigree
from gedcom_records.utils import tests_data_path


def wrap(body: str) -> str:
    return f"0 HEAD\n{body}0 TRLR\n"


@pytest.fixture(scope="module")
def sample():
    return parse_file(tests_data_path("sample.ged"), ParserOptions()).data


# ---------------------------------------------------------------------------
# Sample file
# ---------------------------------------------------------------------------

def test_individuals_in_file_order(sample) -> None:
    assert [i.xref for i in sample.individuals] == ["I1", "I2", "I3"]


def test_name_pieces(sample) -> None:
    john = sample.individual("I1")
    assert john.name.value == "John /Doe/"
    assert john.name.given == "John"
    assert john.name.surname == "Doe"
    assert john.name.nickname == "Jack"


def test_sex_and_events(sample) -> None:
    john = sample.individual("@I1@")
    assert john.sex is Gender.MALE

    birth, death = john.events
    assert birth.tag == "BIRT"
    assert birth.kind == "Birth"
    assert birth.date == "1 JAN 1900"
    assert birth.place == "Springfield, Illinois"
    assert death.tag == "DEAT"
    assert death.value == "Y"


def test_event_citation(sample) -> None:
    birth = sample.individual("I1").events[0]
    (citation,) = birth.citations
    assert citation.xref == "S1"
    assert citation.page == "p. 12"
    assert citation.quality == 3


def test_attributes_are_kept_apart_from_events(sample) -> None:
    (occupation,) = sample.individual("I1").attributes
    assert occupation.tag == "OCCU"
    assert occupation.kind == "Occupation"
    assert occupation.value == "Farmer"
    assert occupation.date == "FROM 1920 TO 1950"


def test_custom_tag_with_children_is_captured(sample) -> None:
    (custom,) = sample.individual("I1").custom_data
    assert custom.tag == "_MILT"
    assert custom.value == "Served in WWI"
    assert [(c.tag, c.value) for c in custom.children] == [("DATE", "1917")]


def test_note_and_change_date(sample) -> None:
    john = sample.individual("I1")
    assert [n.value for n in john.notes] == ["Went by Jack"]
    assert john.last_updated == "5 MAY 2020"


def test_family_links(sample) -> None:
    john = sample.individual("I1")
    bob = sample.individual("I3")

    assert [link.xref for link in john.spouse_links()] == ["F1"]
    assert john.child_links() == []

    (link,) = bob.families
    assert link.link_type is FamilyLinkType.CHILD
    assert link.xref == "F1"
    assert link.pedigree is Pedigree.BIRTH


# ---------------------------------------------------------------------------
# Inline documents
# ---------------------------------------------------------------------------

def test_multiple_names_are_kept() -> None:
    text = wrap("0 @I1@ INDI\n1 NAME Ann /Lee/\n1 NAME Annie /Lee/\n2 TYPE aka\n")
    person = parse_gedcom(text, ParserOptions()).data.individuals[0]

    assert [n.value for n in person.names] == ["Ann /Lee/", "Annie /Lee/"]
    assert person.names[1].name_type == "aka"
    assert person.name.value == "Ann /Lee/"


@pytest.mark.parametrize(
    "code, expected",
    [("M", Gender.MALE), ("F", Gender.FEMALE), ("N", Gender.NONBINARY), ("U", Gender.UNKNOWN)],
)
def test_sex_codes(code, expected) -> None:
    text = wrap(f"0 @I1@ INDI\n1 SEX {code}\n")
    assert parse_gedcom(text, ParserOptions()).data.individuals[0].sex is expected


def test_unknown_sex_is_fatal_by_default() -> None:
    text = wrap("0 @I1@ INDI\n1 SEX X\n")
    with pytest.raises(MalformedValueError) as excinfo:
        parse_gedcom(text, ParserOptions())
    assert excinfo.value.line == 3


def test_unknown_sex_becomes_unknown_when_lenient() -> None:
    text = wrap("0 @I1@ INDI\n1 SEX X\n")
    result = parse_gedcom(text, ParserOptions(strict_gender=False))

    assert result.ok
    assert result.data.individuals[0].sex is Gender.UNKNOWN
    (warning,) = result.warnings
    assert warning.kind == DiagnosticKind.MALFORMED_VALUE
    assert warning.line == 3


def test_pedigree_is_case_insensitive() -> None:
    text = wrap("0 @I1@ INDI\n1 FAMC @F1@\n2 PEDI ADOPTED\n")
    link = parse_gedcom(text, ParserOptions()).data.individuals[0].families[0]
    assert link.pedigree is Pedigree.ADOPTED


def test_unknown_pedigree_is_fatal_by_default() -> None:
    text = wrap("0 @I1@ INDI\n1 FAMC @F1@\n2 PEDI stepchild\n")
    with pytest.raises(MalformedValueError):
        parse_gedcom(text, ParserOptions())


def test_unknown_pedigree_is_dropped_when_lenient() -> None:
    text = wrap("0 @I1@ INDI\n1 FAMC @F1@\n2 PEDI stepchild\n")
    result = parse_gedcom(text, ParserOptions(strict_pedigree=False))

    link = result.data.individuals[0].families[0]
    assert link.pedigree is None
    assert [w.kind for w in result.warnings] == [DiagnosticKind.MALFORMED_VALUE]


def test_unknown_field_reports_tag_and_line() -> None:
    text = "0 @I1@ INDI\n1 FOOBAR x\n0 TRLR\n"
    with pytest.raises(UnknownFieldError) as excinfo:
        parse_gedcom(text, ParserOptions())

    assert excinfo.value.line == 2
    assert "FOOBAR" in str(excinfo.value)


def test_individual_without_pointer() -> None:
    text = wrap("0 INDI\n1 NAME Nobody\n")
    person = parse_gedcom(text, ParserOptions()).data.individuals[0]
    assert person.xref is None
    assert person.name.value == "Nobody"


def test_bad_quality_value_is_malformed() -> None:
    text = wrap("0 @I1@ INDI\n1 BIRT\n2 SOUR @S1@\n3 QUAY 7\n")
    with pytest.raises(MalformedValueError) as excinfo:
        parse_gedcom(text, ParserOptions())
    assert excinfo.value.line == 5
