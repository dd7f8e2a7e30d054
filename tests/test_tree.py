# tests/test_tree.py

from __future__ import annotations

from gedcom_records.records import Family, Individual, Source
from gedcom_records.tree import GedcomData


def test_empty_data() -> None:
    data = GedcomData()
    assert len(data) == 0
    assert data.find_by_xref("I1") is None
    assert data.stats() == {
        "individuals": 0,
        "families": 0,
        "sources": 0,
        "repositories": 0,
        "submitters": 0,
    }


def test_lookup_accepts_bare_and_delimited_xrefs() -> None:
    data = GedcomData()
    person = Individual(xref="I1")
    data.add_individual(person)

    assert data.find_by_xref("I1") is person
    assert data.find_by_xref("@I1@") is person
    assert data.individual("I1") is person
    assert data.family("I1") is None


def test_index_is_rebuilt_after_add() -> None:
    data = GedcomData()
    data.add_family(Family(xref="F1"))
    assert data.find_by_xref("S1") is None

    source = Source(xref="S1")
    data.add_source(source)
    assert data.find_by_xref("S1") is source


def test_iter_records_order() -> None:
    data = GedcomData()
    data.add_source(Source(xref="S1"))
    data.add_family(Family(xref="F1"))
    data.add_individual(Individual(xref="I1"))

    assert [r.xref for r in data.iter_records()] == ["I1", "F1", "S1"]
    assert len(data) == 3
