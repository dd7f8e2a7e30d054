# tests/test_parser_header.py

from __future__ import annotations

from gedcom_records.core.diagnostics import DiagnosticKind
from gedcom_records.parser import ParserOptions, parse_file, parse_gedcom
from gedcom_records.utils import tests_data_path


def test_sample_header_fields() -> None:
    result = parse_file(tests_data_path("sample.ged"), ParserOptions())
    header = result.data.header

    assert header.gedcom.version == "5.5.1"
    assert header.gedcom.form == "LINEAGE-LINKED"
    assert header.destination == "ANY"
    assert header.date.value == "2 OCT 2020"
    assert header.date.time == "10:30:00"
    assert header.submitter_tag == "U1"
    assert header.filename == "sample.ged"
    assert header.copyright.value == "(c) 2020 Example"
    assert header.encoding.value == "UTF-8"
    assert header.language == "English"


def test_sample_header_source_and_corporation() -> None:
    header = parse_file(tests_data_path("sample.ged"), ParserOptions()).data.header
    sour = header.source

    assert sour.value == "GEDCOM_RECORDS"
    assert sour.version == "0.1"
    assert sour.name == "gedcom-records fixture"
    assert sour.corporation.value == "Example Corp"
    assert sour.corporation.address.value == "1 Main Street\nSpringfield"
    assert sour.corporation.address.city == "Springfield"
    assert sour.corporation.phone == "555-0100"
    assert sour.corporation.website == "https://example.com"
    assert sour.data.value == "Example data"
    assert sour.data.date.value == "1 JAN 2020"
    assert sour.data.copyright.value == "Copyright Example"


def test_header_place_form_is_split_into_titles() -> None:
    header = parse_file(tests_data_path("sample.ged"), ParserOptions()).data.header
    assert header.place.jurisdictional_titles == ["City", "County", "State", "Country"]


def test_header_note_joins_continuations() -> None:
    header = parse_file(tests_data_path("sample.ged"), ParserOptions()).data.header
    assert header.note.value == "This file exercises every record type\non a new line"


def test_minimal_file_has_no_records_and_no_diagnostics() -> None:
    result = parse_file(tests_data_path("minimal.ged"), ParserOptions())

    assert len(result.data) == 0
    assert result.data.header.gedcom.version == "5.5"
    assert result.diagnostics == []
    assert result.ok


def test_unexpected_form_is_a_warning_and_value_is_kept() -> None:
    text = "0 HEAD\n1 GEDC\n2 VERS 5.5\n2 FORM EVENT-ORIENTED\n0 TRLR\n"
    result = parse_gedcom(text, ParserOptions())

    assert result.ok
    assert result.data.header.gedcom.form == "EVENT-ORIENTED"
    (warning,) = result.warnings
    assert warning.kind == DiagnosticKind.FORMAT_WARNING
    assert warning.line == 4
    assert "Expected LINEAGE-LINKED, found EVENT-ORIENTED" in warning.message


def test_form_check_ignores_case() -> None:
    text = "0 HEAD\n1 GEDC\n2 FORM Lineage-Linked\n0 TRLR\n"
    result = parse_gedcom(text, ParserOptions())
    assert result.warnings == []


def test_repeated_head_is_skipped_as_unsupported() -> None:
    text = "0 HEAD\n1 LANG English\n0 HEAD\n1 LANG French\n0 TRLR\n"
    result = parse_gedcom(text, ParserOptions())

    assert result.data.header.language == "English"
    (warning,) = result.warnings
    assert warning.kind == DiagnosticKind.UNSUPPORTED
    assert warning.line == 3


def test_header_custom_tag_is_captured() -> None:
    text = "0 HEAD\n1 _HME Genealogy\n2 VERS 3\n0 TRLR\n"
    header = parse_gedcom(text, ParserOptions()).data.header

    (custom,) = header.custom_data
    assert custom.tag == "_HME"
    assert custom.value == "Genealogy"
    assert custom.children[0].tag == "VERS"
    assert custom.children[0].value == "3"
