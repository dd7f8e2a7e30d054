# tests/test_parser_errors.py

from __future__ import annotations

import pytest

from gedcom_records.core.diagnostics import DiagnosticKind
from gedcom_records.core.exceptions import (
    GedcomSyntaxError,
    MalformedValueError,
    MissingLevelError,
    UnexpectedTokenError,
    UnknownFieldError,
)
from gedcom_records.parser import Parser, ParserOptions, parse_file, parse_gedcom
from gedcom_records.utils import tests_data_path


# ---------------------------------------------------------------------------
# Top-level leniency
# ---------------------------------------------------------------------------

def test_unknown_top_level_tag_is_skipped() -> None:
    text = (
        "0 HEAD\n"
        "0 @N1@ NOTE A shared note\n"
        "1 CONT spanning lines\n"
        "0 @I1@ INDI\n"
        "1 NAME A /B/\n"
        "0 TRLR\n"
    )
    result = parse_gedcom(text, ParserOptions())

    assert [i.xref for i in result.data.individuals] == ["I1"]
    (warning,) = result.warnings
    assert warning.kind == DiagnosticKind.UNSUPPORTED
    assert warning.line == 2


def test_top_level_custom_tag_is_skipped() -> None:
    text = "0 HEAD\n0 _UNKNOWN foo\n1 BAR baz\n0 TRLR\n"
    result = parse_gedcom(text, ParserOptions())

    assert result.ok
    assert len(result.data) == 0
    assert [w.kind for w in result.warnings] == [DiagnosticKind.UNSUPPORTED]
    assert result.warnings[0].line == 2


def test_top_level_custom_block_with_pointer_lines_is_skipped() -> None:
    text = "0 _PLAC Somewhere\n1 @P1@ _LOC x\n2 MAP y\n0 @I1@ INDI\n1 NAME A /B/\n0 TRLR\n"
    result = parse_gedcom(text, ParserOptions())

    assert result.ok
    assert [i.xref for i in result.data.individuals] == ["I1"]
    (warning,) = result.warnings
    assert warning.kind == DiagnosticKind.UNSUPPORTED
    assert warning.line == 1


def test_sample_file_reports_only_the_custom_block() -> None:
    result = parse_file(tests_data_path("sample.ged"), ParserOptions())

    assert result.ok
    (warning,) = result.warnings
    assert warning.kind == DiagnosticKind.UNSUPPORTED
    assert warning.line == 98


def test_missing_trailer_is_a_format_warning() -> None:
    result = parse_gedcom("0 HEAD\n0 @I1@ INDI\n1 NAME A /B/\n", ParserOptions())

    assert len(result.data.individuals) == 1
    assert [w.kind for w in result.warnings] == [DiagnosticKind.FORMAT_WARNING]


def test_nothing_after_trailer_is_read() -> None:
    result = parse_gedcom("0 HEAD\n0 TRLR\n0 @I1@ INDI\n", ParserOptions())
    assert len(result.data) == 0
    assert result.diagnostics == []


def test_empty_input_parses_to_empty_data() -> None:
    result = parse_gedcom("", ParserOptions())
    assert len(result.data) == 0
    assert [w.kind for w in result.warnings] == [DiagnosticKind.FORMAT_WARNING]


# ---------------------------------------------------------------------------
# Fatal faults
# ---------------------------------------------------------------------------

def test_unknown_field_in_known_record_is_fatal() -> None:
    text = "0 @I1@ INDI\n1 FOOBAR x\n0 TRLR\n"
    with pytest.raises(UnknownFieldError) as excinfo:
        parse_gedcom(text, ParserOptions())
    assert excinfo.value.line == 2
    assert excinfo.value.kind == DiagnosticKind.UNKNOWN_FIELD


def test_top_level_line_must_be_level_zero() -> None:
    with pytest.raises(UnexpectedTokenError) as excinfo:
        parse_gedcom("1 NAME stray\n0 TRLR\n", ParserOptions())
    assert excinfo.value.line == 1
    assert "Level(1)" in str(excinfo.value)


def test_lexical_fault_is_reported_with_line() -> None:
    text = "0 HEAD\n0 @I1@ INDI\nNAME no level\n0 TRLR\n"
    with pytest.raises(GedcomSyntaxError) as excinfo:
        parse_gedcom(text, ParserOptions())
    assert excinfo.value.line == 3
    assert excinfo.value.kind == DiagnosticKind.INVALID_LINE


def test_lexical_fault_ends_parse_even_when_accumulating() -> None:
    text = "0 HEAD\nbad\n0 TRLR\n"
    with pytest.raises(GedcomSyntaxError):
        parse_gedcom(text, ParserOptions(accumulate_errors=True))


def test_non_ascii_digit_level_is_a_lexical_fault() -> None:
    with pytest.raises(GedcomSyntaxError) as excinfo:
        parse_gedcom("0 HEAD\n\u00b2 NAME x\n0 TRLR\n", ParserOptions(accumulate_errors=True))
    assert excinfo.value.line == 2


def test_required_value_missing_is_unexpected_token() -> None:
    text = "0 @I1@ INDI\n1 SEX\n0 TRLR\n"
    with pytest.raises(UnexpectedTokenError) as excinfo:
        parse_gedcom(text, ParserOptions())
    assert excinfo.value.line == 2


def test_pointer_field_without_pointer_is_malformed() -> None:
    with pytest.raises(MalformedValueError):
        parse_gedcom("0 @F1@ FAM\n1 HUSB I1\n0 TRLR\n", ParserOptions())


def test_missing_level_error_kind() -> None:
    parser = Parser("0 HEAD\n0 TRLR\n", ParserOptions())
    parser.cursor.advance()  # step onto the HEAD tag
    with pytest.raises(MissingLevelError):
        parser.parse()


# ---------------------------------------------------------------------------
# Accumulating mode
# ---------------------------------------------------------------------------

def test_accumulate_errors_drops_faulty_records_and_keeps_going() -> None:
    result = parse_file(tests_data_path("faulty.ged"), ParserOptions(accumulate_errors=True))

    assert [i.xref for i in result.data.individuals] == ["I1", "I4"]
    assert not result.ok
    assert [(e.kind, e.line) for e in result.errors] == [
        (DiagnosticKind.MALFORMED_VALUE, 10),
        (DiagnosticKind.UNKNOWN_FIELD, 13),
    ]


def test_raise_for_errors_reraises_first_fault() -> None:
    result = parse_file(tests_data_path("faulty.ged"), ParserOptions(accumulate_errors=True))
    with pytest.raises(MalformedValueError):
        result.raise_for_errors()


def test_lenient_options_keep_unknown_sex_and_drop_unknown_field() -> None:
    result = parse_file(tests_data_path("faulty.ged"), ParserOptions.lenient())

    assert [i.xref for i in result.data.individuals] == ["I1", "I2", "I4"]
    assert [e.kind for e in result.errors] == [DiagnosticKind.UNKNOWN_FIELD]
    assert [w.kind for w in result.warnings] == [DiagnosticKind.MALFORMED_VALUE]


def test_default_mode_stops_at_first_fault() -> None:
    with pytest.raises(MalformedValueError) as excinfo:
        parse_file(tests_data_path("faulty.ged"), ParserOptions())
    assert excinfo.value.line == 10


def test_diagnostic_str_includes_line_and_kind() -> None:
    result = parse_file(tests_data_path("faulty.ged"), ParserOptions(accumulate_errors=True))
    assert str(result.errors[0]).startswith("line 10: error [MalformedValue]")


# ---------------------------------------------------------------------------
# End-to-end scenarios
# ---------------------------------------------------------------------------

def test_unknown_record_does_not_eat_the_next_one() -> None:
    result = parse_gedcom("0 _UNKNOWN foo\n0 INDI\n0 TRLR\n", ParserOptions())

    assert len(result.data.individuals) == 1
    assert result.errors == []


def test_minimal_document_version() -> None:
    result = parse_gedcom("0 HEAD\n1 GEDC\n2 VERS 7.0\n0 TRLR\n", ParserOptions())

    assert result.data.header.gedcom.version == "7.0"
    assert len(result.data) == 0


def test_unknown_tag_on_second_line_names_line_two() -> None:
    with pytest.raises(UnknownFieldError) as excinfo:
        parse_gedcom("0 INDI\n1 UNKNOWNTAG x\n", ParserOptions())
    assert excinfo.value.line == 2
