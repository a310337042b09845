import logging

import pytest

from fieldkit.atparser import FIELD_LEN, FieldType, parse_number, parse_text_fields


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("123", 123),
        ("-3211", -3211),
        ("4233!", 4233),
        ("", 0),
        ("a", 0),
        ("-", 0),
    ],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_firmware_version_without_header():
    assert parse_text_fields("02.06", None, [FieldType.STRING]) == ["02.06"]


def test_gnss_status_with_header():
    types = [FieldType.NUMBER] * 3
    assert parse_text_fields("+UGPS: 1,0,1", "+UGPS:", types) == [1, 0, 1]


def test_leading_spaces_skipped_trailing_kept():
    types = [FieldType.STRING, FieldType.STRING]
    assert parse_text_fields(" a , b", None, types) == ["a ", "b"]


def test_stops_at_requested_number_of_fields():
    types = [FieldType.NUMBER, FieldType.NUMBER]
    assert parse_text_fields("1,2,3", None, types) == [1, 2]


def test_fewer_fields_logs_warning(caplog):
    types = [FieldType.NUMBER] * 3
    with caplog.at_level(logging.WARNING, logger="fieldkit.atparser"):
        result = parse_text_fields("+UGPS: 1,8", "+UGPS:", types)
    assert result == [1, 8]
    assert "expected 3" in caplog.text


def test_missing_header_gives_nothing():
    assert parse_text_fields("OK", "+UGPS:", [FieldType.NUMBER]) == []


def test_header_only_gives_nothing():
    assert parse_text_fields("+UGPS:", "+UGPS:", [FieldType.NUMBER]) == []


def test_negative_number_stored_unsigned():
    assert parse_text_fields("-1", None, [FieldType.NUMBER]) == [0xFFFFFFFF]


def test_long_field_truncated_and_ends_parse():
    text = "x" * 100 + ",y"
    result = parse_text_fields(text, None, [FieldType.STRING, FieldType.STRING])
    assert result == ["x" * (FIELD_LEN - 1)]


def test_field_of_maximum_length_kept_whole():
    text = "x" * (FIELD_LEN - 1) + ",y"
    result = parse_text_fields(text, None, [FieldType.STRING, FieldType.STRING])
    assert result == ["x" * (FIELD_LEN - 1), "y"]


def test_empty_text_gives_nothing():
    assert parse_text_fields("", None, [FieldType.STRING]) == []


def test_no_fields_requested():
    assert parse_text_fields("1,2", None, []) == []