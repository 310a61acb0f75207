import pytest

from livehls.common.strings.parsers import parse_int_or_none, parse_number, trimmed


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("720", 720),
        (" 1080 ", 1080),
        ("720p", 720),
        ("-5", -5),
        ("abc", None),
        ("", None),
        (None, None),
        (480, 480),
        (480.9, 480),
        (float("nan"), None),
    ],
)
def test_parse_int_or_none(raw, expected):
    assert parse_int_or_none(raw) == expected


@pytest.mark.parametrize("raw, expected", [("1500.5", 1500.5), (720, 720.0), (None, 0.0), ("n/a", 0.0), ({}, 0.0)])
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_trimmed_default_only_when_absent():
    assert trimmed(None, "YouTube") == "YouTube"
    assert trimmed("", "YouTube") == ""
    assert trimmed("  News ") == "News"

