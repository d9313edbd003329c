"""Tests for duration string parsing and formatting."""

from datetime import timedelta

import pytest

from src.shared.tracker import InvalidDurationError, ParseError, format_duration, parse_duration


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("40m", timedelta(minutes=40)),
        ("1h30m", timedelta(hours=1, minutes=30)),
        ("30m0s", timedelta(minutes=30)),
        ("3h00m", timedelta(hours=3)),
        ("1.5h", timedelta(minutes=90)),
        (".5m", timedelta(seconds=30)),
        ("500ms", timedelta(milliseconds=500)),
        ("250us", timedelta(microseconds=250)),
        ("250µs", timedelta(microseconds=250)),
        ("+45s", timedelta(seconds=45)),
        ("-10s", timedelta(seconds=-10)),
        ("1m1m", timedelta(minutes=2)),
        ("0", timedelta(0)),
        ("0s", timedelta(0)),
    ],
)
def test_parse_valid_durations(text, expected):
    """Test compound unit strings parse to the expected timedelta."""
    assert parse_duration(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "+", "10", "h", "1d", "1h30", "1h 30m", " 1h", "1h ", "abc", "1..5h", "1H"],
)
def test_parse_invalid_durations(text):
    """Test malformed duration strings are rejected."""
    with pytest.raises(InvalidDurationError):
        parse_duration(text)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1ns", timedelta(microseconds=1)),
        ("999ns", timedelta(microseconds=1)),
        ("1500ns", timedelta(microseconds=2)),
        ("2500ns", timedelta(microseconds=2)),
        ("1s1ns", timedelta(seconds=1)),
        ("-1ns", timedelta(0)),
    ],
)
def test_parse_sub_microsecond_durations(text, expected):
    """Test nanosecond totals round to microseconds without losing positivity."""
    assert parse_duration(text) == expected


def test_invalid_duration_is_parse_error():
    """Test duration errors can be caught as generic parse errors."""
    with pytest.raises(ParseError, match="invalid duration"):
        parse_duration("soon")


def test_huge_duration_is_rejected():
    """Test durations beyond timedelta range raise InvalidDurationError."""
    with pytest.raises(InvalidDurationError, match="out of range"):
        parse_duration("99999999999999h")


@pytest.mark.parametrize(
    ("duration", "expected"),
    [
        (timedelta(hours=3), "3h0m0s"),
        (timedelta(minutes=30), "30m0s"),
        (timedelta(hours=1, minutes=2, seconds=3), "1h2m3s"),
        (timedelta(seconds=1.5), "1.5s"),
        (timedelta(seconds=-10), "-10s"),
        (timedelta(0), "0s"),
    ],
)
def test_format_duration(duration, expected):
    """Test durations format in the grammar the parser accepts."""
    assert format_duration(duration) == expected


def test_format_then_parse_keeps_value():
    """Test a formatted duration parses back to the same value."""
    duration = timedelta(hours=2, minutes=5, seconds=7, microseconds=250000)
    assert parse_duration(format_duration(duration)) == duration
