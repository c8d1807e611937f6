"""Tests for RFC 3339 helpers."""

from datetime import datetime

import pytest
import pytz

from square_sdk.common.utils.date_utils import format_rfc3339, parse_rfc3339, utc_now


def test_parse_rfc3339_with_z_suffix() -> None:
    parsed = parse_rfc3339("2024-03-15T10:30:00.000Z")

    assert parsed == datetime(2024, 3, 15, 10, 30, tzinfo=pytz.utc)


def test_parse_rfc3339_with_offset() -> None:
    parsed = parse_rfc3339("2024-03-15T12:30:00+02:00")

    assert parsed == datetime(2024, 3, 15, 10, 30, tzinfo=pytz.utc)


def test_parse_rfc3339_rejects_garbage_and_naive_values() -> None:
    assert parse_rfc3339(None) is None
    assert parse_rfc3339("") is None
    assert parse_rfc3339("yesterday") is None
    assert parse_rfc3339("2024-03-15T10:30:00") is None


def test_format_rfc3339() -> None:
    assert format_rfc3339(datetime(2024, 3, 15, 10, 30, 0, 123000, tzinfo=pytz.utc)) == "2024-03-15T10:30:00.123Z"
    assert format_rfc3339(datetime(2024, 3, 15, 10, 30)) == "2024-03-15T10:30:00.000Z"


def test_utc_now_is_aware() -> None:
    assert utc_now().tzinfo is not None


@pytest.mark.parametrize(
    "value",
    [
        "2024-W11-5T10:30:00Z",  # ISO week date
        "20240315T103000Z",  # basic format
        "2024-03-15T10:30Z",  # no seconds
        "2024-03-15",
        "2024-03-15T10:30:00.Z",
        "2024-13-15T10:30:00Z",
        "2024-03-15T10:30:00+0200",
        "2024-03-15T10:30:00Z\n",
    ],
)
def test_parse_rfc3339_rejects_non_rfc3339_forms(value) -> None:
    assert parse_rfc3339(value) is None


@pytest.mark.parametrize(
    "value, microsecond",
    [
        ("2024-03-15T10:30:00.1Z", 100000),
        ("2024-03-15T10:30:00.12Z", 120000),
        ("2024-03-15T10:30:00.1234Z", 123400),
        ("2024-03-15T10:30:00.12345Z", 123450),
        ("2024-03-15T10:30:00.123456789Z", 123456),
    ],
)
def test_parse_rfc3339_accepts_any_fraction_length(value, microsecond) -> None:
    assert parse_rfc3339(value) == datetime(2024, 3, 15, 10, 30, 0, microsecond, tzinfo=pytz.utc)


def test_parse_rfc3339_accepts_lowercase_and_space_separator() -> None:
    expected = datetime(2024, 3, 15, 10, 30, tzinfo=pytz.utc)

    assert parse_rfc3339("2024-03-15t10:30:00z") == expected
    assert parse_rfc3339("2024-03-15 10:30:00-00:00") == expected
