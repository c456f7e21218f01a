"""Formatting helper tests."""

from datetime import UTC, date, datetime

import pytest

from storefront.utils.formatting import format_date, format_mobile


def test_format_date():
    assert format_date(date(2026, 1, 5)) == "2026-01-05"
    assert format_date(datetime(2026, 12, 31, 23, 59, tzinfo=UTC)) == "2026-12-31"
    assert format_date("2026-07-04T10:00:00") == "2026-07-04"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("5551234567", "555-123-4567"),
        (5551234567, "555-123-4567"),
        ("(555) 123-4567", "555-123-4567"),
        ("555", "555"),
        ("5551", "555-1"),
        ("555123", "555-123"),
        ("5551234", "555-123-4"),
        ("555123456789", "555-123-4567"),
        ("", ""),
    ],
)
def test_format_mobile(value, expected):
    assert format_mobile(value) == expected
