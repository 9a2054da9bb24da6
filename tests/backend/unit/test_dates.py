"""
Unit tests for core.dates.parse_event_date.
"""
import datetime as dt

import pytest

from eventboard.core.dates import parse_event_date
from eventboard.core.errors import InvalidDateFormatError


def test_full_timestamp_utc():
    assert parse_event_date("2025-06-01T18:30:00Z") == dt.datetime(
        2025, 6, 1, 18, 30, tzinfo=dt.timezone.utc
    )


def test_full_timestamp_with_offset_is_normalised_to_utc():
    parsed = parse_event_date("2025-06-01T18:30:00+02:00")
    assert parsed.utcoffset() == dt.timedelta(0)
    assert parsed == dt.datetime(2025, 6, 1, 16, 30, tzinfo=dt.timezone.utc)


def test_full_timestamp_with_fraction():
    parsed = parse_event_date("2025-06-01T18:30:00.250Z")
    assert parsed.microsecond == 250000


def test_bare_date_is_midnight_utc():
    assert parse_event_date("2025-06-01") == dt.datetime(2025, 6, 1, tzinfo=dt.timezone.utc)


@pytest.mark.parametrize(
    "value",
    [
        "invalid-date-format",
        "",
        "2025-13-01",
        "01/06/2025",
        "2025-06-01T18:30:00",  # no offset
        " 2025-06-01",
        "2025-6-1",
        "2025-06-1",
        "2025-06-01T18:30:00+0200",
    ],
)
def test_rejects_other_formats(value):
    with pytest.raises(InvalidDateFormatError) as exc_info:
        parse_event_date(value)
    assert exc_info.value.value == value
