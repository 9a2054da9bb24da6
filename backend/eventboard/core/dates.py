# eventboard/core/dates.py
import datetime as dt
import re

from eventboard.core.errors import InvalidDateFormatError

# RFC 3339 timestamp: "Z" or a "+HH:MM" offset, optional fractional seconds.
_TIMESTAMP_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,6})?(Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
_TIMESTAMP_FRACTION_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"
_DATE_FORMAT = "%Y-%m-%d"


def parse_event_date(value: str) -> dt.datetime:
    """
    Parse an event date given either as a full timestamp or a calendar date.

    Timestamps are normalised to UTC ("2025-06-01T18:30:00+02:00" becomes
    16:30 UTC); "2025-06-01" becomes midnight UTC.

    Raises:
        InvalidDateFormatError: neither form matches
    """
    text = value or ""
    try:
        match = _TIMESTAMP_RE.fullmatch(text)
        if match:
            fmt = _TIMESTAMP_FRACTION_FORMAT if match.group(1) else _TIMESTAMP_FORMAT
            return dt.datetime.strptime(text, fmt).astimezone(dt.timezone.utc)
        if _DATE_RE.fullmatch(text):
            return dt.datetime.strptime(text, _DATE_FORMAT).replace(tzinfo=dt.timezone.utc)
    except ValueError:
        # Well-formed but out of range, e.g. month 13
        pass
    raise InvalidDateFormatError(value)
