"""Parsing of timestamp arguments given on the command line."""

import re
from datetime import datetime, timezone

# Unix epoch seconds, optionally negative and fractional
EPOCH_RE = re.compile(r"^-?\d+(\.\d+)?$")


class TimestampParseError(ValueError):
    """Raised when a timestamp string cannot be interpreted."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Unrecognized timestamp {value!r}. "
            "Use ISO 8601 (2024-05-01T12:00:00Z) or Unix epoch seconds."
        )


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 string or Unix epoch seconds into a datetime.

    Epoch values are returned as aware UTC datetimes. ISO strings keep
    whatever offset they carry; a trailing 'Z' means UTC.
    """
    text = value.strip()
    if not text:
        raise TimestampParseError(value)

    if EPOCH_RE.match(text):
        try:
            return datetime.fromtimestamp(float(text), tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise TimestampParseError(value) from e

    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise TimestampParseError(value) from e


class TimestampRangeError(ValueError):
    """Raised when a naive/aware pair cannot be brought into one frame."""

    def __init__(self, a: datetime, b: datetime) -> None:
        super().__init__(
            f"Cannot compare {a.isoformat()} with {b.isoformat()}: "
            "local time conversion is out of range."
        )


def align_timezones(a: datetime, b: datetime) -> tuple[datetime, datetime]:
    """Make a naive/aware pair comparable by treating naive values as local time.

    The naive side is localized first. Near datetime.min or datetime.max
    that conversion overflows, so the aware side is converted to naive
    local time instead.

    Raises:
        TimestampRangeError: If neither conversion fits the datetime range.
    """
    if (a.tzinfo is None) == (b.tzinfo is None):
        return a, b

    a_is_naive = a.tzinfo is None
    naive, aware = (a, b) if a_is_naive else (b, a)
    try:
        naive = naive.astimezone()
    except (OverflowError, OSError, ValueError):
        try:
            aware = aware.astimezone().replace(tzinfo=None)
        except (OverflowError, OSError, ValueError) as e:
            raise TimestampRangeError(a, b) from e
    return (naive, aware) if a_is_naive else (aware, naive)
