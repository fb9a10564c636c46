"""Relative time phrases such as '5 minutes ago' or '1 week from now'.

Phrase selection is driven by MAGNITUDES, an ordered table of exclusive
upper bounds. Months are a fixed 30 days and years a fixed 12 months.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

logger = logging.getLogger(__name__)

SECOND = timedelta(seconds=1)
MINUTE = SECOND * 60
HOUR = MINUTE * 60
DAY = HOUR * 24
WEEK = DAY * 7
MONTH = DAY * 30
YEAR = MONTH * 12
LONG_TIME = YEAR * 37

# Divisor for singular templates, which never render {amt}
_EXACT = timedelta(microseconds=1)


@dataclass(frozen=True)
class Magnitude:
    """One row of the relative time table."""

    upper_bound: timedelta  # exclusive
    template: str
    divisor: timedelta


MAGNITUDES: tuple[Magnitude, ...] = (
    Magnitude(SECOND, "now", SECOND),
    Magnitude(SECOND * 2, "1 second {label}", _EXACT),
    Magnitude(MINUTE, "{amt} seconds {label}", SECOND),
    Magnitude(MINUTE * 2, "1 minute {label}", _EXACT),
    Magnitude(HOUR, "{amt} minutes {label}", MINUTE),
    Magnitude(HOUR * 2, "1 hour {label}", _EXACT),
    Magnitude(DAY, "{amt} hours {label}", HOUR),
    Magnitude(DAY * 2, "1 day {label}", _EXACT),
    Magnitude(WEEK, "{amt} days {label}", DAY),
    Magnitude(WEEK * 2, "1 week {label}", _EXACT),
    Magnitude(MONTH, "{amt} weeks {label}", WEEK),
    Magnitude(MONTH * 2, "1 month {label}", _EXACT),
    Magnitude(YEAR, "{amt} months {label}", MONTH),
    Magnitude(MONTH * 18, "1 year {label}", _EXACT),
    Magnitude(YEAR * 2, "2 years {label}", _EXACT),
    Magnitude(LONG_TIME, "{amt} years {label}", YEAR),
    Magnitude(timedelta.max, "a long while {label}", _EXACT),
)


def _select_magnitude(elapsed: timedelta) -> Magnitude:
    """Return the first entry whose bound is strictly greater than elapsed."""
    for magnitude in MAGNITUDES:
        if magnitude.upper_bound > elapsed:
            return magnitude
    # Unreachable while the table ends with timedelta.max
    logger.debug("No magnitude bound exceeds %s, using last entry", elapsed)
    return MAGNITUDES[-1]


def format_relative(a: datetime, b: datetime, a_label: str, b_label: str) -> str:
    """Describe the distance between two instants.

    When ``a`` is strictly later than ``b`` the phrase uses ``b_label``,
    otherwise ``a_label``. With ``a`` as the described instant and ``b`` as
    "now", passing ("ago", "from now") yields "5 minutes ago" for a past
    ``a`` and "5 minutes from now" for a future one.

    Raises:
        TypeError: If either argument is not a datetime, or one is naive
            and the other aware.
    """
    if not isinstance(a, datetime) or not isinstance(b, datetime):
        raise TypeError("format_relative() requires datetime instances")

    if a > b:
        elapsed, label = a - b, b_label
    else:
        elapsed, label = b - a, a_label

    magnitude = _select_magnitude(elapsed)
    amt = elapsed // magnitude.divisor
    return magnitude.template.format(amt=amt, label=label)


def format_relative_now(then: datetime) -> str:
    """Describe ``then`` relative to the current time, e.g. '3 days ago'."""
    if not isinstance(then, datetime):
        raise TypeError("format_relative_now() requires a datetime instance")
    now = datetime.now(then.tzinfo)
    return format_relative(then, now, "ago", "from now")
