"""Ordinal suffixes for integers."""

import operator

_TEEN_EXCEPTIONS = {1: 11, 2: 12, 3: 13}
_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def ordinal(n: int) -> str:
    """Return ``n`` with its English ordinal suffix, e.g. 22 -> '22nd'.

    Negative values go through Python's floored modulo, so -1 renders as
    '-1th' and -9 as '-9st'.
    """
    if isinstance(n, bool):
        raise TypeError("ordinal() requires an integer, not bool")
    n = operator.index(n)

    last_digit = n % 10
    suffix = "th"
    if last_digit in _SUFFIXES and n % 100 != _TEEN_EXCEPTIONS[last_digit]:
        suffix = _SUFFIXES[last_digit]
    return f"{n}{suffix}"
