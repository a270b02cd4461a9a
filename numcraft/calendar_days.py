"""Leap years and the ordinal day of the year."""

from __future__ import annotations

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def day_of_year(day: int, month: int, year: int) -> int:
    """Return the ordinal of the given date within its year, counting 1 January as 1.

    Raises ValueError for a month outside 1..12. The day is added as given.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"invalid month: {month}")
    before = sum(_MONTH_LENGTHS[: month - 1])
    if month > 2 and is_leap(year):
        before += 1
    return before + day