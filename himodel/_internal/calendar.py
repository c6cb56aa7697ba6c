"""Calendar utilities for himodel.

Only what instant comparison needs: mapping a year/month/day triple onto
a proleptic Gregorian day count. Day values past the end of a month are
not rejected; they roll over into the following month, so ``2020-02-30``
lands on the same ordinal as ``2020-03-01``.

This module is not part of the public API.
"""

from __future__ import annotations


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1, matching ``datetime.date.toordinal``.

    Args:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day (1-31). Not checked against the month length.

    Returns:
        The ordinal day number.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(2020, 2, 30) == ymd_to_ordinal(2020, 3, 1)
        True
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


__all__ = [
    "is_leap_year",
    "ymd_to_ordinal",
]
