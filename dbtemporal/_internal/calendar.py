"""Calendar utilities for dbtemporal.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap year logic, month lengths and conversions between
(year, month, day) triples and ordinal day numbers.

Ordinal 1 = 0001-01-01, the same numbering as ``datetime.date.toordinal()``,
extended to year 0 and negative (astronomical) years.

Months are 1-based here; the public value types expose 0-based months and
convert at their boundary.

This module is not part of the public API.
"""

from __future__ import annotations

from dbtemporal._internal.constants import DAYS_IN_MONTH

# Days in complete cycles of the Gregorian calendar
_DAYS_IN_400_YEARS = 146_097
_DAYS_IN_100_YEARS = 36_524
_DAYS_IN_4_YEARS = 1_461


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be 0 or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2004)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.

    Examples:
        >>> days_in_month(2000, 2)
        29
        >>> days_in_month(2001, 2)
        28
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an ordinal day number.

    Consecutive calendar days map to consecutive integers. The ordinal for
    0001-01-01 is 1 and the ordinal for 0000-12-31 is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(1970, 1, 1)
        719163
    """
    # Python's // floors toward negative infinity, so this holds for
    # years before 1 as well
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number to year, month, day.

    Exact inverse of :func:`ymd_to_ordinal` for every integer ordinal.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day) with a 1-based month.

    Examples:
        >>> ordinal_to_ymd(719163)
        (1970, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    # n is 0-indexed (n=0 means ordinal=1); flooring divmod keeps the
    # remainder non-negative, so years before 1 need no special case
    n = ordinal - 1

    n400, n = divmod(n, _DAYS_IN_400_YEARS)

    # The last 100-year block of a 400-year cycle has one extra day
    n100, n = divmod(n, _DAYS_IN_100_YEARS)

    n4, n = divmod(n, _DAYS_IN_4_YEARS)

    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a 4-year or 400-year cycle: December 31 of a leap year
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-indexed day-of-year to month and day."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def ordinal_to_weekday(ordinal: int) -> int:
    """Return the day of the week for an ordinal (0=Sunday, 6=Saturday).

    Ordinal 1 (0001-01-01) was a Monday.
    """
    return ordinal % 7


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ordinal_to_weekday",
]
