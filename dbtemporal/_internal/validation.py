"""Validation utilities for dbtemporal.

Range checks shared by the public constructors. Each check raises
ValidationError naming the field and its valid range.

This module is not part of the public API.
"""

from __future__ import annotations

from dbtemporal._internal.calendar import days_in_month
from dbtemporal.errors import ValidationError


def validate_range(name: str, value: int, min_val: int, max_val: int) -> None:
    """Validate that ``min_val <= value <= max_val`` (both inclusive).

    Args:
        name: Field name used in the error message.
        value: The value to check.
        min_val: Smallest accepted value.
        max_val: Largest accepted value.

    Raises:
        ValidationError: If the value is out of range.

    Examples:
        >>> validate_range("hours", 24, 0, 23)
        Traceback (most recent call last):
        ...
        ValidationError: hours must be between 0 and 23, got 24
    """
    if not (min_val <= value <= max_val):
        raise ValidationError(
            f"{name} must be between {min_val} and {max_val}, got {value}"
        )


def validate_month(month: int) -> None:
    """Validate a zero-based month (0-11).

    Raises:
        ValidationError: If month is outside 0-11.
    """
    validate_range("month", month, 0, 11)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and zero-based month.

    Args:
        year: The year.
        month: The month (0-11).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month + 1)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} "
            f"for {year}-{month + 1:02d}, got {day}"
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate a (year, zero-based month, day) triple."""
    validate_month(month)
    validate_day(year, month, day)


def validate_time(hours: int, minutes: int, seconds: int, milliseconds: int) -> None:
    """Validate wall-clock time fields, each independently."""
    validate_range("hours", hours, 0, 23)
    validate_range("minutes", minutes, 0, 59)
    validate_range("seconds", seconds, 0, 59)
    validate_range("milliseconds", milliseconds, 0, 999)


__all__ = [
    "validate_range",
    "validate_month",
    "validate_day",
    "validate_date",
    "validate_time",
]
