"""LocalDate class representing a calendar date.

This module provides the LocalDate class for representing calendar dates
in the proleptic Gregorian calendar, without any timezone.
"""

from __future__ import annotations

from typing import Any

from dbtemporal._internal.calendar import (
    days_before_month,
    is_leap_year,
    ordinal_to_weekday,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from dbtemporal._internal.validation import validate_date


class LocalDate:
    """A calendar date in the proleptic Gregorian calendar.

    LocalDate represents a calendar day with year, month and day components.
    Months are zero-based (0 = January, 11 = December), matching the
    database client's wire-level field conventions. Years use astronomical
    numbering, so year 0 exists and equals 1 BCE.

    The internal representation is the ordinal day number
    (ordinal 1 = 0001-01-01), which makes comparisons and day arithmetic
    plain integer operations.

    Attributes:
        year: The year (can be 0 or negative).
        month: The month (0-11).
        day: The day of the month (1-31).

    Examples:
        >>> d = LocalDate(2019, 0, 31)
        >>> str(d)
        '2019-01-31'
        >>> d.month
        0

        >>> LocalDate(2019, 1, 30)  # February 30
        Traceback (most recent call last):
        ...
        ValidationError: day must be between 1 and 28 for 2019-02, got 30
    """

    __slots__ = ("_ordinal",)

    def __init__(self, year: int, month: int = 0, day: int = 1) -> None:
        """Create a LocalDate from year, zero-based month and day.

        Args:
            year: The year.
            month: The month (0-11).
            day: The day of the month.

        Raises:
            ValidationError: If month or day is out of range.
        """
        validate_date(year, month, day)

        self._ordinal: int = ymd_to_ordinal(year, month + 1, day)

    @classmethod
    def _from_ordinal(cls, ordinal: int) -> LocalDate:
        """Create a LocalDate from an ordinal without validation.

        This is an internal factory method for values that are known to
        be valid, such as dates decoded from the wire.

        Args:
            ordinal: The ordinal day number.

        Returns:
            A new LocalDate instance.
        """
        instance = object.__new__(cls)
        instance._ordinal = ordinal
        return instance

    @classmethod
    def from_ordinal(cls, ordinal: int) -> LocalDate:
        """Create a LocalDate from an ordinal day number.

        Together with :meth:`to_ordinal` this is the canonical way to move
        a date by whole days.

        Args:
            ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

        Returns:
            The corresponding LocalDate.

        Examples:
            >>> LocalDate.from_ordinal(1)
            LocalDate [ 0001-01-01 ]

            >>> d = LocalDate(2019, 11, 31)
            >>> LocalDate.from_ordinal(d.to_ordinal() + 1)
            LocalDate [ 2020-01-01 ]
        """
        year, month, day = ordinal_to_ymd(ordinal)
        return cls(year, month - 1, day)

    @property
    def year(self) -> int:
        """Return the year component."""
        year, _, _ = ordinal_to_ymd(self._ordinal)
        return year

    @property
    def month(self) -> int:
        """Return the zero-based month component (0-11)."""
        _, month, _ = ordinal_to_ymd(self._ordinal)
        return month - 1

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        _, _, day = ordinal_to_ymd(self._ordinal)
        return day

    @property
    def day_of_week(self) -> int:
        """Return the day of the week (0=Sunday, 6=Saturday).

        Examples:
            >>> LocalDate(2019, 0, 1).day_of_week  # Tuesday
            2
        """
        return ordinal_to_weekday(self._ordinal)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> LocalDate(2020, 11, 31).day_of_year  # Leap year
            366
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        return days_before_month(year, month) + day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> LocalDate:
        """Return a new LocalDate with specified components replaced.

        Raises:
            ValidationError: If the resulting date is invalid.

        Examples:
            >>> LocalDate(2019, 0, 31).replace(month=2)
            LocalDate [ 2019-03-31 ]
        """
        y, m, d = ordinal_to_ymd(self._ordinal)
        return LocalDate(
            year if year is not None else y,
            month if month is not None else m - 1,
            day if day is not None else d,
        )

    def add_days(self, days: int) -> LocalDate:
        """Return a new LocalDate offset by the given number of days.

        Examples:
            >>> LocalDate(2019, 1, 28).add_days(1)
            LocalDate [ 2019-03-01 ]
        """
        return LocalDate.from_ordinal(self._ordinal + days)

    def to_ordinal(self) -> int:
        """Return the ordinal day number for this date.

        Examples:
            >>> LocalDate(1, 0, 1).to_ordinal()
            1
            >>> LocalDate(1970, 0, 1).to_ordinal()
            719163
        """
        return self._ordinal

    def to_iso_format(self) -> str:
        """Return the date as ``YYYY-MM-DD`` with a 1-based month.

        Years before 0 are rendered with a leading minus (``-0044-03-15``).
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        if year >= 0:
            return f"{year:04d}-{month:02d}-{day:02d}"
        return f"{year:05d}-{month:02d}-{day:02d}"

    def to_json(self) -> dict[str, Any]:
        """Return the date as a JSON-serializable dictionary.

        Examples:
            >>> LocalDate(2019, 0, 31).to_json()
            {'_type': 'LocalDate', 'value': '2019-01-31'}
        """
        return {"_type": "LocalDate", "value": self.to_iso_format()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._ordinal == other._ordinal

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._ordinal <= other._ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._ordinal > other._ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._ordinal >= other._ordinal

    def __hash__(self) -> int:
        return hash(self._ordinal)

    def __repr__(self) -> str:
        """Return the debug form, e.g. ``LocalDate [ 2019-01-31 ]``."""
        return f"LocalDate [ {self.to_iso_format()} ]"

    def __str__(self) -> str:
        """Return the canonical ``YYYY-MM-DD`` form."""
        return self.to_iso_format()


__all__ = ["LocalDate"]
