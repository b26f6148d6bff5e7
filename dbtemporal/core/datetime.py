"""LocalDateTime class combining a date and a time of day.

This module provides the LocalDateTime class, a wall-clock date-time reading
with no timezone, stored as a UTC-anchored instant.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Any

from dbtemporal._internal.calendar import (
    ordinal_to_weekday,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from dbtemporal._internal.constants import (
    MAX_INSTANT_MILLIS,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MIN_INSTANT_MILLIS,
    UNIX_EPOCH_ORDINAL,
)
from dbtemporal._internal.validation import validate_date, validate_range
from dbtemporal.core.date import LocalDate
from dbtemporal.core.time import LocalTime
from dbtemporal.errors import ValidationError
from dbtemporal.format.iso8601 import (
    format_utc_instant,
    strip_expected_suffix,
    strip_zone_suffix,
)


class LocalDateTime:
    """A wall-clock date and time without timezone.

    LocalDateTime combines a calendar date with a time of day. Internally
    it holds a single instant, milliseconds since 1970-01-01T00:00:00 UTC,
    and derives every field from it using UTC calendar math. The instant is
    only a storage format: a LocalDateTime is what a clock on the wall
    shows, not a point on the universal timeline, and the host timezone
    never affects its fields.

    Months are zero-based (0-11) and ``day_of_week`` counts from Sunday
    (0) to Saturday (6).

    Attributes:
        year: The year component.
        month: The month component (0-11).
        day: The day component (1-31).
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        millisecond: The millisecond component (0-999).
        instant: The stored epoch milliseconds.

    Examples:
        >>> dt = LocalDateTime(2019, 0, 1)
        >>> str(dt)
        '2019-01-01T00:00:00'
        >>> dt.instant
        1546300800000

        >>> LocalDateTime(2019, 0, 1, 12, 30, 15, 250).to_plain_string()
        '2019-01-01 12:30:15.250'
    """

    __slots__ = ("_instant",)

    def __init__(
        self,
        year: int,
        month: int = 0,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> None:
        """Create a LocalDateTime from wall-clock fields.

        Args:
            year: The year.
            month: The month (0-11).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            millisecond: The millisecond (0-999).

        Raises:
            ValidationError: If any field is out of range, or the resulting
                instant is outside the supported range.
        """
        validate_date(year, month, day)
        validate_range("hour", hour, 0, 23)
        validate_range("minute", minute, 0, 59)
        validate_range("second", second, 0, 59)
        validate_range("millisecond", millisecond, 0, 999)

        days = ymd_to_ordinal(year, month + 1, day) - UNIX_EPOCH_ORDINAL
        instant = (
            days * MILLIS_PER_DAY
            + hour * MILLIS_PER_HOUR
            + minute * MILLIS_PER_MINUTE
            + second * MILLIS_PER_SECOND
            + millisecond
        )
        if not (MIN_INSTANT_MILLIS <= instant <= MAX_INSTANT_MILLIS):
            raise ValidationError(
                f"date-time {year}-{month + 1:02d}-{day:02d} is outside the "
                "supported range"
            )

        self._instant: int = instant

    @classmethod
    def _from_instant(cls, instant: int) -> LocalDateTime:
        """Create a LocalDateTime from epoch milliseconds.

        This is an internal factory method that bypasses validation.

        Args:
            instant: Milliseconds since 1970-01-01T00:00:00 UTC.

        Returns:
            A new LocalDateTime instance.
        """
        instance = object.__new__(cls)
        instance._instant = instant
        return instance

    @classmethod
    def combine(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        """Create a LocalDateTime from a LocalDate and a LocalTime.

        Examples:
            >>> LocalDateTime.combine(LocalDate(2019, 0, 1), LocalTime(8, 30))
            LocalDateTime [ 2019-01-01T08:30:00 ]
        """
        return cls(
            date.year,
            date.month,
            date.day,
            time.hours,
            time.minutes,
            time.seconds,
            time.milliseconds,
        )

    # Field decomposition

    def _ymd(self) -> tuple[int, int, int]:
        return ordinal_to_ymd(self._instant // MILLIS_PER_DAY + UNIX_EPOCH_ORDINAL)

    def _millis_of_day(self) -> int:
        return self._instant % MILLIS_PER_DAY

    @property
    def year(self) -> int:
        return self._ymd()[0]

    @property
    def month(self) -> int:
        """Return the zero-based month (0-11)."""
        return self._ymd()[1] - 1

    @property
    def day(self) -> int:
        return self._ymd()[2]

    @property
    def hour(self) -> int:
        return self._millis_of_day() // MILLIS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._millis_of_day() % MILLIS_PER_HOUR) // MILLIS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._millis_of_day() % MILLIS_PER_MINUTE) // MILLIS_PER_SECOND

    @property
    def millisecond(self) -> int:
        return self._instant % MILLIS_PER_SECOND

    @property
    def day_of_week(self) -> int:
        """Return the day of the week (0=Sunday, 6=Saturday).

        Examples:
            >>> LocalDateTime(2019, 0, 1).day_of_week  # Tuesday
            2
        """
        return ordinal_to_weekday(
            self._instant // MILLIS_PER_DAY + UNIX_EPOCH_ORDINAL
        )

    @property
    def instant(self) -> int:
        """Return the stored instant in milliseconds since the UTC epoch."""
        return self._instant

    def date(self) -> LocalDate:
        """Return the date portion as a LocalDate."""
        return LocalDate._from_ordinal(
            self._instant // MILLIS_PER_DAY + UNIX_EPOCH_ORDINAL
        )

    def time(self) -> LocalTime:
        """Return the time portion as a LocalTime."""
        return LocalTime._from_millis(self._millis_of_day())

    # Conversion

    def to_datetime(self) -> _datetime.datetime:
        """Return a naive ``datetime.datetime`` with the same wall-clock fields.

        Raises:
            ValidationError: If the year is outside what ``datetime``
                supports (1-9999).

        Examples:
            >>> LocalDateTime(2019, 0, 1, 8, 30, 0, 5).to_datetime()
            datetime.datetime(2019, 1, 1, 8, 30, 0, 5000)
        """
        year, month, day = self._ymd()
        if not (_datetime.MINYEAR <= year <= _datetime.MAXYEAR):
            raise ValidationError(
                f"year must be between {_datetime.MINYEAR} and "
                f"{_datetime.MAXYEAR} to convert to datetime, got {year}"
            )
        return _datetime.datetime(
            year,
            month,
            day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond * 1000,
        )

    # Formatting

    def to_iso_format(self) -> str:
        """Return the canonical ``YYYY-MM-DDTHH:MM:SS[.mmm]`` form.

        The milliseconds appear only when nonzero. The result carries no
        zone designator.

        Raises:
            FormatInvariantError: If the generic UTC formatter produced
                output without its zone suffix.

        Examples:
            >>> LocalDateTime(2019, 0, 1).to_iso_format()
            '2019-01-01T00:00:00'
            >>> LocalDateTime(2019, 0, 1, 0, 0, 0, 120).to_iso_format()
            '2019-01-01T00:00:00.120'
        """
        result = strip_zone_suffix(format_utc_instant(self._instant))
        if self.millisecond == 0:
            result = strip_expected_suffix(result, ".000")
        return result

    def to_plain_string(self) -> str:
        """Return a display form with a space instead of the ``T`` separator.

        Examples:
            >>> LocalDateTime(2019, 0, 1, 8, 30).to_plain_string()
            '2019-01-01 08:30:00'
        """
        return self.to_iso_format().replace("T", " ", 1)

    def to_json(self) -> dict[str, Any]:
        """Return the date-time as a JSON-serializable dictionary."""
        return {"_type": "LocalDateTime", "value": self.to_iso_format()}

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        """Check equality with another LocalDateTime.

        Two values are equal iff their instants are equal.
        """
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._instant == other._instant

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._instant < other._instant

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._instant <= other._instant

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._instant > other._instant

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._instant >= other._instant

    def __hash__(self) -> int:
        return hash(self._instant)

    def __repr__(self) -> str:
        return f"LocalDateTime [ {self.to_iso_format()} ]"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["LocalDateTime"]
