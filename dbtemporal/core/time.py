"""LocalTime class representing a time of day.

This module provides the LocalTime class for representing wall-clock
time-of-day values with millisecond precision.
"""

from __future__ import annotations

from typing import Any

from dbtemporal._internal.constants import (
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from dbtemporal._internal.validation import validate_time


class LocalTime:
    """A wall-clock time of day with millisecond precision.

    LocalTime represents the time portion of a day, from midnight
    (00:00:00) to 23:59:59.999. It carries no date and no timezone.

    The internal representation stores the total milliseconds since
    midnight in a single ``_millis`` slot.

    Attributes:
        hours: The hour component (0-23).
        minutes: The minute component (0-59).
        seconds: The second component (0-59).
        milliseconds: The millisecond component (0-999).

    Examples:
        >>> t = LocalTime(14, 30, 45)
        >>> t.hours, t.minutes, t.seconds
        (14, 30, 45)
        >>> str(LocalTime(23, 59, 59, 999))
        '23:59:59.999'
        >>> str(LocalTime(12, 0, 0, 500))
        '12:00:00.5'
    """

    __slots__ = ("_millis",)

    def __init__(
        self,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
    ) -> None:
        """Create a LocalTime from component parts.

        Args:
            hours: The hour (0-23).
            minutes: The minute (0-59).
            seconds: The second (0-59).
            milliseconds: The millisecond (0-999).

        Raises:
            ValidationError: If any component is out of range. Fields are
                checked independently; nothing carries over.

        Examples:
            >>> LocalTime(24, 0, 0, 0)
            Traceback (most recent call last):
            ...
            ValidationError: hours must be between 0 and 23, got 24
        """
        validate_time(hours, minutes, seconds, milliseconds)

        self._millis: int = (
            hours * MILLIS_PER_HOUR
            + minutes * MILLIS_PER_MINUTE
            + seconds * MILLIS_PER_SECOND
            + milliseconds
        )

    @classmethod
    def _from_millis(cls, millis: int) -> LocalTime:
        """Create a LocalTime from milliseconds since midnight.

        This is an internal factory method that bypasses validation
        for use when the value is known to be valid.

        Args:
            millis: Milliseconds since midnight [0, 86_400_000).

        Returns:
            A new LocalTime instance.
        """
        instance = object.__new__(cls)
        instance._millis = millis
        return instance

    @property
    def hours(self) -> int:
        return self._millis // MILLIS_PER_HOUR

    @property
    def minutes(self) -> int:
        return (self._millis % MILLIS_PER_HOUR) // MILLIS_PER_MINUTE

    @property
    def seconds(self) -> int:
        return (self._millis % MILLIS_PER_MINUTE) // MILLIS_PER_SECOND

    @property
    def milliseconds(self) -> int:
        """Return the milliseconds within the current second (0-999)."""
        return self._millis % MILLIS_PER_SECOND

    @property
    def total_milliseconds(self) -> int:
        """Return the total milliseconds since midnight.

        Examples:
            >>> LocalTime(0, 0, 1).total_milliseconds
            1000
        """
        return self._millis

    def to_iso_format(self) -> str:
        """Return the time as ``HH:MM:SS[.fff]``.

        The fraction appears only when milliseconds is nonzero, with
        trailing zeros stripped.

        Examples:
            >>> LocalTime(9, 5, 0).to_iso_format()
            '09:05:00'
            >>> LocalTime(9, 5, 0, 5).to_iso_format()
            '09:05:00.005'
        """
        repr_ = f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"
        millis = self.milliseconds
        if millis:
            repr_ += "." + f"{millis:03d}".rstrip("0")
        return repr_

    def to_json(self) -> dict[str, Any]:
        """Return the time as a JSON-serializable dictionary."""
        return {"_type": "LocalTime", "value": self.to_iso_format()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._millis == other._millis

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._millis < other._millis

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._millis <= other._millis

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._millis > other._millis

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._millis >= other._millis

    def __hash__(self) -> int:
        return hash(self._millis)

    def __repr__(self) -> str:
        return f"LocalTime [ {self.to_iso_format()} ]"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["LocalTime"]
