"""Duration class representing a calendar-aware interval.

This module provides the Duration class, the client-side counterpart of a
database interval: whole months, whole days and milliseconds kept apart
because months and days have no fixed length.
"""

from __future__ import annotations

import logging
from typing import Any

from dbtemporal._internal.constants import (
    MICROS_PER_MILLI,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MONTHS_PER_YEAR,
)
from dbtemporal.errors import FormatInvariantError

logger = logging.getLogger(__name__)


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Divide truncating toward zero; the remainder takes the dividend's sign.

    Examples:
        >>> _trunc_divmod(-14, 12)
        (-1, -2)
    """
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _unit(value: int, name: str) -> str:
    return f"{value} {name}{'' if abs(value) == 1 else 's'}"


class Duration:
    """A calendar-aware span of time.

    Duration stores three independent signed components: months, days and
    milliseconds. They are never normalized against each other, so one
    month stays one month rather than becoming 30 days, and each component
    keeps its own sign.

    Attributes:
        months: The months component.
        days: The days component.
        milliseconds: The milliseconds component.

    Examples:
        >>> str(Duration())
        '00:00:00'
        >>> str(Duration(14))
        '1 year 2 months'
        >>> str(Duration(0, 0, 3_661_500))
        '01:01:01.5'
        >>> str(Duration(-1, 3, -500))
        '-1 month +3 days -00:00:00.5'
    """

    __slots__ = ("_months", "_days", "_milliseconds")

    def __init__(self, months: int = 0, days: int = 0, milliseconds: int = 0) -> None:
        """Create a Duration; the components are stored verbatim."""
        self._months: int = months
        self._days: int = days
        self._milliseconds: int = milliseconds

    @classmethod
    def _from_components(cls, months: int, days: int, milliseconds: int) -> Duration:
        """Create a Duration from decoded interval components.

        This is an internal factory method used by the trusted
        construction path.
        """
        instance = object.__new__(cls)
        instance._months = months
        instance._days = days
        instance._milliseconds = milliseconds
        return instance

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def milliseconds(self) -> int:
        return self._milliseconds

    def is_zero(self) -> bool:
        """Return True if all three components are zero."""
        return self._months == 0 and self._days == 0 and self._milliseconds == 0

    def to_interval_format(self) -> str:
        """Return the verbose interval form of this duration.

        Calendar units come first (``years``, ``months``, ``days``), each
        only when nonzero and pluralized unless its magnitude is one. A
        positive unit that follows a negative one gets an explicit ``+``.
        A clock segment ``HH:MM:SS[.ffffff]`` follows when there is no
        calendar unit or any time component is nonzero; the fraction is
        rendered in microseconds with trailing zeros stripped.

        Returns:
            The canonical interval string.

        Raises:
            FormatInvariantError: If splitting the milliseconds produced an
                hour count whose sign contradicts the input.

        Examples:
            >>> Duration(0, 1).to_interval_format()
            '1 day'
            >>> Duration(25, -2, 90_000).to_interval_format()
            '2 years 1 month -2 days +00:01:30'
        """
        buf: list[str] = []

        years, months = _trunc_divmod(self._months, MONTHS_PER_YEAR)

        hours, rest = _trunc_divmod(self._milliseconds, MILLIS_PER_HOUR)
        if _sign(hours) not in (0, _sign(self._milliseconds)):
            logger.error(
                "interval hour sign mismatch: %d ms split into %d hours",
                self._milliseconds,
                hours,
            )
            raise FormatInvariantError("interval out of range")
        minutes, rest = _trunc_divmod(rest, MILLIS_PER_MINUTE)
        seconds, frac = _trunc_divmod(rest, MILLIS_PER_SECOND)

        is_before = False
        for value, name in ((years, "year"), (months, "month"), (self._days, "day")):
            if not value:
                continue
            prefix = "+" if is_before and value > 0 else ""
            buf.append(prefix + _unit(value, name))
            is_before = value < 0

        if not buf or hours or minutes or seconds or frac:
            negative = hours < 0 or minutes < 0 or seconds < 0 or frac < 0
            if negative:
                sign = "-"
            elif is_before:
                sign = "+"
            else:
                sign = ""
            clock = (
                f"{sign}{abs(hours):02d}:{abs(minutes):02d}:{abs(seconds):02d}"
            )
            if frac:
                clock += "." + f"{abs(frac) * MICROS_PER_MILLI:06d}".rstrip("0")
            buf.append(clock)

        return " ".join(buf)

    def to_json(self) -> dict[str, Any]:
        """Return the duration as a JSON-serializable dictionary.

        Examples:
            >>> Duration(14, 3).to_json()["value"]
            '1 year 2 months 3 days'
        """
        return {
            "_type": "Duration",
            "value": self.to_interval_format(),
            "months": self._months,
            "days": self._days,
            "milliseconds": self._milliseconds,
        }

    def __eq__(self, other: object) -> bool:
        """Check equality component by component.

        ``Duration(1)`` and ``Duration(0, 30)`` are different values.
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return (
            self._months == other._months
            and self._days == other._days
            and self._milliseconds == other._milliseconds
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._months, self._days, self._milliseconds))

    def __repr__(self) -> str:
        return f"Duration [ {self.to_interval_format()} ]"

    def __str__(self) -> str:
        return self.to_interval_format()


__all__ = ["Duration"]
