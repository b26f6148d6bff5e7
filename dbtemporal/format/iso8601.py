"""ISO 8601 formatting.

This module provides the generic UTC formatter that LocalDateTime builds its
canonical form on, plus a dispatcher returning the canonical string of any
dbtemporal value.

Functions:
    format_utc_instant: Format epoch milliseconds as a UTC ISO 8601 string.
    strip_expected_suffix: Remove a suffix, checking it is present.
    strip_zone_suffix: Remove the ``Z`` designator, checking it is present.
    format_canonical: Canonical string form of a dbtemporal value.

The generic formatter mirrors what a UTC calendar library emits: it always
includes milliseconds and always ends with the ``Z`` zone designator.

Examples:
    >>> format_utc_instant(0)
    '1970-01-01T00:00:00.000Z'

    >>> strip_zone_suffix(format_utc_instant(1_500))
    '1970-01-01T00:00:01.500'
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from dbtemporal._internal.calendar import ordinal_to_ymd
from dbtemporal._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    UNIX_EPOCH_ORDINAL,
)
from dbtemporal.errors import FormatInvariantError

if TYPE_CHECKING:
    from dbtemporal.core.date import LocalDate
    from dbtemporal.core.datetime import LocalDateTime
    from dbtemporal.core.duration import Duration
    from dbtemporal.core.time import LocalTime

logger = logging.getLogger(__name__)

# Type alias for the value types
TemporalType = Union["LocalDate", "LocalTime", "LocalDateTime", "Duration"]

UTC_DESIGNATOR = "Z"


def format_utc_instant(instant: int) -> str:
    """Format an epoch-millisecond instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    The instant is always read as UTC; the host timezone is never
    consulted.

    Args:
        instant: Milliseconds since 1970-01-01T00:00:00 UTC.

    Returns:
        ISO 8601 string with millisecond precision and a ``Z`` suffix.

    Examples:
        >>> format_utc_instant(1_546_300_800_000)
        '2019-01-01T00:00:00.000Z'
        >>> format_utc_instant(-1)
        '1969-12-31T23:59:59.999Z'
    """
    days, millis = divmod(instant, MILLIS_PER_DAY)
    year, month, day = ordinal_to_ymd(days + UNIX_EPOCH_ORDINAL)

    if year >= 0:
        date_str = f"{year:04d}-{month:02d}-{day:02d}"
    else:
        date_str = f"{year:05d}-{month:02d}-{day:02d}"

    hour, millis = divmod(millis, MILLIS_PER_HOUR)
    minute, millis = divmod(millis, MILLIS_PER_MINUTE)
    second, millis = divmod(millis, MILLIS_PER_SECOND)

    return (
        f"{date_str}T{hour:02d}:{minute:02d}:{second:02d}.{millis:03d}"
        f"{UTC_DESIGNATOR}"
    )


def strip_expected_suffix(formatted: str, suffix: str) -> str:
    """Remove a suffix the generic formatter is known to emit.

    Args:
        formatted: Output of :func:`format_utc_instant` or a slice of it.
        suffix: The suffix that must be present.

    Returns:
        The string without the suffix.

    Raises:
        FormatInvariantError: If the string does not end with the suffix.
    """
    if not formatted.endswith(suffix):
        logger.error(
            "unexpected ISO format: %r (expected suffix %r)", formatted, suffix
        )
        raise FormatInvariantError(f"unexpected ISO format: {formatted}")
    return formatted[: -len(suffix)]


def strip_zone_suffix(formatted: str) -> str:
    """Remove the trailing ``Z`` from a generic UTC formatter result."""
    return strip_expected_suffix(formatted, UTC_DESIGNATOR)


def format_canonical(value: TemporalType) -> str:
    """Return the canonical string form of a dbtemporal value.

    Args:
        value: A LocalDate, LocalTime, LocalDateTime or Duration.

    Returns:
        The canonical string, identical to ``str(value)``.

    Raises:
        TypeError: If value is not a dbtemporal value type.

    Examples:
        >>> from dbtemporal import Duration, LocalDate
        >>> format_canonical(LocalDate(2019, 0, 31))
        '2019-01-31'
        >>> format_canonical(Duration(14))
        '1 year 2 months'
    """
    # Import here to avoid circular imports
    from dbtemporal.core.date import LocalDate
    from dbtemporal.core.datetime import LocalDateTime
    from dbtemporal.core.duration import Duration
    from dbtemporal.core.time import LocalTime

    if isinstance(value, (LocalDate, LocalTime, LocalDateTime)):
        return value.to_iso_format()
    elif isinstance(value, Duration):
        return value.to_interval_format()
    raise TypeError(
        "expected LocalDate, LocalTime, LocalDateTime, or Duration, "
        f"got {type(value).__name__}"
    )


__all__ = [
    "format_utc_instant",
    "strip_expected_suffix",
    "strip_zone_suffix",
    "format_canonical",
]
