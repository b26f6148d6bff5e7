"""dbtemporal: temporal value types for a database client.

dbtemporal provides immutable date, time, date-time and interval values
that mirror a database server's temporal types. "Local" values carry no
timezone: they are wall-clock readings and never depend on the host's
timezone configuration.

Core Types:
    LocalDate: Calendar date (year, zero-based month, day)
    LocalTime: Time of day (hours, minutes, seconds, milliseconds)
    LocalDateTime: Combined wall-clock date and time
    Duration: Interval of months, days and milliseconds

Format Functions:
    format_canonical: Canonical string form of any value

Exceptions:
    TemporalError: Base exception
    ValidationError: Invalid input values
    FormatInvariantError: Canonical formatting invariant violated

Example:
    >>> from dbtemporal import Duration, LocalDate, LocalDateTime
    >>> str(LocalDate(2019, 0, 31))
    '2019-01-31'
    >>> str(LocalDateTime(2019, 0, 1))
    '2019-01-01T00:00:00'
    >>> str(Duration(14))
    '1 year 2 months'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from dbtemporal.core.date import LocalDate
from dbtemporal.core.datetime import LocalDateTime
from dbtemporal.core.duration import Duration
from dbtemporal.core.time import LocalTime

# Exceptions
from dbtemporal.errors import (
    FormatInvariantError,
    TemporalError,
    ValidationError,
)

# Format functions
from dbtemporal.format import format_canonical

__all__: list[str] = [
    "__version__",
    # Core types
    "LocalDate",
    "LocalDateTime",
    "Duration",
    "LocalTime",
    # Exceptions
    "TemporalError",
    "ValidationError",
    "FormatInvariantError",
    # Format functions
    "format_canonical",
]
