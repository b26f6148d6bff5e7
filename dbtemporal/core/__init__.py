"""Core temporal types.

This module provides the value types exchanged with the database:
    - LocalDate: Calendar date in the proleptic Gregorian calendar
    - LocalTime: Wall-clock time of day with millisecond precision
    - LocalDateTime: Wall-clock date and time, no timezone
    - Duration: Interval of months, days and milliseconds
"""

from __future__ import annotations

from dbtemporal.core.date import LocalDate
from dbtemporal.core.datetime import LocalDateTime
from dbtemporal.core.duration import Duration
from dbtemporal.core.time import LocalTime

__all__: list[str] = [
    "LocalDate",
    "LocalDateTime",
    "Duration",
    "LocalTime",
]
