"""Internal constants for dbtemporal.

These constants define the limits and unit conversions used throughout
the package. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR  # 86_400_000

MICROS_PER_MILLI: int = 1_000

MONTHS_PER_YEAR: int = 12

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Ordinal of 1970-01-01 (ordinal 1 = 0001-01-01)
UNIX_EPOCH_ORDINAL: int = 719_163

# Largest instant distance from the epoch a UTC calendar primitive accepts
# (100 million days either side)
MAX_INSTANT_MILLIS: int = 100_000_000 * MILLIS_PER_DAY
MIN_INSTANT_MILLIS: int = -MAX_INSTANT_MILLIS


__all__ = [
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "MICROS_PER_MILLI",
    "MONTHS_PER_YEAR",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
    "MAX_INSTANT_MILLIS",
    "MIN_INSTANT_MILLIS",
]
