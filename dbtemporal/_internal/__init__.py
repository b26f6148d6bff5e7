"""Internal utilities for dbtemporal.

This module contains private implementation details:
    - Calendar math (leap years, month lengths, ordinal day numbers)
    - Constants and unit conversions
    - Validation helpers
    - Trusted construction functions for the protocol decoder

Note: This module is not part of the public API.
"""

from __future__ import annotations

from dbtemporal._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_range,
    validate_time,
)

__all__: list[str] = [
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_time",
]
