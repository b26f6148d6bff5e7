"""dbtemporal exception hierarchy.

All dbtemporal-specific exceptions inherit from TemporalError.
"""

from __future__ import annotations


class TemporalError(Exception):
    """Base exception for all dbtemporal errors."""

    pass


class ValidationError(TemporalError):
    """Invalid input values.

    Raised by the public constructors when a field is out of range.

    Examples:
        - Month value outside 0-11
        - Day value outside the valid range for the month
        - Hour value outside 0-23
    """

    pass


class FormatInvariantError(TemporalError):
    """A canonical formatting routine found a broken invariant.

    This signals a defect rather than bad input and is never recovered
    from inside the package.

    Examples:
        - The generic UTC formatter returned text without its zone suffix
        - Decomposing a duration produced an hour with the wrong sign
    """

    pass


__all__ = [
    "TemporalError",
    "ValidationError",
    "FormatInvariantError",
]
