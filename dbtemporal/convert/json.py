"""JSON serialization for temporal objects.

This module provides functions for converting dbtemporal values to
JSON-serializable dictionaries.

Functions:
    to_json: Convert a temporal object to a JSON-serializable dict.
    json_default: ``default=`` hook for ``json.dumps``.

The JSON format uses the canonical string with a type tag:

    {"_type": "LocalDateTime", "value": "2019-01-01T00:00:00"}
    {"_type": "LocalDate", "value": "2019-01-31"}
    {"_type": "LocalTime", "value": "14:30:00.5"}
    {"_type": "Duration", "value": "1 year 2 months",
     "months": 14, "days": 0, "milliseconds": 0}

Examples:
    >>> import json
    >>> from dbtemporal import LocalDate
    >>> from dbtemporal.convert import json_default

    >>> json.dumps({"d": LocalDate(2019, 0, 31)}, default=json_default)
    '{"d": {"_type": "LocalDate", "value": "2019-01-31"}}'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from dbtemporal.core.date import LocalDate
    from dbtemporal.core.datetime import LocalDateTime
    from dbtemporal.core.duration import Duration
    from dbtemporal.core.time import LocalTime

# Type alias for temporal objects
TemporalType = Union["LocalDate", "LocalTime", "LocalDateTime", "Duration"]


def to_json(value: TemporalType) -> dict[str, Any]:
    """Convert a temporal object to a JSON-serializable dictionary.

    Args:
        value: A LocalDate, LocalTime, LocalDateTime, or Duration.

    Returns:
        A dictionary with a ``_type`` tag and the canonical ``value``.

    Raises:
        TypeError: If value is not a supported temporal type.

    Examples:
        >>> from dbtemporal import Duration, LocalTime
        >>> to_json(LocalTime(14, 30))
        {'_type': 'LocalTime', 'value': '14:30:00'}
        >>> to_json(Duration(0, 2))["value"]
        '2 days'
    """
    # Import here to avoid circular imports
    from dbtemporal.core.date import LocalDate
    from dbtemporal.core.datetime import LocalDateTime
    from dbtemporal.core.duration import Duration
    from dbtemporal.core.time import LocalTime

    if isinstance(value, (LocalDate, LocalTime, LocalDateTime, Duration)):
        return value.to_json()
    raise TypeError(
        "expected LocalDate, LocalTime, LocalDateTime, or Duration, "
        f"got {type(value).__name__}"
    )


def json_default(obj: Any) -> dict[str, Any]:
    """Serialize dbtemporal values inside ``json.dumps(..., default=...)``.

    Raises:
        TypeError: For any other object, as ``json.dumps`` expects.
    """
    return to_json(obj)


__all__ = [
    "to_json",
    "json_default",
]
