"""Canonical string formatting.

Functions:
    format_canonical: Canonical string form of any dbtemporal value.
    format_utc_instant: Generic UTC ISO 8601 rendering of an instant.

Examples:
    >>> from dbtemporal import LocalDateTime
    >>> from dbtemporal.format import format_canonical

    >>> format_canonical(LocalDateTime(2019, 0, 1))
    '2019-01-01T00:00:00'
"""

from __future__ import annotations

from dbtemporal.format.iso8601 import format_canonical, format_utc_instant

__all__: list[str] = [
    "format_canonical",
    "format_utc_instant",
]
