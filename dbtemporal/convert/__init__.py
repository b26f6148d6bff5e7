"""Temporal conversion utilities.

This module provides functions for converting temporal objects to other
representations:
    - JSON serialization

Examples:
    >>> from dbtemporal import LocalDate
    >>> from dbtemporal.convert import to_json

    >>> to_json(LocalDate(2019, 0, 31))
    {'_type': 'LocalDate', 'value': '2019-01-31'}
"""

from __future__ import annotations

from dbtemporal.convert.json import json_default, to_json

__all__ = [
    "to_json",
    "json_default",
]
