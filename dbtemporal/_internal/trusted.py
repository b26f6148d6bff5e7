"""Trusted construction path for the protocol decoder.

Values decoded from the wire are already known to be valid, so these
factories build instances directly from their stored representation and
skip constructor validation. Application code should use the public
constructors instead.

This module is not part of the public API.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dbtemporal.core.date import LocalDate
    from dbtemporal.core.datetime import LocalDateTime
    from dbtemporal.core.duration import Duration
    from dbtemporal.core.time import LocalTime

logger = logging.getLogger(__name__)


def local_date_from_ordinal(ordinal: int) -> LocalDate:
    """Build a LocalDate from an ordinal day number (1 = 0001-01-01)."""
    from dbtemporal.core.date import LocalDate

    logger.debug("trusted LocalDate from ordinal %d", ordinal)
    return LocalDate._from_ordinal(ordinal)


def local_time_from_milliseconds(milliseconds: int) -> LocalTime:
    """Build a LocalTime from milliseconds since midnight."""
    from dbtemporal.core.time import LocalTime

    logger.debug("trusted LocalTime from %d ms", milliseconds)
    return LocalTime._from_millis(milliseconds)


def local_datetime_from_instant(instant: int) -> LocalDateTime:
    """Build a LocalDateTime from milliseconds since the UTC epoch."""
    from dbtemporal.core.datetime import LocalDateTime

    logger.debug("trusted LocalDateTime from instant %d", instant)
    return LocalDateTime._from_instant(instant)


def duration_from_components(months: int, days: int, milliseconds: int) -> Duration:
    """Build a Duration from decoded interval components."""
    from dbtemporal.core.duration import Duration

    logger.debug(
        "trusted Duration from (%d, %d, %d)", months, days, milliseconds
    )
    return Duration._from_components(months, days, milliseconds)


__all__ = [
    "local_date_from_ordinal",
    "local_time_from_milliseconds",
    "local_datetime_from_instant",
    "duration_from_components",
]
