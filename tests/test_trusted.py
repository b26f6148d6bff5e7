"""Tests for the trusted construction path used by the protocol decoder."""

from __future__ import annotations

import logging

from dbtemporal._internal.trusted import (
    duration_from_components,
    local_date_from_ordinal,
    local_datetime_from_instant,
    local_time_from_milliseconds,
)
from dbtemporal.core.date import LocalDate
from dbtemporal.core.datetime import LocalDateTime
from dbtemporal.core.duration import Duration
from dbtemporal.core.time import LocalTime


class TestTrustedFactories:
    """Trusted factories build instances from stored representations."""

    def test_local_date(self) -> None:
        d = local_date_from_ordinal(730120)  # 2000-01-01
        assert isinstance(d, LocalDate)
        assert d == LocalDate(2000, 0, 1)
        assert d.to_ordinal() == 730120

    def test_local_time(self) -> None:
        t = local_time_from_milliseconds(3_661_500)
        assert isinstance(t, LocalTime)
        assert t == LocalTime(1, 1, 1, 500)
        assert str(t) == "01:01:01.5"

    def test_local_datetime(self) -> None:
        dt = local_datetime_from_instant(1_546_300_800_000)
        assert isinstance(dt, LocalDateTime)
        assert dt == LocalDateTime(2019, 0, 1)
        assert str(dt) == "2019-01-01T00:00:00"

    def test_duration(self) -> None:
        d = duration_from_components(14, -3, 500)
        assert isinstance(d, Duration)
        assert d == Duration(14, -3, 500)
        assert str(d) == "1 year 2 months -3 days +00:00:00.5"

    def test_local_datetime_beyond_public_range(self) -> None:
        """The trusted path skips the range check of the public constructor."""
        dt = local_datetime_from_instant(10**18)
        assert dt.instant == 10**18
        assert dt.year > 275_760

    def test_debug_logging(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="dbtemporal._internal.trusted"):
            local_date_from_ordinal(1)
        assert "trusted LocalDate from ordinal 1" in caplog.text
