"""Tests for the LocalDateTime class."""

from __future__ import annotations

import datetime

import pytest

from dbtemporal._internal.trusted import local_datetime_from_instant
from dbtemporal.core.date import LocalDate
from dbtemporal.core.datetime import LocalDateTime
from dbtemporal.core.time import LocalTime
from dbtemporal.errors import FormatInvariantError, ValidationError


class TestLocalDateTimeConstruction:
    """Test LocalDateTime construction."""

    def test_basic_construction(self) -> None:
        dt = LocalDateTime(2019, 5, 15, 14, 30, 45, 123)
        assert dt.year == 2019
        assert dt.month == 5
        assert dt.day == 15
        assert dt.hour == 14
        assert dt.minute == 30
        assert dt.second == 45
        assert dt.millisecond == 123

    def test_construction_with_defaults(self) -> None:
        dt = LocalDateTime(2019)
        assert (dt.year, dt.month, dt.day) == (2019, 0, 1)
        assert (dt.hour, dt.minute, dt.second, dt.millisecond) == (0, 0, 0, 0)

    def test_instant(self) -> None:
        assert LocalDateTime(1970, 0, 1).instant == 0
        assert LocalDateTime(2019, 0, 1).instant == 1_546_300_800_000
        assert LocalDateTime(1969, 11, 31, 23, 59, 59, 999).instant == -1

    def test_matches_stdlib_utc_timestamp(self) -> None:
        dt = LocalDateTime(2021, 6, 4, 18, 7, 9, 250)
        expected = datetime.datetime(
            2021, 7, 4, 18, 7, 9, 250_000, tzinfo=datetime.timezone.utc
        )
        assert dt.instant == int(expected.timestamp() * 1000)

    def test_before_epoch(self) -> None:
        dt = LocalDateTime(1900, 1, 28, 6, 0, 0, 1)
        assert (dt.year, dt.month, dt.day) == (1900, 1, 28)
        assert (dt.hour, dt.minute, dt.second, dt.millisecond) == (6, 0, 0, 1)

    def test_day_of_week(self) -> None:
        assert LocalDateTime(2019, 0, 1, 23, 59).day_of_week == 2  # Tuesday
        assert LocalDateTime(1969, 11, 28).day_of_week == 0  # Sunday

    def test_combine(self) -> None:
        dt = LocalDateTime.combine(LocalDate(2019, 0, 1), LocalTime(8, 30, 0, 5))
        assert dt == LocalDateTime(2019, 0, 1, 8, 30, 0, 5)

    def test_date_and_time_parts(self) -> None:
        dt = LocalDateTime(2019, 0, 31, 8, 30, 15, 5)
        assert dt.date() == LocalDate(2019, 0, 31)
        assert dt.time() == LocalTime(8, 30, 15, 5)


class TestLocalDateTimeValidation:
    """Test LocalDateTime validation."""

    def test_invalid_month(self) -> None:
        with pytest.raises(ValidationError, match="month must be between 0 and 11"):
            LocalDateTime(2019, 12, 1)

    def test_invalid_day(self) -> None:
        with pytest.raises(ValidationError, match="day must be between 1 and 28"):
            LocalDateTime(2019, 1, 29)

    def test_invalid_hour(self) -> None:
        with pytest.raises(ValidationError, match="hour must be between 0 and 23"):
            LocalDateTime(2019, 0, 1, 24)

    def test_invalid_minute(self) -> None:
        with pytest.raises(ValidationError, match="minute must be between 0 and 59"):
            LocalDateTime(2019, 0, 1, 0, 60)

    def test_invalid_second(self) -> None:
        with pytest.raises(ValidationError, match="second must be between 0 and 59"):
            LocalDateTime(2019, 0, 1, 0, 0, 60)

    def test_invalid_millisecond(self) -> None:
        with pytest.raises(
            ValidationError, match="millisecond must be between 0 and 999"
        ):
            LocalDateTime(2019, 0, 1, 0, 0, 0, 1000)

    def test_out_of_instant_range(self) -> None:
        with pytest.raises(ValidationError, match="outside the supported range"):
            LocalDateTime(300_000)


class TestLocalDateTimeFormatting:
    """Test canonical and plain string forms."""

    def test_canonical_has_no_zone(self) -> None:
        assert str(LocalDateTime(2019, 0, 1, 0, 0, 0, 0)) == "2019-01-01T00:00:00"

    def test_canonical_with_milliseconds(self) -> None:
        assert str(LocalDateTime(2019, 0, 1, 12, 30, 15, 250)) == "2019-01-01T12:30:15.250"
        assert str(LocalDateTime(2019, 0, 1, 12, 30, 15, 5)) == "2019-01-01T12:30:15.005"

    def test_plain_string(self) -> None:
        dt = LocalDateTime(2019, 0, 1, 8, 30)
        assert dt.to_plain_string() == "2019-01-01 08:30:00"
        assert "T" not in dt.to_plain_string()
        assert not dt.to_plain_string().endswith("Z")

    def test_repr(self) -> None:
        assert repr(LocalDateTime(2019, 0, 1)) == "LocalDateTime [ 2019-01-01T00:00:00 ]"

    def test_missing_zone_suffix_is_fatal(self, monkeypatch) -> None:
        """A generic formatter result without 'Z' is a defect, not input."""
        import dbtemporal.core.datetime as datetime_module

        monkeypatch.setattr(
            datetime_module,
            "format_utc_instant",
            lambda instant: "2019-01-01T00:00:00.000+00:00",
        )
        with pytest.raises(FormatInvariantError, match="unexpected ISO format"):
            str(LocalDateTime(2019, 0, 1))


class TestHostTimezoneIndependence:
    """Fields, formatting and equality never depend on the host timezone."""

    def test_fields(self, host_timezone: str) -> None:
        dt = LocalDateTime(2019, 0, 1, 0, 0, 0, 0)
        assert (dt.year, dt.month, dt.day, dt.hour) == (2019, 0, 1, 0)

    def test_canonical(self, host_timezone: str) -> None:
        assert str(LocalDateTime(2019, 0, 1, 0, 0, 0, 0)) == "2019-01-01T00:00:00"

    def test_instant(self, host_timezone: str) -> None:
        assert LocalDateTime(2019, 0, 1).instant == 1_546_300_800_000

    def test_equality(self, host_timezone: str) -> None:
        assert LocalDateTime(2019, 2, 10, 2, 30) == LocalDateTime(2019, 2, 10, 2, 30)
        assert LocalDateTime(2019, 2, 10, 2, 30) != LocalDateTime(2019, 2, 10, 3, 30)

    def test_to_datetime(self, host_timezone: str) -> None:
        assert LocalDateTime(2019, 0, 1, 8, 30, 0, 5).to_datetime() == (
            datetime.datetime(2019, 1, 1, 8, 30, 0, 5000)
        )


class TestLocalDateTimeComparison:
    """Test equality, ordering and hashing."""

    def test_equal_fields_equal(self) -> None:
        assert LocalDateTime(2019, 0, 1, 1, 2, 3, 4) == LocalDateTime(2019, 0, 1, 1, 2, 3, 4)

    def test_different_fields_unequal(self) -> None:
        base = LocalDateTime(2019, 0, 1, 1, 2, 3, 4)
        assert base != LocalDateTime(2019, 0, 1, 1, 2, 3, 5)
        assert base != LocalDateTime(2019, 0, 2, 1, 2, 3, 4)

    def test_equal_to_trusted_instance(self) -> None:
        assert local_datetime_from_instant(0) == LocalDateTime(1970, 0, 1)

    def test_ordering(self) -> None:
        earlier = LocalDateTime(2019, 0, 1)
        later = LocalDateTime(2019, 0, 1, 0, 0, 0, 1)
        assert earlier < later
        assert later > earlier
        assert earlier <= earlier
        assert later >= earlier

    def test_hash(self) -> None:
        values = {LocalDateTime(2019, 0, 1), LocalDateTime(2019, 0, 1)}
        assert len(values) == 1

    def test_not_equal_to_stdlib_datetime(self) -> None:
        assert LocalDateTime(2019, 0, 1) != datetime.datetime(2019, 1, 1)


class TestToDatetime:
    """Test conversion to datetime.datetime."""

    def test_naive(self) -> None:
        assert LocalDateTime(2019, 0, 1).to_datetime().tzinfo is None

    def test_year_out_of_range(self) -> None:
        dt = local_datetime_from_instant(-70_000_000_000_000)
        assert dt.year < 1
        with pytest.raises(ValidationError, match="to convert to datetime"):
            dt.to_datetime()
