"""Tests for the calendar boundary helpers."""

import pytest

from calperiod.arithmetic.boundaries import (
    at_time,
    end_of_day,
    end_of_hour,
    end_of_iso_week,
    end_of_minute,
    end_of_month,
    end_of_second,
    end_of_week,
    end_of_year,
    start_of_day,
    start_of_hour,
    start_of_iso_week,
    start_of_minute,
    start_of_month,
    start_of_second,
    start_of_week,
    start_of_year,
)
from calperiod.core.duration import NANOSECOND
from calperiod.core.instant import Instant
from calperiod.errors import ValidationError
from calperiod.units.timezone import Timezone

SAMPLE = Instant(2020, 3, 1, 15, 15, 15, nanosecond=15)


class TestTimeOfDayBoundaries:
    """Tests for second, minute, hour and day boundaries."""

    def test_second(self) -> None:
        """Test second boundaries."""
        assert start_of_second(SAMPLE) == Instant(2020, 3, 1, 15, 15, 15)
        assert end_of_second(SAMPLE) == Instant(2020, 3, 1, 15, 15, 16) - NANOSECOND

    def test_minute(self) -> None:
        """Test minute boundaries."""
        assert start_of_minute(SAMPLE) == Instant(2020, 3, 1, 15, 15)
        assert end_of_minute(SAMPLE) == Instant(2020, 3, 1, 15, 16) - NANOSECOND

    def test_hour(self) -> None:
        """Test hour boundaries."""
        assert start_of_hour(SAMPLE) == Instant(2020, 3, 1, 15)
        assert end_of_hour(SAMPLE) == Instant(2020, 3, 1, 16) - NANOSECOND

    def test_day(self) -> None:
        """Test day boundaries."""
        assert start_of_day(SAMPLE) == Instant(2020, 3, 1)
        assert end_of_day(SAMPLE) == Instant(2020, 3, 2) - NANOSECOND

    def test_end_of_day_at_year_end(self) -> None:
        """Test end_of_day on December 31st."""
        assert end_of_day(Instant(2020, 12, 31, 8)) == Instant(2021, 1, 1) - NANOSECOND

    def test_start_is_idempotent(self) -> None:
        """Test that boundaries of boundaries are unchanged."""
        midnight = start_of_day(SAMPLE)
        assert start_of_day(midnight) == midnight
        assert end_of_day(end_of_day(SAMPLE)) == end_of_day(SAMPLE)


class TestWeekBoundaries:
    """Sunday-based weeks and Monday-based ISO weeks."""

    @pytest.mark.parametrize(
        ("t", "expected"),
        [
            (Instant(2020, 3, 30, 15, 15, 15, nanosecond=15), Instant(2020, 3, 29)),
            (Instant(2020, 3, 1, 15, 15, 15, nanosecond=15), Instant(2020, 3, 1)),
            (Instant(2020, 4, 8, 15, 15, 15, nanosecond=15), Instant(2020, 4, 5)),
        ],
    )
    def test_start_of_week(self, t: Instant, expected: Instant) -> None:
        """Test Sunday-based week starts."""
        assert start_of_week(t) == expected

    @pytest.mark.parametrize(
        ("t", "expected"),
        [
            (Instant(2020, 3, 30, 15, 15, 15, nanosecond=15), Instant(2020, 4, 5)),
            (Instant(2020, 3, 1, 15, 15, 15, nanosecond=15), Instant(2020, 3, 8)),
            (Instant(2020, 4, 8, 15, 15, 15, nanosecond=15), Instant(2020, 4, 12)),
        ],
    )
    def test_end_of_week(self, t: Instant, expected: Instant) -> None:
        """Test Sunday-based week ends."""
        assert end_of_week(t) == expected - NANOSECOND

    @pytest.mark.parametrize(
        ("t", "expected"),
        [
            (Instant(2020, 3, 30, 15, 15, 15, nanosecond=15), Instant(2020, 3, 30)),
            (Instant(2020, 3, 1, 15, 15, 15, nanosecond=15), Instant(2020, 2, 24)),
            (Instant(2020, 4, 8, 15, 15, 15, nanosecond=15), Instant(2020, 4, 6)),
        ],
    )
    def test_start_of_iso_week(self, t: Instant, expected: Instant) -> None:
        """Test Monday-based ISO week starts."""
        assert start_of_iso_week(t) == expected

    @pytest.mark.parametrize(
        ("t", "expected"),
        [
            (Instant(2020, 3, 30, 15, 15, 15, nanosecond=15), Instant(2020, 4, 6)),
            (Instant(2020, 3, 1, 15, 15, 15, nanosecond=15), Instant(2020, 3, 2)),
            (Instant(2020, 4, 8, 15, 15, 15, nanosecond=15), Instant(2020, 4, 13)),
        ],
    )
    def test_end_of_iso_week(self, t: Instant, expected: Instant) -> None:
        """Test Monday-based ISO week ends."""
        assert end_of_iso_week(t) == expected - NANOSECOND


class TestMonthAndYearBoundaries:
    """Tests for month and year boundaries."""

    def test_month(self) -> None:
        """Test month boundaries."""
        t = Instant(2020, 3, 15, 15, 15, 15, nanosecond=15)
        assert start_of_month(t) == Instant(2020, 3, 1)
        assert end_of_month(t) == Instant(2020, 4, 1) - NANOSECOND

    def test_end_of_february(self) -> None:
        """Test end_of_month in leap and common years."""
        assert end_of_month(Instant(2020, 2, 10)) == Instant(2020, 3, 1) - NANOSECOND
        assert end_of_month(Instant(2021, 2, 10)).day == 28

    def test_end_of_december(self) -> None:
        """Test end_of_month rolling into the next year."""
        assert end_of_month(Instant(2020, 12, 31, 23)) == Instant(2021, 1, 1) - NANOSECOND

    def test_year(self) -> None:
        """Test year boundaries."""
        t = Instant(2020, 3, 15, 15, 15, 15, nanosecond=15)
        assert start_of_year(t) == Instant(2020, 1, 1)
        assert end_of_year(t) == Instant(2021, 1, 1) - NANOSECOND


class TestBoundaryTimezones:
    """Boundaries are computed on the instant's own wall clock."""

    def test_keeps_timezone(self) -> None:
        """Test that results keep the input timezone."""
        tz = Timezone.from_hours(-5)
        t = Instant(2020, 3, 1, 22, timezone=tz)
        assert start_of_day(t) == Instant(2020, 3, 1, timezone=tz)
        assert start_of_day(t).timezone == tz
        assert end_of_year(t).timezone == tz

    def test_day_differs_from_utc_day(self) -> None:
        """Test that the local day, not the UTC day, is used."""
        # 22:00 at UTC-5 is already the next day in UTC.
        t = Instant(2020, 3, 1, 22, timezone=Timezone.from_hours(-5))
        assert start_of_day(t) == Instant(2020, 3, 1, 5)


class TestAtTime:
    """Tests for at_time."""

    def test_sets_wall_clock(self) -> None:
        """Test that at_time keeps the date."""
        assert at_time(SAMPLE, 8, 30, 0, 0) == Instant(2020, 3, 1, 8, 30)

    def test_rejects_out_of_range(self) -> None:
        """Test that invalid times raise ValidationError."""
        with pytest.raises(ValidationError):
            at_time(SAMPLE, 8, 60, 0, 0)
