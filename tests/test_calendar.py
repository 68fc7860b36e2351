"""Tests for the internal calendar arithmetic."""

import datetime

import pytest

from calperiod._internal.calendar import (
    days_in_month,
    is_leap_year,
    mjd_to_weekday,
    mjd_to_ymd,
    validate_date,
    ymd_to_mjd,
)


class TestLeapYears:
    """Tests for leap year and month length rules."""

    @pytest.mark.parametrize(
        ("year", "leap"),
        [(2000, True), (1900, False), (2024, True), (2023, False), (0, True), (-4, True), (-100, False)],
    )
    def test_is_leap_year(self, year: int, leap: bool) -> None:
        """Test Gregorian leap year rules."""
        assert is_leap_year(year) is leap

    def test_days_in_month(self) -> None:
        """Test month lengths, including February."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31

    def test_days_in_month_rejects_bad_month(self) -> None:
        """Test that an invalid month raises ValueError."""
        with pytest.raises(ValueError):
            days_in_month(2023, 13)


class TestModifiedJulianDay:
    """Tests for MJD conversions."""

    def test_reference_points(self) -> None:
        """Test known Modified Julian Day numbers."""
        assert ymd_to_mjd(1858, 11, 17) == 0
        assert ymd_to_mjd(1970, 1, 1) == 40587
        assert mjd_to_ymd(0) == (1858, 11, 17)
        assert mjd_to_ymd(40587) == (1970, 1, 1)

    @pytest.mark.parametrize(
        "date",
        [
            datetime.date(1, 1, 1),
            datetime.date(1600, 2, 29),
            datetime.date(1999, 12, 31),
            datetime.date(2000, 3, 1),
            datetime.date(2024, 2, 29),
            datetime.date(9999, 12, 31),
        ],
    )
    def test_matches_standard_library_ordinals(self, date: datetime.date) -> None:
        """Test day numbering against datetime.date."""
        mjd = ymd_to_mjd(date.year, date.month, date.day)
        assert mjd - ymd_to_mjd(1, 1, 1) == date.toordinal() - 1
        assert mjd_to_ymd(mjd) == (date.year, date.month, date.day)
        assert mjd_to_weekday(mjd) == date.weekday()

    def test_negative_years(self) -> None:
        """Test dates before year 1."""
        # Year 0 is a leap year, so 0000-03-01 follows 0000-02-29.
        assert ymd_to_mjd(0, 3, 1) - ymd_to_mjd(0, 2, 28) == 2
        assert ymd_to_mjd(1, 1, 1) - ymd_to_mjd(0, 1, 1) == 366
        assert mjd_to_ymd(ymd_to_mjd(-9999, 1, 1)) == (-9999, 1, 1)

    def test_day_overflow_counts_into_next_month(self) -> None:
        """Test that out-of-range days count on linearly."""
        assert ymd_to_mjd(2023, 1, 32) == ymd_to_mjd(2023, 2, 1)
        assert ymd_to_mjd(2023, 2, 29) == ymd_to_mjd(2023, 3, 1)
        assert ymd_to_mjd(2023, 3, 0) == ymd_to_mjd(2023, 2, 28)


class TestValidateDate:
    """Tests for validate_date."""

    def test_valid_date(self) -> None:
        """Test that valid dates pass validation."""
        validate_date(2024, 2, 29)

    @pytest.mark.parametrize(
        ("year", "month", "day"),
        [(2023, 2, 29), (2023, 0, 1), (2023, 1, 0), (10_000, 1, 1), (-10_000, 1, 1)],
    )
    def test_invalid_dates(self, year: int, month: int, day: int) -> None:
        """Test that invalid dates raise ValueError."""
        with pytest.raises(ValueError):
            validate_date(year, month, day)
