"""Tests for the Duration class."""

import datetime

import pytest

from calperiod.core.duration import DAY, HOUR, NANOSECOND, SECOND, Duration


class TestDurationConstruction:
    """Tests for Duration constructors and factories."""

    def test_components_are_summed(self) -> None:
        """Test that every keyword component adds to the total."""
        d = Duration(days=1, hours=2, minutes=3, seconds=4, milliseconds=5, microseconds=6, nanoseconds=7)
        expected = (
            86_400_000_000_000
            + 2 * 3_600_000_000_000
            + 3 * 60_000_000_000
            + 4 * 1_000_000_000
            + 5 * 1_000_000
            + 6 * 1_000
            + 7
        )
        assert d.total_nanoseconds == expected

    def test_negative_components(self) -> None:
        """Test that components may be negative and cancel out."""
        assert Duration(seconds=1, nanoseconds=-1).total_nanoseconds == 999_999_999
        assert Duration(hours=-1).is_negative

    def test_factories_match_constants(self) -> None:
        """Test the from_* factories against the unit constants."""
        assert Duration.from_days(1) == DAY
        assert Duration.from_hours(1) == HOUR
        assert Duration.from_seconds(1) == SECOND
        assert Duration.from_nanoseconds(1) == NANOSECOND
        assert Duration.from_minutes(90) == Duration(hours=1, minutes=30)
        assert Duration.from_milliseconds(1500) == Duration(seconds=1, milliseconds=500)
        assert Duration.from_microseconds(1) == Duration(nanoseconds=1000)

    def test_zero(self) -> None:
        """Test the zero duration."""
        assert Duration.zero().is_zero
        assert not Duration.zero()
        assert NANOSECOND


class TestDurationArithmetic:
    """Tests for Duration operators."""

    def test_add_and_subtract(self) -> None:
        """Test addition and subtraction of durations."""
        assert SECOND + SECOND == Duration(seconds=2)
        assert SECOND - NANOSECOND == Duration(nanoseconds=999_999_999)

    def test_sum_of_durations(self) -> None:
        """Test that sum() works starting from 0."""
        assert sum([HOUR, HOUR, HOUR]) == Duration(hours=3)

    def test_negation_and_abs(self) -> None:
        """Test unary minus, plus and abs()."""
        assert -SECOND == Duration(seconds=-1)
        assert abs(Duration(minutes=-5)) == Duration(minutes=5)
        assert abs(Duration(minutes=5)) == Duration(minutes=5)
        assert +HOUR == HOUR

    def test_multiply(self) -> None:
        """Test multiplication by an integer on either side."""
        assert HOUR * 3 == Duration(hours=3)
        assert 2 * NANOSECOND == Duration(nanoseconds=2)

    def test_multiply_by_float_is_rejected(self) -> None:
        """Test that non-integer factors raise TypeError."""
        with pytest.raises(TypeError):
            HOUR * 1.5

    def test_add_non_duration_is_rejected(self) -> None:
        """Test that adding a foreign type raises TypeError."""
        with pytest.raises(TypeError):
            HOUR + 5

    def test_ordering(self) -> None:
        """Test comparison operators."""
        assert NANOSECOND < SECOND < HOUR < DAY
        assert DAY >= Duration(hours=24)
        assert sorted([DAY, NANOSECOND, HOUR]) == [NANOSECOND, HOUR, DAY]

    def test_hash_follows_equality(self) -> None:
        """Test that equal values hash equally."""
        assert hash(Duration(minutes=60)) == hash(HOUR)
        assert len({Duration(minutes=60), HOUR}) == 1


class TestDurationConversion:
    """Tests for timedelta interop and string forms."""

    def test_from_timedelta(self) -> None:
        """Test conversion from a timedelta."""
        td = datetime.timedelta(days=1, seconds=5, microseconds=7)
        assert Duration.from_timedelta(td) == Duration(days=1, seconds=5, microseconds=7)

    def test_from_negative_timedelta(self) -> None:
        """Test conversion from a negative timedelta."""
        assert Duration.from_timedelta(datetime.timedelta(minutes=-1)) == Duration(minutes=-1)

    def test_to_timedelta_truncates_nanoseconds(self) -> None:
        """Test that sub-microsecond precision is dropped."""
        assert Duration(microseconds=3, nanoseconds=999).to_timedelta() == datetime.timedelta(microseconds=3)
        assert Duration(nanoseconds=-1500).to_timedelta() == datetime.timedelta(microseconds=-1)

    def test_total_seconds(self) -> None:
        """Test total_seconds as a float."""
        assert Duration(hours=1, milliseconds=500).total_seconds == 3600.5

    @pytest.mark.parametrize(
        ("duration", "expected"),
        [
            (Duration.zero(), "0s"),
            (NANOSECOND, "1ns"),
            (-NANOSECOND, "-1ns"),
            (Duration(milliseconds=1500), "1.5s"),
            (Duration(days=1, hours=2, seconds=30), "1d2h30s"),
            (Duration(minutes=-15), "-15m"),
        ],
    )
    def test_str(self, duration: Duration, expected: str) -> None:
        """Test the compact string form."""
        assert str(duration) == expected

    def test_repr(self) -> None:
        """Test the repr form."""
        assert repr(SECOND) == "Duration(nanoseconds=1000000000)"
