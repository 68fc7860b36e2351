"""Calendar boundary helpers.

Each ``start_of_*`` function truncates an instant to the beginning of the
enclosing calendar unit; each ``end_of_*`` function returns the last
nanosecond of that unit. Results keep the input's timezone, and units are
computed on the wall clock of that timezone.

Weeks come in two flavours: ``start_of_week`` / ``end_of_week`` run
Sunday through Saturday, ``start_of_iso_week`` / ``end_of_iso_week`` run
Monday through Sunday.
"""

from __future__ import annotations

from calperiod.core.duration import NANOSECOND
from calperiod.core.instant import Instant


def start_of_second(t: Instant) -> Instant:
    return t.replace_time(t.hour, t.minute, t.second)


def end_of_second(t: Instant) -> Instant:
    return t.replace_time(t.hour, t.minute, t.second, 999_999_999)


def start_of_minute(t: Instant) -> Instant:
    return t.replace_time(t.hour, t.minute)


def end_of_minute(t: Instant) -> Instant:
    return t.replace_time(t.hour, t.minute, 59, 999_999_999)


def start_of_hour(t: Instant) -> Instant:
    return t.replace_time(t.hour)


def end_of_hour(t: Instant) -> Instant:
    return t.replace_time(t.hour, 59, 59, 999_999_999)


def start_of_day(t: Instant) -> Instant:
    """Return midnight of the instant's calendar day.

    Examples:
        >>> start_of_day(Instant(2020, 3, 1, 15, 15, 15, nanosecond=15))
        Instant(2020, 3, 1, 0, 0, 0, nanosecond=0, timezone=UTC)
    """
    return t.replace_time()


def end_of_day(t: Instant) -> Instant:
    """Return the last nanosecond before the next midnight.

    Examples:
        >>> end_of_day(Instant(2020, 3, 1, 15))
        Instant(2020, 3, 1, 23, 59, 59, nanosecond=999999999, timezone=UTC)
    """
    return start_of_day(t).add_date(days=1) - NANOSECOND


def start_of_week(t: Instant) -> Instant:
    """Return midnight of the Sunday starting the instant's week."""
    return start_of_day(t.add_date(days=-((t.weekday + 1) % 7)))


def end_of_week(t: Instant) -> Instant:
    """Return the last nanosecond of the Saturday ending the instant's week."""
    return end_of_day(t.add_date(days=6 - (t.weekday + 1) % 7))


def start_of_iso_week(t: Instant) -> Instant:
    """Return midnight of the Monday starting the instant's ISO week."""
    return start_of_day(t.add_date(days=-t.weekday))


def end_of_iso_week(t: Instant) -> Instant:
    """Return the last nanosecond of the Sunday ending the instant's ISO week."""
    return end_of_day(t.add_date(days=6 - t.weekday))


def start_of_month(t: Instant) -> Instant:
    return start_of_day(t.add_date(days=1 - t.day))


def end_of_month(t: Instant) -> Instant:
    return start_of_month(t).add_date(months=1) - NANOSECOND


def start_of_year(t: Instant) -> Instant:
    return Instant(t.year, 1, 1, timezone=t.timezone)


def end_of_year(t: Instant) -> Instant:
    return start_of_year(t).add_date(years=1) - NANOSECOND


def at_time(t: Instant, hour: int, minute: int, second: int, nanosecond: int) -> Instant:
    """Return the instant's calendar date at the given wall-clock time.

    Raises:
        ValidationError: If a time component is out of range.
    """
    return t.replace_time(hour, minute, second, nanosecond)


__all__ = [
    "start_of_second",
    "end_of_second",
    "start_of_minute",
    "end_of_minute",
    "start_of_hour",
    "end_of_hour",
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_iso_week",
    "end_of_iso_week",
    "start_of_month",
    "end_of_month",
    "start_of_year",
    "end_of_year",
    "at_time",
]
