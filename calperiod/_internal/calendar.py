"""Proleptic Gregorian calendar arithmetic.

Dates are counted as Modified Julian Day numbers (MJD 0 = 1858-11-17).
The conversions use the era-based civil-day algorithm, which is exact for
negative (astronomical) years as well, so no special casing is needed
before year 1.

This module is not part of the public API.
"""

from __future__ import annotations

from calperiod._internal.constants import DAYS_IN_MONTH, MAX_YEAR, MIN_YEAR

# Days from 0000-03-01 (start of the civil era) to 1858-11-17
_MJD_EPOCH_CIVIL_DAYS = 678_881


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def ymd_to_mjd(year: int, month: int, day: int) -> int:
    """Convert year, month, day to a Modified Julian Day number.

    ``day`` may lie outside the month; the result simply counts past the
    month boundary, which :meth:`Instant.add_date` relies on.

    Examples:
        >>> ymd_to_mjd(1858, 11, 17)
        0
        >>> ymd_to_mjd(1970, 1, 1)
        40587
    """
    # Shift the year so it starts in March; Feb 29 is then the last day.
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = (month + 9) % 12
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146_097 + doe - _MJD_EPOCH_CIVIL_DAYS


def mjd_to_ymd(mjd: int) -> tuple[int, int, int]:
    """Convert a Modified Julian Day number to (year, month, day).

    Examples:
        >>> mjd_to_ymd(0)
        (1858, 11, 17)
        >>> mjd_to_ymd(40587)
        (1970, 1, 1)
    """
    z = mjd + _MJD_EPOCH_CIVIL_DAYS
    era = z // 146_097
    doe = z - era * 146_097
    yoe = (doe - doe // 1460 + doe // 36_524 - doe // 146_096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return (year, month, day)


def mjd_to_weekday(mjd: int) -> int:
    """Convert an MJD number to the day of week (Monday=0, Sunday=6).

    Examples:
        >>> mjd_to_weekday(0)  # 1858-11-17 was a Wednesday
        2
    """
    return (mjd + 2) % 7


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid date.

    Raises:
        ValueError: If the date is invalid.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValueError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValueError(f"day must be 1-{max_day} for {year}-{month:02d}, got {day}")


__all__ = [
    "is_leap_year",
    "days_in_month",
    "ymd_to_mjd",
    "mjd_to_ymd",
    "mjd_to_weekday",
    "validate_date",
]
