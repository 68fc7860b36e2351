"""calperiod: calendar boundaries and period algebra.

calperiod answers questions such as "does this window overlap that one by
at least an hour?", "which calendar years does this span touch?" and "what
is left of this span once these others are removed?".

Core Types:
    Instant: Absolute point in time, nanosecond precision, fixed UTC offset
    Duration: Signed span of time with nanosecond precision
    Period: Half-open span [start, end) with overlap, cut and merge operations
    Timezone: Fixed UTC offset

Helpers:
    start_of_* / end_of_*: Calendar unit boundaries (second through year)
    same_or_before, same_or_after, between, between_inclusive: Comparisons

Exceptions:
    CalperiodError: Base exception
    ValidationError: Invalid component values
    PeriodError: Invalid period (EmptyStartError, EmptyEndError, ...)
    PeriodFormatError: Malformed period template
    ParseError: Malformed ISO 8601 or JSON input
    TimezoneError: Invalid UTC offset

Example:
    >>> from calperiod import Instant, Period
    >>> week = Period(Instant(2023, 1, 1), Instant(2023, 1, 8))
    >>> week.years()
    [2023]
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from calperiod.core.duration import (
    DAY,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    Duration,
)
from calperiod.core.instant import Instant
from calperiod.core.period import DEFAULT_PERIOD_FORMAT, Period

# Units
from calperiod.units.timezone import Timezone

# Helpers
from calperiod.arithmetic import (
    at_time,
    between,
    between_inclusive,
    end_of_day,
    end_of_hour,
    end_of_iso_week,
    end_of_minute,
    end_of_month,
    end_of_second,
    end_of_week,
    end_of_year,
    same_or_after,
    same_or_before,
    start_of_day,
    start_of_hour,
    start_of_iso_week,
    start_of_minute,
    start_of_month,
    start_of_second,
    start_of_week,
    start_of_year,
)

# Exceptions
from calperiod.errors import (
    CalperiodError,
    EmptyEndError,
    EmptyStartError,
    EndBeforeStartError,
    EndEqualsStartError,
    ParseError,
    PeriodError,
    PeriodFormatError,
    TimezoneError,
    ValidationError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Duration",
    "Instant",
    "Period",
    "DEFAULT_PERIOD_FORMAT",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    # Units
    "Timezone",
    # Helpers
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
    "same_or_before",
    "same_or_after",
    "between",
    "between_inclusive",
    # Exceptions
    "CalperiodError",
    "ValidationError",
    "ParseError",
    "TimezoneError",
    "PeriodError",
    "EmptyStartError",
    "EmptyEndError",
    "EndEqualsStartError",
    "EndBeforeStartError",
    "PeriodFormatError",
]
