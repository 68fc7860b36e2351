"""Calendar boundary and comparison helpers.

Boundary Operations (from calperiod.arithmetic.boundaries):
    - start_of_second ... end_of_year: truncate to / extend to a calendar unit
    - at_time: keep the date, replace the wall-clock time

Comparison Operations (from calperiod.arithmetic.comparisons):
    - same_or_before, same_or_after: inclusive ordering
    - between: exclusive range test
    - between_inclusive: inclusive range test
"""

from __future__ import annotations

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
from calperiod.arithmetic.comparisons import (
    between,
    between_inclusive,
    same_or_after,
    same_or_before,
)

__all__ = [
    # Boundary operations
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
    # Comparison operations
    "same_or_before",
    "same_or_after",
    "between",
    "between_inclusive",
]
