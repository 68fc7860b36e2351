"""Core types for calperiod.

This module exports the primary types:
    - Duration: Signed span of time with nanosecond precision
    - Instant: Absolute point in time with a fixed UTC offset
    - Period: Half-open span between two instants, with its algebra
"""

from __future__ import annotations

from calperiod.core.duration import Duration
from calperiod.core.instant import Instant
from calperiod.core.period import Period

__all__: list[str] = [
    "Duration",
    "Instant",
    "Period",
]
