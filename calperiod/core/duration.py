"""Duration class representing a signed span of time.

Durations are stored as a single integer count of nanoseconds, which
makes them exact for every operation the period algebra performs (shifting
bounds by one nanosecond, shrinking ends by a step, taking absolute values).
"""

from __future__ import annotations

import datetime as _datetime

from calperiod._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)


class Duration:
    """A signed span of time with nanosecond precision.

    Examples:
        >>> Duration(hours=1, minutes=30).total_seconds
        5400.0
        >>> abs(Duration(nanoseconds=-5))
        Duration(nanoseconds=5)
        >>> Duration(seconds=1) - Duration(nanoseconds=1)
        Duration(nanoseconds=999999999)
    """

    __slots__ = ("_nanos",)

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        Components may be negative and are simply summed.
        """
        self._nanos: int = (
            days * NANOS_PER_DAY
            + hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + seconds * NANOS_PER_SECOND
            + milliseconds * NANOS_PER_MILLISECOND
            + microseconds * NANOS_PER_MICROSECOND
            + nanoseconds
        )

    @classmethod
    def zero(cls) -> Duration:
        return cls()

    @classmethod
    def from_days(cls, days: int) -> Duration:
        return cls(days=days)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        return cls(hours=hours)

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        return cls(minutes=minutes)

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        return cls(seconds=seconds)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Duration:
        return cls(milliseconds=milliseconds)

    @classmethod
    def from_microseconds(cls, microseconds: int) -> Duration:
        return cls(microseconds=microseconds)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        return cls(nanoseconds=nanoseconds)

    @classmethod
    def from_timedelta(cls, td: _datetime.timedelta) -> Duration:
        """Create a Duration from a standard library timedelta.

        Examples:
            >>> Duration.from_timedelta(_datetime.timedelta(minutes=2))
            Duration(nanoseconds=120000000000)
        """
        return cls(days=td.days, seconds=td.seconds, microseconds=td.microseconds)

    def to_timedelta(self) -> _datetime.timedelta:
        """Return the duration as a timedelta, truncated toward zero to microseconds."""
        micros = abs(self._nanos) // NANOS_PER_MICROSECOND
        if self._nanos < 0:
            micros = -micros
        return _datetime.timedelta(microseconds=micros)

    @property
    def total_nanoseconds(self) -> int:
        """Return the exact duration in nanoseconds."""
        return self._nanos

    @property
    def total_seconds(self) -> float:
        """Return the duration in seconds (may lose precision)."""
        return self._nanos / NANOS_PER_SECOND

    @property
    def is_negative(self) -> bool:
        return self._nanos < 0

    @property
    def is_zero(self) -> bool:
        return self._nanos == 0

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self._nanos + other._nanos)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self._nanos - other._nanos)

    def __mul__(self, other: object) -> Duration:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Duration(nanoseconds=self._nanos * other)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __neg__(self) -> Duration:
        return Duration(nanoseconds=-self._nanos)

    def __pos__(self) -> Duration:
        return Duration(nanoseconds=self._nanos)

    def __abs__(self) -> Duration:
        return Duration(nanoseconds=abs(self._nanos))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return f"Duration(nanoseconds={self._nanos})"

    def __str__(self) -> str:
        """Return a compact form such as ``1d2h3m4.5s``, ``-1ns`` or ``0s``.

        Examples:
            >>> str(Duration(days=1, hours=2, seconds=30))
            '1d2h30s'
            >>> str(Duration(milliseconds=1500))
            '1.5s'
            >>> str(-Duration(nanoseconds=1))
            '-1ns'
        """
        if self._nanos == 0:
            return "0s"

        sign = "-" if self._nanos < 0 else ""
        remaining = abs(self._nanos)
        if remaining < NANOS_PER_SECOND:
            return f"{sign}{remaining}ns"

        parts = []
        for unit, size in (("d", NANOS_PER_DAY), ("h", NANOS_PER_HOUR), ("m", NANOS_PER_MINUTE)):
            count, remaining = divmod(remaining, size)
            if count:
                parts.append(f"{count}{unit}")

        secs, frac = divmod(remaining, NANOS_PER_SECOND)
        if secs or frac:
            sec_str = str(secs)
            if frac:
                sec_str += "." + f"{frac:09d}".rstrip("0")
            parts.append(f"{sec_str}s")

        return sign + "".join(parts)

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return self._nanos != 0


NANOSECOND = Duration(nanoseconds=1)
MICROSECOND = Duration(microseconds=1)
MILLISECOND = Duration(milliseconds=1)
SECOND = Duration(seconds=1)
MINUTE = Duration(minutes=1)
HOUR = Duration(hours=1)
DAY = Duration(days=1)


__all__ = [
    "Duration",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
]
