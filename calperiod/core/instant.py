"""Instant class: an absolute point in time with nanosecond precision.

An Instant stores its wall-clock reading as a Modified Julian Day number
plus nanoseconds since local midnight, together with the fixed-offset
Timezone that reading is expressed in. Ordering, equality and hashing
compare the absolute (UTC) instant; the timezone only affects calendar
decomposition.
"""

from __future__ import annotations

import datetime as _datetime
import re
from typing import TYPE_CHECKING, overload

from calperiod._internal.calendar import (
    mjd_to_weekday,
    mjd_to_ymd,
    validate_date,
    ymd_to_mjd,
)
from calperiod._internal.constants import (
    MAX_YEAR,
    MIN_YEAR,
    MJD_UNIX_EPOCH,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from calperiod.errors import ParseError, ValidationError
from calperiod.units.timezone import Timezone

if TYPE_CHECKING:
    from calperiod.core.duration import Duration

_ISO_PATTERN = re.compile(
    r"^(?P<year>[+-]?\d{4,5})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[T ](?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d{1,9}))?)?)?"
    r"(?P<tz>[Zz]|[+-]\d{2}(?::?\d{2})?)?$"
)


class Instant:
    """An absolute point in time with a fixed UTC offset.

    Examples:
        >>> t = Instant(2024, 1, 15, 14, 30, 45)
        >>> t.year, t.hour
        (2024, 14)
        >>> str(t)
        '2024-01-15T14:30:45Z'

        >>> a = Instant(2024, 1, 15, 12, timezone=Timezone.utc())
        >>> b = Instant(2024, 1, 15, 13, timezone=Timezone.from_hours(1))
        >>> a == b
        True
    """

    __slots__ = ("_days", "_nanos", "_tz")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
        timezone: Timezone | None = None,
    ) -> None:
        """Create an Instant from wall-clock components.

        Args:
            year: The year (-9999 to 9999, astronomical numbering).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The nanosecond within the second (0-999999999).
            timezone: The offset the components are expressed in; UTC if None.

        Raises:
            ValidationError: If any component is out of range.
        """
        try:
            validate_date(year, month, day)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        for name, value, upper in (
            ("hour", hour, 23),
            ("minute", minute, 59),
            ("second", second, 59),
            ("nanosecond", nanosecond, NANOS_PER_SECOND - 1),
        ):
            if not 0 <= value <= upper:
                raise ValidationError(f"{name} must be 0-{upper}, got {value}")

        self._days: int = ymd_to_mjd(year, month, day)
        self._nanos: int = (
            hour * NANOS_PER_HOUR + minute * NANOS_PER_MINUTE + second * NANOS_PER_SECOND + nanosecond
        )
        self._tz: Timezone = timezone if timezone is not None else Timezone.utc()

    @classmethod
    def _from_internal(cls, days: int, nanos: int, tz: Timezone) -> Instant:
        """Build an Instant from local MJD + nanos, normalizing nanos into the day."""
        extra_days, nanos = divmod(nanos, NANOS_PER_DAY)
        instance = object.__new__(cls)
        instance._days = days + extra_days
        instance._nanos = nanos
        instance._tz = tz
        return instance

    @classmethod
    def from_unix_nanos(cls, nanos: int, *, timezone: Timezone | None = None) -> Instant:
        """Create an Instant from nanoseconds since 1970-01-01T00:00:00Z.

        Examples:
            >>> Instant.from_unix_nanos(0)
            Instant(1970, 1, 1, 0, 0, 0, nanosecond=0, timezone=UTC)
        """
        tz = timezone if timezone is not None else Timezone.utc()
        local = nanos + tz.offset_seconds * NANOS_PER_SECOND
        return cls._from_internal(MJD_UNIX_EPOCH, local, tz)

    @classmethod
    def from_datetime(cls, dt: _datetime.datetime) -> Instant:
        """Create an Instant from a standard library datetime.

        Naive datetimes are read as UTC. Aware datetimes keep their current
        UTC offset (whole seconds only).

        Raises:
            ValidationError: If the offset is not a whole number of seconds.
        """
        tz = Timezone.utc()
        offset = dt.utcoffset()
        if offset is not None and offset:
            if offset.microseconds:
                raise ValidationError(f"sub-second UTC offsets are not supported: {offset}")
            tz = Timezone(offset.days * 86_400 + offset.seconds)
        return cls(
            dt.year,
            dt.month,
            dt.day,
            dt.hour,
            dt.minute,
            dt.second,
            nanosecond=dt.microsecond * NANOS_PER_MICROSECOND,
            timezone=tz,
        )

    @classmethod
    def from_iso_format(cls, s: str) -> Instant:
        """Parse an ISO 8601 timestamp.

        Accepts ``YYYY-MM-DD``, ``YYYY-MM-DDTHH:MM[:SS[.fffffffff]]`` and an
        optional ``Z`` / ``+HH:MM`` suffix. A missing offset means UTC.

        Raises:
            ParseError: If the string is not in a supported format.
            ValidationError: If a component is out of range.

        Examples:
            >>> Instant.from_iso_format("2024-01-15T14:30:45.000000001+02:00")
            Instant(2024, 1, 15, 14, 30, 45, nanosecond=1, timezone=+02:00)
        """
        if not isinstance(s, str):
            raise ParseError(f"expected string, got {type(s).__name__}")

        match = _ISO_PATTERN.match(s.strip())
        if not match:
            raise ParseError(f"invalid ISO 8601 timestamp: {s!r}")

        fraction = match.group("fraction") or ""
        tz_str = match.group("tz")
        return cls(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour") or 0),
            int(match.group("minute") or 0),
            int(match.group("second") or 0),
            nanosecond=int(fraction.ljust(9, "0")) if fraction else 0,
            timezone=Timezone.from_string(tz_str) if tz_str else None,
        )

    @classmethod
    def min(cls) -> Instant:
        """Return the earliest representable instant (UTC)."""
        return cls(MIN_YEAR, 1, 1)

    @classmethod
    def max(cls) -> Instant:
        """Return the latest representable instant (UTC)."""
        return cls(MAX_YEAR, 12, 31, 23, 59, 59, nanosecond=NANOS_PER_SECOND - 1)

    # Calendar decomposition

    @property
    def year(self) -> int:
        return mjd_to_ymd(self._days)[0]

    @property
    def month(self) -> int:
        return mjd_to_ymd(self._days)[1]

    @property
    def day(self) -> int:
        return mjd_to_ymd(self._days)[2]

    @property
    def hour(self) -> int:
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        return self._nanos % NANOS_PER_SECOND

    @property
    def weekday(self) -> int:
        """Return the day of week, Monday=0 through Sunday=6."""
        return mjd_to_weekday(self._days)

    @property
    def timezone(self) -> Timezone:
        return self._tz

    # Conversions

    def to_unix_nanos(self) -> int:
        """Return nanoseconds since 1970-01-01T00:00:00Z."""
        local = (self._days - MJD_UNIX_EPOCH) * NANOS_PER_DAY + self._nanos
        return local - self._tz.offset_seconds * NANOS_PER_SECOND

    def to_datetime(self) -> _datetime.datetime:
        """Return an aware standard library datetime, truncated to microseconds.

        Raises:
            ValueError: If the year is outside the range datetime supports.
        """
        year, month, day = mjd_to_ymd(self._days)
        tzinfo = _datetime.timezone(_datetime.timedelta(seconds=self._tz.offset_seconds))
        return _datetime.datetime(
            year,
            month,
            day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond // NANOS_PER_MICROSECOND,
            tzinfo=tzinfo,
        )

    def to_iso_format(self) -> str:
        """Return the instant as ISO 8601, with sub-seconds only when non-zero.

        Examples:
            >>> Instant(2024, 1, 15, 14, 30, 45).to_iso_format()
            '2024-01-15T14:30:45Z'
            >>> Instant(2024, 1, 15, nanosecond=1500).to_iso_format()
            '2024-01-15T00:00:00.0000015Z'
        """
        year, month, day = mjd_to_ymd(self._days)
        date_str = f"{year:04d}-{month:02d}-{day:02d}" if year >= 0 else f"{year:05d}-{month:02d}-{day:02d}"
        time_str = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        if self.nanosecond:
            time_str += "." + f"{self.nanosecond:09d}".rstrip("0")
        suffix = "Z" if self._tz.is_utc else str(self._tz)
        return f"{date_str}T{time_str}{suffix}"

    # Calendar arithmetic

    def add_date(self, years: int = 0, months: int = 0, days: int = 0) -> Instant:
        """Add calendar years, months and days, keeping the wall-clock time.

        Overflowing days roll into the following month, so adding one month
        to January 31st lands on March 2nd (or 3rd outside leap years).

        Examples:
            >>> Instant(2023, 1, 31).add_date(months=1)
            Instant(2023, 3, 3, 0, 0, 0, nanosecond=0, timezone=UTC)
            >>> Instant(2024, 12, 31, 6).add_date(days=1)
            Instant(2025, 1, 1, 6, 0, 0, nanosecond=0, timezone=UTC)
        """
        year, month, day = mjd_to_ymd(self._days)
        year_carry, month_index = divmod(month - 1 + months, 12)
        new_days = ymd_to_mjd(year + years + year_carry, month_index + 1, 1) + day - 1 + days
        return Instant._from_internal(new_days, self._nanos, self._tz)

    def replace_time(self, hour: int = 0, minute: int = 0, second: int = 0, nanosecond: int = 0) -> Instant:
        """Return the same calendar date at another wall-clock time.

        Raises:
            ValidationError: If a component is out of range.
        """
        year, month, day = mjd_to_ymd(self._days)
        return Instant(year, month, day, hour, minute, second, nanosecond=nanosecond, timezone=self._tz)

    def __add__(self, other: object) -> Instant:
        from calperiod.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return Instant._from_internal(self._days, self._nanos + other.total_nanoseconds, self._tz)

    def __radd__(self, other: object) -> Instant:
        return self.__add__(other)

    @overload
    def __sub__(self, other: Duration) -> Instant: ...

    @overload
    def __sub__(self, other: Instant) -> Duration: ...

    def __sub__(self, other: object) -> Instant | Duration:
        """Subtract a Duration (giving an Instant) or an Instant (giving a Duration)."""
        from calperiod.core.duration import Duration

        if isinstance(other, Duration):
            return Instant._from_internal(self._days, self._nanos - other.total_nanoseconds, self._tz)
        if isinstance(other, Instant):
            return Duration(nanoseconds=self.to_unix_nanos() - other.to_unix_nanos())
        return NotImplemented

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.to_unix_nanos() == other.to_unix_nanos()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.to_unix_nanos() < other.to_unix_nanos()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.to_unix_nanos() <= other.to_unix_nanos()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.to_unix_nanos() > other.to_unix_nanos()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.to_unix_nanos() >= other.to_unix_nanos()

    def __hash__(self) -> int:
        return hash(self.to_unix_nanos())

    def __repr__(self) -> str:
        year, month, day = mjd_to_ymd(self._days)
        return (
            f"Instant({year}, {month}, {day}, {self.hour}, {self.minute}, {self.second}, "
            f"nanosecond={self.nanosecond}, timezone={self._tz})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Instant"]
