"""Timezone represented as a fixed UTC offset.

An Instant carries a Timezone only so that it can be split into calendar
fields (year, month, day, ...). There is no IANA database and no
conversion between zones.
"""

from __future__ import annotations

import re
from typing import ClassVar

from calperiod._internal.constants import MAX_UTC_OFFSET_SECONDS, SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from calperiod.errors import TimezoneError

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{1,2})(?::?(\d{2}))?$")


class Timezone:
    """A timezone represented as a UTC offset in seconds.

    Positive offsets are east of UTC, negative offsets west.

    Examples:
        >>> Timezone.utc().is_utc
        True
        >>> Timezone.from_hours(5, 30).offset_seconds
        19800
        >>> str(Timezone.from_string("-0500"))
        '-05:00'
    """

    __slots__ = ("_offset_seconds", "_name")

    _utc_instance: ClassVar[Timezone | None] = None

    def __init__(self, offset_seconds: int, name: str | None = None) -> None:
        """Create a Timezone with the given UTC offset.

        Raises:
            TimezoneError: If the offset is not an int or exceeds +/-14 hours.
        """
        if not isinstance(offset_seconds, int) or isinstance(offset_seconds, bool):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )
        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )
        self._offset_seconds = offset_seconds
        self._name = name

    @classmethod
    def utc(cls) -> Timezone:
        """Return the shared UTC instance."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0, "UTC")
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Timezone:
        """Create a Timezone from an hour offset plus unsigned minutes.

        The sign of ``hours`` applies to ``minutes`` as well, so
        ``from_hours(-3, 30)`` is UTC-03:30.

        Raises:
            TimezoneError: If minutes is outside 0-59 or the total is out of range.
        """
        if not 0 <= minutes <= 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")
        sign = -1 if hours < 0 else 1
        return cls(sign * (abs(hours) * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE))

    @classmethod
    def from_string(cls, s: str) -> Timezone:
        """Parse ``Z``, ``UTC``, ``+HH:MM``, ``+HHMM`` or ``+HH``.

        Raises:
            TimezoneError: If the string cannot be parsed.

        Examples:
            >>> Timezone.from_string("Z").is_utc
            True
            >>> Timezone.from_string("+05:30").offset_seconds
            19800
        """
        if not isinstance(s, str):
            raise TimezoneError(f"expected string, got {type(s).__name__}")

        s = s.strip()
        if s.upper() in ("Z", "UTC"):
            return cls.utc()

        match = _OFFSET_PATTERN.match(s)
        if not match:
            raise TimezoneError(f"cannot parse timezone string: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        minutes = int(minutes_str) if minutes_str else 0
        if minutes > 59:
            raise TimezoneError(f"offset minutes out of range: {s!r}")

        sign = 1 if sign_str == "+" else -1
        return cls(sign * (int(hours_str) * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE))

    @property
    def offset_seconds(self) -> int:
        return self._offset_seconds

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def is_utc(self) -> bool:
        return self._offset_seconds == 0

    def __eq__(self, other: object) -> bool:
        """Timezones are equal when their offsets are, whatever the name."""
        if not isinstance(other, Timezone):
            return NotImplemented
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        if self._name:
            return f"Timezone(offset_seconds={self._offset_seconds}, name={self._name!r})"
        return f"Timezone(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        """Return ``UTC`` (or the given name) for zero, else ``+HH:MM``."""
        if self._offset_seconds == 0:
            return self._name if self._name else "UTC"

        total_minutes = abs(self._offset_seconds) // SECONDS_PER_MINUTE
        sign = "+" if self._offset_seconds > 0 else "-"
        return f"{sign}{total_minutes // 60:02d}:{total_minutes % 60:02d}"


__all__ = ["Timezone"]
