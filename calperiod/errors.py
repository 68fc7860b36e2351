"""calperiod exception hierarchy.

All calperiod-specific exceptions inherit from CalperiodError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calperiod.core.duration import Duration
    from calperiod.core.instant import Instant
    from calperiod.core.period import Period


class CalperiodError(Exception):
    """Base exception for all calperiod errors."""

    pass


class ValidationError(CalperiodError):
    """Invalid input values.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Nanosecond value outside 0-999999999
    """

    pass


class ParseError(CalperiodError):
    """Failed to parse a string or JSON representation."""

    pass


class TimezoneError(CalperiodError):
    """Invalid UTC offset.

    Examples:
        - Invalid UTC offset format
        - Offset outside +/-14 hours
    """

    pass


class PeriodError(ValidationError):
    """A period failed validation.

    Raised only by :meth:`Period.validate`; every other period operation
    degrades to an empty result instead.

    Attributes:
        period: The period that failed validation.
    """

    def __init__(self, message: str, period: Period) -> None:
        super().__init__(message)
        self.period = period


class EmptyStartError(PeriodError):
    """The period has no start."""

    def __init__(self, period: Period) -> None:
        super().__init__("start is empty", period)


class EmptyEndError(PeriodError):
    """The period has no end."""

    def __init__(self, period: Period) -> None:
        super().__init__("end is empty", period)


class EndEqualsStartError(PeriodError):
    """The period ends at the instant it starts."""

    def __init__(self, period: Period, instant: Instant) -> None:
        super().__init__(f"end must be after start; is the same ({instant})", period)
        self.instant = instant


class EndBeforeStartError(PeriodError):
    """The period ends before it starts.

    Attributes:
        start: The period start.
        end: The period end.
        gap: How far the end lies before the start.
    """

    def __init__(self, period: Period, start: Instant, end: Instant, gap: Duration) -> None:
        super().__init__(f"end ({end}) is {gap} before start ({start})", period)
        self.start = start
        self.end = end
        self.gap = gap


class PeriodFormatError(CalperiodError):
    """A period template could not be rendered.

    Attributes:
        template: The template that failed.
    """

    def __init__(self, template: str, reason: str) -> None:
        super().__init__(f"cannot render {template!r}: {reason}")
        self.template = template
        self.reason = reason


__all__ = [
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
