"""Period class: a half-open span of time and its algebra.

A Period runs from ``start`` (inclusive) to ``end`` (exclusive). Either
bound may be ``None``, which means the period is unbounded on that side:
``Period(None, t)`` covers everything before ``t`` and ``Period()`` covers
all of time. Periods are not validated on construction; call
:meth:`Period.validate` when a bounded, forward-running period is required.

Overlap, year and date decomposition all share one notion of *step*: the
minimum amount of time two spans must share before they count as touching.
With a zero step, adjacent periods (one ending where the other starts)
overlap; with the default one-nanosecond step they do not.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from calperiod._internal.sequence import map_sequence
from calperiod.arithmetic.boundaries import start_of_day
from calperiod.arithmetic.comparisons import same_or_after, same_or_before
from calperiod.core.duration import NANOSECOND, Duration
from calperiod.core.instant import Instant
from calperiod.errors import (
    EmptyEndError,
    EmptyStartError,
    EndBeforeStartError,
    EndEqualsStartError,
    ParseError,
    PeriodError,
    PeriodFormatError,
)

_LOGGER = logging.getLogger(__name__)

# Template used by Period.format() and str(); read at call time.
DEFAULT_PERIOD_FORMAT = "{start} -> {end}"

# Step used by the non-step entry points (overlaps_with, years, dates, ...).
DEFAULT_STEP = NANOSECOND


def _start_key(start: Instant | None) -> tuple[int, int]:
    """Order a lower bound; an unset start sorts before every instant."""
    if start is None:
        return (0, 0)
    return (1, start.to_unix_nanos())


def _end_key(end: Instant | None, shift: int = 0) -> tuple[int, int]:
    """Order an upper bound moved back by ``shift`` ns; an unset end sorts after every instant."""
    if end is None:
        return (2, 0)
    return (1, end.to_unix_nanos() - shift)


def _ends_by(end: Instant | None, start: Instant | None) -> bool:
    """Return True if an upper bound lies at or before a lower bound."""
    return end is not None and start is not None and same_or_before(end, start)


def _later_end(a: Instant | None, b: Instant | None) -> Instant | None:
    if a is None or b is None:
        return None
    return a if a > b else b


class Period:
    """A span of time between two instants, half-open [start, end).

    Examples:
        >>> jan1, jan7 = Instant(2023, 1, 1), Instant(2023, 1, 7)
        >>> p = Period(jan1, jan7)
        >>> p.contains(jan1), p.contains(jan7)
        (True, False)
        >>> str(p)
        '2023-01-01T00:00:00Z -> 2023-01-07T00:00:00Z'
        >>> len(p.cut(Period(Instant(2023, 1, 3), Instant(2023, 1, 6))))
        2
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: Instant | None = None, end: Instant | None = None) -> None:
        self._start = start
        self._end = end

    @property
    def start(self) -> Instant | None:
        """Return the start (inclusive), or None if unbounded."""
        return self._start

    @property
    def end(self) -> Instant | None:
        """Return the end (exclusive), or None if unbounded."""
        return self._end

    def with_start(self, start: Instant | None) -> Period:
        return Period(start, self._end)

    def with_end(self, end: Instant | None) -> Period:
        return Period(self._start, end)

    # Validation & basic queries

    def is_zero(self) -> bool:
        """Return True if neither bound is set."""
        return self._start is None and self._end is None

    def _validation_error(self) -> PeriodError | None:
        if self._start is None:
            return EmptyStartError(self)
        if self._end is None:
            return EmptyEndError(self)
        if self._end == self._start:
            return EndEqualsStartError(self, self._end)
        if self._end < self._start:
            return EndBeforeStartError(self, self._start, self._end, self._start - self._end)
        return None

    def validate(self) -> None:
        """Check that both bounds are set and that end is after start.

        Raises:
            EmptyStartError: If start is None.
            EmptyEndError: If end is None.
            EndEqualsStartError: If end equals start.
            EndBeforeStartError: If end precedes start.
        """
        error = self._validation_error()
        if error is not None:
            raise error

    def is_valid(self) -> bool:
        """Return True if :meth:`validate` would pass."""
        return self._validation_error() is None

    def duration(self) -> Duration | None:
        """Return ``end - start``, or None if either bound is unset."""
        if self._start is None or self._end is None:
            return None
        return self._end - self._start

    def add(self, d: Duration) -> Period:
        """Return the period shifted by ``d``. Unset bounds stay unset."""
        return Period(
            None if self._start is None else self._start + d,
            None if self._end is None else self._end + d,
        )

    def __add__(self, other: object) -> Period:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def contains(self, t: Instant) -> bool:
        """Return True if ``start <= t < end``."""
        if self._start is not None and t < self._start:
            return False
        return self._end is None or t < self._end

    def contains_inclusive(self, t: Instant) -> bool:
        """Return True if ``start <= t <= end``."""
        if self._start is not None and t < self._start:
            return False
        return self._end is None or same_or_after(self._end, t)

    def __contains__(self, t: Instant) -> bool:
        return self.contains(t)

    # Overlap

    def overlaps_with(self, other: Period) -> bool:
        """Return True if the periods share at least one nanosecond."""
        return self.overlaps_with_step(DEFAULT_STEP, other)

    def overlaps_with_step(self, step: Duration, other: Period) -> bool:
        """Return True if the periods overlap by at least ``step``.

        The sign of ``step`` is ignored. A zero step also counts periods that
        only touch, so ``[Jan 1, Jan 2)`` and ``[Jan 2, Jan 3)`` overlap with
        a zero step but not with a one-nanosecond step. A zero period never
        overlaps anything.

        Examples:
            >>> from calperiod.core.duration import Duration
            >>> a = Period(Instant(2023, 1, 1), Instant(2023, 1, 3))
            >>> b = Period(Instant(2023, 1, 3), Instant(2023, 1, 7))
            >>> a.overlaps_with_step(Duration.zero(), b)
            True
            >>> a.overlaps_with(b)
            False
        """
        if self.is_zero() or other.is_zero():
            return False

        shift = abs(step).total_nanoseconds
        p_start, p_end = _start_key(self._start), _end_key(self._end, shift)
        o_start, o_end = _start_key(other._start), _end_key(other._end, shift)

        return (
            o_start <= p_start <= o_end
            or o_start <= p_end <= o_end
            or p_start <= o_start <= p_end
            or p_start <= o_end <= p_end
        )

    # Calendar decomposition

    def years(self) -> list[int]:
        """Return every calendar year the period touches for at least 1ns."""
        return self.years_step(DEFAULT_STEP)

    def years_step(self, step: Duration) -> list[int]:
        """Return the years the period spends at least ``step`` in.

        The last year is taken from ``end - step``. Years are returned in
        ascending order even when the period runs backwards. A period
        with an unset bound has no years.

        Examples:
            >>> from calperiod.core.duration import Duration
            >>> p = Period(Instant(2020, 12, 31), Instant(2021, 1, 1))
            >>> p.years_step(Duration.zero())
            [2020, 2021]
            >>> p.years()
            [2020]
        """
        if self._start is None or self._end is None:
            return []

        first = self._start.year
        last = (self._end - abs(step)).year
        if first > last:
            first, last = last, first
        return list(range(first, last + 1))

    def in_year(self, year: int) -> bool:
        return self.in_year_step(DEFAULT_STEP, year)

    def in_year_step(self, step: Duration, year: int) -> bool:
        return year in self.years_step(step)

    def dates(self) -> list[Instant] | None:
        """Return the midnight of every date the period touches for at least 1ns."""
        return self.dates_step(DEFAULT_STEP)

    def dates_step(self, step: Duration) -> list[Instant] | None:
        """Return the midnight of every date the period spends at least ``step`` in.

        Dates run from the start's day up to the day of ``end - step`` in
        the start's timezone. Returns None if the period is invalid.
        """
        if not self.is_valid():
            return None

        end = self._end - abs(step)
        current = start_of_day(self._start)
        out = [current]
        while True:
            current = start_of_day(current.add_date(days=1))
            if current > end:
                break
            out.append(current)
        return out

    # Splitting

    def slice_dates(self, predicate: Callable[[Instant, int], bool]) -> tuple[Period, Period, bool]:
        return self.slice_dates_step(DEFAULT_STEP, predicate)

    def slice_dates_step(
        self,
        step: Duration,
        predicate: Callable[[Instant, int], bool],
    ) -> tuple[Period, Period, bool]:
        """Split the period at the first date accepted by ``predicate``.

        ``predicate`` is called with each date from :meth:`dates_step` and its
        index. On the first date it accepts, returns ``(before, after, True)``
        where ``after`` runs from that date to the period's end and
        ``before`` runs from the first date to the last date that was
        rejected (both dates, not the period's own bounds).

        Returns ``(self, Period(), False)`` if the period is invalid, if no
        date is accepted, or if the very first date is accepted (nothing
        lies before it).
        """
        if not self.is_valid():
            return self, Period(), False

        dates = self.dates_step(step)
        if not dates:
            return self, Period(), False

        rejected: list[Instant] = []
        after: Period | None = None
        for i, date in enumerate(dates):
            if predicate(date, i):
                after = Period(date, self._end)
                break
            rejected.append(date)

        if after is None or not rejected:
            return self, Period(), False

        return Period(rejected[0], rejected[-1]), after, True

    # Subtraction

    def cut(self, *cuts: Period) -> list[Period]:
        """Remove ``cuts`` from the period and return what is left.

        Every period is treated as half-open and an unset bound on a cut
        means the cut extends without limit on that side. Fragments are
        returned in ascending order; cutting with no periods returns
        ``[self]`` and cutting away everything returns ``[]``.

        Examples:
            >>> jan = lambda d: Instant(2023, 1, d)
            >>> Period(jan(1), jan(7)).cut(Period(None, jan(4))) == [Period(jan(4), jan(7))]
            True
            >>> Period(jan(1), jan(7)).cut(Period(jan(1), jan(7)))
            []
        """
        remaining = [self]
        for cut in sorted(cuts, key=lambda c: _start_key(c._start)):
            remaining = [fragment for r in remaining for fragment in r._subtract(cut)]

        _LOGGER.debug("Cut %s by %d period(s) into %d fragment(s)", self, len(cuts), len(remaining))
        return remaining

    def _subtract(self, cut: Period) -> list[Period]:
        covers_start = cut._start is None or (
            self._start is not None and same_or_before(cut._start, self._start)
        )
        covers_end = cut._end is None or (self._end is not None and same_or_after(cut._end, self._end))
        if covers_start and covers_end:
            return []

        # Entirely before or after the cut
        if cut._start is not None and self._end is not None and self._end < cut._start:
            return [self]
        if cut._end is not None and self._start is not None and self._start > cut._end:
            return [self]

        before_start = cut._start is not None and (self._start is None or self._start < cut._start)
        after_end = cut._end is not None and (self._end is None or self._end > cut._end)

        if before_start and after_end:
            return [Period(self._start, cut._start), Period(cut._end, self._end)]
        if before_start:
            return [Period(self._start, cut._start)]
        if after_end:
            return [Period(cut._end, self._end)]
        return []

    def cut_inclusive(self, *cuts: Period) -> list[Period]:
        """Like :meth:`cut`, but every end (the receiver's and the cuts') is inclusive.

        Examples:
            >>> from calperiod.arithmetic.boundaries import end_of_day
            >>> jan = lambda d: Instant(2023, 1, d)
            >>> got = Period(jan(1), end_of_day(jan(7))).cut_inclusive(Period(jan(3), end_of_day(jan(6))))
            >>> got == [Period(jan(1), end_of_day(jan(2))), Period(jan(7), end_of_day(jan(7)))]
            True
        """
        extended_cuts = map_sequence(cuts, _extend_end)
        result = _extend_end(self).cut(*extended_cuts)
        return map_sequence(result, _shrink_end)

    # Merging

    def merge(self, periods: Iterable[Period]) -> list[Period]:
        """Merge the period with ``periods``, joining ones that overlap or touch."""
        return self.merge_step(Duration.zero(), periods)

    def merge_step(self, step: Duration, periods: Iterable[Period]) -> list[Period]:
        """Merge the period with ``periods`` into ascending, combined periods.

        Periods are sorted by start and swept once. A period that overlaps
        the last merged one by at least ``step`` extends it; one that starts
        at or after the last merged end begins a new entry. A period that
        does neither (it starts inside the last merged period but overlaps
        it by less than ``step``) is dropped.
        """
        periods = list(periods)
        if not periods:
            return [self]

        ordered = sorted([self, *periods], key=lambda p: _start_key(p._start))
        merged = [ordered[0]]
        for p in ordered[1:]:
            last = merged[-1]
            if last.overlaps_with_step(step, p):
                merged[-1] = last.with_end(_later_end(last._end, p._end))
            elif _ends_by(last._end, p._start):
                merged.append(p)
            else:
                _LOGGER.debug("Dropping %s while merging: starts inside %s", p, last)

        _LOGGER.debug("Merged %d period(s) into %d", len(ordered), len(merged))
        return merged

    # Formatting

    def render(self, template: str | None = None) -> str:
        """Render the period through a ``str.format`` template.

        The template sees two named fields, ``start`` and ``end``; unset
        bounds render as ``-∞`` and ``∞``. An empty template selects
        :data:`DEFAULT_PERIOD_FORMAT`.

        Raises:
            PeriodFormatError: If the template is malformed or uses
                fields or attributes that do not exist.

        Examples:
            >>> p = Period(Instant(2024, 1, 1), Instant(2024, 2, 1))
            >>> p.render("{start.year}/{start.month} .. {end.year}/{end.month}")
            '2024/1 .. 2024/2'
        """
        template = template or DEFAULT_PERIOD_FORMAT
        fields: dict[str, Any] = {
            "start": "-∞" if self._start is None else self._start,
            "end": "∞" if self._end is None else self._end,
        }
        try:
            return template.format_map(fields)
        except (KeyError, IndexError, AttributeError, ValueError, TypeError) as e:
            raise PeriodFormatError(template, f"{type(e).__name__}: {e}") from e

    def format_as(self, template: str | None = None) -> str:
        """Render like :meth:`render`, but describe failures in the returned string."""
        try:
            return self.render(template)
        except PeriodFormatError as e:
            _LOGGER.debug("Failed to format period: %s", e)
            return f"<failed to format period: {e.reason}>"

    def format(self) -> str:
        return self.format_as(DEFAULT_PERIOD_FORMAT)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Period({self._start!r}, {self._end!r})"

    # Serialization

    def to_json(self) -> dict:
        """Return the period as a JSON-serializable dictionary.

        Examples:
            >>> Period(Instant(2024, 1, 1), None).to_json()
            {'start': '2024-01-01T00:00:00Z', 'end': None}
        """
        return {
            "start": None if self._start is None else self._start.to_iso_format(),
            "end": None if self._end is None else self._end.to_iso_format(),
        }

    @classmethod
    def from_json(cls, data: dict) -> Period:
        """Create a Period from a dictionary produced by :meth:`to_json`.

        Missing or null fields become unset bounds.

        Raises:
            ParseError: If the data is not a dict or a bound is not a string.
        """
        if not isinstance(data, dict):
            raise ParseError(f"expected dict, got {type(data).__name__}")

        bounds = []
        for key in ("start", "end"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ParseError(f"'{key}' must be an ISO 8601 string or null, got {type(value).__name__}")
            bounds.append(None if value is None else Instant.from_iso_format(value))
        return cls(*bounds)

    # Value semantics

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))


def _extend_end(p: Period) -> Period:
    return p if p.end is None else p.with_end(p.end + NANOSECOND)


def _shrink_end(p: Period) -> Period:
    return p if p.end is None else p.with_end(p.end - NANOSECOND)


__all__ = ["Period", "DEFAULT_PERIOD_FORMAT", "DEFAULT_STEP"]
