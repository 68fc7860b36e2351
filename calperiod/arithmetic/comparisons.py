"""Inclusive and exclusive comparison helpers for instants.

These are the building blocks the period algebra is written in. All of
them compare absolute instants, so operands in different timezones
compare correctly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calperiod.core.instant import Instant


def same_or_before(t: Instant, r: Instant) -> bool:
    """Return True if ``t`` is the same instant as ``r`` or precedes it.

    Examples:
        >>> from calperiod.core.instant import Instant
        >>> same_or_before(Instant(2024, 1, 1), Instant(2024, 1, 1))
        True
        >>> same_or_before(Instant(2024, 1, 2), Instant(2024, 1, 1))
        False
    """
    return t == r or t < r


def same_or_after(t: Instant, l: Instant) -> bool:  # noqa: E741
    """Return True if ``t`` is the same instant as ``l`` or follows it."""
    return t == l or t > l


def between(t: Instant, l: Instant, r: Instant) -> bool:  # noqa: E741
    """Return True if ``t`` lies strictly between ``l`` and ``r``."""
    return l < t < r


def between_inclusive(t: Instant, l: Instant, r: Instant) -> bool:  # noqa: E741
    """Return True if ``l <= t <= r``.

    Examples:
        >>> from calperiod.core.instant import Instant
        >>> between_inclusive(Instant(2024, 1, 10), Instant(2024, 1, 1), Instant(2024, 1, 10))
        True
    """
    return same_or_before(t, r) and same_or_after(t, l)


__all__ = [
    "same_or_before",
    "same_or_after",
    "between",
    "between_inclusive",
]
