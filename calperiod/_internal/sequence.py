"""Sequence helpers.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

In = TypeVar("In")
Out = TypeVar("Out")


def map_sequence(items: Iterable[In] | None, fn: Callable[[In], Out]) -> list[Out] | None:
    """Apply ``fn`` to every item and collect the results in a new list.

    ``None`` maps to ``None`` and an empty input maps to an empty list, so
    callers that treat "no sequence" differently from "empty sequence" keep
    that distinction.

    Examples:
        >>> map_sequence([1, 2, 3], lambda n: n * 2)
        [2, 4, 6]
        >>> map_sequence(None, str) is None
        True
        >>> map_sequence([], str)
        []
    """
    if items is None:
        return None
    return [fn(item) for item in items]


__all__ = ["map_sequence"]
