"""Internal utilities for calperiod.

    - Constants and magic numbers
    - Proleptic Gregorian calendar arithmetic
    - Sequence helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from calperiod._internal.sequence import map_sequence

__all__: list[str] = ["map_sequence"]
