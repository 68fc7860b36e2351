"""Unit types used by the core instant type."""

from __future__ import annotations

from calperiod.units.timezone import Timezone

__all__: list[str] = ["Timezone"]
