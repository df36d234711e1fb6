"""
Shared numeric helpers for the planning engine.

  - Half-up rounding (Python's round() is banker's rounding)
  - Threshold ladders: ordered (upper_bound, label) bands, first match wins
  - Assumption resolution: scenario → project → regional default
  - Land-size unit conversion
"""

from __future__ import annotations

import math
from typing import Any, Sequence

from housing_planner.config import settings


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (76.5 → 77)."""
    return math.floor(value + 0.5)


# ──────────────────────────────────────────────────────────────────
# THRESHOLD LADDERS
# ──────────────────────────────────────────────────────────────────
# A ladder is a list of (upper_bound, label) in ascending bound order.
# The first band whose bound the value sits under wins; values past every
# bound get the top label.  Bounds are not checked for monotonicity.

Ladder = Sequence[tuple[float, str]]


def classify(value: float, bands: Ladder, top_label: str, inclusive: bool = False) -> str:
    """Evaluate a threshold ladder.

    Args:
        value: Quantity being classified
        bands: Ascending (upper_bound, label) pairs
        top_label: Label for values beyond the last bound
        inclusive: If True a value equal to a bound stays in that band
            (value <= bound); otherwise the comparison is strict (value < bound)
    """
    for bound, label in bands:
        if value < bound or (inclusive and value == bound):
            return label
    return top_label


# ──────────────────────────────────────────────────────────────────
# ASSUMPTION RESOLUTION
# ──────────────────────────────────────────────────────────────────

def resolve_assumption(field: str, *layers: Any, default: Any) -> Any:
    """Return the first non-None ``field`` across override layers, else ``default``.

    Layers are passed most specific first (scenario, then project); any
    layer may itself be None.
    """
    for layer in layers:
        if layer is None:
            continue
        value = getattr(layer, field, None)
        if value is not None:
            return value
    return default


# ──────────────────────────────────────────────────────────────────
# UNITS
# ──────────────────────────────────────────────────────────────────

def land_size_to_sqm(land_size: float, unit: str = "sqm") -> float:
    """Convert a land size in sqm or acres to square metres."""
    if unit == "acres":
        return land_size * settings.acre_to_sqm
    if unit == "sqm":
        return land_size
    raise ValueError(f"Unknown land size unit: {unit!r}")
