"""Shared numeric helpers for the yeast and timeline models."""

from __future__ import annotations

# Temperature at which all ratios are calibrated.
REFERENCE_TEMP_C = 25.0


def clamp(value: float, lo: float, hi: float) -> float:
    """Bound *value* to the closed interval ``[lo, hi]``."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def temp_adjust_ratio(temp_c: float, base: float, step: float, lo: float, hi: float) -> float:
    """Shift *base* by *step* per degree away from the reference temperature.

    Warmer than reference lowers the ratio (floored at *lo*); colder raises
    it (capped at *hi*).  At exactly the reference temperature *base* is
    returned unchanged.
    """
    if temp_c > REFERENCE_TEMP_C:
        return max(base - (temp_c - REFERENCE_TEMP_C) * step, lo)
    if temp_c < REFERENCE_TEMP_C:
        return min(base + (REFERENCE_TEMP_C - temp_c) * step, hi)
    return base
