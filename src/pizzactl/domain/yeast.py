"""Yeast estimate and ingredient mass breakdown for direct doughs.

The yeast model is a heuristic calibrated at a single point:
0.35% dry yeast (of flour mass) at 25°C, flour strength W=260, and
12 effective fermentation hours.  Away from that point it scales by

- temperature: Q10 ≈ 2, i.e. ``2 ** ((25 - temp_c) / 10)``
- flour strength: ``(w / 260) ** 0.2`` (mild)
- time: ``12 / effective_hours`` (inverse)

and the result is bounded to [0.05%, 1.5%] so extreme inputs never
extrapolate into nonsense.

Ingredient masses back-solve flour from the total dough mass, so
flour + water + salt + yeast always equals the requested total.
"""

from __future__ import annotations

from dataclasses import dataclass

from pizzactl.domain.ratios import REFERENCE_TEMP_C, clamp
from pizzactl.domain.types import YeastKind

# --- Calibration baseline ---

BASE_DRY_PERCENT = 0.0035
BASE_W = 260.0
BASE_HOURS = 12.0
Q10 = 2.0
W_EXPONENT = 0.2

MIN_DRY_PERCENT = 0.0005
MAX_DRY_PERCENT = 0.015

# Fresh (compressed) yeast is ~3x dry by weight for the same leavening.
FRESH_TO_DRY_RATIO = 3.0

# Fridge activity relative to room temperature.
MIN_FRIDGE_FACTOR = 0.05
MAX_FRIDGE_FACTOR = 0.5


@dataclass(frozen=True)
class IngredientsInput:
    """Inputs to :func:`compute_ingredients`.

    No cross-field validation happens here; callers check ranges first.
    """

    total_dough_g: float
    hydration: float
    salt_per_kg: float
    yeast: YeastKind
    temp_c: float
    w: int
    effective_hours: float


@dataclass(frozen=True)
class Ingredients:
    """Ingredient masses in grams."""

    flour_g: float
    water_g: float
    salt_g: float
    yeast_g: float
    # Reserved for a sourdough variant; always zero.
    starter_total_g: float = 0.0

    @property
    def total_g(self) -> float:
        return self.flour_g + self.water_g + self.salt_g + self.yeast_g


def effective_hours(total_hours: float, fridge_hours: float, fridge_factor: float) -> float:
    """Wall-clock hours weighted by fermentation activity.

    Room hours count fully; fridge hours count at *fridge_factor*.
    *fridge_hours* is clamped to ``[0, total_hours]`` and *fridge_factor*
    to ``[0.05, 0.5]``.
    """
    fridge = clamp(fridge_hours, 0.0, max(total_hours, 0.0))
    factor = clamp(fridge_factor, MIN_FRIDGE_FACTOR, MAX_FRIDGE_FACTOR)
    return (total_hours - fridge) + fridge * factor


def estimate_yeast_percent_dry(temp_c: float, w: int, effective_hours: float) -> float:
    """Dry yeast as a fraction of flour mass (0.0035 == 0.35%)."""
    f_temp = Q10 ** ((REFERENCE_TEMP_C - temp_c) / 10.0)
    f_w = (w / BASE_W) ** W_EXPONENT
    f_time = BASE_HOURS / effective_hours
    return clamp(BASE_DRY_PERCENT * f_temp * f_w * f_time, MIN_DRY_PERCENT, MAX_DRY_PERCENT)


def yeast_percent(kind: YeastKind, temp_c: float, w: int, effective_hours: float) -> float:
    """Yeast fraction of flour mass for *kind*."""
    dry = estimate_yeast_percent_dry(temp_c, w, effective_hours)
    if kind is YeastKind.FRESH:
        return dry * FRESH_TO_DRY_RATIO
    return dry


def compute_ingredients(data: IngredientsInput) -> Ingredients:
    """Split the total dough mass into flour, water, salt, and yeast."""
    salt_pct = data.salt_per_kg / 1000.0
    yeast_pct = yeast_percent(data.yeast, data.temp_c, data.w, data.effective_hours)

    flour = data.total_dough_g / (1.0 + data.hydration + salt_pct + yeast_pct)
    return Ingredients(
        flour_g=flour,
        water_g=flour * data.hydration,
        salt_g=flour * salt_pct,
        yeast_g=flour * yeast_pct,
        starter_total_g=0.0,
    )
