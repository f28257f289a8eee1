"""Fermentation timeline: partition total process hours into phases.

Two layouts, selected by whether the dough is refrigerated:

- No fridge:   bulk rise → final proof
- With fridge: bulk rise → fridge → warmup → final proof

Both partition the caller's total exactly.  The fridge layout does not
check that ``fridge_hours + warmup_hours < total_hours``; when that is
violated the room-temperature phases collapse to zero.  Callers
validate first.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from pizzactl.domain.ratios import REFERENCE_TEMP_C, clamp, temp_adjust_ratio

NO_FRIDGE_BULK_SHARE = 0.55
SHIFT_PER_DEGREE_H = 0.05
MAX_SHIFT_H = 1.0
MAX_SHIFT_SHARE = 0.2

FRIDGE_BULK_RATIO = 0.35
FRIDGE_RATIO_STEP = 0.01
FRIDGE_RATIO_MIN = 0.20
FRIDGE_RATIO_MAX = 0.60

PHASE_BULK = "bulk"
PHASE_FRIDGE = "fridge"
PHASE_WARMUP = "warmup"
PHASE_PROOF = "proof"


@dataclass(frozen=True)
class Timeline:
    """Phase durations in hours."""

    bulk_h: float
    fridge_h: float
    warmup_h: float
    proof_h: float

    @property
    def total_h(self) -> float:
        return self.bulk_h + self.fridge_h + self.warmup_h + self.proof_h

    @property
    def uses_fridge(self) -> bool:
        return self.fridge_h > 0.0

    def phases(self) -> Iterator[tuple[str, float]]:
        """Yield ``(phase, hours)`` in process order.

        Bulk and proof are always present; fridge and warmup only when used.
        """
        yield PHASE_BULK, self.bulk_h
        if self.fridge_h > 0.0:
            yield PHASE_FRIDGE, self.fridge_h
        if self.warmup_h > 0.0:
            yield PHASE_WARMUP, self.warmup_h
        yield PHASE_PROOF, self.proof_h


def timeline_no_fridge(total_hours: float, temp_c: float) -> Timeline:
    """Split *total_hours* ~55/45 into bulk and proof, adjusted for temperature.

    Up to an hour moves from bulk to proof when warm, or from proof to
    bulk when cold, never more than 20% of the phase it is taken from.
    """
    bulk = total_hours * NO_FRIDGE_BULK_SHARE
    proof = total_hours - bulk

    if temp_c > REFERENCE_TEMP_C:
        delta = clamp((temp_c - REFERENCE_TEMP_C) * SHIFT_PER_DEGREE_H, 0.0, MAX_SHIFT_H)
        adjust = min(delta, bulk * MAX_SHIFT_SHARE)
        bulk -= adjust
        proof += adjust
    elif temp_c < REFERENCE_TEMP_C:
        delta = clamp((REFERENCE_TEMP_C - temp_c) * SHIFT_PER_DEGREE_H, 0.0, MAX_SHIFT_H)
        adjust = min(delta, proof * MAX_SHIFT_SHARE)
        bulk += adjust
        proof -= adjust

    return Timeline(bulk_h=bulk, fridge_h=0.0, warmup_h=0.0, proof_h=proof)


def timeline_with_fridge(
    total_hours: float,
    temp_c: float,
    fridge_hours: float,
    warmup_hours: float,
) -> Timeline:
    """Split the room-temperature remainder around a fridge + warmup block.

    The remainder (total minus fridge and warmup) goes 35% to bulk by
    default, adjusted by 1 point per °C away from 25°C and bounded to
    [20%, 60%]; the rest is final proof.
    """
    remaining = max(total_hours - fridge_hours - warmup_hours, 0.0)
    bulk_ratio = temp_adjust_ratio(
        temp_c, FRIDGE_BULK_RATIO, FRIDGE_RATIO_STEP, FRIDGE_RATIO_MIN, FRIDGE_RATIO_MAX
    )
    bulk = remaining * bulk_ratio
    proof = remaining - bulk

    return Timeline(
        bulk_h=bulk,
        fridge_h=max(fridge_hours, 0.0),
        warmup_h=max(warmup_hours, 0.0),
        proof_h=proof,
    )


def build_timeline(
    total_hours: float,
    temp_c: float,
    fridge_hours: float = 0.0,
    warmup_hours: float = 0.0,
) -> Timeline:
    """Pick the fridge layout when *fridge_hours* is positive."""
    if fridge_hours > 0.0:
        return timeline_with_fridge(total_hours, temp_c, fridge_hours, warmup_hours)
    return timeline_no_fridge(total_hours, temp_c)
