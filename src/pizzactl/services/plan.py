"""PlanService — ingredients and timeline for one dough.

Merges parameter layers (config defaults, optional profile, CLI
overrides), validates the result, then runs the yeast/ingredient and
timeline models.  Nothing is computed or saved unless every check passes.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pizzactl.domain.params import RecipeOverrides, RecipeParams
from pizzactl.domain.schedule import combine_start, parse_start, project_phases
from pizzactl.domain.timeline import build_timeline
from pizzactl.domain.yeast import (
    IngredientsInput,
    compute_ingredients,
    effective_hours,
    yeast_percent,
)
from pizzactl.infrastructure.profiles import ProfileError, read_profile, write_profile
from pizzactl.services._helpers import now_local
from pizzactl.services.base import BaseService
from pizzactl.services.result import Op, ServiceResult
from pizzactl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

OP = Op.PLAN

VALIDATION = "VALIDATION"
INVALID_RANGE = "INVALID_RANGE"

W_RANGE = (200, 450)
HYDRATION_RANGE = (0.55, 0.85)

FLOAT_FIELDS = (
    "temp",
    "hydration",
    "salt_per_kg",
    "ball_weight",
    "total_hours",
    "fridge_hours",
    "warmup_hours",
    "fridge_factor",
)


def check_ranges(params: RecipeParams) -> str | None:
    """Return a message for the first out-of-range parameter, else None.

    The timeline model silently collapses when fridge + warmup leaves no
    room-temperature time, so that case is rejected here.
    """
    for name in FLOAT_FIELDS:
        if not math.isfinite(getattr(params, name)):
            return f"{name.replace('_', '-')} must be a finite number"
    lo, hi = W_RANGE
    if not lo <= params.w <= hi:
        return f"W must be between {lo} and {hi}"
    lo_h, hi_h = HYDRATION_RANGE
    if not lo_h <= params.hydration <= hi_h:
        return f"Hydration must be between {lo_h} and {hi_h}"
    if params.balls < 1:
        return "balls must be >= 1"
    if params.ball_weight <= 0:
        return "ball-weight must be > 0"
    if params.total_hours <= 0:
        return "total-hours must be > 0"
    if params.fridge_hours < 0 or params.warmup_hours < 0:
        return "fridge-hours and warmup-hours must be >= 0"
    if params.uses_fridge and params.fridge_hours + params.warmup_hours >= params.total_hours:
        return "Sum of fridge-hours and warmup-hours must be < total-hours"
    return None


class PlanService(BaseService):
    """Computes a dough plan from layered recipe parameters."""

    def resolve(
        self,
        overrides: RecipeOverrides,
        *,
        profile_path: Path | None = None,
    ) -> RecipeParams:
        """Merge config defaults, the profile (if any), and *overrides*.

        Raises:
            ProfileError: If the profile cannot be loaded.
            pydantic.ValidationError: If a required field is missing.
        """
        layers = [self._settings.recipe]
        if profile_path is not None:
            layers.append(read_profile(profile_path))
            logger.debug("Loaded profile %s", profile_path)
        layers.append(overrides)
        return RecipeParams.from_layers(*layers)

    @traced
    def plan(
        self,
        overrides: RecipeOverrides,
        *,
        profile_path: Path | None = None,
        save_profile: Path | None = None,
        now: datetime | None = None,
    ) -> ServiceResult:
        """Validate parameters and compute ingredients, timeline, and schedule."""
        try:
            params = self.resolve(overrides, profile_path=profile_path)
        except ProfileError as exc:
            return self._fail(OP, exc.code, exc.message, path=str(exc.path))
        except ValidationError as exc:
            fields = sorted({".".join(str(p) for p in e["loc"]) for e in exc.errors()})
            return self._fail(
                OP, VALIDATION, f"Invalid or missing parameters: {', '.join(fields)}", fields=fields
            )

        problem = check_ranges(params)
        if problem is not None:
            return self._fail(OP, INVALID_RANGE, problem, params=params.model_dump(mode="json"))

        warnings: list[str] = []

        with trace_span("ingredients") as span:
            eff = effective_hours(params.total_hours, params.fridge_hours, params.fridge_factor)
            ingredients = compute_ingredients(
                IngredientsInput(
                    total_dough_g=params.total_dough_g,
                    hydration=params.hydration,
                    salt_per_kg=params.salt_per_kg,
                    yeast=params.yeast,
                    temp_c=params.temp,
                    w=params.w,
                    effective_hours=eff,
                )
            )
            pct = yeast_percent(params.yeast, params.temp, params.w, eff)
            if span:
                span.annotate("effective_hours", round(eff, 3))

        with trace_span("timeline"):
            timeline = build_timeline(
                params.total_hours, params.temp, params.fridge_hours, params.warmup_hours
            )

        schedule: list[dict[str, Any]] = []
        start_dt = self._start_datetime(params, now, warnings)
        if start_dt is not None:
            try:
                schedule = [p.to_dict() for p in project_phases(timeline, start_dt)]
            except OverflowError:
                warnings.append("Timeline runs past the calendar range; clock times omitted")
                start_dt = None

        data: dict[str, Any] = {
            "params": params.model_dump(mode="json"),
            "total_dough_g": params.total_dough_g,
            "effective_hours": eff,
            "yeast_percent": pct,
            "ingredients": {
                "flour_g": ingredients.flour_g,
                "water_g": ingredients.water_g,
                "salt_g": ingredients.salt_g,
                "yeast_g": ingredients.yeast_g,
                "starter_total_g": ingredients.starter_total_g,
            },
            "timeline": {
                "bulk_h": timeline.bulk_h,
                "fridge_h": timeline.fridge_h,
                "warmup_h": timeline.warmup_h,
                "proof_h": timeline.proof_h,
            },
            "total_hours": timeline.total_h,
            "start": start_dt.strftime("%H:%M") if start_dt else None,
            "schedule": schedule,
        }

        if save_profile is not None:
            try:
                write_profile(save_profile, params)
            except ProfileError as exc:
                return self._fail(OP, exc.code, exc.message, path=str(exc.path))
            logger.debug("Saved profile %s", save_profile)
            data["profile_saved"] = str(save_profile)

        return ServiceResult(ok=True, op=OP, data=data, warnings=warnings)

    @staticmethod
    def _start_datetime(
        params: RecipeParams, now: datetime | None, warnings: list[str]
    ) -> datetime | None:
        """Start of the process, or None when the given start is unusable."""
        current = now or now_local()
        if params.start is None:
            return current
        try:
            start = parse_start(params.start)
        except ValueError:
            warnings.append(f"Ignoring start time {params.start!r}: expected HH:MM")
            return None
        return combine_start(start, current.date())
