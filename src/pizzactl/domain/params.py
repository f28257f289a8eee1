"""Recipe parameter set and layered overrides.

The effective parameters for one calculation come from several layers
(config defaults, a saved profile, CLI options).  Each layer is a
:class:`RecipeOverrides` where ``None`` means "not supplied", so a value
that happens to equal the default still wins over a lower layer.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from pizzactl.domain.types import YeastKind


class RecipeOverrides(BaseModel):
    """Sparse parameter layer: every field optional."""

    model_config = {"frozen": True}

    w: int | None = None
    temp: float | None = None
    yeast: YeastKind | None = None
    hydration: float | None = None
    salt_per_kg: float | None = None
    ball_weight: float | None = None
    balls: int | None = None
    total_hours: float | None = None
    fridge_hours: float | None = None
    warmup_hours: float | None = None
    fridge_factor: float | None = None
    start: str | None = None

    def supplied(self) -> dict[str, Any]:
        """Fields that were actually set in this layer."""
        return {k: v for k, v in self.model_dump().items() if v is not None}


def merge_layers(*layers: RecipeOverrides) -> dict[str, Any]:
    """Merge layers lowest-priority first; later non-None values win."""
    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer.supplied())
    return merged


class RecipeParams(BaseModel):
    """Complete, effective parameter set for one calculation.

    Also the schema of a saved profile document.
    """

    model_config = {"frozen": True}

    w: int
    temp: float = 25.0
    yeast: YeastKind = YeastKind.DRY
    hydration: float = 0.75
    salt_per_kg: float = 20.0
    ball_weight: float = 280.0
    balls: int = 2
    total_hours: float = 11.0
    fridge_hours: float = 0.0
    warmup_hours: float = 3.0
    fridge_factor: float = 0.25
    start: str | None = None

    @classmethod
    def from_layers(cls, *layers: RecipeOverrides) -> RecipeParams:
        """Build from code defaults plus *layers*.

        Raises:
            pydantic.ValidationError: If ``w`` is missing from every layer.
        """
        return cls.model_validate(merge_layers(*layers))

    @property
    def total_dough_g(self) -> float:
        return self.balls * self.ball_weight

    @property
    def uses_fridge(self) -> bool:
        return self.fridge_hours > 0.0
