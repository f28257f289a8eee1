"""Command: ingredients and fermentation timeline for one dough."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from pizzactl.commands._base import PizzaCommand
from pizzactl.domain.params import RecipeOverrides
from pizzactl.domain.types import YeastKind

if TYPE_CHECKING:
    from pizzactl.commands._context import AppContext


@click.command(
    cls=PizzaCommand,
    examples="""\
  pizzactl plan --w 280
  pizzactl plan --w 300 --temp 22 --yeast fresh --balls 4
  pizzactl plan --w 320 --total-hours 24 --fridge-hours 16 --warmup-hours 3
  pizzactl plan --w 280 --start 09:30
  pizzactl plan --profile weekend.json --balls 6
  pizzactl plan --w 280 --hydration 0.7 --save-profile weekend.json""",
)
@click.option("--w", type=click.IntRange(200, 450), default=None, help="Flour strength W (e.g. 260–300).")
@click.option("--temp", type=float, default=None, help="Ambient temperature in °C [25].")
@click.option(
    "--yeast",
    type=click.Choice([k.value for k in YeastKind]),
    default=None,
    help="Yeast type [dry].",
)
@click.option("--hydration", type=float, default=None, help="Target hydration, 0.55–0.85 [0.75].")
@click.option("--salt-per-kg", type=float, default=None, help="Salt in g per kg flour [20].")
@click.option("--ball-weight", type=float, default=None, help="Dough ball weight in grams [280].")
@click.option("--balls", type=int, default=None, help="Number of balls [2].")
@click.option("--total-hours", type=float, default=None, help="Total process hours, mix to bake [11].")
@click.option("--fridge-hours", type=float, default=None, help="Fridge time in hours; 0 = no fridge [0].")
@click.option("--warmup-hours", type=float, default=None, help="Warmup after fridge in hours [3].")
@click.option(
    "--fridge-factor",
    type=float,
    default=None,
    help="Fridge activity vs room, clamped to 0.05–0.5 [0.25].",
)
@click.option("--start", default=None, help="Start time HH:MM (default: now).")
@click.option(
    "--profile",
    "profile_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Load a profile JSON before applying CLI options.",
)
@click.option(
    "--save-profile",
    type=click.Path(path_type=Path),
    default=None,
    help="Save the effective parameters to a profile JSON.",
)
@click.pass_obj
def plan(
    app: AppContext,
    w: int | None,
    temp: float | None,
    yeast: str | None,
    hydration: float | None,
    salt_per_kg: float | None,
    ball_weight: float | None,
    balls: int | None,
    total_hours: float | None,
    fridge_hours: float | None,
    warmup_hours: float | None,
    fridge_factor: float | None,
    start: str | None,
    profile_path: Path | None,
    save_profile: Path | None,
) -> None:
    """Calculate ingredients and timeline for a direct pizza dough.

    Options left out fall back to the profile (--profile), then to the
    [recipe] section of pizzactl.toml, then to the defaults in brackets.
    """
    from pizzactl.services.plan import PlanService

    overrides = RecipeOverrides(
        w=w,
        temp=temp,
        yeast=YeastKind(yeast) if yeast else None,
        hydration=hydration,
        salt_per_kg=salt_per_kg,
        ball_weight=ball_weight,
        balls=balls,
        total_hours=total_hours,
        fridge_hours=fridge_hours,
        warmup_hours=warmup_hours,
        fridge_factor=fridge_factor,
        start=start,
    )
    result = PlanService(app.settings).plan(
        overrides,
        profile_path=profile_path,
        save_profile=save_profile,
    )
    app.emit(result)
