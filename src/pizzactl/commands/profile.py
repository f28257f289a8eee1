"""Command group: saved parameter profiles."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from pizzactl.commands._base import PizzaGroup

if TYPE_CHECKING:
    from pizzactl.commands._context import AppContext


@click.group(
    cls=PizzaGroup,
    examples="""\
  pizzactl profile show weekend.json
  pizzactl --json profile show weekend.json""",
)
def profile() -> None:
    """Inspect saved parameter profiles."""


@profile.command(
    examples="""\
  pizzactl profile show weekend.json""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def show(app: AppContext, path: Path) -> None:
    """Show the parameters stored in a profile."""
    from pizzactl.services.profile import ProfileService

    app.emit(ProfileService(app.settings).show(path))
