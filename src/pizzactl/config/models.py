"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, pizzactl.toml only contains
overrides.  Recipe defaults live in :class:`RecipeParams`; the
``[recipe]`` section only lists the fields a kitchen wants different.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- pizzactl.toml sections ---


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 100
    show_notes: bool = True
