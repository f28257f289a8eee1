"""Locating ``pizzactl.toml``.

An explicit ``--config`` path wins, then ``PIZZACTL_CONFIG``, then the
nearest ``pizzactl.toml`` in the working directory or any parent.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "pizzactl.toml"
CONFIG_ENV_VAR = "PIZZACTL_CONFIG"


def _walk_up(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A ``PIZZACTL_CONFIG`` pointing at a missing file disables discovery.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None
    return _walk_up((start or Path.cwd()).resolve())


def resolve_config(explicit: str | None, cwd: Path | None = None) -> Path | None:
    """Config file in effect for a CLI run.

    An explicit path that does not exist means "no config", never a
    fallback to discovery.
    """
    if explicit:
        p = Path(explicit)
        return p if p.is_file() else None
    return find_config(cwd)
