"""Shared pytest fixtures and test helpers for pizzactl tests."""

from __future__ import annotations

import json
from collections.abc import Generator
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from pizzactl.config.settings import PizzaSettings
from pizzactl.services.telemetry import disable_telemetry

# A fixed clock so schedules are reproducible.
FIXED_NOW = datetime(2024, 6, 1, 10, 0)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer env vars from leaking into settings."""
    for var in ("PIZZACTL_CONFIG", "PIZZACTL_QUIET", "PIZZACTL_VERBOSE", "PIZZACTL_JSON_OUTPUT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` enables telemetry in-process; turn it off after each test."""
    yield
    disable_telemetry()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run with CWD in an empty temp directory (no pizzactl.toml above it)."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(workdir: Path) -> PizzaSettings:
    """Settings with code defaults only."""
    return PizzaSettings.from_cli(cwd=workdir)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_profile_json(path: Path, **fields: Any) -> Path:
    """Write a profile document with *fields*."""
    path.write_text(json.dumps(fields), encoding="utf-8")
    return path


def ingredient_sum(data: dict[str, Any]) -> float:
    ing = data["ingredients"]
    return ing["flour_g"] + ing["water_g"] + ing["salt_g"] + ing["yeast_g"]


def timeline_sum(data: dict[str, Any]) -> float:
    t = data["timeline"]
    return t["bulk_h"] + t["fridge_h"] + t["warmup_h"] + t["proof_h"]
