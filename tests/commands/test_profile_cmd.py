"""Tests for the profile command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from pizzactl.cli import cli


@pytest.mark.usefixtures("workdir")
class TestProfileShow:
    def test_show(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "p.json").write_text('{"w": 290, "hydration": 0.7}')
        result = cli_runner.invoke(cli, ["profile", "show", "p.json"])
        assert result.exit_code == 0
        assert "hydration" in result.output
        assert "290" in result.output

    def test_show_json(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "p.json").write_text('{"w": 290}')
        result = cli_runner.invoke(cli, ["--json", "profile", "show", "p.json"])
        data = json.loads(result.output)
        assert data["data"]["fields"] == {"w": 290}

    def test_show_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["profile", "show", "nope.json"])
        assert result.exit_code == 1
        assert result.stdout == ""

    def test_group_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["profile", "--examples"])
        assert result.exit_code == 0
        assert "profile show" in result.output
