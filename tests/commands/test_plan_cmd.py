"""Tests for the plan command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from pizzactl.cli import cli


@pytest.mark.usefixtures("workdir")
class TestPlanCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["plan", "--w", "280", "--start", "09:00"])
        assert result.exit_code == 0, result.output
        assert "Ingredients summary" in result.output
        assert "Timeline" in result.output
        assert "~end at 20:00" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "plan", "--w", "270"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "plan"
        ing = data["data"]["ingredients"]
        total = ing["flour_g"] + ing["water_g"] + ing["salt_g"] + ing["yeast_g"]
        assert total == pytest.approx(560.0, abs=0.2)

    def test_quiet_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "plan", "--w", "270"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0].startswith("flour ")

    def test_fridge_options(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "plan",
                "--w",
                "320",
                "--total-hours",
                "24",
                "--fridge-hours",
                "16",
                "--warmup-hours",
                "3",
                "--yeast",
                "fresh",
            ],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["timeline"]["fridge_h"] == 16.0
        assert data["params"]["yeast"] == "fresh"

    def test_w_out_of_range_rejected_by_click(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["plan", "--w", "500"])
        assert result.exit_code == 2

    def test_missing_w(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "plan"])
        assert result.exit_code == 1
        assert result.stdout == ""

    def test_invalid_hydration(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["plan", "--w", "280", "--hydration", "0.95"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Hydration must be between" in result.stderr

    def test_fridge_too_long(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["plan", "--w", "280", "--total-hours", "10", "--fridge-hours", "8"]
        )
        assert result.exit_code == 1
        assert "must be < total-hours" in result.stderr

    def test_bad_start_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["plan", "--w", "280", "--start", "soon"])
        assert result.exit_code == 0
        assert "WARNING" in result.stderr
        assert "end at" not in result.stdout

    def test_verbose_includes_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "-v", "plan", "--w", "280"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["meta"]["telemetry"]["name"] == "PlanService.plan"


@pytest.mark.usefixtures("workdir")
class TestPlanProfiles:
    def test_save_then_load(self, cli_runner: CliRunner, workdir: Path) -> None:
        saved = cli_runner.invoke(
            cli, ["plan", "--w", "300", "--balls", "4", "--save-profile", "weekend.json"]
        )
        assert saved.exit_code == 0
        assert "Profile saved to weekend.json" in saved.output
        assert (workdir / "weekend.json").is_file()

        loaded = cli_runner.invoke(cli, ["--json", "plan", "--profile", "weekend.json"])
        assert loaded.exit_code == 0
        params = json.loads(loaded.output)["data"]["params"]
        assert params["w"] == 300
        assert params["balls"] == 4

    def test_cli_option_beats_profile(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "p.json").write_text('{"w": 300, "temp": 20.0}')
        result = cli_runner.invoke(
            cli, ["--json", "plan", "--profile", "p.json", "--temp", "25"]
        )
        params = json.loads(result.output)["data"]["params"]
        assert params["temp"] == 25.0
        assert params["w"] == 300

    def test_config_defaults(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "pizzactl.toml").write_text("[recipe]\nw = 260\nballs = 3\n")
        result = cli_runner.invoke(cli, ["--json", "plan"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["total_dough_g"] == 840.0

    def test_unreadable_profile(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["plan", "--w", "280", "--profile", "missing.json"])
        assert result.exit_code == 1
        assert "Failed to read profile" in result.stderr

    def test_invalid_profile(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "bad.json").write_text("{oops")
        result = cli_runner.invoke(cli, ["plan", "--w", "280", "--profile", "bad.json"])
        assert result.exit_code == 1
        assert "Invalid profile JSON" in result.stderr

    def test_binary_profile(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "bin.json").write_bytes(b'{"w": 280, "temp": "\xff"}')
        result = cli_runner.invoke(cli, ["plan", "--profile", "bin.json"])
        assert result.exit_code == 1
        assert "not UTF-8" in result.stderr

    def test_huge_total_hours(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["plan", "--w", "280", "--total-hours", "1e9"])
        assert result.exit_code == 0, result.output
        assert "calendar range" in result.stderr
        assert "~end at" not in result.stdout

    def test_infinite_total_hours(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["plan", "--w", "280", "--total-hours", "inf"])
        assert result.exit_code == 1
        assert "total-hours must be a finite number" in result.stderr
