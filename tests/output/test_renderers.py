"""Tests for operation-specific Rich renderers."""

from __future__ import annotations

from pathlib import Path

import pytest

from pizzactl.config.settings import PizzaSettings
from pizzactl.domain.params import RecipeOverrides
from pizzactl.domain.types import YeastKind
from pizzactl.output.renderers import fmt_g, fmt_number, render_quiet, render_result
from pizzactl.services.plan import PlanService
from pizzactl.services.result import ServiceError, ServiceResult
from tests.conftest import FIXED_NOW


def _plan(settings: PizzaSettings, **fields: object) -> ServiceResult:
    result = PlanService(settings).plan(RecipeOverrides(**fields), now=FIXED_NOW)  # type: ignore[arg-type]
    assert result.ok, result.error
    return result


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


class TestFormatting:
    @pytest.mark.parametrize(
        ("grams", "expected"),
        [(8.0, "8"), (312.44, "312.4"), (0.96, "1"), (1.23, "1.2"), (0.0, "0")],
    )
    def test_fmt_number(self, grams: float, expected: str) -> None:
        assert fmt_number(grams) == expected

    def test_fmt_g(self) -> None:
        assert fmt_g(3.14) == "3.1 g"


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("plan", "INVALID_RANGE", "Hydration must be between 0.55 and 0.85"))
        assert "ERROR" in output
        assert "plan" in output
        assert "Hydration must be between" in output

    def test_verbose_shows_detail(self) -> None:
        output = render_result(_err("plan", "PROFILE_INVALID", "Bad", path="x.json"), verbose=True)
        assert "detail" in output
        assert "x.json" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="plan"))


class TestPlanRenderer:
    def test_ingredients_table(self, settings: PizzaSettings) -> None:
        output = render_result(_plan(settings, w=270))
        assert "Ingredients summary" in output
        assert "2 × 280 g" in output
        assert "W=270 | H=75%" in output
        assert "Water" in output
        assert "20.0 g/kg" in output
        assert "Dry yeast" in output
        assert "of flour (estimate)" in output

    def test_fresh_yeast_row(self, settings: PizzaSettings) -> None:
        output = render_result(_plan(settings, w=270, yeast=YeastKind.FRESH))
        assert "Fresh yeast" in output
        assert "~3× dry yeast" in output

    def test_timeline_with_clock(self, settings: PizzaSettings) -> None:
        output = render_result(_plan(settings, w=270))
        assert "Bulk rise (whole dough):" in output
        assert "h → ~end at 16:03" in output
        assert "Final proof (balls):" in output
        assert "~end at 21:00" in output
        assert "11.0 h" in output
        assert "Fridge" not in output

    def test_fridge_rows(self, settings: PizzaSettings) -> None:
        output = render_result(
            _plan(settings, w=300, total_hours=12.0, fridge_hours=4.0, warmup_hours=3.0)
        )
        assert "Fridge (covered):" in output
        assert "Warmup (bench rest):" in output
        assert "~end at 15:45" in output
        assert "~end at 18:45" in output

    def test_no_clock_without_start(self, settings: PizzaSettings) -> None:
        output = render_result(_plan(settings, w=270, start="late"))
        assert "end at" not in output

    def test_notes_toggle(self, settings: PizzaSettings) -> None:
        result = _plan(settings, w=270)
        assert "Notes:" in render_result(result)
        assert "Notes:" not in render_result(result, show_notes=False)

    def test_profile_saved_line(self, settings: PizzaSettings, tmp_path: Path) -> None:
        target = tmp_path / "p.json"
        result = PlanService(settings).plan(RecipeOverrides(w=280), save_profile=target)
        assert f"Profile saved to {target}" in render_result(result, width=400)

    def test_verbose_extras(self, settings: PizzaSettings) -> None:
        output = render_result(_plan(settings, w=270), verbose=True)
        assert "effective_hours" in output
        assert "total_dough_g" in output


class TestProfileShowRenderer:
    def test_fields_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="profile_show",
            data={"path": "p.json", "fields": {"w": 300, "balls": 4}, "count": 2},
        )
        output = render_result(result)
        assert "OK" in output
        assert "p.json" in output
        assert "balls" in output
        assert "300" in output


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(ServiceResult(ok=True, op="other", data={"a": 1}))
        assert "OK" in output
        assert "a: 1" in output


class TestQuiet:
    def test_plan_lines(self, settings: PizzaSettings) -> None:
        lines = render_quiet(_plan(settings, w=270)).splitlines()
        assert [line.split()[0] for line in lines] == ["flour", "water", "salt", "yeast"]

    def test_error(self) -> None:
        assert render_quiet(_err("plan", "X", "boom")) == "ERROR: plan — boom"

    def test_other_ok(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="profile_show")) == "OK: profile_show"
