"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from pizzactl.output.console import create_console, get_output, style_for_phase
from pizzactl.services.result import Op

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from pizzactl.services.result import ServiceResult

    Renderer = Callable[..., None]


PHASE_LABELS: dict[str, str] = {
    "bulk": "Bulk rise (whole dough)",
    "fridge": "Fridge (covered)",
    "warmup": "Warmup (bench rest)",
    "proof": "Final proof (balls)",
}

NOTES = (
    "Yeast amounts are heuristic (Q10≈2/10°C; mild W effect). "
    "Fridge counted at configurable factor.",
    "If dough rises too fast in warm conditions (>27°C), "
    "shorten bulk or reduce yeast slightly.",
)

QUIET_INGREDIENTS = ("flour", "water", "salt", "yeast")


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
    show_notes: bool = True,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, show_notes=show_notes)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    ingredients = result.data.get("ingredients")
    if result.op == Op.PLAN and isinstance(ingredients, dict):
        return "\n".join(
            f"{name} {fmt_number(ingredients.get(f'{name}_g', 0.0))}" for name in QUIET_INGREDIENTS
        )

    return f"OK: {result.op}"


# ── Formatting helpers ────────────────────────────────────────────────


def fmt_number(grams: float) -> str:
    """Round to 0.1 and drop the decimal when it is zero."""
    v = round(grams * 10.0) / 10.0
    if abs(v - round(v)) < 1e-9:
        return f"{v:.0f}"
    return f"{v:.1f}"


def fmt_g(grams: float) -> str:
    """Format a mass: ``312.4 g`` or ``8 g``."""
    return f"{fmt_number(grams)} g"


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="pizza.ok")
    op = Text(f"  {result.op}", style="pizza.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="pizza.key")
    console.print(k, Text(str(value)), end="")
    console.print()


def _heading(console: Console, title: str) -> None:
    console.print()
    console.print(Text(f"=== {title} ===", style="pizza.heading"))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    prefix = " " * indent
    line = Text(f"{prefix}{span.get('duration_ms', 0.0):>8.3f}ms  ", style="dim")
    line.append(str(span.get("name", "?")))
    annotations = span.get("annotations")
    if annotations:
        line.append(f"  ({', '.join(f'{k}={v}' for k, v in annotations.items())})", style="dim")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pizza.error")
    op = Text(f"  {result.op}", style="pizza.op")
    console.print(label, op, Text(" — "), msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Plan renderer ─────────────────────────────────────────────────────


def _ingredients_table(data: dict[str, Any]) -> Table:
    params = data.get("params", {})
    ing = data.get("ingredients", {})

    table = Table(show_header=True, show_lines=True, expand=False)
    table.add_column("Ingredient", style="pizza.heading")
    table.add_column("Amount", style="pizza.amount", justify="right")
    table.add_column("Notes", style="pizza.note")

    table.add_row("Balls", f"{params.get('balls', 0)} × {params.get('ball_weight', 0.0):.0f} g", "")
    table.add_row(
        "Flour",
        fmt_g(ing.get("flour_g", 0.0)),
        f"W={params.get('w')} | H={params.get('hydration', 0.0) * 100:.0f}%",
    )
    table.add_row("Water", fmt_g(ing.get("water_g", 0.0)), "")
    table.add_row(
        "Salt",
        fmt_g(ing.get("salt_g", 0.0)),
        f"{params.get('salt_per_kg', 0.0):.1f} g/kg",
    )
    if params.get("yeast") == "fresh":
        table.add_row("Fresh yeast", fmt_g(ing.get("yeast_g", 0.0)), "~3× dry yeast")
    else:
        pct = data.get("yeast_percent", 0.0) * 100
        table.add_row("Dry yeast", fmt_g(ing.get("yeast_g", 0.0)), f"~{pct:.2f}% of flour (estimate)")
    return table


def _render_plan(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_notes: bool = True,
) -> None:
    d = result.data
    timeline = d.get("timeline", {})
    ends = {row["phase"]: row["ends_at"] for row in d.get("schedule", [])}

    _heading(console, "Ingredients summary")
    console.print(_ingredients_table(d))

    _heading(console, "Timeline")
    label_width = max(len(label) for label in PHASE_LABELS.values()) + 1
    for phase, label in PHASE_LABELS.items():
        hours = timeline.get(f"{phase}_h", 0.0)
        if phase in ("fridge", "warmup") and timeline.get("fridge_h", 0.0) <= 0.0:
            continue
        line = Text("- ")
        line.append(f"{label + ':':<{label_width}} ", style=style_for_phase(phase))
        line.append(f"{hours:.1f} h")
        if phase in ends:
            line.append(" → ~end at ")
            line.append(ends[phase], style="pizza.time")
        console.print(line)
    console.print(f"- {'Total:':<{label_width}} {d.get('total_hours', 0.0):.1f} h")

    if verbose:
        console.print()
        _field(console, "effective_hours", f"{d.get('effective_hours', 0.0):.2f}")
        _field(console, "total_dough_g", fmt_g(d.get("total_dough_g", 0.0)))
        if d.get("start"):
            _field(console, "start", d["start"])

    if show_notes:
        console.print()
        console.print("Notes:")
        for note in NOTES:
            console.print(f"• {note}", style="pizza.note")

    if "profile_saved" in d:
        console.print()
        console.print(f"Profile saved to {d['profile_saved']}")

    if verbose:
        _render_meta(console, result)


# ── Profile renderer ──────────────────────────────────────────────────


def _render_profile_show(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_notes: bool = True,
) -> None:
    _status_line(console, result)
    _field(console, "path", result.data.get("path", ""))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="pizza.key")
    table.add_column("Value")
    for key, value in result.data.get("fields", {}).items():
        table.add_row(key, str(value))
    console.print(table)

    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_notes: bool = True,
) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Renderer] = {
    Op.PLAN: _render_plan,
    Op.PROFILE_SHOW: _render_profile_show,
}
