"""Rich Console factory and theme for pizzactl output.

Consoles render into a StringIO buffer so every renderer returns a plain
string.  In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PIZZA_THEME = Theme(
    {
        "pizza.ok": "bold green",
        "pizza.error": "bold red",
        "pizza.warning": "bold yellow",
        "pizza.op": "bold cyan",
        "pizza.heading": "bold",
        "pizza.key": "dim",
        "pizza.amount": "bold",
        "pizza.time": "cyan",
        "pizza.note": "dim",
        "pizza.phase.bulk": "yellow",
        "pizza.phase.fridge": "blue",
        "pizza.phase.warmup": "magenta",
        "pizza.phase.proof": "green",
    }
)

DEFAULT_WIDTH = 100


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps table layout stable in tests).
    """
    return Console(
        file=StringIO(),
        theme=PIZZA_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_phase(phase: str) -> str:
    """Return the Rich style name for a timeline phase."""
    return f"pizza.phase.{phase}" if phase in {"bulk", "fridge", "warmup", "proof"} else ""
