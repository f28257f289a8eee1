"""Click base classes for pizzactl commands.

Commands take an ``examples`` string (sample ``pizzactl`` invocations).
``--examples`` prints it and exits; ``--help`` only points at it, so the
option list for ``plan`` stays readable.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Adds the eager ``--examples`` flag and a pointer to it in ``--help``."""

    examples: str | None

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(  # type: ignore[attr-defined]
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or not self.examples:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)  # type: ignore[misc]
        if self.examples:
            formatter.write_paragraph()
            formatter.write_text(f"Run '{ctx.command_path} --examples' for sample invocations.")


class PizzaCommand(_ExamplesMixin, click.Command):
    """A pizzactl leaf command such as ``plan`` or ``profile show``."""


class PizzaGroup(_ExamplesMixin, click.Group):
    """A pizzactl group; subcommands default to :class:`PizzaCommand`."""

    command_class = PizzaCommand
