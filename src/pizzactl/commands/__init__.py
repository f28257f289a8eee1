"""Subcommand modules for pizzactl.

Provides register_commands() which uses deferred imports to keep
``pizzactl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root group."""
    from pizzactl.commands.plan import plan
    from pizzactl.commands.profile import profile

    cli.add_command(plan)
    cli.add_command(profile)
