"""Subcommand modules for jobteardown.

register_commands() uses deferred imports to keep ``--help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from jobteardown.commands.config_cmd import config
    from jobteardown.commands.simulate import simulate

    cli.add_command(config)
    cli.add_command(simulate)
