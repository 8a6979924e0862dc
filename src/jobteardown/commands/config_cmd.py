"""Command: show the effective teardown configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jobteardown.output.formatters import format_config

if TYPE_CHECKING:
    from jobteardown.commands._context import AppContext


@click.command()
@click.pass_obj
def config(app: AppContext) -> None:
    """Print the [teardown] settings after TOML, env and flag merging."""
    app.echo(format_config(app.settings.teardown, json_output=app.json_output))
