"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from jobteardown.config.logging import configure_logging

if TYPE_CHECKING:
    from jobteardown.config.settings import TeardownSettings


class AppContext:
    """Settings plus output helpers shared by every command."""

    def __init__(self, settings: TeardownSettings) -> None:
        self.settings = settings
        configure_logging(
            verbose=settings.verbose_logging,
            log_json=settings.json_logging,
        )

    @property
    def json_output(self) -> bool:
        return self.settings.json_output

    def echo(self, text: str) -> None:
        click.echo(text)

    def fail(self, message: str) -> NoReturn:
        """Report *message* on stderr and exit with code 1."""
        click.echo(f"ERROR: {message}", err=True)
        raise SystemExit(1)
