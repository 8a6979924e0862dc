"""Command: replay one item-update event against a host snapshot."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from jobteardown.infrastructure.snapshot import load_snapshot
from jobteardown.output.formatters import format_result
from jobteardown.plugins.manager import create_plugin_manager

if TYPE_CHECKING:
    from jobteardown.commands._context import AppContext
    from jobteardown.services.result import TeardownResult


@click.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("item_name")
@click.pass_obj
def simulate(app: AppContext, snapshot: Path, item_name: str) -> None:
    """Run the teardown decision for ITEM_NAME as if it had just been saved.

    SNAPSHOT is a JSON description of jobs, multi-branch containers and
    shared libraries. The event goes through the registered item_updated
    hook; enqueues go to an in-memory queue and nothing is run.
    """
    try:
        host = load_snapshot(snapshot)
    except ValidationError as exc:
        app.fail(f"invalid snapshot {snapshot}: {exc.error_count()} error(s)\n{exc}")

    item = host.get_item(item_name)
    if item is None:
        app.fail(f"no item named {item_name!r} in {snapshot}")

    results: list[TeardownResult] = []
    pm = create_plugin_manager(host.services, app.settings.teardown, on_result=results.append)
    pm.notify_item_updated(item)
    if not results:
        app.fail(f"teardown handling failed for {item_name!r}; rerun with -v for details")

    app.echo(format_result(results[0], json_output=app.json_output))
