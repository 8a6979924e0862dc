"""Render TeardownResult and TeardownConfig for humans or machines (--json)."""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from jobteardown.output.console import create_console, get_output

if TYPE_CHECKING:
    from jobteardown.config.models import TeardownConfig
    from jobteardown.services.result import TeardownResult


def format_result(result: TeardownResult, *, json_output: bool = False) -> str:
    """Format one event's result.

    Args:
        result: The teardown result to format.
        json_output: If True, return JSON; otherwise a Rich table.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column(style="td.key")
    table.add_column(style="td.value")
    table.add_row("outcome", f"[td.{result.outcome.value}]{result.outcome.value}[/]")
    table.add_row("item", escape(result.item))
    if result.reason:
        table.add_row("reason", escape(result.reason))
    if result.request is not None:
        table.add_row("target", escape(result.request.target))
        for name, value in result.request.parameters().items():
            table.add_row(name, escape(value))
        cause = result.request.cause
        upstream = cause.upstream_project
        if cause.upstream_build is not None:
            upstream = f"{upstream} #{cause.upstream_build}"
        table.add_row("cause", escape(upstream))
    if result.build_number is not None:
        table.add_row("build", str(result.build_number))
    console.print(table)
    return get_output(console).rstrip()


def format_config(config: TeardownConfig, *, json_output: bool = False) -> str:
    data = config.model_dump()
    if json_output:
        return _json.dumps(data, indent=2)
    return "\n".join(f"{key}: {value if value is not None else '-'}" for key, value in data.items())
