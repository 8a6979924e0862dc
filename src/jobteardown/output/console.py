"""Rich Console factory and theme for jobteardown output.

Consoles render to a StringIO buffer so formatters keep a plain
``-> str`` contract. In non-TTY environments Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TEARDOWN_THEME = Theme(
    {
        "td.dispatched": "bold green",
        "td.skipped": "bold yellow",
        "td.not_eligible": "dim",
        "td.failed": "bold red",
        "td.key": "dim",
        "td.value": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=TEARDOWN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
