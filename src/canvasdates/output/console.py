"""Rich console factory and the ``cd.*`` theme.

Renderers draw into an in-memory console and hand back a string, so the
caller decides whether it goes to stdout or stderr. Rich drops color codes
by itself when the buffer is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CD_THEME = Theme(
    {
        "cd.ok": "bold green",
        "cd.error": "bold red",
        "cd.warning": "bold yellow",
        "cd.op": "bold cyan",
        "cd.key": "dim",
        "cd.path": "dim",
        "cd.date": "bold magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=CD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
