"""Rich Console factory and theme for typedenv output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TYPEDENV_THEME = Theme(
    {
        "env.ok": "bold green",
        "env.error": "bold red",
        "env.warning": "bold yellow",
        "env.op": "bold cyan",
        "env.key": "dim",
        "env.name": "bold blue",
        "env.type": "magenta",
        "env.status.ok": "green",
        "env.status.unset": "yellow",
        "env.status.invalid": "red",
    }
)

_STATUS_STYLES: dict[str, str] = {
    "ok": "env.status.ok",
    "unset": "env.status.unset",
    "invalid": "env.status.invalid",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TYPEDENV_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for a check status."""
    return _STATUS_STYLES.get(status, "")
