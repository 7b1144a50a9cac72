"""Rich Console factory and theme for vault2blog output.

Command output renders to a StringIO buffer and is echoed by click, so it
stays capturable in tests.  Diagnostics (first-run welcome, malformed
configuration) print straight to stderr.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

V2B_THEME = Theme(
    {
        "v2b.ok": "bold green",
        "v2b.error": "bold red",
        "v2b.warning": "bold yellow",
        "v2b.key": "dim",
        "v2b.path": "dim",
        "v2b.title": "bold",
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
        theme=V2B_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def create_stderr_console() -> Console:
    """Create a Console bound to ``sys.stderr`` for user-facing diagnostics."""
    return Console(stderr=True, theme=V2B_THEME, highlight=False)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
