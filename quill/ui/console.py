"""Shared Rich Console and style definitions for the Quill CLI.

Diagnostics go to stderr via ``err_console``; extracted text is the only
thing written to stdout.
"""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

QUILL_THEME = Theme(
    {
        "info": "cyan",
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "heading": "bold cyan",
        "muted": "dim",
        "scope": "bold magenta",
        "scope.global": "bold green",
    }
)

err_console = Console(stderr=True, theme=QUILL_THEME)
