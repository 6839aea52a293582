"""Shared Rich consoles and style definitions."""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

PATHGROUP_THEME = Theme(
    {
        "info": "cyan",
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "heading": "bold cyan",
        "muted": "dim",
        "kind.label": "magenta",
        "kind.literal": "dim",
    }
)

# Summaries and warnings.
err_console = Console(stderr=True, theme=PATHGROUP_THEME)

# Tables and other human-readable results.
out_console = Console(theme=PATHGROUP_THEME)
