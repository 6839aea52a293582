"""Terminal rendering helpers.

Chrome goes to stderr. stdout is reserved for results.
"""

from __future__ import annotations

from pathgroup.ui.console import err_console, out_console

__all__ = ["err_console", "out_console"]
