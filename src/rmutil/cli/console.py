"""CLI console helpers with optional Rich support.

Everything written to stderr goes through :data:`console`.  This module
avoids module-level imports of ``rich`` so that removal, ``--help`` and
``--version`` keep working when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from rmutil.exceptions import RmError

PROG_NAME: str = "rm"


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``RmError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise RmError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain stderr print.

        With ``markup=False`` the text is written verbatim: no markup,
        no highlighting and no line wrapping.
        """
        try:
            rich_console = get_rich_console()
        except RmError:
            print(*objects, file=sys.stderr)
            return
        if markup:
            rich_console.print(*objects)
        else:
            rich_console.print(
                *objects,
                markup=False,
                emoji=False,
                highlight=False,
                soft_wrap=True,
            )

    def error(self, message: str) -> None:
        """Print ``rm: <message>`` verbatim."""
        self.print(f"{PROG_NAME}: {message}", markup=False)


console = _ConsoleProxy()
