"""Console output helpers for create-regolith-addon.

Every message is prefixed with a bold, coloured level tag (``error``,
``info`` or ``success``).  Errors go to stderr, everything else to stdout.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Literal

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
error_console = Console(stderr=True)

LogLevel = Literal["error", "info", "success"]

LEVEL_STYLES: dict[str, str] = {
    "error": "bold red",
    "info": "bold blue",
    "success": "bold green",
}


# ---------------------------------------------------------------------------
# Levelled logging
# ---------------------------------------------------------------------------


def log(level: LogLevel, message: str) -> None:
    """Print *message* (Rich markup allowed) behind the tag for *level*."""
    style = LEVEL_STYLES[level]
    formatted = f"[{style}]{level}[/{style}] {message}"
    if level == "error":
        error_console.print(formatted)
    else:
        console.print(formatted)


def print_error(message: str) -> None:
    log("error", escape(message))


def print_success(message: str) -> None:
    log("success", escape(message))


def highlight_path(path: str | PurePath) -> str:
    """Markup that renders *path* in yellow."""
    return f"[yellow]{escape(str(path))}[/yellow]"


def log_making_dir(path: str | PurePath) -> None:
    log("info", f"making directory {highlight_path(path)}")


def log_writing_file(path: str | PurePath) -> None:
    log("info", f"writing file {highlight_path(path)}")


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()
