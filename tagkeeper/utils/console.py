"""
Rich-backed terminal output for the tagkeeper commands.

Everything printed here is meant for the person running the CLI. Tags are
arbitrary user input, so they are always rendered as literal text and never
interpreted as Rich markup. Only labels built by this module (see
:func:`colorize_tag_kind`) carry styling. Diagnostics belong to
:mod:`tagkeeper.utils.logger` instead.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Dict, List, Optional

from rich.text import Text
from rich.table import Table
from rich.theme import Theme
from rich.console import Console

from tagkeeper.constants import (
    TAG_KIND_INVALID,
    TAG_KIND_PRERELEASE,
    TAG_KIND_RC,
    TAG_KIND_RELEASE,
)

TAGKEEPER_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
    }
)

_KIND_COLORS: Dict[str, str] = {
    TAG_KIND_RELEASE: "green",
    TAG_KIND_RC: "cyan",
    TAG_KIND_PRERELEASE: "yellow",
    TAG_KIND_INVALID: "red",
}

_console: Optional[Console] = None
_color_allowed = True
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True when the environment and stdout permit ANSI colors."""
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                _console = Console(
                    theme=TAGKEEPER_THEME,
                    no_color=not (_color_allowed and _should_use_color()),
                    highlight=False,
                )
    return _console


def reconfigure_console(*, use_color: bool = True) -> None:
    """Discard the cached console; the next print builds a fresh one.

    Args:
        use_color: ``False`` forces plain output (``--no-color``). ``True``
            leaves the decision to the environment, so ``NO_COLOR``, ``CI``
            and a non-TTY stdout still turn colors off.
    """
    global _console, _color_allowed
    with _console_lock:
        _console = None
        _color_allowed = use_color


# ---------------------------------------------------------------------------
# Status lines
# ---------------------------------------------------------------------------


def print_success(message: str, *, prefix: str = "[OK]") -> None:
    _get_console().print(f"{prefix} {message}", style="success", markup=False)


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    _get_console().print(f"{prefix} {message}", style="error", markup=False)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    _get_console().print(f"{prefix} {message}", style="warning", markup=False)


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def _cell(value: Any) -> Text:
    if isinstance(value, Text):
        return value
    return Text("" if value is None else str(value))


def print_table(
    data: List[Dict[str, Any]],
    *,
    headers: Optional[List[str]] = None,
    title: Optional[str] = None,
    column_styles: Optional[Dict[str, Dict[str, Any]]] = None,
) -> None:
    """Print rows of tag data as a table.

    Plain values are shown verbatim, brackets included. Pass a
    :class:`rich.text.Text` to style a single cell.

    Args:
        data: One mapping per row. An empty list prints nothing.
        headers: Columns to show, in order. Defaults to the first row's keys.
        title: Caption above the table.
        column_styles: ``style`` / ``justify`` / ``no_wrap`` keyed by header.
    """
    if not data:
        return

    columns = headers if headers is not None else list(data[0])
    styles = column_styles or {}

    table = Table(title=title, show_header=True, header_style="bold")
    for name in columns:
        options = styles.get(name, {})
        table.add_column(
            name,
            style=options.get("style"),
            justify=options.get("justify", "default"),
            no_wrap=options.get("no_wrap", False),
            overflow="fold",
        )

    for row in data:
        table.add_row(*(_cell(row.get(name)) for name in columns))

    _get_console().print(table)


def colorize_tag_kind(kind: str) -> Text:
    """Return ``kind`` as a table cell colored by tag kind.

    Unknown kinds come back unstyled.
    """
    return Text(kind, style=_KIND_COLORS.get(kind.lower(), ""))
