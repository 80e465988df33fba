"""Terminal output and logging helpers shared by the tagkeeper commands."""

from __future__ import annotations

from tagkeeper.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
)
from tagkeeper.utils.console import (
    colorize_tag_kind,
    print_error,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)

__all__ = [
    "colorize_tag_kind",
    "disable_logging",
    "get_logger",
    "is_logging_configured",
    "print_error",
    "print_success",
    "print_table",
    "print_warning",
    "reconfigure_console",
    "setup_logging",
]
