"""
Logging utilities for tagkeeper.

Every module obtains its logger through :func:`get_logger`, which keeps all
records under the ``tagkeeper`` namespace. Nothing is emitted until the CLI
(or an embedding application) calls :func:`setup_logging`; library use stays
silent thanks to a ``NullHandler``.
"""

from __future__ import annotations

import os
import sys
import logging
import threading
from typing import IO, Optional

from tagkeeper.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_LEVEL_COLORS,
    LOG_VERBOSE_FORMAT,
    LOGGER_NAMESPACE,
)

_logging_configured: bool = False
_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in ANSI color codes.

    Colors are only applied when ``use_color`` is set and the terminal
    allows it (see :meth:`_should_use_color`). The record itself is left
    untouched so other handlers see the plain level name.
    """

    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = LOG_LEVEL_COLORS.get(record.levelname)
        if not (color and self.use_color and self._should_use_color()):
            return super().format(record)

        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original

    @staticmethod
    def _should_use_color() -> bool:
        if os.environ.get("NO_COLOR") or os.environ.get("CI"):
            return False
        try:
            return sys.stderr.isatty()
        except (AttributeError, OSError):
            return False


def setup_logging(
    *,
    level: int = logging.INFO,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
    use_color: bool = True,
) -> None:
    """Install a single stream handler on the ``tagkeeper`` logger.

    Repeated calls replace the previous handler rather than stacking new
    ones.

    Args:
        level: Logging level (e.g., ``logging.INFO``, ``logging.DEBUG``).
        verbose: Include timestamps and logger names in each line.
        stream: Output stream; defaults to ``sys.stderr``.
        use_color: ``False`` turns level colors off regardless of the
            terminal. ``True`` still honours ``NO_COLOR`` and ``CI``.
    """
    global _logging_configured

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        ColoredFormatter(
            LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            use_color=use_color,
        )
    )

    with _lock:
        package_logger = logging.getLogger(LOGGER_NAMESPACE)
        package_logger.handlers.clear()
        package_logger.setLevel(level)
        package_logger.addHandler(handler)
        package_logger.propagate = False
        _logging_configured = True


def _qualify(name: Optional[str]) -> str:
    """Map ``name`` into the package namespace."""
    if not name or name == LOGGER_NAMESPACE:
        return LOGGER_NAMESPACE
    if name.startswith(LOGGER_NAMESPACE + "."):
        return name
    return f"{LOGGER_NAMESPACE}.{name}"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger within the tagkeeper namespace.

    Args:
        name: Short (``"core.normalizer"``) or fully qualified
            (``"tagkeeper.core.normalizer"``) logger name.

    Returns:
        A logger instance under the ``tagkeeper`` hierarchy.
    """
    logger = logging.getLogger(_qualify(name))

    if not logger.handlers and (not logger.parent or not logger.parent.handlers):
        logger.addHandler(logging.NullHandler())

    return logger


def is_logging_configured() -> bool:
    """Return True if :func:`setup_logging` has been called."""
    return _logging_configured


def disable_logging() -> None:
    """Silence all tagkeeper logging output."""
    global _logging_configured

    with _lock:
        package_logger = logging.getLogger(LOGGER_NAMESPACE)
        package_logger.handlers.clear()
        package_logger.addHandler(logging.NullHandler())
        package_logger.setLevel(logging.NOTSET)
        _logging_configured = False
