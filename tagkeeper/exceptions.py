"""
Custom exception hierarchy for tagkeeper.

All exceptions inherit from :class:`TagKeeperError` and carry optional
structured metadata via the ``details`` attribute, which is rendered by
``__str__`` so that CLI error lines and log records show the offending
tags alongside the message.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class TagKeeperError(Exception):
    """Base exception for all tagkeeper errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


class ParseError(TagKeeperError):
    """Raised when a tag cannot be parsed as a semantic version.

    The error always refers to the tag as the caller supplied it, never to
    the normalized string handed to the version parser.

    Args:
        message: Error description.
        tag: Original (non-normalized) tag.
        reason: Rejection reason reported by the version parser.
    """

    __slots__ = ("tag", "reason")

    def __init__(
        self,
        message: str,
        *,
        tag: Optional[str] = None,
        reason: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "tag", repr(tag) if tag is not None else None)
        _add_if(details, "reason", reason)

        super().__init__(message, details)

        self.tag = tag
        self.reason = reason


class DowngradeError(TagKeeperError):
    """Raised when a proposed version transition moves backwards.

    Args:
        message: Error description.
        current_tag: Tag currently recorded.
        new_tag: Proposed tag that precedes ``current_tag``.
    """

    __slots__ = ("current_tag", "new_tag")

    def __init__(
        self,
        message: str,
        *,
        current_tag: Optional[str] = None,
        new_tag: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "current", current_tag)
        _add_if(details, "new", new_tag)

        super().__init__(message, details)

        self.current_tag = current_tag
        self.new_tag = new_tag


class ConfigError(TagKeeperError):
    """Raised when a configuration file is missing, unreadable, or invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
