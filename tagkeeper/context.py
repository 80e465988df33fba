"""
Shared context object for tagkeeper CLI commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from tagkeeper.config import TagKeeperConfig


class TagKeeperContext:
    """Per-invocation state handed from the ``tagkeeper`` group to commands.

    Attributes:
        config_path: Configuration file that was loaded, if any.
        config: Loaded configuration, or ``None`` before loading.
    """

    __slots__ = ("config_path", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.config: Optional[TagKeeperConfig] = None

    def resolve_tag_prefix(self, option_value: Optional[str]) -> str:
        """Return ``option_value`` if given, else the configured prefix."""
        if option_value is not None:
            return option_value
        if self.config is not None:
            return self.config.tag_prefix
        return ""


#: Click decorator for injecting :class:`TagKeeperContext` into commands.
pass_context = click.make_pass_decorator(TagKeeperContext, ensure=True)
