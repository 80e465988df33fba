"""
Data model exports for tagkeeper.

Example:
    >>> from tagkeeper.models import TagInfo
"""

from __future__ import annotations

from tagkeeper.models.tag import TagInfo

__all__ = [
    "TagInfo",
]
