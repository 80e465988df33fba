"""
Core functionality exports for tagkeeper.

Importing from here keeps user-facing imports clean and stable::

    from tagkeeper.core import parse_tag, validate_upgrade
"""

from __future__ import annotations

from tagkeeper.core.normalizer import (
    normalize_rc_format,
    normalize_tag,
    parse_tag,
    strip_tag_prefix,
)
from tagkeeper.core.comparator import compare_tags, validate_upgrade
from tagkeeper.core.classifier import (
    classify_tag,
    classify_version,
    is_release,
    is_release_candidate,
    is_release_or_release_candidate,
)

__all__ = [
    # Normalizer
    "strip_tag_prefix",
    "normalize_rc_format",
    "normalize_tag",
    "parse_tag",
    # Comparator
    "compare_tags",
    "validate_upgrade",
    # Classifier
    "is_release",
    "is_release_candidate",
    "is_release_or_release_candidate",
    "classify_tag",
    "classify_version",
]
