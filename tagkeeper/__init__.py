"""
tagkeeper: release tag normalization and upgrade validation.

Upstream repositories spell their release tags in many ways
(``v1.2.3``, ``op-node/v1.16.3-rc1``, ``1.35.3``, ``v0.3.0-RC-2``).
tagkeeper reduces them to comparable semantic versions and answers three
questions about them:

    • Is this tag a stable release, a release candidate, or something else?
    • Which of two tags is newer?
    • Is moving from one tag to another a downgrade?

Example:
    >>> import tagkeeper
    >>> tagkeeper.compare_tags("v0.3.0-rc1", "v0.3.0")
    -1
    >>> tagkeeper.validate_upgrade("v0.3.0", "v0.2.9")
    Traceback (most recent call last):
    ...
    tagkeeper.exceptions.DowngradeError: Version downgrade detected (current=v0.3.0, new=v0.2.9)
"""

from __future__ import annotations

from tagkeeper.__version__ import __version__
from tagkeeper.exceptions import DowngradeError, ParseError, TagKeeperError
from tagkeeper.core import (
    classify_tag,
    compare_tags,
    is_release,
    is_release_candidate,
    is_release_or_release_candidate,
    normalize_tag,
    parse_tag,
    validate_upgrade,
)

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "tagkeeper Contributors"
__license__ = "Apache-2.0"
__description__ = "Release tag normalization, comparison and upgrade validation."

__all__ = [
    "__version__",
    # Parsing
    "parse_tag",
    "normalize_tag",
    # Ordering
    "compare_tags",
    "validate_upgrade",
    # Classification
    "is_release",
    "is_release_candidate",
    "is_release_or_release_candidate",
    "classify_tag",
    # Errors
    "TagKeeperError",
    "ParseError",
    "DowngradeError",
]
