"""Tag normalization and parsing for tagkeeper.

Upstream repositories publish release tags in many shapes::

    v1.16.2
    op-node/v1.16.3-rc1
    1.35.3
    v0.3.0-RC-2

This module reduces them to a string the :mod:`semver` parser accepts and
hands that string over. Normalization is purely textual and total; only the
final parse step can fail, and it fails with
:class:`~tagkeeper.exceptions.ParseError` naming the tag as given.

Typical usage::

    >>> parse_tag("op-node/v1.16.3-rc1", "op-node")
    Version(major=1, minor=16, patch=3, prerelease='rc.1', build=None)
"""

from __future__ import annotations

import semver

from tagkeeper.exceptions import ParseError
from tagkeeper.utils.logger import get_logger
from tagkeeper.constants import (
    RC_CANONICAL_FORMAT,
    RC_PATTERN,
    TAG_PATH_SEPARATOR,
    VERSION_PREFIX,
)

logger = get_logger("core.normalizer")


def strip_tag_prefix(tag: str, tag_prefix: str = "") -> str:
    """Remove ``tag_prefix`` and one following path separator from ``tag``.

    A tag that does not start with the prefix is returned unchanged; the
    mismatch is logged but not treated as an error.

    Args:
        tag: Raw tag, e.g. ``"op-node/v1.16.2"``.
        tag_prefix: Expected prefix, e.g. ``"op-node"``. Empty means none.

    Returns:
        The tag without its prefix, e.g. ``"v1.16.2"``.
    """
    if not tag_prefix:
        return tag

    if not tag.startswith(tag_prefix):
        logger.debug("Tag %r does not start with prefix %r; using it as-is", tag, tag_prefix)
        return tag

    stripped = tag[len(tag_prefix):]
    if stripped.startswith(TAG_PATH_SEPARATOR):
        stripped = stripped[len(TAG_PATH_SEPARATOR):]
    return stripped


def normalize_rc_format(version: str) -> str:
    """Rewrite release-candidate suffixes into the dotted ``-rc.N`` form.

    Examples:
        >>> normalize_rc_format("v0.3.0-rc1")
        'v0.3.0-rc.1'
        >>> normalize_rc_format("v0.3.0-RC-12")
        'v0.3.0-rc.12'
        >>> normalize_rc_format("v0.3.0-beta.1")
        'v0.3.0-beta.1'
    """
    return RC_PATTERN.sub(RC_CANONICAL_FORMAT, version)


def normalize_tag(tag: str, tag_prefix: str = "") -> str:
    """Apply prefix stripping and RC normalization to ``tag``."""
    return normalize_rc_format(strip_tag_prefix(tag, tag_prefix))


def parse_tag(tag: str, tag_prefix: str = "") -> semver.Version:
    """Parse a release tag into a :class:`semver.Version`.

    Steps:

    1. Strip ``tag_prefix`` (and a single ``/``) if the tag starts with it.
    2. Rewrite RC suffixes (``-rc1``, ``-rc-1``, ``-RC1``) to ``-rc.1``.
    3. Drop one leading ``v`` and parse as a semantic version. Missing minor
       or patch components default to zero (``v1.2`` is ``1.2.0``).

    Args:
        tag: Raw tag.
        tag_prefix: Expected tag prefix, or ``""``.

    Returns:
        A freshly constructed, immutable version.

    Raises:
        ParseError: The normalized tag is not a valid semantic version.
    """
    normalized = normalize_tag(tag, tag_prefix)
    candidate = normalized
    if candidate.startswith(VERSION_PREFIX):
        candidate = candidate[len(VERSION_PREFIX):]

    try:
        version = semver.Version.parse(candidate, optional_minor_and_patch=True)
    except ValueError as exc:
        logger.debug("Cannot parse tag %r (normalized %r): %s", tag, normalized, exc)
        raise ParseError(
            "Invalid version format",
            tag=tag,
            reason=str(exc),
        ) from exc

    if normalized != tag:
        logger.debug("Normalized tag %r to %r", tag, normalized)
    return version
