"""Release / release-candidate classification of tags.

The predicates here never raise: a tag that cannot be parsed is simply
neither a release nor a release candidate. Callers that need to tell an
invalid tag apart from a valid one of the wrong kind should use
:func:`classify_tag` or call :func:`~tagkeeper.core.normalizer.parse_tag`
themselves.
"""

from __future__ import annotations

from typing import Optional

import semver

from tagkeeper.exceptions import ParseError
from tagkeeper.core.normalizer import parse_tag
from tagkeeper.constants import (
    RC_ONLY_PATTERN,
    TAG_KIND_INVALID,
    TAG_KIND_PRERELEASE,
    TAG_KIND_RC,
    TAG_KIND_RELEASE,
)


def _try_parse(tag: str, tag_prefix: str) -> Optional[semver.Version]:
    try:
        return parse_tag(tag, tag_prefix)
    except ParseError:
        return None


def _is_rc_prerelease(prerelease: Optional[str]) -> bool:
    """Return True if ``prerelease`` is exactly one RC marker."""
    if not prerelease:
        return False
    return RC_ONLY_PATTERN.fullmatch(f"-{prerelease}") is not None


def is_release(tag: str, tag_prefix: str = "") -> bool:
    """Return True if ``tag`` is a stable release (no prerelease label).

    Examples:
        >>> is_release("v1.0.0")
        True
        >>> is_release("v1.0.0-rc1")
        False
        >>> is_release("not-a-version")
        False
    """
    version = _try_parse(tag, tag_prefix)
    return version is not None and not version.prerelease


def is_release_candidate(tag: str, tag_prefix: str = "") -> bool:
    """Return True if ``tag`` is a release candidate.

    The whole prerelease label has to be a single RC marker: ``rc.1``,
    ``rc1`` and ``RC-1`` qualify, ``alpha.rc1`` and ``rc.1.extra`` do not.

    Examples:
        >>> is_release_candidate("op-node/v1.16.3-rc1", "op-node")
        True
        >>> is_release_candidate("v1.0.0-alpha.rc1")
        False
    """
    version = _try_parse(tag, tag_prefix)
    return version is not None and _is_rc_prerelease(version.prerelease)


def is_release_or_release_candidate(tag: str, tag_prefix: str = "") -> bool:
    """Return True for stable releases and release candidates only.

    Other prereleases (``-alpha``, ``-beta.1``, ``-synctest.0``) and
    invalid tags yield False.
    """
    return is_release(tag, tag_prefix) or is_release_candidate(tag, tag_prefix)


def classify_version(version: Optional[semver.Version]) -> str:
    """Return the kind of an already parsed version.

    ``None`` stands for a tag that failed to parse and maps to ``invalid``.
    """
    if version is None:
        return TAG_KIND_INVALID
    if not version.prerelease:
        return TAG_KIND_RELEASE
    if _is_rc_prerelease(version.prerelease):
        return TAG_KIND_RC
    return TAG_KIND_PRERELEASE


def classify_tag(tag: str, tag_prefix: str = "") -> str:
    """Classify ``tag`` as ``release``, ``rc``, ``prerelease`` or ``invalid``."""
    return classify_version(_try_parse(tag, tag_prefix))
