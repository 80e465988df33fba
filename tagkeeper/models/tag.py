"""
Tag data model for tagkeeper.

:class:`TagInfo` bundles a raw tag with its parse outcome and
classification so commands can render tables and JSON without parsing the
same tag repeatedly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import semver

from tagkeeper.constants import (
    TAG_KIND_INVALID,
    TAG_KIND_RC,
    TAG_KIND_RELEASE,
)
from tagkeeper.core import classify_version, normalize_tag, parse_tag
from tagkeeper.exceptions import ParseError


@dataclass
class TagInfo:
    """
    Parsed view of a single release tag.

    Attributes:
        tag: Tag exactly as supplied.
        tag_prefix: Prefix used while parsing.
        version: Parsed version, or ``None`` if parsing failed.
        error: Parse failure reason, or ``None`` on success.
        kind: One of ``release``, ``rc``, ``prerelease``, ``invalid``.
    """

    tag: str
    tag_prefix: str = ""
    version: Optional[semver.Version] = field(default=None, compare=False)
    error: Optional[str] = None
    kind: str = TAG_KIND_INVALID

    @classmethod
    def from_tag(cls, tag: str, tag_prefix: str = "") -> "TagInfo":
        """Parse and classify ``tag``; never raises for string input."""
        try:
            version = parse_tag(tag, tag_prefix)
        except ParseError as exc:
            return cls(tag=tag, tag_prefix=tag_prefix, error=exc.reason)

        return cls(
            tag=tag,
            tag_prefix=tag_prefix,
            version=version,
            kind=classify_version(version),
        )

    # ------------------------------------------------------------------
    # Status helpers
    # ------------------------------------------------------------------

    @property
    def is_valid(self) -> bool:
        return self.version is not None

    @property
    def is_release(self) -> bool:
        return self.kind == TAG_KIND_RELEASE

    @property
    def is_release_candidate(self) -> bool:
        return self.kind == TAG_KIND_RC

    @property
    def normalized(self) -> str:
        """Normalized version string handed to the version parser."""
        return normalize_tag(self.tag, self.tag_prefix)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_json(self) -> Dict[str, Any]:
        """
        Serialize the tag to a JSON-compatible dictionary.

        Returns:
            JSON-safe tag representation.
        """
        entry: Dict[str, Any] = {
            "tag": self.tag,
            "kind": self.kind,
        }
        if self.tag_prefix:
            entry["tag_prefix"] = self.tag_prefix

        if self.version is None:
            entry["error"] = self.error or "Invalid version format"
            return entry

        entry["version"] = str(self.version)
        entry["components"] = {
            "major": self.version.major,
            "minor": self.version.minor,
            "patch": self.version.patch,
            "prerelease": self.version.prerelease,
            "build": self.version.build,
        }
        return entry

    def get_display_data(self) -> Dict[str, Any]:
        """Return a flat row for table output."""
        if self.version is None:
            return {
                "Tag": self.tag,
                "Kind": self.kind,
                "Version": "-",
                "Prerelease": "-",
            }
        return {
            "Tag": self.tag,
            "Kind": self.kind,
            "Version": str(self.version),
            "Prerelease": self.version.prerelease or "-",
        }

    def __str__(self) -> str:
        if self.version is None:
            return f"{self.tag} (invalid)"
        return f"{self.tag} -> {self.version} ({self.kind})"
