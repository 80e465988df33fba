"""
Centralized constants for tagkeeper.

This module defines immutable values used across tagkeeper, including the
release-candidate patterns, tag classification labels, configuration
file names, and logging formats. All values are intended to be treated as
read-only.
"""

import re
from typing import Final, Mapping, Pattern, Sequence

# ---------------------------------------------------------------------------
# Tag normalization
# ---------------------------------------------------------------------------

#: Separator allowed between a tag prefix and the version (``op-node/v1.2.3``).
TAG_PATH_SEPARATOR: Final[str] = "/"

#: Optional leading marker accepted in front of a version (``v1.2.3``).
VERSION_PREFIX: Final[str] = "v"

#: Release-candidate spellings: ``-rc1``, ``-rc.1``, ``-rc-1``, ``-RC1``.
RC_PATTERN: Final[Pattern[str]] = re.compile(r"-rc[.-]?(\d+)", re.IGNORECASE)

#: Canonical replacement for :data:`RC_PATTERN` matches.
RC_CANONICAL_FORMAT: Final[str] = r"-rc.\1"

#: A prerelease (with leading ``-``) consisting of exactly one RC marker.
RC_ONLY_PATTERN: Final[Pattern[str]] = re.compile(r"-rc[.-]?\d+", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Tag classification
# ---------------------------------------------------------------------------

#: Stable release: no prerelease label.
TAG_KIND_RELEASE: Final[str] = "release"

#: Release candidate: the prerelease label is a single RC marker.
TAG_KIND_RC: Final[str] = "rc"

#: Any other prerelease (``alpha``, ``beta.1``, ``synctest.0`` ...).
TAG_KIND_PRERELEASE: Final[str] = "prerelease"

#: Tag that cannot be parsed as a semantic version.
TAG_KIND_INVALID: Final[str] = "invalid"

#: Accepted values for ``classify --require``.
REQUIRE_CHOICES: Final[Sequence[str]] = ("any", "release", "rc", "release-or-rc")

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

#: Dedicated configuration file, settings under ``[tagkeeper]``.
CONFIG_FILE_NAME: Final[str] = "tagkeeper.toml"

#: Shared project file, settings under ``[tool.tagkeeper]``.
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

#: Default tag prefix (no prefix expected).
DEFAULT_TAG_PREFIX: Final[str] = ""

#: Environment variables recognised by the CLI.
ENV_VARS: Final[Mapping[str, str]] = {
    "config": "TAGKEEPER_CONFIG",
    "color": "TAGKEEPER_COLOR",
    "tag_prefix": "TAGKEEPER_TAG_PREFIX",
}

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Root logger name for the package.
LOGGER_NAMESPACE: Final[str] = "tagkeeper"

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

#: ANSI colors per log level name.
LOG_LEVEL_COLORS: Final[Mapping[str, str]] = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
