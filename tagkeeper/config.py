"""Configuration file loader for tagkeeper.

Supports two formats:

- ``tagkeeper.toml``: settings under ``[tagkeeper]`` table
- ``pyproject.toml``: settings under ``[tool.tagkeeper]`` table

Discovery order:

1. Explicit path from ``--config`` or ``TAGKEEPER_CONFIG``
2. ``tagkeeper.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.tagkeeper]`` section

Configuration precedence: defaults < config file < environment < CLI args.

Example (``tagkeeper.toml``)::

    [tagkeeper]
    tag_prefix = "op-node"
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from tagkeeper.exceptions import ConfigError
from tagkeeper.utils.logger import get_logger
from tagkeeper.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_TAG_PREFIX,
    PYPROJECT_FILE_NAME,
)

logger = get_logger("config")

_SECTION = "tagkeeper"


@dataclass
class TagKeeperConfig:
    """Parsed and validated tagkeeper configuration.

    Attributes:
        tag_prefix: Tag prefix used by commands when ``--tag-prefix`` is not
            given, e.g. ``"op-node"`` for tags like ``op-node/v1.16.2``.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    tag_prefix: str = DEFAULT_TAG_PREFIX

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return user-facing options for debug logging."""
        return {"tag_prefix": self.tag_prefix}


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    dedicated = cwd / CONFIG_FILE_NAME
    if dedicated.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, dedicated)
        return dedicated

    pyproject = cwd / PYPROJECT_FILE_NAME
    if pyproject.is_file() and _pyproject_has_tagkeeper_section(pyproject):
        logger.debug("Found [tool.tagkeeper] in pyproject.toml: %s", pyproject)
        return pyproject

    logger.debug("No configuration file found")
    return None


def _pyproject_has_tagkeeper_section(path: Path) -> bool:
    """Return True if ``path`` has a ``[tool.tagkeeper]`` table.

    An unreadable or malformed pyproject.toml is treated as having none,
    so discovery falls back to defaults.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring %s during discovery: %s", path, exc)
        return False
    return _SECTION in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> TagKeeperConfig:
    """Load and validate tagkeeper configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`TagKeeperConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        return TagKeeperConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == PYPROJECT_FILE_NAME:
        section = raw.get("tool", {}).get(_SECTION, {})
    else:
        section = raw.get(_SECTION, {})

    if not section:
        logger.debug("Config file found but no tagkeeper section, using defaults")
        return TagKeeperConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> TagKeeperConfig:
    """Validate a ``[tagkeeper]`` / ``[tool.tagkeeper]`` table.

    Raises:
        ConfigError: Unknown keys or values of the wrong type.
    """
    config = TagKeeperConfig()

    unknown = set(section.keys()) - {"tag_prefix"}
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    if "tag_prefix" in section:
        val = section["tag_prefix"]
        if not isinstance(val, str):
            raise ConfigError(
                f"tag_prefix must be a string, got {type(val).__name__}",
                config_path=config_path,
                option="tag_prefix",
            )
        config.tag_prefix = val.strip()

    return config
