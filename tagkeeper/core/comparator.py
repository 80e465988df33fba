"""Version comparison and upgrade validation for tagkeeper.

Both operations parse their inputs with
:func:`~tagkeeper.core.normalizer.parse_tag` and order the results by
semantic-version precedence, so ``v0.3.0-rc1`` < ``v0.3.0-rc.2`` <
``v0.3.0`` regardless of how each tag spells its RC suffix.
"""

from __future__ import annotations

from tagkeeper.core.normalizer import parse_tag
from tagkeeper.exceptions import DowngradeError, ParseError
from tagkeeper.utils.logger import get_logger

logger = get_logger("core.comparator")


def compare_tags(tag_a: str, tag_b: str, tag_prefix: str = "") -> int:
    """Compare two tags by semantic-version precedence.

    Args:
        tag_a: First tag.
        tag_b: Second tag.
        tag_prefix: Prefix shared by both tags, or ``""``.

    Returns:
        ``-1`` if ``tag_a`` precedes ``tag_b``, ``0`` if they are equal,
        ``1`` if ``tag_a`` follows ``tag_b``.

    Raises:
        ParseError: Either tag cannot be parsed.

    Examples:
        >>> compare_tags("v0.3.0-rc1", "v0.3.0")
        -1
        >>> compare_tags("op-node/v1.16.3", "op-node/v1.16.2", "op-node")
        1
    """
    version_a = parse_tag(tag_a, tag_prefix)
    version_b = parse_tag(tag_b, tag_prefix)
    return version_a.compare(version_b)


def validate_upgrade(current_tag: str, new_tag: str, tag_prefix: str = "") -> None:
    """Check that moving from ``current_tag`` to ``new_tag`` is not a downgrade.

    The outcome depends on what ``current_tag`` holds:

    - **empty**: nothing recorded yet, so any parseable ``new_tag`` is
      accepted as the baseline.
    - **unparseable**: there is no trustworthy baseline; only ``new_tag``
      has to parse. No ordering check is made.
    - **parseable**: ``new_tag`` must parse and must not precede it.
      Equal versions are accepted.

    Args:
        current_tag: Tag currently recorded, or ``""``.
        new_tag: Proposed tag.
        tag_prefix: Prefix shared by both tags, or ``""``.

    Raises:
        ParseError: ``new_tag`` cannot be parsed.
        DowngradeError: ``new_tag`` precedes ``current_tag``.
    """
    if not current_tag:
        logger.debug("No current tag recorded; accepting %r as baseline", new_tag)
        parse_tag(new_tag, tag_prefix)
        return

    try:
        current_version = parse_tag(current_tag, tag_prefix)
    except ParseError:
        logger.info(
            "Current tag %r is not a valid version; skipping downgrade check",
            current_tag,
        )
        parse_tag(new_tag, tag_prefix)
        return

    new_version = parse_tag(new_tag, tag_prefix)

    if new_version < current_version:
        raise DowngradeError(
            "Version downgrade detected",
            current_tag=current_tag,
            new_tag=new_tag,
        )

    logger.debug("Upgrade %r -> %r is valid", current_tag, new_tag)
