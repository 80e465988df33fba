"""Parse command implementation for tagkeeper.

Shows the semantic version a tag normalizes to, component by component.

Typical usage::

    $ tagkeeper parse op-node/v1.16.3-rc1 --tag-prefix op-node
    $ tagkeeper parse v0.3.0-RC-2 --format json
"""

from __future__ import annotations

import sys
import json
from typing import Optional

import click

from tagkeeper.models import TagInfo
from tagkeeper.commands import tag_prefix_option
from tagkeeper.context import pass_context, TagKeeperContext
from tagkeeper.utils import (
    colorize_tag_kind,
    get_logger,
    print_error,
    print_table,
)

logger = get_logger("commands.parse")


@click.command()
@click.argument("tag")
@tag_prefix_option
@click.option(
    "--format",
    "-f",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format.",
)
@pass_context
def parse(
    ctx: TagKeeperContext,
    tag: str,
    tag_prefix: Optional[str],
    format: str,
) -> None:
    """Parse TAG into a semantic version.

    Exits 0 if the tag parses, 1 otherwise.
    """
    prefix = ctx.resolve_tag_prefix(tag_prefix)
    logger.info("Parsing %r (prefix %r)", tag, prefix)

    info = TagInfo.from_tag(tag, prefix)

    if format.lower() == "json":
        print(json.dumps(info.to_json(), indent=2))
    elif info.is_valid:
        _display_version(info)
    else:
        print_error(f"Invalid version format: {tag!r} ({info.error})")

    sys.exit(0 if info.is_valid else 1)


def _display_version(info: TagInfo) -> None:
    """Render the components of a parsed tag as a two-column table."""
    assert info.version is not None
    rows = [
        {"Field": "Tag", "Value": info.tag},
        {"Field": "Normalized", "Value": info.normalized},
        {"Field": "Version", "Value": str(info.version)},
        {"Field": "Major", "Value": info.version.major},
        {"Field": "Minor", "Value": info.version.minor},
        {"Field": "Patch", "Value": info.version.patch},
        {"Field": "Prerelease", "Value": info.version.prerelease or "-"},
        {"Field": "Build", "Value": info.version.build or "-"},
        {"Field": "Kind", "Value": colorize_tag_kind(info.kind)},
    ]
    print_table(rows, headers=["Field", "Value"], column_styles={"Field": {"style": "bold"}})
