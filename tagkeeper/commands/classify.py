"""Classify command implementation for tagkeeper.

Labels each tag as ``release``, ``rc``, ``prerelease`` or ``invalid`` and
optionally enforces that every tag is of an accepted kind.

Typical usage::

    $ tagkeeper classify v1.0.0 v1.0.0-rc1 v1.0.0-synctest.0
    $ tagkeeper classify op-node/v1.16.3-rc1 -p op-node --require release-or-rc
"""

from __future__ import annotations

import sys
import json
from typing import Callable, Dict, List, Optional

import click

from tagkeeper.models import TagInfo
from tagkeeper.constants import REQUIRE_CHOICES
from tagkeeper.commands import tag_prefix_option
from tagkeeper.context import pass_context, TagKeeperContext
from tagkeeper.utils import (
    colorize_tag_kind,
    get_logger,
    print_error,
    print_table,
)

logger = get_logger("commands.classify")

_PREDICATES: Dict[str, Callable[[TagInfo], bool]] = {
    "any": lambda info: True,
    "release": lambda info: info.is_release,
    "rc": lambda info: info.is_release_candidate,
    "release-or-rc": lambda info: info.is_release or info.is_release_candidate,
}


@click.command()
@click.argument("tags", nargs=-1, required=True)
@tag_prefix_option
@click.option(
    "--format",
    "-f",
    type=click.Choice(["table", "simple", "json"], case_sensitive=False),
    default="table",
    help="Output format.",
)
@click.option(
    "--require",
    "-r",
    type=click.Choice(list(REQUIRE_CHOICES), case_sensitive=False),
    default="any",
    help="Fail unless every tag is of this kind.",
)
@pass_context
def classify(
    ctx: TagKeeperContext,
    tags: List[str],
    tag_prefix: Optional[str],
    format: str,
    require: str,
) -> None:
    """Classify one or more TAGS.

    Exits 1 if any tag does not satisfy ``--require``.
    """
    prefix = ctx.resolve_tag_prefix(tag_prefix)
    predicate = _PREDICATES[require.lower()]

    infos = [TagInfo.from_tag(tag, prefix) for tag in tags]
    rejected = [info.tag for info in infos if not predicate(info)]
    logger.info(
        "Classified %d tag(s); %d rejected by --require %s",
        len(infos),
        len(rejected),
        require,
    )

    format = format.lower()
    if format == "json":
        print(json.dumps([info.to_json() for info in infos], indent=2))
    elif format == "simple":
        for info in infos:
            print(f"{info.tag}\t{info.kind}")
    else:
        print_table(
            [
                dict(info.get_display_data(), Kind=colorize_tag_kind(info.kind))
                for info in infos
            ],
            headers=["Tag", "Kind", "Version", "Prerelease"],
            title="Tag classification",
        )

    if rejected:
        if format != "json":
            print_error(f"Tags not matching '{require}': {', '.join(rejected)}")
        sys.exit(1)
    sys.exit(0)
