"""Compare command implementation for tagkeeper.

Prints ``-1``, ``0`` or ``1`` depending on whether the first tag precedes,
equals or follows the second under semantic-version precedence.

Typical usage::

    $ tagkeeper compare v0.3.0-rc1 v0.3.0
    -1
    $ tagkeeper compare op-node/v1.16.3 op-node/v1.16.2 -p op-node --format json
"""

from __future__ import annotations

import sys
import json
from typing import Optional

import click

from tagkeeper.core import compare_tags
from tagkeeper.exceptions import ParseError
from tagkeeper.commands import tag_prefix_option
from tagkeeper.context import pass_context, TagKeeperContext
from tagkeeper.utils import get_logger, print_error

logger = get_logger("commands.compare")

_RELATION = {-1: "<", 0: "=", 1: ">"}


@click.command()
@click.argument("tag_a")
@click.argument("tag_b")
@tag_prefix_option
@click.option(
    "--format",
    "-f",
    type=click.Choice(["simple", "json"], case_sensitive=False),
    default="simple",
    help="Output format.",
)
@pass_context
def compare(
    ctx: TagKeeperContext,
    tag_a: str,
    tag_b: str,
    tag_prefix: Optional[str],
    format: str,
) -> None:
    """Compare TAG_A with TAG_B.

    Exits 0 when both tags parse, 1 otherwise.
    """
    prefix = ctx.resolve_tag_prefix(tag_prefix)

    try:
        result = compare_tags(tag_a, tag_b, prefix)
    except ParseError as e:
        print_error(str(e))
        sys.exit(1)

    logger.info("%s %s %s", tag_a, _RELATION[result], tag_b)

    if format.lower() == "json":
        data = {
            "tag_a": tag_a,
            "tag_b": tag_b,
            "result": result,
            "relation": _RELATION[result],
        }
        print(json.dumps(data, indent=2))
    else:
        print(result)

    sys.exit(0)
