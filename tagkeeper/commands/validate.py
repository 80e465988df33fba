"""Validate command implementation for tagkeeper.

Checks that moving from the current tag to a new one is not a downgrade.
Pass an empty string as CURRENT when no version has been recorded yet.

Typical usage::

    $ tagkeeper validate v0.3.0-rc.2 v0.3.0
    [OK] v0.3.0-rc.2 -> v0.3.0 is a valid upgrade
    $ tagkeeper validate "" v0.3.0
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from tagkeeper.core import validate_upgrade
from tagkeeper.exceptions import DowngradeError, ParseError
from tagkeeper.commands import tag_prefix_option
from tagkeeper.context import pass_context, TagKeeperContext
from tagkeeper.utils import get_logger, print_error, print_success

logger = get_logger("commands.validate")


@click.command()
@click.argument("current")
@click.argument("new")
@tag_prefix_option
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Print nothing; report the result through the exit code only.",
)
@pass_context
def validate(
    ctx: TagKeeperContext,
    current: str,
    new: str,
    tag_prefix: Optional[str],
    quiet: bool,
) -> None:
    """Validate the upgrade from CURRENT to NEW.

    \b
    Exits:
      0  NEW parses and does not precede CURRENT
      1  NEW is a downgrade or cannot be parsed
    """
    prefix = ctx.resolve_tag_prefix(tag_prefix)

    try:
        validate_upgrade(current, new, prefix)
    except (DowngradeError, ParseError) as e:
        if not quiet:
            print_error(str(e))
        sys.exit(1)

    if not quiet:
        if current:
            print_success(f"{current} -> {new} is a valid upgrade")
        else:
            print_success(f"{new} accepted as initial version")
    sys.exit(0)
