"""
CLI subcommands for tagkeeper.

Each module defines one Click command; :mod:`tagkeeper.cli` registers them.
Options shared by several commands live here.
"""

from __future__ import annotations

import click

from tagkeeper.constants import ENV_VARS

#: ``--tag-prefix`` option; ``None`` means "use the configured prefix".
tag_prefix_option = click.option(
    "--tag-prefix",
    "-p",
    default=None,
    envvar=ENV_VARS["tag_prefix"],
    help="Prefix to strip from tags (e.g. 'op-node' for 'op-node/v1.2.3').",
)
