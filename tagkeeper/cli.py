"""
The ``tagkeeper`` command group.

Global options (config file, verbosity, color) are resolved here once per
invocation. The tag commands then read the prefix settings from the shared
:class:`~tagkeeper.context.TagKeeperContext`.
"""

from __future__ import annotations

import sys
import logging
from pathlib import Path
from typing import Optional

import click

from tagkeeper.config import load_config
from tagkeeper.constants import ENV_VARS
from tagkeeper.__version__ import __version__
from tagkeeper.context import TagKeeperContext
from tagkeeper.exceptions import ConfigError, TagKeeperError
from tagkeeper.utils.logger import get_logger, setup_logging
from tagkeeper.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read settings from this TOML file.",
    envvar=ENV_VARS["config"],
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Log progress to stderr (-v info, -vv debug).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Allow ANSI colors; NO_COLOR and non-TTY output still disable them.",
    envvar=ENV_VARS["color"],
)
@click.version_option(
    version=__version__,
    prog_name="tagkeeper",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """Normalize release tags and check version transitions.

    \b
    Commands:
      parse TAG              Show the version a tag parses to
      compare A B            Print -1, 0 or 1
      validate CURRENT NEW   Fail on a downgrade
      classify TAG...        Label tags release / rc / prerelease / invalid

    \b
    Examples:
      tagkeeper parse op-node/v1.16.3-rc1 --tag-prefix op-node
      tagkeeper validate v0.3.0-rc.2 v0.3.0
      tagkeeper -v classify v1.0.0 v1.0.0-rc1 v1.0.0-alpha
    """
    _configure_logging(verbose, use_color=color)
    reconfigure_console(use_color=color)

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(EXIT_FAILURE) from exc

    tagkeeper_ctx = TagKeeperContext()
    tagkeeper_ctx.config_path = config or loaded_config.source_path
    tagkeeper_ctx.config = loaded_config
    ctx.obj = tagkeeper_ctx

    logger.debug("tagkeeper %s, color allowed: %s", __version__, color)
    logger.debug("Settings from %s: %s", tagkeeper_ctx.config_path, loaded_config.to_log_dict())


def _configure_logging(verbose: int, *, use_color: bool = True) -> None:
    """Map the ``-v`` count onto the package log level."""
    if verbose <= 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    setup_logging(level=level, verbose=verbose > 1, use_color=use_color)
    logger.debug("Log level %s", logging.getLevelName(level))


try:
    from tagkeeper.commands.parse import parse
    from tagkeeper.commands.compare import compare
    from tagkeeper.commands.validate import validate
    from tagkeeper.commands.classify import classify
except ImportError as exc:
    sys.stderr.write(f"FATAL: tagkeeper commands could not be loaded: {exc}\n")
    sys.exit(EXIT_FAILURE)

for _command in (parse, compare, validate, classify):
    cli.add_command(_command)


def _exit_code(exc: SystemExit) -> int:
    # Commands finish with sys.exit(0 or 1); a non-int code is a message.
    if exc.code is None:
        return EXIT_OK
    return exc.code if isinstance(exc.code, int) else EXIT_FAILURE


def main() -> int:
    """Run the CLI and translate its outcome into a process exit status.

    ``0`` means success. ``1`` covers invalid tags, downgrades and any
    tagkeeper or unexpected error. Click usage errors keep their own code
    (``2``), and an interrupt yields ``130``.
    """
    try:
        cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return _exit_code(exc)
    except TagKeeperError as exc:
        print_error(str(exc))
        logger.debug("Error details: %s", exc.details or "<none>", exc_info=True)
        return EXIT_FAILURE
    except (KeyboardInterrupt, click.Abort):
        print_warning("Interrupted")
        return EXIT_INTERRUPTED
    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception while running a command")
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
