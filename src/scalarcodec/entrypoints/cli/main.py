"""SCALARCODEC CLI entry point.

Defines the top-level ``scalarcodec`` command (via Click-Extra), configures
logging for every subcommand, and registers the codec commands.

Examples
    $ scalarcodec encode -e utf-16 "€𝄞"
    $ scalarcodec decode -e utf-8 E2 82 AC
    $ scalarcodec -vv inspect "naïve"
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from scalarcodec import __version__, config
from scalarcodec.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .codec_cmds import decode, encode, inspect
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)

HELP = """SCALARCODEC command-line interface.

    Encode text into UTF-8, UTF-16 (LE/BE) or ASCII code units, decode code
    units back into text, and inspect how each character is represented.
    """

DEFAULT_LOG_PATH = Path(user_log_dir("scalarcodec", appauthor=False)) / "latest.log"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Raise the default WARNING verbosity one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Lower the default WARNING verbosity one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Debug mode: DEBUG console output with logger names and source paths.",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the flight recorder dumps to.",
    default=DEFAULT_LOG_PATH,
    envvar="SCALARCODEC_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Buffer recent DEBUG records in memory and write them to --log-path "
        "when a WARNING or worse is logged."
    ),
    default=False,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="SCALARCODEC_LOGGER_LEVELS",
    help=(
        "Set the minimum level of a specific logger (NAME=LEVEL). Repeatable, "
        "or a comma/space list in SCALARCODEC_LOGGER_LEVELS."
    ),
    show_envvar=True,
)
@clickx.pass_context
def scalarcodec(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """SCALARCODEC command-line interface."""

    level = logging.WARNING - 10 * verbose_count + 10 * quiet_count
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(config_flight_recorder(path=log_path))

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    try:
        default_encoding = config.get_default_encoding()
    except config.InvalidDefaultEncodingError as exc:
        raise click.ClickException(str(exc)) from exc

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        default_encoding=default_encoding,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


scalarcodec.add_command(encode)
scalarcodec.add_command(decode)
scalarcodec.add_command(inspect)
