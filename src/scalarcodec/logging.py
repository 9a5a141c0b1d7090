"""Logging setup for the SCALARCODEC command line.

Console output is rendered by Rich. An optional "flight recorder" keeps the
most recent records in memory at DEBUG granularity and dumps them to a file
once something goes wrong, so a failed decode can be diagnosed after the
fact without running the whole command again at -vv.

The library modules never configure logging themselves; they only obtain
module loggers. Everything here is wired up by the CLI entry point.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from scalarcodec.interfaces.codec import Encoding

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "scalarcodec"
REPORTED_DISTRIBUTIONS = ("click", "click-extra", "rich")

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from foreign loggers with their top-level package name.

    ``click_extra.commands`` becomes ``[click_extra]``; records from our own
    loggers get an empty prefix. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich console handler (stderr).

    Args:
        level: Minimum level shown; forced to DEBUG in debug mode.
        debug_mode: Show timestamps, logger names and source locations.
        color: Emit ANSI colors. Mirrors click-extra's --color/--no-color.

    Returns:
        RichHandler: Ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a memory handler that dumps buffered records to ``path``.

    Args:
        path: File the buffer is flushed to (truncated on first flush).
        capacity: Records kept in memory before an automatic flush.
        flush_level: Records at or above this level trigger a flush.
        flush_on_close: Also flush when logging shuts down.

    Returns:
        MemoryHandler: Buffering handler targeting a UTF-8 FileHandler.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] "
            "%(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    default_encoding: Encoding,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """Emit a one-line INFO banner followed by DEBUG diagnostics.

    Args:
        logger: Logger to write to.
        app_version: SCALARCODEC version.
        level: Effective console level.
        default_encoding: Encoding used when a command gets no -e option.
        handlers: Handlers attached to the root logger.
        log_path: Flight-recorder destination, if any.
        flight_recorder: Whether the flight recorder is active.
        logger_levels: Per-logger level overrides in effect.
    """
    logger.info(
        "SCALARCODEC %s (console=%s, flight-recorder=%s, default encoding=%s)",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
        default_encoding,
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    for name in REPORTED_DISTRIBUTIONS:
        logger.debug("%s: %s", name, _distribution_version(name))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug("Flight recorder path: %s", log_path or "<none>")
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
