"""Logging configuration for diffgate CLI."""

import logging
from enum import IntEnum
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(IntEnum):
    """Log level enumeration."""

    QUIET = logging.WARNING
    NORMAL = logging.INFO
    VERBOSE = logging.DEBUG


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    stream: TextIO | None = None,
    debug: bool = False,
) -> Console:
    """Configure logging based on CLI options.

    Git invocations are logged at DEBUG, so -v shows every command line
    diffgate runs.

    Args:
        verbosity: Number of -v flags
        quiet: Suppress non-error output (wins over debug and verbosity)
        no_color: Disable colored output
        stream: Output stream for log records (defaults to stderr)
        debug: Same as -vv

    Returns:
        Rich console for user-facing output
    """
    if quiet:
        level = LogLevel.QUIET
    elif debug or verbosity >= 1:
        level = LogLevel.VERBOSE
    else:
        level = LogLevel.NORMAL

    detailed = debug or verbosity >= 2

    console = Console(
        force_terminal=False if no_color else None,
        no_color=no_color,
    )

    handler = RichHandler(
        console=Console(file=stream, stderr=stream is None, no_color=no_color),
        show_time=detailed,
        show_path=detailed,
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )

    return console
