"""Logging configuration for g2bi."""

import logging
from enum import IntEnum

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(IntEnum):
    """Log level enumeration."""

    QUIET = logging.WARNING
    NORMAL = logging.INFO
    VERBOSE = logging.DEBUG


def resolve_log_level(verbosity: int = 0, quiet: bool = False, debug: bool = False) -> LogLevel:
    """Map CLI flags to a log level.

    Precedence: quiet > debug > verbosity.
    """
    if quiet:
        return LogLevel.QUIET
    if debug or verbosity >= 1:
        return LogLevel.VERBOSE
    return LogLevel.NORMAL


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    debug: bool = False,
) -> Console:
    """Configure logging based on CLI options.

    Log records go to stderr through a Rich handler; the returned console
    is used for regular command output.

    Args:
        verbosity: Number of -v flags (0=normal, 1+=debug)
        quiet: Only log warnings and errors (takes precedence over debug/verbosity)
        no_color: Disable colored output
        debug: Debug logging with timestamps and source paths (like -vv)

    Returns:
        Configured Rich console for output
    """
    level = resolve_log_level(verbosity, quiet, debug)
    detailed = debug or verbosity >= 2

    log_console = Console(stderr=True, no_color=no_color)
    handler = RichHandler(
        console=log_console,
        show_time=debug or verbosity >= 1,
        show_path=detailed,
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )

    return Console(no_color=no_color, highlight=False)
