"""Logging helpers for RELMATCH.

The library itself only emits records through module loggers
(``logging.getLogger(__name__)``). This module provides an opt-in Rich console
handler for seeing those records while debugging a test suite, and a filter
that annotates third-party records with a short prefix.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "relmatch"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[sqlalchemy]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "sqlalchemy.engine.Engine" -> "[sqlalchemy]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode the handler is set to DEBUG
    and includes source file/line information; otherwise a short third-party
    prefix is applied.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, logger names).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to a logger.
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

    fmt = "%(prefix)s %(message)s" if not debug_mode else "%(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def enable_console_logging(
    level: int = logging.DEBUG, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Attach a console handler to the ``relmatch`` logger.

    Returns:
        RichHandler: The attached handler, so callers can remove it again.
    """
    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    project_logger = logging.getLogger(PROJECT_PREFIX)
    project_logger.addHandler(handler)
    project_logger.setLevel(min(project_logger.level or level, level))
    return handler
