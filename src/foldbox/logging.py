"""Logging helpers for foldbox.

The library itself only emits records through module loggers and attaches no
handlers. Applications and tests that want to see those records on the
console call `configure_logging`, which installs a Rich handler on the
root logger. A filter annotates third-party records with a short
prefix used by console formatting.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from .config import get_debug_mode, get_log_level

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "foldbox"
CONSOLE_HANDLER_NAME = "foldbox-console"


def is_project_logger(name: str) -> bool:
    """Return True for the ``foldbox`` logger and its children."""
    return name == PROJECT_PREFIX or name.startswith(PROJECT_PREFIX + ".")


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records that do not come from the ``foldbox`` logger or its children,
    sets `record.prefix` to a short bracketed token like "[urllib3] ". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not is_project_logger(record.name):
            # e.g. "urllib3.connectionpool" -> "[urllib3] "
            record.prefix = f"[{record.name.split('.')[0]}] "
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.WARNING,
    debug_mode: bool = False,
    color: bool = True,
    console: Console | None = None,
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr unless a console is given. In debug mode
    the handler is set to DEBUG and includes timestamps, logger names and
    source paths; otherwise a short third-party prefix is applied.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting.
        color: Enable color output when True. Ignored if `console` is given.
        console: Console to write to instead of stderr.

    Returns:
        RichHandler: Configured handler.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    if console is None:
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

    fmt = (
        "%(prefix)s%(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def configure_logging(
    level: int | None = None,
    debug_mode: bool | None = None,
    color: bool = True,
    console: Console | None = None,
) -> RichHandler:
    """Attach a console handler to the root logger.

    Records from foldbox and from third-party libraries both reach it; the
    latter are tagged with a short prefix outside debug mode. A handler
    installed by an earlier call is removed first, so calling this
    repeatedly never duplicates output.

    Args:
        level: Console level. Defaults to `FOLDBOX_LOG_LEVEL`.
        debug_mode: Debug formatting. Defaults to `FOLDBOX_DEBUG`.
        color: Enable color output when True.
        console: Console to write to instead of stderr.

    Returns:
        RichHandler: The installed handler.

    Raises:
        InvalidLogLevelError: If `level` is omitted and `FOLDBOX_LOG_LEVEL`
            is not a level name.
    """
    if level is None:
        level = get_log_level()
    if debug_mode is None:
        debug_mode = get_debug_mode()

    root = logging.getLogger()
    for old in list(root.handlers):
        if old.get_name() == CONSOLE_HANDLER_NAME:
            root.removeHandler(old)
            old.close()

    handler = config_console_handler(
        level=level, debug_mode=debug_mode, color=color, console=console
    )
    handler.set_name(CONSOLE_HANDLER_NAME)
    root.addHandler(handler)
    root.setLevel(handler.level)
    return handler
