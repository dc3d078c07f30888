"""Configuration utilities for foldbox.

Settings are read from environment variables when they are needed, so a
process can change them before configuring logging.
"""

import logging
import os

from .errors import InvalidLogLevelError

LOG_LEVEL_ENV = "FOLDBOX_LOG_LEVEL"  # pragma: no mutate
DEBUG_ENV = "FOLDBOX_DEBUG"  # pragma: no mutate

DEFAULT_LOG_LEVEL = logging.WARNING
FALSY_VALUES = frozenset({"0", "false", "no"})


def parse_log_level(value: str) -> int:
    """Convert a textual log level name into its numeric level.

    Args:
        value: A standard level name such as ``DEBUG`` or ``warning``.

    Returns:
        The numeric logging level.

    Raises:
        InvalidLogLevelError: If `value` is not a known level name.
    """
    if not isinstance(lvl := getattr(logging, value.strip().upper(), None), int):
        raise InvalidLogLevelError(value)
    return lvl


def get_log_level() -> int:
    """Get the console log level from the environment.

    Returns:
        The level named by `FOLDBOX_LOG_LEVEL`, or WARNING if it is unset.

    Raises:
        InvalidLogLevelError: If `FOLDBOX_LOG_LEVEL` is not a level name.
    """
    if not (value := os.environ.get(LOG_LEVEL_ENV)):
        return DEFAULT_LOG_LEVEL
    return parse_log_level(value)


def get_debug_mode() -> bool:
    """Return True if `FOLDBOX_DEBUG` is set to a truthy value."""
    value = os.environ.get(DEBUG_ENV, "").strip().lower()
    return bool(value) and value not in FALSY_VALUES
