"""Unit tests for foldbox.logging module."""

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from foldbox.box import done
from foldbox.config import DEBUG_ENV, LOG_LEVEL_ENV
from foldbox.errors import InvalidLogLevelError
from foldbox.logging import (
    CONSOLE_HANDLER_NAME,
    ThirdPartyPrefixFilter,
    config_console_handler,
    configure_logging,
)
from foldbox.reduce import reduce


def make_record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


def make_console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, color_system=None, width=200), buffer


# --- ThirdPartyPrefixFilter ---


@pytest.mark.parametrize(
    "name, prefix",
    [
        ("urllib3.connectionpool", "[urllib3] "),
        ("rich", "[rich] "),
        ("foldboxes.extra", "[foldboxes] "),
        ("foldbox", ""),
        ("foldbox.reduce", ""),
    ],
)
def test_prefix_filter(name, prefix):
    """Third-party records get a bracketed prefix; project records do not."""
    record = make_record(name)
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == prefix  # type: ignore[attr-defined]


# --- config_console_handler ---


def test_console_handler_defaults():
    """The default handler uses the given level and the prefix filter."""
    handler = config_console_handler(level=logging.INFO)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)
    assert handler.console.stderr


def test_console_handler_debug_mode():
    """Debug mode forces DEBUG and drops the prefix filter."""
    handler = config_console_handler(level=logging.ERROR, debug_mode=True)
    assert handler.level == logging.DEBUG
    assert not handler.filters


def test_console_handler_no_color():
    """Colour can be switched off."""
    handler = config_console_handler(color=False)
    assert handler.console.color_system is None


# --- configure_logging ---


def test_configure_logging_uses_env(monkeypatch, root_logger):
    """Unset arguments fall back to the environment."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "info")
    handler = configure_logging()
    assert handler.level == logging.INFO
    assert root_logger.level == logging.INFO
    assert handler in root_logger.handlers


def test_configure_logging_debug_env(monkeypatch, root_logger):
    """FOLDBOX_DEBUG switches on debug formatting."""
    monkeypatch.setenv(DEBUG_ENV, "1")
    handler = configure_logging()
    assert handler.level == logging.DEBUG
    assert root_logger.level == logging.DEBUG


def test_configure_logging_invalid_env(monkeypatch, root_logger):
    """A bad FOLDBOX_LOG_LEVEL is reported, and no handler is installed."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "LOUD")
    with pytest.raises(InvalidLogLevelError):
        configure_logging()
    assert not any(
        h.get_name() == CONSOLE_HANDLER_NAME for h in root_logger.handlers
    )


def test_configure_logging_replaces_previous_handler(root_logger):
    """Calling configure_logging twice keeps a single console handler."""
    first = configure_logging(level=logging.INFO)
    second = configure_logging(level=logging.WARNING)
    ours = [h for h in root_logger.handlers if h.get_name() == CONSOLE_HANDLER_NAME]
    assert ours == [second]
    assert first not in root_logger.handlers


def test_early_termination_reaches_console(root_logger):
    """Driver debug records are written to the configured console."""
    console, buffer = make_console()
    configure_logging(level=logging.DEBUG, console=console)
    reduce([1, 2, 3], lambda acc, x: done() if x == 2 else acc + x, 0)
    assert "reduce() stopped early at step 2 (empty box: True)" in buffer.getvalue()


def test_project_records_have_no_prefix(root_logger):
    """foldbox records are written without a prefix or leading space."""
    handler = configure_logging(level=logging.INFO)
    record = logging.LogRecord(
        "foldbox.reduce", logging.INFO, __file__, 1, "from foldbox", None, None
    )
    assert handler.filter(record)
    assert handler.format(record) == "from foldbox"


def test_third_party_records_are_prefixed(root_logger):
    """Records from other libraries reach the console with their prefix."""
    console, buffer = make_console()
    configure_logging(level=logging.INFO, console=console)
    logging.getLogger("urllib3.connectionpool").warning("pool is full")
    assert "[urllib3] pool is full" in buffer.getvalue()


def test_debug_mode_shows_logger_names(root_logger):
    """Debug formatting names the logger instead of using a prefix."""
    console, buffer = make_console()
    configure_logging(debug_mode=True, console=console)
    logging.getLogger("urllib3.connectionpool").debug("retrying")
    assert "urllib3.connectionpool: retrying" in buffer.getvalue()
    assert "[urllib3]" not in buffer.getvalue()
