"""Global pytest fixtures for foldbox."""

import logging
from collections.abc import Iterator

import pytest

from foldbox.config import DEBUG_ENV, LOG_LEVEL_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without foldbox configuration in the environment."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(DEBUG_ENV, raising=False)


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """The root logger, restored to its original state afterwards."""
    logger = logging.getLogger()
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
