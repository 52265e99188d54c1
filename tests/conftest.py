from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from sqlchain.utils.logging import ROOT_LOGGER_NAME, set_correlation_id

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture(autouse=True)
def restore_sqlchain_logging() -> Generator[None, None, None]:
    """Undo logger configuration and correlation IDs set by a test."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    set_correlation_id(None)
