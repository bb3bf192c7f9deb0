import logging
import sys
from collections.abc import Iterator

import pytest
from loguru import logger

from rollingbuffer.logging_config import InterceptHandler


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collects Loguru messages emitted during a test."""
    messages: list[str] = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(sink_id)


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Resets Loguru and the stdlib root logger after setup_logging() runs."""
    yield
    logger.remove()
    logger.add(sys.stderr)
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, InterceptHandler):
            root.removeHandler(handler)
