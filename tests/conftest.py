import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True, scope="session")
def quiet_logs():
    # per-move debug logs would flood the statistical tests
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
    yield


@pytest.fixture
def log_messages():
    """Collects loguru records emitted during a test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")
    yield messages
    logger.remove(handler_id)
