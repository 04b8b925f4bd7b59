"""
Test configuration for vapcore tests.
"""

from __future__ import annotations

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collect loguru output emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(handler_id)
