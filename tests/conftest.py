"""Shared fixtures for the RSB test suite."""

from pathlib import Path

import pytest
from loguru import logger

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
