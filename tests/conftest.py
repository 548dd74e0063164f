"""
Pytest configuration and fixtures for all tests.
"""

import pytest
from loguru import logger

from mailcraft import EmailBuilder
from mailcraft.infrastructure.settings import get_settings


@pytest.fixture
def builder():
    """A fresh builder with nothing set."""
    return EmailBuilder.new_email()


@pytest.fixture
def complete_builder():
    """A builder holding the three mandatory components."""
    return (
        EmailBuilder.new_email()
        .from_address("a@x.com")
        .to("b@x.com")
        .with_body("hi")
    )


@pytest.fixture
def log_messages():
    """Capture loguru records as 'LEVEL message' strings."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(f"{m.record['level'].name} {m.record['message']}"), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from the developer's MAILCRAFT_* environment."""
    monkeypatch.setenv("MAILCRAFT_ENVIRONMENT", "test")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
