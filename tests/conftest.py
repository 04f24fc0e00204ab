"""Root conftest — shared test configuration."""

import os

import pytest

from bookstore.config import get_settings

# Ensure tests don't pick up a developer's local overrides
os.environ.setdefault("BOOKSTORE_DEFAULT_CURRENCY", "USD")
os.environ.setdefault("BOOKSTORE_LOG_FORMAT", "json")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
