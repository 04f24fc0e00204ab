"""Configuration — tests for settings, env overrides and bootstrap.

Tests cover:
    - Defaults
    - BOOKSTORE_* environment overrides
    - default_currency validated
    - get_settings cached
    - configure() installs logging from settings
"""

import logging

import pytest
from pydantic import ValidationError

from bookstore.config import Settings, get_settings
from bookstore.infrastructure.observability import JSONFormatter
from bookstore.main import configure


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)


def test_defaults():
    settings = Settings()
    assert settings.default_currency == "USD"
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"


def test_env_override(monkeypatch):
    monkeypatch.setenv("BOOKSTORE_DEFAULT_CURRENCY", "eur")
    monkeypatch.setenv("BOOKSTORE_LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.default_currency == "eur"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("currency", ["US", "DOLLAR", "12$"])
def test_invalid_default_currency_rejected(currency):
    with pytest.raises(ValidationError):
        Settings(default_currency=currency)


def test_get_settings_cached():
    assert get_settings() is get_settings()


def test_configure_installs_logging(restore_root_logger):
    settings = configure(Settings(log_level="ERROR", log_format="json"))
    assert settings.log_level == "ERROR"
    assert logging.root.level == logging.ERROR
    assert isinstance(logging.root.handlers[-1].formatter, JSONFormatter)
