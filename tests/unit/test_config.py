"""
Configuration and Logging Unit Tests
"""

import logging

import pytest

from portkey_adapter.auth import AuthType
from portkey_adapter.config import Settings, get_settings
from portkey_adapter.logging_config import setup_logging
from portkey_adapter.providers.base import (
    DEFAULT_EMBEDDING_MODEL,
    DEFAULT_GEMINI_BASE_URL,
    DEFAULT_GEMINI_EMBEDDING_MODEL,
    ContentGeneratorConfig,
)


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("PORTKEY_API_KEY", "pk-env")
    monkeypatch.setenv("HTTP_TIMEOUT", "12.5")
    monkeypatch.setenv("DEBUG", "true")

    settings = Settings(_env_file=None)

    assert settings.PORTKEY_API_KEY == "pk-env"
    assert settings.HTTP_TIMEOUT == 12.5
    assert settings.DEBUG is True


def test_settings_read_from_env_file(monkeypatch, tmp_path):
    monkeypatch.delenv("GEMINI_MODEL", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("GEMINI_MODEL=gemini-2.0-flash\n", encoding="utf-8")

    assert Settings(_env_file=env_file).GEMINI_MODEL == "gemini-2.0-flash"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_config_from_settings_defaults(monkeypatch):
    for name in ("GEMINI_MODEL", "GEMINI_BASE_URL", "DEFAULT_EMBEDDING_MODEL", "GEMINI_EMBEDDING_MODEL", "HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    config = ContentGeneratorConfig.from_settings(
        AuthType.USE_GEMINI, settings=Settings(_env_file=None, GEMINI_API_KEY="g")
    )

    assert config.model == "gemini-2.5-pro"
    assert config.gemini_api_key == "g"
    assert config.gemini_base_url == DEFAULT_GEMINI_BASE_URL
    assert config.embedding_model == DEFAULT_EMBEDDING_MODEL
    assert config.gemini_embedding_model == DEFAULT_GEMINI_EMBEDDING_MODEL
    assert config.timeout is None


def test_config_is_frozen(portkey_config):
    with pytest.raises(Exception):
        portkey_config.model = "other"


def test_config_requires_model():
    with pytest.raises(ValueError):
        ContentGeneratorConfig(model="")


@pytest.fixture
def restore_logging():
    names = ("", "httpx", "portkey_adapter")
    saved = {
        name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers), logging.getLogger(name).propagate)
        for name in names
    }
    yield
    for name, (level, handlers, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers = handlers
        logger.propagate = propagate


@pytest.mark.parametrize("debug, expected", [("false", logging.INFO), ("true", logging.DEBUG)])
def test_setup_logging_levels(monkeypatch, restore_logging, debug, expected):
    monkeypatch.setenv("DEBUG", debug)

    setup_logging()

    assert logging.getLogger("portkey_adapter").level == expected
    assert logging.getLogger("httpx").level == logging.WARNING
    handler = logging.getLogger("portkey_adapter").handlers[0]
    assert handler.formatter._fmt == "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
