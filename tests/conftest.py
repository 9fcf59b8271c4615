"""
Test Configuration Module
"""

import pytest

from portkey_adapter.auth import AuthType
from portkey_adapter.config import get_settings
from portkey_adapter.providers.base import ContentGeneratorConfig, PortkeyConfig


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; drop them between tests"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def portkey_config() -> ContentGeneratorConfig:
    return ContentGeneratorConfig(
        model="gemini-2.5-pro",
        auth_type=AuthType.USE_PORTKEY,
        portkey=PortkeyConfig(api_key="pk-test-1234567890"),
    )


@pytest.fixture
def gemini_config() -> ContentGeneratorConfig:
    return ContentGeneratorConfig(
        model="gemini-2.5-pro",
        auth_type=AuthType.USE_GEMINI,
        gemini_api_key="gk-test-1234567890",
    )
