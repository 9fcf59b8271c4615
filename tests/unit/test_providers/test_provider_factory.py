"""
Content Generator Factory Unit Tests
"""

import pytest

from portkey_adapter.auth import AuthType
from portkey_adapter.common.errors import ConfigurationError
from portkey_adapter.config import Settings
from portkey_adapter.providers.base import ContentGeneratorConfig
from portkey_adapter.providers.factory import create_content_generator
from portkey_adapter.providers.gemini_generator import GeminiContentGenerator
from portkey_adapter.providers.portkey_generator import PortkeyContentGenerator


def test_portkey_auth_creates_portkey_generator(portkey_config):
    assert isinstance(create_content_generator(portkey_config), PortkeyContentGenerator)


def test_gemini_auth_creates_gemini_generator(gemini_config):
    assert isinstance(create_content_generator(gemini_config), GeminiContentGenerator)


@pytest.mark.parametrize("auth_type", [AuthType.LOGIN_WITH_GOOGLE_PERSONAL, AuthType.USE_VERTEX_AI, None])
def test_unsupported_auth_type(auth_type):
    config = ContentGeneratorConfig(model="gemini-2.5-pro", auth_type=auth_type)
    with pytest.raises(ConfigurationError) as exc_info:
        create_content_generator(config)
    assert exc_info.value.code == "unsupported_auth_type"


def test_missing_credential_propagates():
    config = ContentGeneratorConfig(model="gemini-2.5-pro", auth_type=AuthType.USE_PORTKEY)
    with pytest.raises(ConfigurationError) as exc_info:
        create_content_generator(config)
    assert exc_info.value.code == "missing_credential"


def test_from_settings_builds_generator():
    settings = Settings(
        _env_file=None,
        PORTKEY_API_KEY="pk-from-env-123456",
        PORTKEY_BASE_URL="https://gw.internal/v1/",
        HTTP_TIMEOUT=30,
    )
    config = ContentGeneratorConfig.from_settings(AuthType.USE_PORTKEY, settings=settings)

    generator = create_content_generator(config)

    assert isinstance(generator, PortkeyContentGenerator)
    assert generator.base_url == "https://gw.internal/v1"
    assert generator.model == settings.GEMINI_MODEL
    assert config.timeout == 30
