"""
Content Generator Factory Module

Creates the content generator matching the selected auth method.
"""

from typing import Optional

import httpx

from portkey_adapter.auth import AuthType
from portkey_adapter.common.errors import ConfigurationError
from portkey_adapter.providers.base import ContentGenerator, ContentGeneratorConfig
from portkey_adapter.providers.gemini_generator import GeminiContentGenerator
from portkey_adapter.providers.portkey_generator import PortkeyContentGenerator


def create_content_generator(
    config: ContentGeneratorConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ContentGenerator:
    """
    Create the content generator for config.auth_type

    Args:
        config: Generator configuration
        transport: Custom httpx transport passed to the generator

    Returns:
        ContentGenerator: Portkey or Gemini native generator

    Raises:
        ConfigurationError: Auth method not served by an API-key backend,
            or its credential is missing
    """
    if config.auth_type == AuthType.USE_PORTKEY:
        return PortkeyContentGenerator(config, transport=transport)
    if config.auth_type == AuthType.USE_GEMINI:
        return GeminiContentGenerator(config, transport=transport)

    raise ConfigurationError(
        f"Unsupported auth method: {config.auth_type.value if config.auth_type else None}",
        code="unsupported_auth_type",
    )
