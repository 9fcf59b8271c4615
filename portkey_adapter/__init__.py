"""
Portkey Content Adapter

Speaks a Gemini-style content-generation request/response shape over either
the Portkey gateway (OpenAI-compatible) or the native Gemini API.
"""

from portkey_adapter.auth import AuthType, validate_auth_method
from portkey_adapter.common.errors import AdapterError, ConfigurationError, TransportError
from portkey_adapter.common.sse import ContentStream
from portkey_adapter.domain import (
    Content,
    CountTokensRequest,
    CountTokensResponse,
    EmbedContentRequest,
    EmbedContentResponse,
    GenerateContentRequest,
    GenerateContentResponse,
    GenerationConfig,
    Part,
    TextContent,
)
from portkey_adapter.providers import (
    ContentGenerator,
    ContentGeneratorConfig,
    GeminiContentGenerator,
    PortkeyConfig,
    PortkeyContentGenerator,
    create_content_generator,
)

__version__ = "0.1.0"
__all__ = [
    "AuthType",
    "validate_auth_method",
    "AdapterError",
    "ConfigurationError",
    "TransportError",
    "ContentStream",
    "Content",
    "CountTokensRequest",
    "CountTokensResponse",
    "EmbedContentRequest",
    "EmbedContentResponse",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "GenerationConfig",
    "Part",
    "TextContent",
    "ContentGenerator",
    "ContentGeneratorConfig",
    "GeminiContentGenerator",
    "PortkeyConfig",
    "PortkeyContentGenerator",
    "create_content_generator",
]
