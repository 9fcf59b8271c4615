"""
Content Generator Base Class

Defines the abstract interface shared by every backend, and the frozen
configuration generators are built from.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from portkey_adapter.auth import AuthType
from portkey_adapter.common.sse import ContentStream
from portkey_adapter.config import Settings, get_settings
from portkey_adapter.domain.content import (
    CountTokensRequest,
    EmbedContentRequest,
    GenerateContentRequest,
)
from portkey_adapter.domain.response import (
    CountTokensResponse,
    EmbedContentResponse,
    GenerateContentResponse,
)

DEFAULT_PORTKEY_BASE_URL = "https://api.portkey.ai/v1"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com"
DEFAULT_EMBEDDING_MODEL = "text-embedding-ada-002"
DEFAULT_GEMINI_EMBEDDING_MODEL = "text-embedding-004"


class PortkeyConfig(BaseModel):
    """Portkey gateway credentials"""

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = Field(None, description="Portkey API Key")
    # Defaults to the public gateway when unset
    base_url: Optional[str] = Field(None, description="Gateway Base URL")


class ContentGeneratorConfig(BaseModel):
    """
    Content Generator Configuration

    Frozen once built; generators keep a reference and never change it.
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(..., min_length=1, description="Model Name")
    auth_type: Optional[AuthType] = Field(None, description="Selected Auth Method")
    portkey: Optional[PortkeyConfig] = None
    gemini_api_key: Optional[str] = None
    gemini_base_url: str = DEFAULT_GEMINI_BASE_URL
    # Gateway (OpenAI-style) embedding model
    embedding_model: str = DEFAULT_EMBEDDING_MODEL
    # Native Gemini embedding model
    gemini_embedding_model: str = DEFAULT_GEMINI_EMBEDDING_MODEL
    # Request timeout (seconds), None leaves deadlines to the caller
    timeout: Optional[float] = None

    @classmethod
    def from_settings(
        cls,
        auth_type: AuthType,
        model: Optional[str] = None,
        settings: Optional[Settings] = None,
    ) -> "ContentGeneratorConfig":
        """
        Build from environment settings

        Args:
            auth_type: Selected auth method
            model: Model name, defaults to GEMINI_MODEL
            settings: Settings, defaults to the cached instance

        Returns:
            ContentGeneratorConfig: Frozen configuration
        """
        settings = settings or get_settings()
        return cls(
            model=model or settings.GEMINI_MODEL,
            auth_type=auth_type,
            portkey=PortkeyConfig(
                api_key=settings.PORTKEY_API_KEY,
                base_url=settings.PORTKEY_BASE_URL,
            ),
            gemini_api_key=settings.GEMINI_API_KEY,
            gemini_base_url=settings.GEMINI_BASE_URL,
            embedding_model=settings.DEFAULT_EMBEDDING_MODEL,
            gemini_embedding_model=settings.GEMINI_EMBEDDING_MODEL,
            timeout=settings.HTTP_TIMEOUT,
        )


class ContentGenerator(ABC):
    """
    Content Generator Abstract Base Class

    Every backend exposes the same four operations over the internal
    request/response shapes, so callers never know which one is in use.
    """

    @abstractmethod
    async def generate_content(
        self, request: GenerateContentRequest
    ) -> GenerateContentResponse:
        """
        Generate a complete response

        Raises:
            TransportError: Non-2xx status or connection failure
        """

    @abstractmethod
    async def generate_content_stream(
        self, request: GenerateContentRequest
    ) -> ContentStream:
        """
        Start a streaming generation

        The status is checked before this returns, so a failed call raises
        here and never yields partial results.

        The returned stream holds the HTTP connection until it is exhausted
        or closed. Breaking out of a bare ``async for`` leaves the connection
        open until garbage collection, so use ``async with``:

            async with await generator.generate_content_stream(request) as stream:
                async for fragment in stream:
                    if done(fragment):
                        break

        Raises:
            TransportError: Non-2xx status or connection failure
        """

    @abstractmethod
    async def count_tokens(self, request: CountTokensRequest) -> CountTokensResponse:
        """Count (or estimate) the tokens of the request contents"""

    @abstractmethod
    async def embed_content(self, request: EmbedContentRequest) -> EmbedContentResponse:
        """Embed the request contents as a single vector"""
