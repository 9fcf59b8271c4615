"""
Portkey Content Generator

Serves the internal content-generation operations through the Portkey
gateway's OpenAI-compatible API:
- /chat/completions (plain and streamed)
- /embeddings

Token counting has no gateway endpoint and is estimated locally.
"""

import logging
from typing import Any, Optional

import httpx

from portkey_adapter.common.errors import ConfigurationError, TransportError
from portkey_adapter.common.http_client import HttpClient, read_json
from portkey_adapter.common.normalizer import join_text, normalize_contents
from portkey_adapter.common.protocol_conversion import (
    build_chat_completion_request,
    chat_completion_to_generate_response,
    chunk_to_generate_response,
    parse_chat_completion_delta,
    parse_embedding_response,
)
from portkey_adapter.common.sse import ContentStream
from portkey_adapter.common.token_counter import get_token_estimator
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
from portkey_adapter.domain.wire import EmbeddingRequest
from portkey_adapter.providers.base import (
    DEFAULT_PORTKEY_BASE_URL,
    ContentGenerator,
    ContentGeneratorConfig,
)

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_PATH = "/chat/completions"
EMBEDDINGS_PATH = "/embeddings"


def _parse_stream_frame(payload: Any) -> Optional[GenerateContentResponse]:
    chunk = parse_chat_completion_delta(payload)
    if chunk is None:
        return None
    return chunk_to_generate_response(chunk)


class PortkeyContentGenerator(ContentGenerator):
    """
    Portkey gateway content generator

    The API key is checked once at construction; everything else is found
    out at call time. Instances hold only the frozen configuration and are
    safe to share across concurrent calls.
    """

    def __init__(
        self,
        config: ContentGeneratorConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize generator

        Args:
            config: Generator configuration, ``config.portkey.api_key`` is required
            transport: Custom httpx transport (proxies, tests)

        Raises:
            ConfigurationError: Portkey API key missing or empty
        """
        if config.portkey is None or not config.portkey.api_key:
            raise ConfigurationError("Portkey API key is required")

        self._config = config
        self._http = HttpClient(
            base_url=config.portkey.base_url or DEFAULT_PORTKEY_BASE_URL,
            headers=self._build_headers(config.portkey.api_key),
            timeout=config.timeout,
            transport=transport,
        )

    @staticmethod
    def _build_headers(api_key: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-portkey-api-key": api_key,
        }

    @property
    def model(self) -> str:
        return self._config.model

    @property
    def base_url(self) -> str:
        return self._http.base_url

    def _build_payload(self, request: GenerateContentRequest, stream: bool) -> dict[str, Any]:
        messages = normalize_contents(request.contents)
        return build_chat_completion_request(
            messages=messages,
            config=request.config,
            model=request.model or self._config.model,
            stream=stream,
        ).to_payload()

    async def generate_content(
        self, request: GenerateContentRequest
    ) -> GenerateContentResponse:
        payload = self._build_payload(request, stream=False)
        response = await self._http.post(CHAT_COMPLETIONS_PATH, payload)

        if not response.is_success:
            logger.warning(
                "Portkey chat completion failed: status=%s body=%.500s",
                response.status_code,
                response.text,
            )
            raise TransportError.from_status(response.status_code, response.reason_phrase)

        return chat_completion_to_generate_response(read_json(response))

    async def generate_content_stream(
        self, request: GenerateContentRequest
    ) -> ContentStream:
        payload = self._build_payload(request, stream=True)
        streaming = await self._http.stream(CHAT_COMPLETIONS_PATH, payload)

        if not streaming.is_success:
            status_code, reason = streaming.status_code, streaming.reason_phrase
            await streaming.aclose()
            logger.warning("Portkey stream failed before streaming: status=%s", status_code)
            raise TransportError.from_status(status_code, reason)

        return ContentStream(
            chunks=streaming.aiter_bytes(),
            parse_frame=_parse_stream_frame,
            release=streaming.aclose,
        )

    async def count_tokens(self, request: CountTokensRequest) -> CountTokensResponse:
        """
        Estimate the token count

        The gateway has no counting endpoint: the normalized text is joined
        without separators and estimated at four characters per token.
        """
        messages = normalize_contents(request.contents)
        return CountTokensResponse(total_tokens=get_token_estimator().count_messages(messages))

    async def embed_content(self, request: EmbedContentRequest) -> EmbedContentResponse:
        """
        Embed the request contents

        All normalized text is joined with single spaces and sent as one
        input. A response without vector data yields an empty vector.
        """
        messages = normalize_contents(request.contents)
        embed_request = EmbeddingRequest(
            model=request.model or self._config.embedding_model,
            input=join_text(messages, " ").strip(),
        )

        response = await self._http.post(EMBEDDINGS_PATH, embed_request.to_payload())
        if not response.is_success:
            logger.warning("Portkey embeddings failed: status=%s", response.status_code)
            raise TransportError.from_status(
                response.status_code,
                response.reason_phrase,
                api_name="Portkey Embeddings API",
            )

        return parse_embedding_response(read_json(response))
