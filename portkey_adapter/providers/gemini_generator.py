"""
Google Gemini Native Content Generator

Serves the internal content-generation operations through the Gemini
native API (v1beta models endpoints).
"""

import logging
from typing import Any, Optional

import httpx

from portkey_adapter.common.errors import ConfigurationError, TransportError
from portkey_adapter.common.http_client import HttpClient, read_json
from portkey_adapter.common.normalizer import normalize_contents
from portkey_adapter.common.protocol_conversion import (
    build_gemini_request,
    gemini_to_generate_response,
    parse_gemini_embedding,
)
from portkey_adapter.common.sse import ContentStream
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
from portkey_adapter.providers.base import ContentGenerator, ContentGeneratorConfig

logger = logging.getLogger(__name__)


def _parse_stream_frame(payload: Any) -> Optional[GenerateContentResponse]:
    response = gemini_to_generate_response(payload)
    if not response.text:
        return None
    return response


class GeminiContentGenerator(ContentGenerator):
    """Google Gemini native API content generator."""

    def __init__(
        self,
        config: ContentGeneratorConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not config.gemini_api_key:
            raise ConfigurationError("Gemini API key is required")

        self._config = config
        self._http = HttpClient(
            base_url=config.gemini_base_url,
            headers={
                "Content-Type": "application/json",
                "x-goog-api-key": config.gemini_api_key,
            },
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def model(self) -> str:
        return self._config.model

    @staticmethod
    def _model_path(model: str, method: str) -> str:
        if model.startswith("models/"):
            model = model[len("models/"):]
        return f"/v1beta/models/{model}:{method}"

    async def _post_json(self, path: str, body: dict[str, Any]) -> Any:
        response = await self._http.post(path, body)
        if not response.is_success:
            logger.warning(
                "Gemini request failed: path=%s status=%s body=%.500s",
                path,
                response.status_code,
                response.text,
            )
            raise TransportError.from_status(
                response.status_code, response.reason_phrase, api_name="Gemini API"
            )
        return read_json(response)

    async def generate_content(
        self, request: GenerateContentRequest
    ) -> GenerateContentResponse:
        model = request.model or self._config.model
        body = build_gemini_request(normalize_contents(request.contents), request.config)
        data = await self._post_json(self._model_path(model, "generateContent"), body)
        return gemini_to_generate_response(data)

    async def generate_content_stream(
        self, request: GenerateContentRequest
    ) -> ContentStream:
        model = request.model or self._config.model
        body = build_gemini_request(normalize_contents(request.contents), request.config)
        streaming = await self._http.stream(
            self._model_path(model, "streamGenerateContent"),
            body,
            params={"alt": "sse"},
        )

        if not streaming.is_success:
            status_code, reason = streaming.status_code, streaming.reason_phrase
            await streaming.aclose()
            logger.warning("Gemini stream failed before streaming: status=%s", status_code)
            raise TransportError.from_status(status_code, reason, api_name="Gemini API")

        return ContentStream(
            chunks=streaming.aiter_bytes(),
            parse_frame=_parse_stream_frame,
            release=streaming.aclose,
        )

    async def count_tokens(self, request: CountTokensRequest) -> CountTokensResponse:
        model = request.model or self._config.model
        body = build_gemini_request(normalize_contents(request.contents), None)
        data = await self._post_json(self._model_path(model, "countTokens"), body)
        total = data.get("totalTokens") if isinstance(data, dict) else None
        return CountTokensResponse(total_tokens=total if isinstance(total, int) else 0)

    async def embed_content(self, request: EmbedContentRequest) -> EmbedContentResponse:
        model = request.model or self._config.gemini_embedding_model
        messages = normalize_contents(request.contents)
        body = {
            "model": f"models/{model}",
            "content": {"parts": [{"text": m.text} for m in messages]},
        }
        data = await self._post_json(self._model_path(model, "embedContent"), body)
        return parse_gemini_embedding(data)
