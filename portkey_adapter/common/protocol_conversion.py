"""
Protocol Conversion

Translates between the internal request/response shapes and the wire
formats of the two backends:

- OpenAI-compatible chat completions, spoken by the Portkey gateway
- Gemini generateContent, spoken by the native API

All functions here are pure; nothing touches the network.
"""

from typing import Any, Optional

from portkey_adapter.domain.content import (
    MODEL_ROLE,
    Content,
    GenerationConfig,
    NormalizedMessage,
    Part,
    Role,
)
from portkey_adapter.domain.response import (
    DEFAULT_FINISH_REASON,
    Candidate,
    ContentEmbedding,
    EmbedContentResponse,
    GenerateContentResponse,
    UsageMetadata,
)
from portkey_adapter.domain.wire import (
    ChatCompletionRequest,
    ChatMessage,
    WireResponseChunk,
    WireUsage,
)


def _safe_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    return 0


def _first_choice(body: Any) -> dict[str, Any]:
    if not isinstance(body, dict):
        return {}
    choices = body.get("choices")
    if not isinstance(choices, list) or not choices:
        return {}
    choice = choices[0]
    return choice if isinstance(choice, dict) else {}


def _wire_usage(body: Any) -> Optional[WireUsage]:
    if not isinstance(body, dict):
        return None
    usage = body.get("usage")
    if not isinstance(usage, dict):
        return None
    return WireUsage(
        prompt_tokens=_safe_int(usage.get("prompt_tokens")),
        completion_tokens=_safe_int(usage.get("completion_tokens")),
        total_tokens=_safe_int(usage.get("total_tokens")),
    )


# ---------------------------------------------------------------------------
# Chat completions (gateway)
# ---------------------------------------------------------------------------


def build_chat_completion_request(
    messages: list[NormalizedMessage],
    config: Optional[GenerationConfig],
    model: str,
    stream: bool,
) -> ChatCompletionRequest:
    """
    Build the chat completions request

    An empty message list is passed through unchanged.

    Args:
        messages: Normalized messages
        config: Generation parameters; unset fields are omitted from the payload
        model: Target model name
        stream: Value of the stream flag

    Returns:
        ChatCompletionRequest: Request model, see ``to_payload()``
    """
    config = config or GenerationConfig()
    return ChatCompletionRequest(
        model=model,
        messages=[ChatMessage(role=m.role.value, content=m.text) for m in messages],
        stream=stream,
        max_tokens=config.max_output_tokens,
        temperature=config.temperature,
        top_p=config.top_p,
    )


def parse_chat_completion(body: Any) -> WireResponseChunk:
    """
    Decode a non-streaming chat completions body

    Args:
        body: Parsed JSON body

    Returns:
        WireResponseChunk: First-choice text, finish reason and usage
    """
    choice = _first_choice(body)
    message = choice.get("message")
    text = message.get("content") if isinstance(message, dict) else None
    finish_reason = choice.get("finish_reason")
    return WireResponseChunk(
        text=text if isinstance(text, str) else "",
        finish_reason=finish_reason if isinstance(finish_reason, str) else None,
        usage=_wire_usage(body),
    )


def parse_chat_completion_delta(payload: Any) -> Optional[WireResponseChunk]:
    """
    Decode one streamed chat completions frame

    Args:
        payload: Parsed JSON of one ``data:`` line

    Returns:
        WireResponseChunk when the frame carries new text, otherwise None
    """
    choice = _first_choice(payload)
    delta = choice.get("delta")
    if not isinstance(delta, dict):
        return None
    text = delta.get("content")
    if not isinstance(text, str) or not text:
        return None
    finish_reason = choice.get("finish_reason")
    return WireResponseChunk(
        text=text,
        finish_reason=finish_reason if isinstance(finish_reason, str) else None,
        usage=_wire_usage(payload),
    )


def chunk_to_generate_response(chunk: WireResponseChunk) -> GenerateContentResponse:
    """
    Translate a decoded gateway unit into the internal response

    Missing finish reason becomes "STOP", missing counters become 0.

    Args:
        chunk: Decoded body or stream frame

    Returns:
        GenerateContentResponse: Single assistant candidate at index 0
    """
    usage = chunk.usage or WireUsage()
    return GenerateContentResponse.from_text(
        text=chunk.text,
        finish_reason=chunk.finish_reason,
        usage=UsageMetadata(
            prompt_token_count=usage.prompt_tokens,
            candidates_token_count=usage.completion_tokens,
            total_token_count=usage.total_tokens,
        ),
    )


def chat_completion_to_generate_response(body: Any) -> GenerateContentResponse:
    return chunk_to_generate_response(parse_chat_completion(body))


def generate_response_to_chat_completion(
    response: GenerateContentResponse,
    model: str = "",
) -> dict[str, Any]:
    """
    Render an internal response as a chat completions body

    Args:
        response: Internal response
        model: Model name reported in the body

    Returns:
        dict: Chat completions body with one choice
    """
    usage = response.usage_metadata
    return {
        "object": "chat.completion",
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": Role.ASSISTANT.value, "content": response.text},
                "finish_reason": response.finish_reason,
            }
        ],
        "usage": {
            "prompt_tokens": usage.prompt_token_count,
            "completion_tokens": usage.candidates_token_count,
            "total_tokens": usage.total_token_count,
        },
    }


def parse_embedding_response(body: Any) -> EmbedContentResponse:
    """
    Decode an embeddings body

    A body without vector data yields one empty vector.
    """
    values: list[float] = []
    if isinstance(body, dict):
        data = body.get("data")
        if isinstance(data, list) and data and isinstance(data[0], dict):
            embedding = data[0].get("embedding")
            if isinstance(embedding, list):
                values = embedding
    return EmbedContentResponse(embeddings=(ContentEmbedding(values=tuple(values)),))


# ---------------------------------------------------------------------------
# Gemini generateContent (native)
# ---------------------------------------------------------------------------


def build_gemini_request(
    messages: list[NormalizedMessage],
    config: Optional[GenerationConfig],
) -> dict[str, Any]:
    """
    Build a native generateContent body from normalized messages

    Args:
        messages: Normalized messages
        config: Generation parameters

    Returns:
        dict: Body with ``contents`` and, when set, ``generationConfig``
    """
    body: dict[str, Any] = {
        "contents": [
            {
                "role": MODEL_ROLE if m.role == Role.ASSISTANT else Role.USER.value,
                "parts": [{"text": m.text}],
            }
            for m in messages
        ]
    }
    if config is not None:
        generation_config = {
            key: value
            for key, value in (
                ("maxOutputTokens", config.max_output_tokens),
                ("temperature", config.temperature),
                ("topP", config.top_p),
            )
            if value is not None
        }
        if generation_config:
            body["generationConfig"] = generation_config
    return body


def gemini_to_generate_response(body: Any) -> GenerateContentResponse:
    """
    Translate a native generateContent body (or one stream frame)

    Only text parts are kept.
    """
    if not isinstance(body, dict):
        return GenerateContentResponse()

    candidates: list[Candidate] = []
    raw_candidates = body.get("candidates")
    if isinstance(raw_candidates, list):
        for position, raw in enumerate(raw_candidates):
            if not isinstance(raw, dict):
                continue
            content = raw.get("content") if isinstance(raw.get("content"), dict) else {}
            raw_parts = content.get("parts")
            parts = tuple(
                Part(text=p["text"])
                for p in (raw_parts if isinstance(raw_parts, list) else [])
                if isinstance(p, dict) and isinstance(p.get("text"), str)
            )
            role = content.get("role")
            finish_reason = raw.get("finishReason")
            candidates.append(
                Candidate(
                    content=Content(role=role if isinstance(role, str) else MODEL_ROLE, parts=parts),
                    finish_reason=finish_reason if isinstance(finish_reason, str) else DEFAULT_FINISH_REASON,
                    index=_safe_int(raw.get("index", position)),
                )
            )

    usage = body.get("usageMetadata") if isinstance(body.get("usageMetadata"), dict) else {}
    return GenerateContentResponse(
        candidates=tuple(candidates),
        usage_metadata=UsageMetadata(
            prompt_token_count=_safe_int(usage.get("promptTokenCount")),
            candidates_token_count=_safe_int(usage.get("candidatesTokenCount")),
            total_token_count=_safe_int(usage.get("totalTokenCount")),
        ),
    )


def parse_gemini_embedding(body: Any) -> EmbedContentResponse:
    values: list[float] = []
    if isinstance(body, dict):
        embedding = body.get("embedding")
        if isinstance(embedding, dict) and isinstance(embedding.get("values"), list):
            values = embedding["values"]
    return EmbedContentResponse(embeddings=(ContentEmbedding(values=tuple(values)),))
