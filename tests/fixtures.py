"""
Test Fixtures

HTTP transports and SSE payload builders shared by the generator tests.
"""

import json
from typing import Any, Callable, Iterable, Optional

import httpx


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served"""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)

    @property
    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


def json_transport(body: Any, status_code: int = 200) -> RecordingTransport:
    """Transport answering every request with one JSON body"""
    return RecordingTransport(lambda request: httpx.Response(status_code, json=body))


class ChunkedBody(httpx.AsyncByteStream):
    """Response body delivered in the given chunks, recording whether it was closed"""

    def __init__(self, chunks: Iterable[bytes], fail_after: Optional[int] = None):
        self.chunks = list(chunks)
        self.fail_after = fail_after
        self.reads = 0
        self.closed = False

    async def __aiter__(self):
        for index, chunk in enumerate(self.chunks):
            if self.fail_after is not None and index >= self.fail_after:
                raise httpx.ReadError("connection reset")
            self.reads += 1
            yield chunk

    async def aclose(self) -> None:
        self.closed = True


def stream_transport(body: ChunkedBody, status_code: int = 200) -> RecordingTransport:
    """Transport answering every request with a streamed SSE body"""
    return RecordingTransport(
        lambda request: httpx.Response(
            status_code,
            headers={"content-type": "text/event-stream"},
            stream=body,
        )
    )


def sse_line(payload: Any) -> bytes:
    return f"data: {json.dumps(payload)}\n".encode()


def delta_frame(
    content: str,
    finish_reason: Optional[str] = None,
    usage: Optional[dict[str, int]] = None,
) -> dict[str, Any]:
    frame: dict[str, Any] = {
        "choices": [{"index": 0, "delta": {"content": content}, "finish_reason": finish_reason}]
    }
    if usage is not None:
        frame["usage"] = usage
    return frame


CHAT_COMPLETION_BODY = {
    "id": "chatcmpl-1",
    "object": "chat.completion",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Hello there"},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 5, "completion_tokens": 2, "total_tokens": 7},
}

EMBEDDING_BODY = {
    "object": "list",
    "data": [{"object": "embedding", "index": 0, "embedding": [0.1, -0.2, 0.3]}],
    "model": "text-embedding-ada-002",
}

GEMINI_BODY = {
    "candidates": [
        {
            "content": {"role": "model", "parts": [{"text": "Hi "}, {"text": "from Gemini"}]},
            "finishReason": "STOP",
            "index": 0,
        }
    ],
    "usageMetadata": {"promptTokenCount": 3, "candidatesTokenCount": 4, "totalTokenCount": 7},
}
