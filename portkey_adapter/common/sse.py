"""
Streaming Response Decoding

Turns a server-sent-events byte stream into internal response fragments.

- ``SSELineDecoder`` reassembles complete lines across network reads
- ``iter_data_payloads`` keeps the JSON payloads of ``data: `` lines
- ``ContentStream`` drives both over a live HTTP body and yields one
  translated fragment per frame that carries new content
"""

from __future__ import annotations

import codecs
import json
import logging
from collections.abc import AsyncIterator, Awaitable, Iterable, Iterator
from typing import Any, Callable, Optional

import httpx

from portkey_adapter.common.errors import TransportError
from portkey_adapter.domain.response import GenerateContentResponse

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"


class SSELineDecoder:
    """
    Incremental line splitter for an SSE body.

    - bytes are decoded with an incremental UTF-8 decoder, so a multi-byte
      character split across reads is reassembled
    - a line is emitted only once its terminator has been seen; the
      unterminated tail stays pending until the next read
    - CRLF terminators are accepted
    """

    def __init__(self) -> None:
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending: list[str] = []

    @property
    def pending(self) -> str:
        """Unterminated tail carried over to the next read."""
        return "".join(self._pending)

    def feed(self, chunk: bytes) -> list[str]:
        """
        Append bytes and return the lines completed by them.
        """
        if not chunk:
            return []

        text = self._decoder.decode(chunk)
        lines: list[str] = []
        start = 0
        while True:
            end = text.find("\n", start)
            if end == -1:
                break
            if self._pending:
                self._pending.append(text[start:end])
                line = "".join(self._pending)
                self._pending.clear()
            else:
                line = text[start:end]
            lines.append(line[:-1] if line.endswith("\r") else line)
            start = end + 1

        if start < len(text):
            self._pending.append(text[start:])
        return lines


def iter_data_payloads(lines: Iterable[str]) -> Iterator[Any]:
    """
    Yield the parsed JSON payload of every ``data: `` line.

    Lines without the prefix (comments, keep-alives, other fields) and the
    ``[DONE]`` sentinel are skipped. A payload that is not valid JSON is
    skipped on its own; the lines around it are unaffected.
    """
    for line in lines:
        if not line.startswith(DATA_PREFIX):
            continue
        data = line[len(DATA_PREFIX):]
        if data == DONE_SENTINEL:
            continue
        try:
            yield json.loads(data)
        except json.JSONDecodeError:
            logger.debug("Skipping malformed stream line: %.200s", data)


FrameParser = Callable[[Any], Optional[GenerateContentResponse]]


class ContentStream:
    """
    Async iterator of internal response fragments decoded from an SSE body.

    Each network read is the only suspension point; fragments decoded from
    one read are handed out before the next read is issued. The underlying
    HTTP response is released when the body ends, when a read fails, or
    when ``aclose()`` is called (also on ``async with`` exit). Abandoning
    the iterator without closing it leaves release to garbage collection,
    so prefer ``async with`` when stopping early.

    Example:
        async with await generator.generate_content_stream(request) as stream:
            async for fragment in stream:
                print(fragment.text, end="")
    """

    def __init__(
        self,
        chunks: AsyncIterator[bytes],
        parse_frame: FrameParser,
        release: Optional[Callable[[], Awaitable[None]]] = None,
    ) -> None:
        """
        Args:
            chunks: Raw body chunks, e.g. ``response.aiter_bytes()``
            parse_frame: Translates one parsed payload, returning None for
                frames without new content
            release: Closes the HTTP response and its client
        """
        self._chunks = chunks
        self._parse_frame = parse_frame
        self._release_fn = release
        self._released = False
        self._decoder = SSELineDecoder()
        self._iterator = self._iterate()

    async def _iterate(self) -> AsyncIterator[GenerateContentResponse]:
        reader = self._read_chunks()
        try:
            async for chunk in reader:
                for payload in iter_data_payloads(self._decoder.feed(chunk)):
                    fragment = self._parse_frame(payload)
                    if fragment is not None:
                        yield fragment
            if self._decoder.pending:
                logger.debug("Discarding unterminated stream tail: %.200s", self._decoder.pending)
        finally:
            await reader.aclose()
            await self._release()

    async def _read_chunks(self) -> AsyncIterator[bytes]:
        iterator = self._chunks.__aiter__()
        while True:
            try:
                chunk = await iterator.__anext__()
            except StopAsyncIteration:
                return
            except httpx.TimeoutException as e:
                raise TransportError(f"Stream read timeout: {e}") from e
            except httpx.HTTPError as e:
                raise TransportError(f"Stream read error: {e}") from e
            yield chunk

    async def _release(self) -> None:
        if self._released:
            return
        self._released = True
        close_chunks = getattr(self._chunks, "aclose", None)
        if close_chunks is not None:
            await close_chunks()
        if self._release_fn is not None:
            await self._release_fn()

    @property
    def closed(self) -> bool:
        return self._released

    def __aiter__(self) -> "ContentStream":
        return self

    async def __anext__(self) -> GenerateContentResponse:
        return await self._iterator.__anext__()

    async def aclose(self) -> None:
        """Stop decoding and release the HTTP response. Safe to call twice."""
        await self._iterator.aclose()
        await self._release()

    async def __aenter__(self) -> "ContentStream":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
