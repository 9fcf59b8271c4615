"""
HTTP Client Wrapper Module

Provides the asynchronous HTTP calls content generators make to their
backends. A fresh httpx.AsyncClient is opened per call, so a wrapper
instance holds no connection state and can be shared across concurrent calls.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, AsyncIterator, Optional

import httpx

from portkey_adapter.common.errors import TransportError
from portkey_adapter.common.sanitizer import sanitize_headers

logger = logging.getLogger(__name__)


@dataclass
class StreamingResponse:
    """
    Open streaming response

    Owns both the response and the client it was sent with; ``aclose()``
    releases the two together.
    """

    client: httpx.AsyncClient
    response: httpx.Response

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def reason_phrase(self) -> str:
        return self.response.reason_phrase

    @property
    def is_success(self) -> bool:
        return self.response.is_success

    def aiter_bytes(self) -> AsyncIterator[bytes]:
        return self.response.aiter_bytes()

    async def aclose(self) -> None:
        try:
            await self.response.aclose()
        finally:
            await self.client.aclose()


class HttpClient:
    """
    Asynchronous HTTP Client Wrapper

    Wraps httpx.AsyncClient with the backend base URL, default headers and
    timeout. httpx timeouts and connection failures surface as TransportError.
    """

    def __init__(
        self,
        base_url: str,
        headers: Optional[dict[str, str]] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize HTTP Client

        Args:
            base_url: Base URL, trailing slashes are trimmed
            headers: Default request headers
            timeout: Request timeout (seconds), None disables it
            transport: Custom httpx transport (proxies, tests)
        """
        self.base_url = base_url.rstrip("/")
        self.default_headers = dict(headers or {})
        self.timeout = timeout
        self.transport = transport

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=self.default_headers,
            timeout=httpx.Timeout(self.timeout),
            transport=self.transport,
        )

    def build_url(self, path: str) -> str:
        cleaned_path = path if path.startswith("/") else f"/{path}"
        return f"{self.base_url}{cleaned_path}"

    def _log_request(self, label: str, url: str, body: dict[str, Any]) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s: url=%s headers=%s body=%s",
                label,
                url,
                sanitize_headers(self.default_headers),
                json.dumps(body, ensure_ascii=False),
            )

    async def post(
        self,
        path: str,
        json_body: dict[str, Any],
        params: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Send POST Request and read the whole body

        Args:
            path: Request path, appended to base_url
            json_body: JSON request body
            params: Query parameters

        Returns:
            httpx.Response: Response with the body already read

        Raises:
            TransportError: Timeout or connection failure
        """
        url = self.build_url(path)
        self._log_request("POST", url, json_body)

        try:
            async with self._new_client() as client:
                return await client.post(url, json=json_body, params=params)
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timeout: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"Request error: {e}") from e

    async def stream(
        self,
        path: str,
        json_body: dict[str, Any],
        params: Optional[dict[str, str]] = None,
    ) -> StreamingResponse:
        """
        Send streaming POST Request

        Returns once the status line and headers have arrived; the body is
        left unread. The caller must ``aclose()`` the result.

        Raises:
            TransportError: Timeout or connection failure before headers arrive
        """
        url = self.build_url(path)
        self._log_request("POST (stream)", url, json_body)

        client = self._new_client()
        try:
            request = client.build_request("POST", url, json=json_body, params=params)
            response = await client.send(request, stream=True)
        except httpx.TimeoutException as e:
            await client.aclose()
            raise TransportError(f"Request timeout: {e}") from e
        except httpx.RequestError as e:
            await client.aclose()
            raise TransportError(f"Request error: {e}") from e
        except BaseException:
            await client.aclose()
            raise

        return StreamingResponse(client=client, response=response)


def read_json(response: httpx.Response) -> Any:
    """
    Parse a successful response body as JSON

    Raises:
        TransportError: Body is not valid JSON
    """
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise TransportError(
            f"Invalid JSON in response body: {e}",
            status_code=response.status_code,
            status_text=response.reason_phrase,
            code="invalid_body",
        ) from e
