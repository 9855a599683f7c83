"""httpx-based outbound HTTP client.

A single ``httpx.AsyncClient`` is shared by every request and closed on
application shutdown.
"""

from typing import Any

import httpx

from seo_prerender.exceptions import UpstreamError


class HttpxClient:
    """httpx implementation of the HttpClient protocol.

    Example:
        ```python
        client = HttpxClient.create(timeout=5.0)
        payload = await client.get_json("https://api.example.com/details/product/ab12")
        await client.aclose()
        ```
    """

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            timeout: Request timeout in seconds.
            transport: Optional transport override (``httpx.MockTransport`` in tests).
        """
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def create(
        cls,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "HttpxClient":
        """Factory method to create HttpxClient with defaults."""
        return cls(timeout=timeout, transport=transport)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    async def _get(self, url: str) -> httpx.Response:
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(url, f"status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise UpstreamError(url, f"{type(e).__name__}: {e}") from e
        return response

    async def get_json(self, url: str) -> Any:
        response = await self._get(url)
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(url, "response body is not valid JSON") from e

    async def get_bytes(self, url: str) -> bytes:
        response = await self._get(url)
        return response.content

    async def aclose(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
