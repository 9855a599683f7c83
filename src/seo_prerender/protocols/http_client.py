"""Outbound HTTP client protocol.

Covers the two upstream calls the service makes: the JSON details lookup
and the raw image download.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for outbound HTTP GET requests."""

    async def get_json(self, url: str) -> Any:
        """GET a URL and decode the JSON body.

        Args:
            url: Absolute URL to fetch

        Returns:
            The decoded JSON document

        Raises:
            UpstreamError: On transport errors, non-2xx status or invalid JSON
        """
        ...

    async def get_bytes(self, url: str) -> bytes:
        """GET a URL and return the raw body.

        Args:
            url: Absolute URL to fetch

        Returns:
            The response body

        Raises:
            UpstreamError: On transport errors or non-2xx status
        """
        ...

    async def aclose(self) -> None:
        """Release pooled connections."""
        ...
