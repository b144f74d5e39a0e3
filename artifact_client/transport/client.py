"""Async HTTP client for the repository REST API.

Wraps two httpx.AsyncClient instances:
  - the repository client, bound to the instance base URL and carrying the
    credentials captured at construction;
  - a bare client for remote upload sources (`stream_url`), so repository
    credentials are never sent to third-party hosts.

Both follow redirects; httpx drops the Authorization header when a redirect
leaves the repository origin (e.g. downloads served from cloud storage).
No retries and no timeouts beyond the httpx `timeout` are applied here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterable, AsyncIterator, Optional

import httpx

from artifact_client.transport import routes
from artifact_client.transport.types import AuthConfig

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class TransportClient:
    """Issues requests given a route template, params and overrides."""

    def __init__(
        self,
        base_url: str,
        auth: Optional[AuthConfig] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.auth = auth
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            auth=auth.httpx_auth() if auth else None,
            headers=auth.headers() if auth else None,
            timeout=timeout,
            verify=verify_ssl,
            transport=transport,
            follow_redirects=True,
        )
        self._remote = httpx.AsyncClient(
            timeout=timeout,
            verify=verify_ssl,
            transport=transport,
            follow_redirects=True,
        )

    async def request(
        self,
        route: str,
        params: Optional[dict] = None,
        *,
        method: str = "GET",
        query: Optional[dict] = None,
        headers: Optional[dict[str, str]] = None,
        content: bytes | AsyncIterable[bytes] | None = None,
    ) -> httpx.Response:
        """Send a request and return the fully read response."""
        url = routes.render(route, params)
        logger.debug("%s %s%s", method, self.base_url, url)
        return await self._client.request(
            method,
            url,
            params=query,
            headers=headers,
            content=content,
        )

    @asynccontextmanager
    async def stream(
        self,
        route: str,
        params: Optional[dict] = None,
        *,
        method: str = "GET",
        query: Optional[dict] = None,
    ) -> AsyncIterator[httpx.Response]:
        """Send a request and yield the response before its body is read."""
        url = routes.render(route, params)
        logger.debug("%s %s%s (streamed)", method, self.base_url, url)
        async with self._client.stream(method, url, params=query) as response:
            yield response

    @asynccontextmanager
    async def stream_url(self, url: str) -> AsyncIterator[httpx.Response]:
        """GET an absolute URL outside the repository, without credentials."""
        logger.debug("GET %s (remote source)", url)
        async with self._remote.stream("GET", url) as response:
            yield response

    async def aclose(self) -> None:
        await self._client.aclose()
        await self._remote.aclose()

    async def __aenter__(self) -> "TransportClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
