"""
Shared HTTP client configuration for collaborator adapters.

Optimized with connection pooling: each adapter keeps one AsyncClient alive
and reuses its TCP connections across requests.
"""

from typing import Any, Optional

import httpx  # type: ignore

from core.constants import (
    HTTP_CONNECT_TIMEOUT,
    HTTP_KEEPALIVE_EXPIRY,
    HTTP_MAX_CONNECTIONS,
    HTTP_MAX_KEEPALIVE_CONNECTIONS,
    HTTP_POOL_TIMEOUT,
    HTTP_READ_TIMEOUT,
    HTTP_WRITE_TIMEOUT,
    USER_AGENT,
)
from core.logger import logger
from core.messages import LogMessages


HTTP_LIMITS = httpx.Limits(
    max_keepalive_connections=HTTP_MAX_KEEPALIVE_CONNECTIONS,
    max_connections=HTTP_MAX_CONNECTIONS,
    keepalive_expiry=HTTP_KEEPALIVE_EXPIRY,
)

HTTP_TIMEOUT = httpx.Timeout(
    connect=HTTP_CONNECT_TIMEOUT,
    read=HTTP_READ_TIMEOUT,
    write=HTTP_WRITE_TIMEOUT,
    pool=HTTP_POOL_TIMEOUT,
)


def create_http_client(**kwargs: Any) -> httpx.AsyncClient:
    """Create an AsyncClient with the shared pool limits and timeouts."""
    headers = {"User-Agent": USER_AGENT}
    headers.update(kwargs.pop("headers", {}) or {})
    return httpx.AsyncClient(
        limits=HTTP_LIMITS,
        timeout=HTTP_TIMEOUT,
        follow_redirects=True,
        headers=headers,
        **kwargs,
    )


class PooledHttpClient:
    """
    Base for adapters that talk to a remote service over HTTP.

    The client is created lazily and recreated if it was closed. Passing a
    client in (e.g. one built on ``httpx.MockTransport``) bypasses creation.
    """

    service_name = "http"

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._client = client

    def _client_options(self) -> dict:
        """Extra keyword arguments for ``create_http_client``."""
        return {}

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create reusable HTTP client with connection pooling."""
        if self._client is None or self._client.is_closed:
            self._client = create_http_client(**self._client_options())
            logger.info(LogMessages.INIT_HTTP_CLIENT.format(service=self.service_name))
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
