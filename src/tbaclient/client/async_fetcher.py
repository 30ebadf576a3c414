"""Asynchronous resource fetcher -- mirrors :class:`~tbaclient.client.fetcher.ResourceFetcher`.

This module provides :class:`AsyncResourceFetcher`, the non-blocking
counterpart used by :class:`~tbaclient.api.AsyncTBA`. It wraps
:class:`httpx.AsyncClient` and keeps the same contract: identification
header, URL-keyed response cache, typed error mapping, and no retry.

Concurrent ``fetch`` calls for the same URL are not coalesced; each one that
misses the cache issues its own request and the last to finish wins the
cache slot.

See Also:
    :class:`~tbaclient.client.fetcher.ResourceFetcher` for the blocking
    equivalent.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from tbaclient.cache import ResponseCache
from tbaclient.client.response import parse_response_body, raise_for_status
from tbaclient.exceptions import ConnectionError_, InvalidUsageError
from tbaclient.models import APP_ID_HEADER, AppIdentity, RequestConfig
from tbaclient.output import get_output


class AsyncResourceFetcher:
    """Non-blocking fetcher for fully-formed API URLs.

    Args:
        identity: Application identity sent in the ``X-TBA-App-Id`` header.
        config: Request settings (timeout, TLS verification, redirects).
        cache: Response cache. A fresh unbounded cache is created when
            ``None``.
        transport: Optional async httpx transport, e.g.
            :class:`httpx.MockTransport` in tests.

    Example::

        async with AsyncResourceFetcher(identity) as fetcher:
            team = await fetcher.fetch("https://www.thebluealliance.com/api/v2/team/frc3128")
    """

    def __init__(
        self,
        identity: AppIdentity,
        config: Optional[RequestConfig] = None,
        cache: Optional[ResponseCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._identity = identity
        self._config = config or RequestConfig()
        self._cache = cache if cache is not None else ResponseCache()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def identity(self) -> AppIdentity:
        return self._identity

    @property
    def config(self) -> RequestConfig:
        return self._config

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> AsyncResourceFetcher:
        self._ensure_client()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client, if one is open."""
        if self._client:
            await self._client.aclose()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def headers(self) -> dict[str, str]:
        """Return the headers sent with every request."""
        return {APP_ID_HEADER: self._identity.header_value}

    async def fetch(self, url: str) -> Any:
        """Return the parsed JSON body for *url*, using the cache when possible.

        Behaves identically to
        :meth:`~tbaclient.client.fetcher.ResourceFetcher.fetch` but is
        non-blocking.
        """
        output = get_output()
        if self._cache.exists(url):
            output.debug(f"Cache hit: {url}")
            return self._cache.get(url)

        output.debug(f"Cache miss: GET {url}")
        response = await self._send(url)
        output.debug(f"HTTP {response.status_code} {response.reason_phrase}: {url}")

        raise_for_status(response, url)
        data = parse_response_body(response, url)
        self._cache.set(url, data)
        return data

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout,
                verify=self._config.verify_ssl,
                follow_redirects=self._config.follow_redirects,
                transport=self._transport,
            )
        return self._client

    async def _send(self, url: str) -> httpx.Response:
        client = self._ensure_client()
        try:
            return await client.get(url, headers=self.headers())
        except httpx.InvalidURL as exc:
            raise InvalidUsageError(f"Invalid URL {url!r}: {exc}") from exc
        except httpx.TransportError as exc:
            raise ConnectionError_(f"Request to {url} failed: {exc}") from exc
