"""Synchronous resource fetcher with identification header and response cache.

This module provides :class:`ResourceFetcher`, the blocking request path
shared by every endpoint method of :class:`~tbaclient.api.TBA`. It wraps
:class:`httpx.Client` and layers on:

- **Identification** -- every request carries the ``X-TBA-App-Id`` header
  built from the client's :class:`~tbaclient.models.AppIdentity`.
- **Response caching** -- parsed bodies are stored in a
  :class:`~tbaclient.cache.ResponseCache` keyed by the exact URL; a cached
  URL is never requested again.
- **Error mapping** -- statuses other than 2xx / 3xx raise a typed
  :class:`~tbaclient.exceptions.APIError`; network failures raise
  :class:`~tbaclient.exceptions.ConnectionError_`.

There is no retry: a failed request is neither retried nor cached, so the
next call for the same URL goes back to the network.

See Also:
    :class:`~tbaclient.client.async_fetcher.AsyncResourceFetcher` for the
    equivalent non-blocking implementation.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from tbaclient.cache import ResponseCache
from tbaclient.client.response import parse_response_body, raise_for_status
from tbaclient.exceptions import ConnectionError_, InvalidUsageError
from tbaclient.models import APP_ID_HEADER, AppIdentity, RequestConfig
from tbaclient.output import get_output


class ResourceFetcher:
    """Blocking fetcher for fully-formed API URLs.

    The underlying :class:`httpx.Client` is opened lazily on the first
    network request, or eagerly when the fetcher is used as a context
    manager. Call :meth:`close` (or leave the ``with`` block) to release it;
    the cache survives a close and the fetcher can be reused afterwards.

    Args:
        identity: Application identity sent in the ``X-TBA-App-Id`` header.
        config: Request settings (timeout, TLS verification, redirects).
        cache: Response cache. A fresh unbounded cache is created when
            ``None``.
        transport: Optional httpx transport, e.g. :class:`httpx.MockTransport`
            in tests.

    Example::

        with ResourceFetcher(identity) as fetcher:
            team = fetcher.fetch("https://www.thebluealliance.com/api/v2/team/frc3128")
    """

    def __init__(
        self,
        identity: AppIdentity,
        config: Optional[RequestConfig] = None,
        cache: Optional[ResponseCache] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._identity = identity
        self._config = config or RequestConfig()
        self._cache = cache if cache is not None else ResponseCache()
        self._transport = transport
        self._client: Optional[httpx.Client] = None

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
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> ResourceFetcher:
        self._ensure_client()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client, if one is open."""
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def headers(self) -> dict[str, str]:
        """Return the headers sent with every request."""
        return {APP_ID_HEADER: self._identity.header_value}

    def fetch(self, url: str) -> Any:
        """Return the parsed JSON body for *url*, using the cache when possible.

        Args:
            url: Fully-formed request URL (base URL + resource path).

        Returns:
            The decoded JSON payload.

        Raises:
            AuthError: On 401 / 403.
            NotFoundError: On 404.
            ServerError: On 5xx.
            APIError: On any other non-success, non-redirect status.
            ConnectionError_: On network / timeout errors.
            ResponseParseError: If the body is not valid JSON.
        """
        output = get_output()
        if self._cache.exists(url):
            output.debug(f"Cache hit: {url}")
            return self._cache.get(url)

        output.debug(f"Cache miss: GET {url}")
        response = self._send(url)
        output.debug(f"HTTP {response.status_code} {response.reason_phrase}: {url}")

        raise_for_status(response, url)
        data = parse_response_body(response, url)
        self._cache.set(url, data)
        return data

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=self._config.timeout,
                verify=self._config.verify_ssl,
                follow_redirects=self._config.follow_redirects,
                transport=self._transport,
            )
        return self._client

    def _send(self, url: str) -> httpx.Response:
        """Issue the GET request, mapping transport failures to tbaclient errors."""
        client = self._ensure_client()
        try:
            return client.get(url, headers=self.headers())
        except httpx.InvalidURL as exc:
            raise InvalidUsageError(f"Invalid URL {url!r}: {exc}") from exc
        except httpx.TransportError as exc:
            raise ConnectionError_(f"Request to {url} failed: {exc}") from exc
