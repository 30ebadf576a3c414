"""HTTP fetching module for tbaclient.

Provides synchronous and asynchronous fetchers that wrap :mod:`httpx` with
the ``X-TBA-App-Id`` identification header, a URL-keyed response cache,
and typed error mapping.

Classes:
    :class:`ResourceFetcher` -- blocking fetcher backed by :class:`httpx.Client`.
    :class:`AsyncResourceFetcher` -- non-blocking fetcher backed by
    :class:`httpx.AsyncClient`.

Both accept the same core parameters: an
:class:`~tbaclient.models.AppIdentity`, an optional
:class:`~tbaclient.models.RequestConfig`, an optional
:class:`~tbaclient.cache.ResponseCache`, and an optional httpx transport.

Example::

    from tbaclient.client import ResourceFetcher

    with ResourceFetcher(identity) as fetcher:
        matches = fetcher.fetch("https://www.thebluealliance.com/api/v2/event/2015casd/matches")
"""

from tbaclient.client.async_fetcher import AsyncResourceFetcher
from tbaclient.client.fetcher import ResourceFetcher

__all__ = ["ResourceFetcher", "AsyncResourceFetcher"]
