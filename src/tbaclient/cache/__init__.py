"""In-memory response caching for tbaclient.

This package provides :class:`ResponseCache`, a flat URL-to-value store
that keeps parsed API responses for the lifetime of a client. Entries are
keyed by the exact request URL.

The cache is consumed by :class:`~tbaclient.client.fetcher.ResourceFetcher`
and :class:`~tbaclient.client.async_fetcher.AsyncResourceFetcher` and is
controlled by :class:`~tbaclient.models.CacheConfig`.
"""

from tbaclient.cache.cache import ResponseCache

__all__ = ["ResponseCache"]
