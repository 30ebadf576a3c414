"""In-memory response cache keyed by request URL.

With the default :class:`~tbaclient.models.CacheConfig` the cache is a plain
map: entries are never evicted and never expire, so it grows for as long as
the owning client lives. Two opt-in knobs exist for long-running processes:

* ``max_entries`` -- once full, storing a new key drops the least recently
  used entry.
* ``ttl_seconds`` -- entries older than the TTL are reported as absent by
  :meth:`ResponseCache.exists` and dropped.

Keys are compared verbatim; no URL normalization is applied. The cache is
not synchronized, so a client shared between threads needs an external lock.
"""

from __future__ import annotations

from collections import OrderedDict
from time import monotonic
from typing import Any, Optional

from tbaclient.models import CacheConfig


class ResponseCache:
    """Flat URL-to-response store with ``exists`` / ``get`` / ``set``.

    Args:
        config: Cache configuration. Defaults to an enabled, unbounded,
            non-expiring cache.

    Example::

        from tbaclient.cache import ResponseCache

        cache = ResponseCache()
        cache.set("https://www.thebluealliance.com/api/v2/team/frc254", {"nickname": "The Cheesy Poofs"})
        if cache.exists("https://www.thebluealliance.com/api/v2/team/frc254"):
            team = cache.get("https://www.thebluealliance.com/api/v2/team/frc254")
    """

    def __init__(self, config: Optional[CacheConfig] = None) -> None:
        self._config = config or CacheConfig()
        # key -> (stored_at, value); ordered from least to most recently used
        self._entries: OrderedDict[str, tuple[float, Any]] = OrderedDict()

    @property
    def config(self) -> CacheConfig:
        """The cache configuration."""
        return self._config

    def exists(self, key: str) -> bool:
        """Return ``True`` if a value has been stored under *key*.

        When a TTL is configured, an expired entry is removed and reported
        as absent.

        Args:
            key: The request URL.
        """
        if not self._config.enabled:
            return False
        entry = self._entries.get(key)
        if entry is None:
            return False
        if self._is_expired(entry[0]):
            del self._entries[key]
            return False
        return True

    def get(self, key: str) -> Any:
        """Return the value stored under *key*.

        Callers are expected to check :meth:`exists` first.

        Args:
            key: The request URL.

        Returns:
            The previously stored value.

        Raises:
            KeyError: If nothing is stored under *key*.
        """
        _, value = self._entries[key]
        if self._config.max_entries is not None:
            self._entries.move_to_end(key)
        return value

    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key*, overwriting any previous value.

        A disabled cache ignores the call. With ``max_entries`` configured,
        the least recently used entries are dropped to make room.

        Args:
            key: The request URL.
            value: The parsed response body.
        """
        if not self._config.enabled:
            return
        self._entries[key] = (monotonic(), value)
        self._entries.move_to_end(key)

        max_entries = self._config.max_entries
        if max_entries is not None:
            while len(self._entries) > max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        """Remove all entries from the cache."""
        self._entries.clear()

    def stats(self) -> dict[str, Any]:
        """Return cache statistics.

        Returns:
            A ``dict`` with ``enabled`` (bool), ``size`` (number of stored
            entries, expired ones included until they are next looked up),
            ``max_entries`` and ``ttl_seconds``.
        """
        return {
            "enabled": self._config.enabled,
            "size": len(self._entries),
            "max_entries": self._config.max_entries,
            "ttl_seconds": self._config.ttl_seconds,
        }

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.exists(key)

    def _is_expired(self, stored_at: float) -> bool:
        ttl = self._config.ttl_seconds
        if ttl is None:
            return False
        return monotonic() - stored_at >= ttl
