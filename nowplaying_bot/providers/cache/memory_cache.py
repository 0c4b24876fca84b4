"""In-memory LRU cache provider using cachetools.LRUCache.

Process-local and unbounded in time: entries never expire, they only leave
when capacity pressure evicts the least-recently-used one.
"""

from __future__ import annotations

import structlog
from cachetools import LRUCache

from nowplaying_bot.interfaces.cache_provider import ICacheProvider
from nowplaying_bot.models.track import ResolutionResult, TrackDescriptor

logger = structlog.get_logger(logger_name=__name__)


class MemoryCacheProvider(ICacheProvider):
    """Bounded LRU cache backed by ``cachetools.LRUCache``.

    Parameters
    ----------
    max_size:
        Maximum number of entries before the least-recently-used entry
        is evicted.  Fixed for the lifetime of the instance.
    """

    def __init__(self, max_size: int = 1000) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self._cache: LRUCache[TrackDescriptor, ResolutionResult] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # ICacheProvider implementation
    # ------------------------------------------------------------------

    async def get(self, key: TrackDescriptor) -> ResolutionResult | None:
        """Retrieve the cached result for *key*, or ``None`` if missing."""
        # LRUCache.get goes through __getitem__, which refreshes recency.
        value = self._cache.get(key)
        if value is not None:
            logger.debug("cache_hit", key=key)
        else:
            logger.debug("cache_miss", key=key)
        return value

    async def set(self, key: TrackDescriptor, value: ResolutionResult) -> None:
        """Store *value* under *key*, evicting the LRU entry when full."""
        if key not in self._cache and len(self._cache) >= self._cache.maxsize:
            logger.debug("cache_evict", size=len(self._cache))
        self._cache[key] = value
        logger.debug("cache_set", key=key, kind=value.kind)

    async def exists(self, key: TrackDescriptor) -> bool:
        """Return ``True`` if *key* is present."""
        return key in self._cache

    def max_size(self) -> int:
        return int(self._cache.maxsize)

    def __len__(self) -> int:
        return len(self._cache)
