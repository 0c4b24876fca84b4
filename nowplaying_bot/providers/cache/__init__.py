"""Cache providers.

LRU cache holding track link resolutions for the lifetime of the process, so
repeated ``/music`` commands for the same track (or for a track known to have
no match) do not hit the iTunes and song.link APIs again.

MemoryCacheProvider is not shared across processes.  For multi-worker
deployments, swap in another adapter implementing ICacheProvider.
"""

from nowplaying_bot.providers.cache.memory_cache import MemoryCacheProvider

__all__ = ["MemoryCacheProvider"]
