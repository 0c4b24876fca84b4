"""Public interface definitions for all external service providers.

Every external API is accessed through the abstract base classes defined in
this package.  Concrete adapters live in ``nowplaying_bot.providers`` and are
wired together in ``nowplaying_bot.main``; unit tests inject mocks instead.

CONCRETE PROVIDER MAP:
    Interface                   →  Concrete implementation
    ─────────────────────────────────────────────────────────
    ICacheProvider              →  MemoryCacheProvider
    ITrackSearchProvider        →  ITunesSearchProvider
    ILinkAggregationProvider    →  SongLinkProvider
    INowPlayingProvider         →  YncaNowPlayingProvider
"""

from nowplaying_bot.interfaces.cache_provider import ICacheProvider
from nowplaying_bot.interfaces.link_aggregation_provider import ILinkAggregationProvider
from nowplaying_bot.interfaces.now_playing_provider import INowPlayingProvider
from nowplaying_bot.interfaces.track_search_provider import ITrackSearchProvider

__all__ = [
    "ICacheProvider",
    "ILinkAggregationProvider",
    "INowPlayingProvider",
    "ITrackSearchProvider",
]
