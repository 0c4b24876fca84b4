"""Abstract base class for the track link cache backend.

The cache stores one :data:`~nowplaying_bot.models.track.ResolutionResult`
per track descriptor.  ``None`` is reserved for "no entry", which is why a
"not found" outcome is stored as a :class:`TrackNotFound` value instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from nowplaying_bot.models.track import ResolutionResult, TrackDescriptor


class ICacheProvider(ABC):
    """Contract for bounded descriptor → resolution-result stores.

    All operations are async so a network-backed store could be swapped in
    without blocking the event loop.  There is deliberately no delete or
    expiry operation: entries leave only through capacity eviction.
    """

    @abstractmethod
    async def get(self, key: TrackDescriptor) -> ResolutionResult | None:
        """Return the result stored under *key*, or ``None`` on a miss.

        A hit counts as a recency touch for eviction purposes.
        """

    @abstractmethod
    async def set(self, key: TrackDescriptor, value: ResolutionResult) -> None:
        """Store *value* under *key*, evicting the least-recently-used entry
        first if the cache is at capacity."""

    @abstractmethod
    async def exists(self, key: TrackDescriptor) -> bool:
        """Return ``True`` if *key* is present.  Does not touch recency."""

    @abstractmethod
    def max_size(self) -> int:
        """Return the fixed capacity of the cache."""
