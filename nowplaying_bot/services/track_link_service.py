"""Memoized track link lookups.

:class:`TrackLinkService` sits in front of :class:`TrackResolver` and keeps
every completed resolution (a link *or* "not found") in a bounded LRU cache,
so the iTunes and song.link APIs are queried at most once per descriptor for
as long as the entry survives eviction.  Failed resolutions are never cached:
the error goes back to the caller and the next lookup tries again.

Concurrent misses for the same descriptor share a single in-flight
resolution when ``deduplicate_inflight`` is enabled (the default).  With it
disabled, each miss resolves independently and the last write wins; both
writes carry the same content, so only upstream work is wasted.
"""

from __future__ import annotations

import asyncio
from typing import Protocol

from nowplaying_bot.interfaces.cache_provider import ICacheProvider
from nowplaying_bot.models.track import ResolutionResult, TrackDescriptor
from nowplaying_bot.utils.logging import get_logger


class Resolver(Protocol):
    async def resolve(self, descriptor: TrackDescriptor) -> ResolutionResult: ...


class TrackLinkService:
    """Cache-backed front for a track resolver.

    Constructed once at startup and shared by every command invocation.
    Holds no external resources, so it needs no shutdown.
    """

    def __init__(
        self,
        resolver: Resolver,
        cache: ICacheProvider,
        deduplicate_inflight: bool = True,
    ) -> None:
        self._resolver = resolver
        self._cache = cache
        self._deduplicate = deduplicate_inflight
        self._inflight: dict[TrackDescriptor, asyncio.Task[ResolutionResult]] = {}
        self._logger = get_logger(__name__)

    async def lookup(self, descriptor: TrackDescriptor) -> ResolutionResult:
        """Return the cached result for *descriptor*, resolving it on a miss.

        Raises whatever the resolver raises; nothing is cached in that case.
        """
        cached = await self._cache.get(descriptor)
        if cached is not None:
            return cached

        if not self._deduplicate:
            return await self._resolve_and_store(descriptor)

        task = self._inflight.get(descriptor)
        if task is None:
            task = asyncio.create_task(self._resolve_and_store(descriptor))
            task.add_done_callback(_consume_exception)
            self._inflight[descriptor] = task
        else:
            self._logger.debug("track_lookup_joined", descriptor=descriptor)

        # Shielded so one cancelled caller does not cancel the shared work.
        return await asyncio.shield(task)

    def inflight_count(self) -> int:
        return len(self._inflight)

    async def _resolve_and_store(self, descriptor: TrackDescriptor) -> ResolutionResult:
        try:
            result = await self._resolver.resolve(descriptor)
        except Exception as exc:
            self._logger.warning("track_lookup_failed", descriptor=descriptor, error=str(exc))
            raise
        else:
            await self._cache.set(descriptor, result)
            return result
        finally:
            self._inflight.pop(descriptor, None)


def _consume_exception(task: asyncio.Task[ResolutionResult]) -> None:
    # Marks the exception as retrieved when every waiter was cancelled;
    # waiters that are still awaiting receive it through the shield.
    if not task.cancelled():
        task.exception()
