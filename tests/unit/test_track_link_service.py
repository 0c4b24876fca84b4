"""Unit tests for TrackLinkService (memoized track link lookups)."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from nowplaying_bot.models.track import TRACK_NOT_FOUND, TrackLink, TrackNotFound
from nowplaying_bot.providers.cache.memory_cache import MemoryCacheProvider
from nowplaying_bot.services.track_link_service import TrackLinkService
from nowplaying_bot.utils.errors import UpstreamError

_LINK = TrackLink(url="https://song.link/abc")


def _resolver(**kwargs) -> MagicMock:
    resolver = MagicMock()
    resolver.resolve = AsyncMock(**kwargs)
    return resolver


def _service(resolver: MagicMock, max_size: int = 1000, **kwargs) -> TrackLinkService:
    return TrackLinkService(resolver=resolver, cache=MemoryCacheProvider(max_size=max_size), **kwargs)


# ======================================================================
# Hits, misses and caching policy
# ======================================================================


class TestLookupCaching:
    @pytest.mark.asyncio
    async def test_miss_invokes_resolver(self) -> None:
        resolver = _resolver(return_value=_LINK)
        service = _service(resolver)

        result = await service.lookup("Daft Punk - One More Time")

        assert result == _LINK
        resolver.resolve.assert_awaited_once_with("Daft Punk - One More Time")

    @pytest.mark.asyncio
    async def test_hits_do_not_invoke_resolver_again(self) -> None:
        resolver = _resolver(return_value=_LINK)
        service = _service(resolver)

        first = await service.lookup("Daft Punk - One More Time")
        for _ in range(3):
            assert await service.lookup("Daft Punk - One More Time") == first

        assert resolver.resolve.await_count == 1

    @pytest.mark.asyncio
    async def test_not_found_is_cached(self) -> None:
        resolver = _resolver(return_value=TRACK_NOT_FOUND)
        service = _service(resolver)

        assert isinstance(await service.lookup("N/A - N/A"), TrackNotFound)
        assert isinstance(await service.lookup("N/A - N/A"), TrackNotFound)
        assert resolver.resolve.await_count == 1

    @pytest.mark.asyncio
    async def test_error_propagates_and_is_not_cached(self) -> None:
        error = UpstreamError("HTTP 502", provider_name="songlink")
        resolver = _resolver(side_effect=[error, _LINK])
        service = _service(resolver)

        with pytest.raises(UpstreamError) as exc_info:
            await service.lookup("Artist - Title")
        assert exc_info.value is error

        # No poisoned entry: the next lookup resolves again and succeeds.
        assert await service.lookup("Artist - Title") == _LINK
        assert resolver.resolve.await_count == 2

    @pytest.mark.asyncio
    async def test_error_is_not_converted_to_not_found(self) -> None:
        resolver = _resolver(side_effect=RuntimeError("boom"))
        service = _service(resolver)

        with pytest.raises(RuntimeError):
            await service.lookup("Artist - Title")

    @pytest.mark.asyncio
    async def test_distinct_strings_are_distinct_keys(self) -> None:
        resolver = _resolver(return_value=_LINK)
        service = _service(resolver)

        await service.lookup("Daft Punk - One More Time")
        await service.lookup("daft punk - one more time")
        await service.lookup("Daft Punk - One More Time ")

        assert resolver.resolve.await_count == 3


# ======================================================================
# Capacity / LRU eviction
# ======================================================================


class TestLookupEviction:
    @pytest.mark.asyncio
    async def test_capacity_plus_one_evicts_oldest(self) -> None:
        resolver = _resolver(return_value=_LINK)
        service = _service(resolver, max_size=3)

        for key in ("a", "b", "c", "d"):
            await service.lookup(key)
        assert resolver.resolve.await_count == 4

        # The remaining three are hits.
        for key in ("b", "c", "d"):
            await service.lookup(key)
        assert resolver.resolve.await_count == 4

        # The evicted one is a fresh miss.
        await service.lookup("a")
        assert resolver.resolve.await_count == 5

    @pytest.mark.asyncio
    async def test_hit_protects_entry_from_eviction(self) -> None:
        resolver = _resolver(return_value=_LINK)
        service = _service(resolver, max_size=2)

        await service.lookup("a")
        await service.lookup("b")
        await service.lookup("a")  # touch
        await service.lookup("c")  # evicts "b"
        assert resolver.resolve.await_count == 3

        await service.lookup("a")
        assert resolver.resolve.await_count == 3
        await service.lookup("b")
        assert resolver.resolve.await_count == 4


# ======================================================================
# Concurrency
# ======================================================================


def _gated_resolver(gate: asyncio.Event, result=_LINK, error: Exception | None = None) -> MagicMock:
    async def _resolve(descriptor: str):
        await gate.wait()
        if error is not None:
            raise error
        return result

    return _resolver(side_effect=_resolve)


async def _let_tasks_run() -> None:
    for _ in range(5):
        await asyncio.sleep(0)


class TestInflightDeduplication:
    @pytest.mark.asyncio
    async def test_concurrent_misses_share_one_resolution(self) -> None:
        gate = asyncio.Event()
        resolver = _gated_resolver(gate)
        service = _service(resolver)

        first = asyncio.create_task(service.lookup("Artist - Title"))
        second = asyncio.create_task(service.lookup("Artist - Title"))
        await _let_tasks_run()
        assert service.inflight_count() == 1

        gate.set()
        results = await asyncio.gather(first, second)

        assert results == [_LINK, _LINK]
        assert resolver.resolve.await_count == 1
        assert service.inflight_count() == 0

    @pytest.mark.asyncio
    async def test_different_descriptors_resolve_independently(self) -> None:
        gate = asyncio.Event()
        resolver = _gated_resolver(gate)
        service = _service(resolver)

        tasks = [asyncio.create_task(service.lookup(key)) for key in ("a", "b")]
        await _let_tasks_run()
        assert service.inflight_count() == 2

        gate.set()
        await asyncio.gather(*tasks)
        assert resolver.resolve.await_count == 2

    @pytest.mark.asyncio
    async def test_shared_error_reaches_every_waiter_and_is_not_cached(self) -> None:
        gate = asyncio.Event()
        resolver = _gated_resolver(gate, error=UpstreamError("down", provider_name="itunes"))
        service = _service(resolver)

        tasks = [asyncio.create_task(service.lookup("Artist - Title")) for _ in range(2)]
        await _let_tasks_run()
        gate.set()
        results = await asyncio.gather(*tasks, return_exceptions=True)

        assert all(isinstance(r, UpstreamError) for r in results)
        assert resolver.resolve.await_count == 1
        assert service.inflight_count() == 0

        resolver.resolve.side_effect = None
        resolver.resolve.return_value = _LINK
        assert await service.lookup("Artist - Title") == _LINK
        assert resolver.resolve.await_count == 2

    @pytest.mark.asyncio
    async def test_cancelled_waiter_does_not_cancel_shared_resolution(self) -> None:
        gate = asyncio.Event()
        resolver = _gated_resolver(gate)
        service = _service(resolver)

        first = asyncio.create_task(service.lookup("Artist - Title"))
        second = asyncio.create_task(service.lookup("Artist - Title"))
        await _let_tasks_run()

        first.cancel()
        await _let_tasks_run()
        gate.set()

        assert await second == _LINK
        assert first.cancelled()
        # The result was stored even though the initiating caller went away.
        assert await service.lookup("Artist - Title") == _LINK
        assert resolver.resolve.await_count == 1

    @pytest.mark.asyncio
    async def test_disabled_deduplication_resolves_each_miss(self) -> None:
        gate = asyncio.Event()
        resolver = _gated_resolver(gate)
        service = _service(resolver, deduplicate_inflight=False)

        tasks = [asyncio.create_task(service.lookup("Artist - Title")) for _ in range(2)]
        await _let_tasks_run()
        gate.set()
        results = await asyncio.gather(*tasks)

        assert results == [_LINK, _LINK]
        assert resolver.resolve.await_count == 2
        # Both writes carried the same content; afterwards it is a plain hit.
        assert await service.lookup("Artist - Title") == _LINK
        assert resolver.resolve.await_count == 2
