"""Two-stage track link resolution.

Stage A asks a metadata search service for a platform-specific track URL;
stage B hands that URL to a link aggregator for the cross-platform page.  The
aggregator accepts only URLs from platforms it recognises, so stage A exists
purely to produce a valid stage B input and the two cannot run in parallel.
"""

from __future__ import annotations

from nowplaying_bot.interfaces.link_aggregation_provider import ILinkAggregationProvider
from nowplaying_bot.interfaces.track_search_provider import ITrackSearchProvider
from nowplaying_bot.models.track import (
    TRACK_NOT_FOUND,
    ResolutionResult,
    TrackDescriptor,
    TrackLink,
)
from nowplaying_bot.utils.logging import get_logger


class TrackResolver:
    """Resolve a track descriptor to a :class:`TrackLink` or ``TrackNotFound``.

    Raises :class:`~nowplaying_bot.utils.errors.UpstreamError` (propagated
    unchanged from the providers) only when a call fails; "no match" is a
    normal ``TrackNotFound`` result.
    """

    def __init__(
        self,
        search_provider: ITrackSearchProvider,
        link_provider: ILinkAggregationProvider,
    ) -> None:
        self._search = search_provider
        self._links = link_provider
        self._logger = get_logger(__name__)

    async def resolve(self, descriptor: TrackDescriptor) -> ResolutionResult:
        platform_url = await self._search.find_track_url(descriptor)
        if not platform_url:
            self._logger.info(
                "track_not_found",
                descriptor=descriptor,
                stage=self._search.get_provider_name(),
            )
            return TRACK_NOT_FOUND

        page_url = await self._links.find_page_url(platform_url)
        if not page_url:
            self._logger.info(
                "track_not_found",
                descriptor=descriptor,
                stage=self._links.get_provider_name(),
            )
            return TRACK_NOT_FOUND

        self._logger.info("track_resolved", descriptor=descriptor, url=page_url)
        return TrackLink(url=page_url)
