"""Abstract base class for link-aggregation providers (resolution stage B).

Link aggregators only accept URLs from platforms they recognise, not free
text, so they always run after a search provider.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ILinkAggregationProvider(ABC):
    """Contract for services mapping a platform URL to a cross-platform page."""

    @abstractmethod
    async def find_page_url(self, platform_url: str) -> str | None:
        """Return the cross-platform page URL for *platform_url*.

        Returns ``None`` when the response carries no usable page URL.

        Raises
        ------
        nowplaying_bot.utils.errors.UpstreamError
            On transport failure, non-2xx status or an unparsable body.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for this provider, e.g. ``"songlink"``."""
