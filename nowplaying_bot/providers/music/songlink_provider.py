"""song.link (Odesli) provider implementing ILinkAggregationProvider.

Translates a platform-specific track URL into the canonical song.link page,
which lists the same track on every streaming service Odesli knows about.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx

from nowplaying_bot.interfaces.link_aggregation_provider import ILinkAggregationProvider
from nowplaying_bot.utils.http import fetch_json
from nowplaying_bot.utils.logging import get_logger

_LINKS_URL = "https://api.song.link/v1-alpha.1/links"


class SongLinkProvider(ILinkAggregationProvider):
    """Stage B of track resolution: platform URL → song.link page URL."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client
        self._logger = get_logger(__name__)

    async def find_page_url(self, platform_url: str) -> str | None:
        # Encoded by hand so ":" and "/" are escaped like a URI component.
        url = f"{_LINKS_URL}?url={quote(platform_url, safe='')}"
        payload = await fetch_json(self._http, url, provider_name=self.get_provider_name())

        page_url = payload.get("pageUrl") if isinstance(payload, dict) else None
        if not isinstance(page_url, str) or not page_url:
            self._logger.info("songlink_page_missing", platform_url=platform_url)
            return None

        self._logger.info("songlink_page_found", platform_url=platform_url, page_url=page_url)
        return page_url

    def get_provider_name(self) -> str:
        return "songlink"
