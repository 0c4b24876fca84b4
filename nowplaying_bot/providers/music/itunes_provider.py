"""iTunes Search API provider implementing ITrackSearchProvider.

Queries ``https://itunes.apple.com/search`` for songs and returns the top
hit's ``trackViewUrl`` (an ``music.apple.com`` link), which song.link accepts
as input.  No API key required.
"""

from __future__ import annotations

from typing import Any

import httpx

from nowplaying_bot.interfaces.track_search_provider import ITrackSearchProvider
from nowplaying_bot.utils.errors import UpstreamError
from nowplaying_bot.utils.http import fetch_json
from nowplaying_bot.utils.logging import get_logger

_SEARCH_URL = "https://itunes.apple.com/search"
_DEFAULT_COUNTRY = "RU"
# The search endpoint rejects some anonymous clients; presenting song.link's
# own site as the referer keeps us on the same access policy as the web app.
_DEFAULT_REFERER = "https://odesli.co/"


class ITunesSearchProvider(ITrackSearchProvider):
    """Stage A of track resolution: free text → Apple Music track URL.

    The ``httpx.AsyncClient`` is injected for testability.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        country: str = _DEFAULT_COUNTRY,
        referer: str = _DEFAULT_REFERER,
    ) -> None:
        self._http = http_client
        self._country = country
        self._referer = referer
        self._logger = get_logger(__name__)

    async def find_track_url(self, term: str) -> str | None:
        params = {"term": term, "country": self._country, "entity": "song"}
        payload = await fetch_json(
            self._http,
            _SEARCH_URL,
            provider_name=self.get_provider_name(),
            params=params,
            headers={"referer": self._referer},
        )

        results = self._extract_results(payload)
        self._logger.info("itunes_search_complete", term=term, results=len(results))
        if not results:
            return None

        top = results[0]
        url = top.get("trackViewUrl") if isinstance(top, dict) else None
        if not isinstance(url, str) or not url:
            self._logger.info("itunes_top_result_without_url", term=term)
            return None
        return url

    def get_provider_name(self) -> str:
        return "itunes"

    def _extract_results(self, payload: Any) -> list[Any]:
        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list):
            raise UpstreamError(
                message="Search response has no 'results' list",
                provider_name=self.get_provider_name(),
            )
        return results
