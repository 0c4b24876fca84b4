"""Now-playing provider for the YNCA receiver bridge service."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from nowplaying_bot.interfaces.now_playing_provider import INowPlayingProvider
from nowplaying_bot.models.now_playing import NowPlaying
from nowplaying_bot.utils.errors import UpstreamError
from nowplaying_bot.utils.http import fetch_json
from nowplaying_bot.utils.logging import get_logger


class YncaNowPlayingProvider(INowPlayingProvider):
    """Reads ``GET {base_url}/now-playing`` from the YNCA service."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._logger = get_logger(__name__)

    async def get_now_playing(self) -> NowPlaying:
        payload = await fetch_json(
            self._http,
            f"{self._base_url}/now-playing",
            provider_name=self.get_provider_name(),
        )
        try:
            now_playing = NowPlaying.model_validate(payload)
        except ValidationError as exc:
            raise UpstreamError(
                message=f"Unexpected now-playing payload: {exc.error_count()} validation error(s)",
                provider_name=self.get_provider_name(),
            ) from exc

        self._logger.debug(
            "now_playing_fetched",
            input=str(now_playing.input),
            status=str(now_playing.status),
            descriptor=now_playing.descriptor,
        )
        return now_playing

    def get_provider_name(self) -> str:
        return "ynca"
