"""Shared pytest fixtures for the nowplaying-bot test suite."""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from nowplaying_bot.models.now_playing import AVInput, AVStatus, NowPlaying, NowPlayingMedia


def make_json_response(payload: Any, status_code: int = 200) -> MagicMock:
    """Build a mocked ``httpx.Response`` returning *payload* from ``.json()``.

    A non-2xx *status_code* makes ``raise_for_status`` raise
    ``httpx.HTTPStatusError`` like the real response would.
    """
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if 200 <= status_code < 300:
        response.raise_for_status = MagicMock()
    else:
        response.raise_for_status = MagicMock(
            side_effect=httpx.HTTPStatusError(
                f"{status_code} Error",
                request=MagicMock(),
                response=MagicMock(status_code=status_code),
            )
        )
    return response


@pytest.fixture
def json_response() -> Callable[..., MagicMock]:
    return make_json_response


@pytest.fixture
def mock_http_client() -> AsyncMock:
    """An ``httpx.AsyncClient`` stand-in; tests set ``.get`` behaviour."""
    client = AsyncMock(spec=httpx.AsyncClient)
    client.get = AsyncMock()
    return client


@pytest.fixture
def sample_now_playing() -> NowPlaying:
    return NowPlaying(
        input=AVInput.AIRPLAY,
        status=AVStatus.PLAYING,
        media=NowPlayingMedia(artist="Daft Punk", title="One More Time"),
    )


@pytest.fixture
def mock_search_provider() -> MagicMock:
    provider = MagicMock()
    provider.find_track_url = AsyncMock(return_value="https://music.apple.com/track/123")
    provider.get_provider_name.return_value = "itunes"
    return provider


@pytest.fixture
def mock_link_provider() -> MagicMock:
    provider = MagicMock()
    provider.find_page_url = AsyncMock(return_value="https://song.link/abc")
    provider.get_provider_name.return_value = "songlink"
    return provider
