"""Abstract base class for now-playing status providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from nowplaying_bot.models.now_playing import NowPlaying


class INowPlayingProvider(ABC):
    """Contract for services reporting what the receiver is playing."""

    @abstractmethod
    async def get_now_playing(self) -> NowPlaying:
        """Fetch the current now-playing snapshot.

        Raises
        ------
        nowplaying_bot.utils.errors.UpstreamError
            If the service is unreachable or answers with an invalid body.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for this provider, e.g. ``"ynca"``."""
