"""Music lookup providers used by the two-stage track resolver."""

from nowplaying_bot.providers.music.itunes_provider import ITunesSearchProvider
from nowplaying_bot.providers.music.songlink_provider import SongLinkProvider

__all__ = ["ITunesSearchProvider", "SongLinkProvider"]
