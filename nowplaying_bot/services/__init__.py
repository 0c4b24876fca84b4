"""Business logic: track resolution, memoized lookups and message rendering."""

from nowplaying_bot.services.track_link_service import TrackLinkService
from nowplaying_bot.services.track_resolver import TrackResolver

__all__ = ["TrackLinkService", "TrackResolver"]
