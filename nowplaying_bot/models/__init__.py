"""nowplaying-bot domain models — re-exports all public model classes."""

from __future__ import annotations

from nowplaying_bot.models.now_playing import (
    MISSING_FIELD_PLACEHOLDER,
    AVInput,
    AVStatus,
    NowPlaying,
    NowPlayingMedia,
)
from nowplaying_bot.models.track import (
    TRACK_NOT_FOUND,
    ResolutionResult,
    TrackDescriptor,
    TrackLink,
    TrackNotFound,
)

__all__ = [
    "AVInput",
    "AVStatus",
    "MISSING_FIELD_PLACEHOLDER",
    "NowPlaying",
    "NowPlayingMedia",
    "ResolutionResult",
    "TRACK_NOT_FOUND",
    "TrackDescriptor",
    "TrackLink",
    "TrackNotFound",
]
