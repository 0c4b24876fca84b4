"""Now-playing status as reported by the YNCA receiver service.

The service answers ``GET /now-playing`` with a document such as::

    {"input": "AirPlay", "status": "Playing",
     "media": {"artist": "Daft Punk", "title": "One More Time"}}

Unknown ``input`` / ``status`` values are kept as plain strings so a new
receiver input never breaks the ``/music`` command.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Placeholder rendered for missing artist/title, both in the chat message and
# in the track descriptor used as a cache key.
MISSING_FIELD_PLACEHOLDER = "N/A"


class AVInput(str, Enum):  # noqa: UP042 — StrEnum requires Python 3.11+
    """Receiver input the current media is playing from."""

    BLUETOOTH = "Bluetooth"
    AIRPLAY = "AirPlay"
    SPOTIFY = "Spotify"
    OTHER = "Other"


class AVStatus(str, Enum):  # noqa: UP042 — StrEnum requires Python 3.11+
    """Playback state of the receiver."""

    PLAYING = "Playing"
    PAUSE = "Pause"
    STANDBY = "Standby"


class NowPlayingMedia(BaseModel):
    model_config = ConfigDict(frozen=True)

    artist: str | None = None
    title: str | None = None


class NowPlaying(BaseModel):
    """Snapshot of what the receiver is currently playing."""

    model_config = ConfigDict(frozen=True)

    input: AVInput | str = Field(default=AVInput.OTHER, union_mode="left_to_right")
    status: AVStatus | str = Field(default=AVStatus.STANDBY, union_mode="left_to_right")
    media: NowPlayingMedia = Field(default_factory=NowPlayingMedia)

    @property
    def descriptor(self) -> str:
        """``"<artist> - <title>"`` with ``N/A`` for missing fields."""
        artist = self.media.artist or MISSING_FIELD_PLACEHOLDER
        title = self.media.title or MISSING_FIELD_PLACEHOLDER
        return f"{artist} - {title}"
