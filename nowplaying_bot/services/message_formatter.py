"""Telegram MarkdownV2 rendering for the ``/music`` command.

The message is built in two steps: a header (input + status emoji and the
track in a code span) sent immediately with a "Searching track..." footer,
then the same header with the lookup outcome once resolution finishes.
"""

from __future__ import annotations

from telegram.helpers import escape_markdown

from nowplaying_bot.models.now_playing import AVInput, AVStatus, NowPlaying
from nowplaying_bot.models.track import ResolutionResult, TrackLink

_INPUT_EMOJI: dict[AVInput, str] = {
    AVInput.BLUETOOTH: "🟦",
    AVInput.AIRPLAY: "🍏",
    AVInput.SPOTIFY: "🟢",
    AVInput.OTHER: "🎵",
}

_STATUS_EMOJI: dict[AVStatus, str] = {
    AVStatus.PLAYING: "▶️",
    AVStatus.PAUSE: "⏸️",
    AVStatus.STANDBY: "⏹️",
}

NOT_FOUND_TEXT = "Sorry, but track not found :("
SEARCHING_TEXT = "Searching track..."
NOW_PLAYING_FAILED_TEXT = "Failed to get now playing status"


def _md(text: str) -> str:
    return escape_markdown(text, version=2)


def _code(text: str) -> str:
    return f"`{escape_markdown(text, version=2, entity_type='code')}`"


def format_header(now_playing: NowPlaying) -> str:
    """Emoji line plus the ``artist - title`` code span."""
    # Unknown values are plain strings and simply get no emoji.
    emoji = _INPUT_EMOJI.get(now_playing.input, "") + _STATUS_EMOJI.get(now_playing.status, "")
    return f"{emoji}\n{_code(now_playing.descriptor)}"


def format_searching(now_playing: NowPlaying) -> str:
    return f"{format_header(now_playing)}\n{_md(SEARCHING_TEXT)}"


def format_result(now_playing: NowPlaying, result: ResolutionResult) -> str:
    if isinstance(result, TrackLink):
        url = escape_markdown(result.url, version=2, entity_type="text_link")
        outcome = f"[SongLink]({url})"
    else:
        outcome = _md(NOT_FOUND_TEXT)
    return f"{format_header(now_playing)}\n{outcome}"


def format_failure(now_playing: NowPlaying, error: Exception) -> str:
    return f"{format_header(now_playing)}\n{_md('Failed to find track:')} {_code(str(error))}"


def format_now_playing_failure(error: Exception) -> str:
    return f"{_md(NOW_PLAYING_FAILED_TEXT + ':')} {_code(str(error))}"
