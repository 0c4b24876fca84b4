"""Telegram command handlers."""

from __future__ import annotations

from telegram import LinkPreviewOptions, Update
from telegram.constants import ParseMode
from telegram.ext import ContextTypes

from nowplaying_bot.interfaces.now_playing_provider import INowPlayingProvider
from nowplaying_bot.services import message_formatter
from nowplaying_bot.services.track_link_service import TrackLinkService
from nowplaying_bot.utils.errors import NowPlayingBotError
from nowplaying_bot.utils.logging import get_logger

_NO_PREVIEW = LinkPreviewOptions(is_disabled=True)


class MusicCommandHandler:
    """Handles ``/music``: show what is playing and a song.link for it.

    Sends a placeholder message straight away, then edits it in place once
    the (possibly slow, possibly cached) link lookup completes.
    """

    def __init__(
        self,
        now_playing_provider: INowPlayingProvider,
        track_links: TrackLinkService,
    ) -> None:
        self._now_playing = now_playing_provider
        self._track_links = track_links
        self._logger = get_logger(__name__)

    async def handle(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        chat = update.effective_chat
        if chat is None:
            return

        try:
            now_playing = await self._now_playing.get_now_playing()
        except NowPlayingBotError as exc:
            self._logger.warning("now_playing_unavailable", chat_id=chat.id, error=str(exc))
            await context.bot.send_message(
                chat_id=chat.id,
                text=message_formatter.format_now_playing_failure(exc),
                parse_mode=ParseMode.MARKDOWN_V2,
                link_preview_options=_NO_PREVIEW,
            )
            return

        sent = await context.bot.send_message(
            chat_id=chat.id,
            text=message_formatter.format_searching(now_playing),
            parse_mode=ParseMode.MARKDOWN_V2,
            link_preview_options=_NO_PREVIEW,
        )

        try:
            result = await self._track_links.lookup(now_playing.descriptor)
        except Exception as exc:
            # Any failure is reported in the chat; nothing was cached for it.
            self._logger.warning(
                "music_command_lookup_failed",
                descriptor=now_playing.descriptor,
                error=str(exc),
            )
            text = message_formatter.format_failure(now_playing, exc)
        else:
            text = message_formatter.format_result(now_playing, result)

        await context.bot.edit_message_text(
            chat_id=sent.chat_id,
            message_id=sent.message_id,
            text=text,
            parse_mode=ParseMode.MARKDOWN_V2,
            link_preview_options=_NO_PREVIEW,
        )
