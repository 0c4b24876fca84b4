"""nowplaying-bot entry point.

Wires together providers, services and the Telegram application.  Settings
come from the environment, ``.env.local`` and ``.env``; logging is
configured before anything else is constructed.

The track link cache is created here exactly once and handed to the
:class:`TrackLinkService`; it lives until the process exits.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog
from telegram.ext import Application, CommandHandler

from nowplaying_bot.bot.handlers import MusicCommandHandler
from nowplaying_bot.config.settings import Settings
from nowplaying_bot.providers.cache.memory_cache import MemoryCacheProvider
from nowplaying_bot.providers.music.itunes_provider import ITunesSearchProvider
from nowplaying_bot.providers.music.songlink_provider import SongLinkProvider
from nowplaying_bot.providers.now_playing.ynca_provider import YncaNowPlayingProvider
from nowplaying_bot.services.track_link_service import TrackLinkService
from nowplaying_bot.services.track_resolver import TrackResolver
from nowplaying_bot.utils.logging import configure_logging, get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# DI assembly
# ---------------------------------------------------------------------------


def build_components(app_settings: Settings) -> dict[str, Any]:
    """Construct every provider and service instance.

    Returns a flat dict of named components; ``http_client`` must be closed
    by the caller on shutdown.
    """
    http_client = httpx.AsyncClient(timeout=app_settings.http_timeout)

    resolver = TrackResolver(
        search_provider=ITunesSearchProvider(
            http_client=http_client,
            country=app_settings.itunes_country,
            referer=app_settings.itunes_referer,
        ),
        link_provider=SongLinkProvider(http_client=http_client),
    )
    cache = MemoryCacheProvider(max_size=app_settings.track_cache_max_size)
    track_links = TrackLinkService(
        resolver=resolver,
        cache=cache,
        deduplicate_inflight=app_settings.track_deduplicate_inflight,
    )
    now_playing = YncaNowPlayingProvider(
        http_client=http_client,
        base_url=app_settings.ynca_service_url,
    )

    return {
        "http_client": http_client,
        "cache": cache,
        "resolver": resolver,
        "track_links": track_links,
        "now_playing": now_playing,
        "music_handler": MusicCommandHandler(
            now_playing_provider=now_playing,
            track_links=track_links,
        ),
    }


def build_application(app_settings: Settings, components: dict[str, Any]) -> Application:
    """Build the python-telegram-bot application with the ``/music`` command."""
    http_client: httpx.AsyncClient = components["http_client"]

    async def _close_http_client(_application: Application) -> None:
        await http_client.aclose()
        _logger.info("http_client_closed")

    builder = Application.builder().token(app_settings.telegram_bot_token)
    if app_settings.telegram_api_root:
        # The library appends the token itself, like the official client does.
        builder = builder.base_url(f"{app_settings.telegram_api_root.rstrip('/')}/bot")
    application = builder.post_shutdown(_close_http_client).build()

    application.add_handler(CommandHandler("music", components["music_handler"].handle))
    return application


def webhook_url(domain: str) -> str:
    if domain.startswith(("http://", "https://")):
        return f"{domain.rstrip('/')}/"
    return f"https://{domain.rstrip('/')}/"


def main() -> None:
    settings = Settings()
    configure_logging(
        log_level=settings.log_level,
        json_output=(settings.app_env == "production"),
    )
    settings.validate_for_startup()

    components = build_components(settings)
    application = build_application(settings, components)

    # run_polling / run_webhook install SIGINT and SIGTERM handlers and
    # stop the application gracefully, which triggers post_shutdown.
    if settings.uses_webhook:
        _logger.info(
            "bot_starting",
            mode="webhook",
            domain=settings.telegram_webhook_domain,
            port=settings.telegram_webhook_port,
        )
        application.run_webhook(
            listen="0.0.0.0",
            port=settings.telegram_webhook_port,
            url_path="",
            webhook_url=webhook_url(settings.telegram_webhook_domain),
        )
    else:
        _logger.info("bot_starting", mode="polling")
        application.run_polling()


if __name__ == "__main__":
    main()
