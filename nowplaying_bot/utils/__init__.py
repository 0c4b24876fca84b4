"""Shared utilities: structured logging and the exception hierarchy."""

from nowplaying_bot.utils.errors import ConfigurationError, NowPlayingBotError, UpstreamError
from nowplaying_bot.utils.logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "NowPlayingBotError",
    "UpstreamError",
    "configure_logging",
    "get_logger",
]
