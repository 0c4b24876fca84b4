"""Telegram transport: command handlers and application assembly."""

from nowplaying_bot.bot.handlers import MusicCommandHandler

__all__ = ["MusicCommandHandler"]
