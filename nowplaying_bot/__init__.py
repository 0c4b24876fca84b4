"""Telegram bot that shows what the hackerspace receiver is playing, with a song.link."""

__version__ = "0.1.0"
