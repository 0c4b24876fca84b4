"""Concrete adapters for the interfaces in ``nowplaying_bot.interfaces``."""
