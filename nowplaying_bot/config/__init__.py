from nowplaying_bot.config.settings import Settings

__all__ = ["Settings"]
