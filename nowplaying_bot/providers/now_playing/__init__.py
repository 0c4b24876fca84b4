from nowplaying_bot.providers.now_playing.ynca_provider import YncaNowPlayingProvider

__all__ = ["YncaNowPlayingProvider"]
