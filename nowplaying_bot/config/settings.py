"""Application settings loaded from environment variables via pydantic-settings.

Configuration sources, highest priority first:

  1. Environment variables (e.g. ``TELEGRAM_BOT_TOKEN=...``)
  2. ``.env.local`` (developer-specific overrides, not committed)
  3. ``.env``
  4. The defaults below

Field ``telegram_bot_token`` maps to env var ``TELEGRAM_BOT_TOKEN`` and so on.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from nowplaying_bot.utils.errors import ConfigurationError


class Settings(BaseSettings):
    """nowplaying-bot application settings."""

    # Later files win, so .env.local overrides .env.
    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Telegram ===
    telegram_bot_token: str = ""
    # Custom Bot API server root (e.g. a local telegram-bot-api instance).
    telegram_api_root: str = ""
    # Empty domain = long polling; anything else = webhook mode.
    telegram_webhook_domain: str = ""
    telegram_webhook_port: int = 8080

    # === Now-playing service ===
    ynca_service_url: str = ""

    # === Track link resolution ===
    itunes_country: str = "RU"
    itunes_referer: str = "https://odesli.co/"
    track_cache_max_size: int = 1000
    track_deduplicate_inflight: bool = True

    # === App Config ===
    http_timeout: float = 30.0
    app_env: str = "development"
    log_level: str = "INFO"

    def validate_for_startup(self) -> None:
        """Raise :class:`ConfigurationError` if a mandatory setting is missing."""
        missing = [
            name
            for name, value in (
                ("TELEGRAM_BOT_TOKEN", self.telegram_bot_token),
                ("YNCA_SERVICE_URL", self.ynca_service_url),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")
        if self.track_cache_max_size < 1:
            raise ConfigurationError("TRACK_CACHE_MAX_SIZE must be at least 1")

    @property
    def uses_webhook(self) -> bool:
        return bool(self.telegram_webhook_domain)
