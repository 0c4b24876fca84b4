"""Custom exception hierarchy for nowplaying-bot.

All application exceptions inherit from :class:`NowPlayingBotError`, which
carries an optional ``provider_name`` so error handlers can identify which
external service (e.g. "itunes", "songlink", "ynca") caused the failure.

    NowPlayingBotError  (base -- catch-all for any bot error)
    +-- UpstreamError       (transport / HTTP status / unparsable body)
    +-- ConfigurationError  (startup / missing config)

A track that simply has no match is *not* an error: resolvers return
:class:`~nowplaying_bot.models.track.TrackNotFound` for that case.
"""


class NowPlayingBotError(Exception):
    """Base exception for all nowplaying-bot errors.

    The ``__str__`` method prefixes the provider name in brackets for
    structured log output, e.g. ``[songlink] HTTP 502 from api.song.link``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class UpstreamError(NowPlayingBotError):
    """Raised when an external service call fails.

    Covers transport failures, non-2xx responses and bodies that cannot be
    parsed into the expected shape.  Never cached and never downgraded to a
    "not found" result.
    """

    def __init__(
        self,
        message: str = "External service call failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class ConfigurationError(NowPlayingBotError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
