"""Abstract base class for metadata search providers (resolution stage A).

A search provider turns a free-text track descriptor into a platform-specific
track URL that a link-aggregation service is able to accept.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ITrackSearchProvider(ABC):
    """Contract for services that map free text to a per-platform track URL."""

    @abstractmethod
    async def find_track_url(self, term: str) -> str | None:
        """Search for *term* and return the top result's track URL.

        Parameters
        ----------
        term:
            Free-text search term, conventionally ``"<artist> - <title>"``.

        Returns
        -------
        str or None
            The first candidate's URL, or ``None`` when there are no
            candidates or the first one carries no usable URL.

        Raises
        ------
        nowplaying_bot.utils.errors.UpstreamError
            On transport failure, non-2xx status or an unparsable body.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for this provider, e.g. ``"itunes"``."""
