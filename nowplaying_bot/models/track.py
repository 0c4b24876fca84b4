"""Track link resolution results.

A lookup either yields a :class:`TrackLink` (a canonical cross-platform page)
or :class:`TrackNotFound` (the upstream services definitively had no usable
link).  Both are frozen Pydantic models tagged by a ``kind`` literal, so the
two outcomes are distinguished by type rather than by comparing against a
sentinel object.  "Not looked up yet" is represented by the *absence* of a
cache entry and never by either of these values.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Opaque, case-sensitive "<artist> - <title>" string.  Used verbatim as the
# cache key, so no normalization is applied anywhere.
TrackDescriptor = str


class TrackLink(BaseModel):
    """A successfully resolved cross-platform link (e.g. a song.link page)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["found"] = "found"
    url: str = Field(min_length=1)


class TrackNotFound(BaseModel):
    """The lookup completed but produced no usable link."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not_found"] = "not_found"


ResolutionResult = Annotated[Union[TrackLink, TrackNotFound], Field(discriminator="kind")]

# Shared instance; the model is frozen and carries no data.
TRACK_NOT_FOUND = TrackNotFound()
