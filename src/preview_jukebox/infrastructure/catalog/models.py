"""Pydantic models for iTunes Search API responses.

These are infrastructure-specific models for parsing external catalog data
before it is converted to domain track descriptors.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from preview_jukebox.domain.music.entities import TrackDescriptor
from preview_jukebox.domain.shared.types import NonNegativeInt


class ItunesTrackRecord(BaseModel):
    """A single search result record.

    Extra fields from the API are silently ignored. Missing or non-string
    values become empty strings, so a record without a preview URL still
    converts; it just cannot be played.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    track_name: str = Field(default="", alias="trackName")
    artist_name: str = Field(default="", alias="artistName")
    artwork_url_60: str = Field(default="", alias="artworkUrl60")
    artwork_url_100: str = Field(default="", alias="artworkUrl100")
    preview_url: str = Field(default="", alias="previewUrl")

    @field_validator(
        "track_name", "artist_name", "artwork_url_60", "artwork_url_100", "preview_url",
        mode="before",
    )
    @classmethod
    def _coerce_to_str(cls, v: Any) -> str:
        """Convert missing / non-string values to an empty string."""
        if not isinstance(v, str):
            return ""
        return v.strip()

    def to_domain(self) -> TrackDescriptor:
        return TrackDescriptor(
            title=self.track_name,
            artist=self.artist_name,
            preview_source_ref=self.preview_url,
            artwork_ref=self.artwork_url_100,
            thumbnail_ref=self.artwork_url_60,
        )


class ItunesSearchResponse(BaseModel):
    """Top-level search response: ``{"resultCount": n, "results": [...]}``."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    result_count: NonNegativeInt = Field(default=0, alias="resultCount")
    results: list[ItunesTrackRecord]
