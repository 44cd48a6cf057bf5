"""Core domain entities for the music bounded context."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from preview_jukebox.domain.music.value_objects import PlaybackState
from preview_jukebox.domain.shared.messages import ErrorMessages


class TrackDescriptor(BaseModel):
    """Immutable value object describing a playable catalog item.

    Two descriptors with the same fields are equal; the queue accepts
    duplicates, so equality carries no identity.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    title: str
    artist: str
    preview_source_ref: str = ""
    artwork_ref: str = ""
    thumbnail_ref: str = ""

    @property
    def display_name(self) -> str:
        return f"{self.title} - {self.artist}"


class PlaybackSession(BaseModel):
    """Playback state for one listening session.

    Invariant: ``current_track`` is set if and only if ``state`` is PLAYING.
    ``start`` and ``reset`` are the only mutators that change either field.
    """

    state: PlaybackState = PlaybackState.IDLE
    current_track: TrackDescriptor | None = None

    @model_validator(mode="after")
    def _check_current_track(self) -> PlaybackSession:
        if self.state.is_playing and self.current_track is None:
            raise ValueError(ErrorMessages.CURRENT_TRACK_REQUIRED)
        if self.state.is_idle and self.current_track is not None:
            raise ValueError(ErrorMessages.CURRENT_TRACK_FORBIDDEN)
        return self

    @property
    def is_playing(self) -> bool:
        return self.state.is_playing

    @property
    def is_idle(self) -> bool:
        return self.state.is_idle

    def start(self, track: TrackDescriptor) -> TrackDescriptor | None:
        """Make *track* current, returning the track it replaced (if any)."""
        previous = self.current_track
        self.current_track = track
        self.state = PlaybackState.PLAYING
        return previous

    def reset(self) -> None:
        """Return to IDLE with no current track."""
        self.state = PlaybackState.IDLE
        self.current_track = None
