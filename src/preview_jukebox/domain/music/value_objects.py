"""Immutable value objects for the music bounded context."""

from __future__ import annotations

from enum import Enum


class PlaybackState(Enum):
    """Playback state of a session.

    State transitions:
    - IDLE -> PLAYING (a track was dequeued and handed to the audio output)
    - PLAYING -> PLAYING (the next track overwrites the current one)
    - PLAYING -> IDLE (play_next found the queue empty)
    - IDLE -> IDLE (play_next on an empty queue is a no-op reset)
    """

    IDLE = "idle"
    PLAYING = "playing"

    @property
    def is_playing(self) -> bool:
        return self == PlaybackState.PLAYING

    @property
    def is_idle(self) -> bool:
        return self == PlaybackState.IDLE
