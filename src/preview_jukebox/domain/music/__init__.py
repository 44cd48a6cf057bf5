"""
Music Bounded Context

Domain logic for track descriptors, the playback queue, and session state.
"""

from preview_jukebox.domain.music.entities import PlaybackSession, TrackDescriptor
from preview_jukebox.domain.music.progress import report_progress
from preview_jukebox.domain.music.queue import TrackQueue
from preview_jukebox.domain.music.value_objects import PlaybackState

__all__ = [
    # Entities
    "TrackDescriptor",
    "PlaybackSession",
    "TrackQueue",
    # Value Objects
    "PlaybackState",
    # Services
    "report_progress",
]
