"""FIFO queue of track descriptors awaiting playback."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from preview_jukebox.domain.music.entities import TrackDescriptor


class TrackQueue:
    """Ordered pending list; insertion order is playback order.

    Only append and remove-from-front are exposed. Snapshots are tuples so the
    presentation layer can never mutate the queue it renders.
    """

    def __init__(self, tracks: Iterable[TrackDescriptor] = ()) -> None:
        self._tracks: deque[TrackDescriptor] = deque(tracks)

    def enqueue(self, track: TrackDescriptor) -> int:
        """Append *track* and return the new queue length."""
        self._tracks.append(track)
        return len(self._tracks)

    def dequeue_front(self) -> TrackDescriptor | None:
        """Remove and return the earliest-inserted track, or None when empty."""
        if not self._tracks:
            return None
        return self._tracks.popleft()

    @property
    def length(self) -> int:
        return len(self._tracks)

    @property
    def is_empty(self) -> bool:
        return not self._tracks

    def snapshot(self) -> tuple[TrackDescriptor, ...]:
        return tuple(self._tracks)

    def __len__(self) -> int:
        return len(self._tracks)

    def __repr__(self) -> str:
        return f"TrackQueue(length={len(self._tracks)})"
