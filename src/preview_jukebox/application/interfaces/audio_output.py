"""Port interface for the audio output device."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

OnEndedCallback = Callable[[], Awaitable[None]]
OnProgressCallback = Callable[[float, float | None], Awaitable[None]]


class AudioOutput(ABC):
    """Interface for a single-source audio output.

    The output plays one source at a time. It reports natural completion of
    a source through the ended callback and its position/duration through the
    progress callback. Replacing or stopping a source never counts as
    completion.
    """

    @abstractmethod
    async def play(self, source_ref: str) -> None:
        """Load *source_ref* and start playing it, replacing any current source.

        Raises:
            PlaybackStartRejectedError: The output refused to start the source.
        """
        ...

    @abstractmethod
    async def pause(self) -> None:
        ...

    @abstractmethod
    async def resume(self) -> None:
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop the current source without signalling completion."""
        ...

    @abstractmethod
    def set_on_ended_callback(self, callback: OnEndedCallback) -> None:
        """Set callback for when the current source finishes naturally."""
        ...

    @abstractmethod
    def set_on_progress_callback(self, callback: OnProgressCallback) -> None:
        """Set callback receiving (position_seconds, duration_seconds or None)."""
        ...
