"""Command and handler for adding a selected search result to the queue."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from preview_jukebox.domain.music.entities import TrackDescriptor
from preview_jukebox.domain.shared.types import NonNegativeInt

if TYPE_CHECKING:
    from ..services.playback_service import PlaybackController


class AddToQueueCommand(BaseModel):
    """Request to queue one track the user picked from the search results."""

    model_config = ConfigDict(frozen=True, strict=True)

    track: TrackDescriptor


class AddToQueueResult(BaseModel):
    """Result of an add-to-queue command."""

    model_config = ConfigDict(frozen=True, strict=True)

    track: TrackDescriptor
    started_playing: bool
    queue_length: NonNegativeInt


class AddToQueueHandler:
    """Appends the selected track and lets the controller start playback if idle."""

    def __init__(self, *, playback_controller: PlaybackController) -> None:
        self._controller = playback_controller

    async def handle(self, command: AddToQueueCommand) -> AddToQueueResult:
        started = await self._controller.enqueue(command.track)
        return AddToQueueResult(
            track=command.track,
            started_playing=started,
            queue_length=self._controller.queue_length,
        )

    async def add_track(self, track: TrackDescriptor) -> None:
        """Result-clicked callback shape expected by presenters."""
        await self.handle(AddToQueueCommand(track=track))
