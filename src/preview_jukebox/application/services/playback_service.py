"""Playback Controller - the queue/playback state machine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.music.entities import PlaybackSession, TrackDescriptor
from ...domain.music.progress import report_progress
from ...domain.music.queue import TrackQueue
from ...domain.music.value_objects import PlaybackState
from ...domain.shared.events import (
    PlaybackIdle,
    PlaybackProgressed,
    PlaybackStartFailed,
    QueueChanged,
    TrackStartedPlaying,
)
from ...domain.shared.exceptions import PlaybackStartRejectedError
from ...domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...domain.shared.events import EventBus
    from ..interfaces.audio_output import AudioOutput

logger = logging.getLogger(__name__)


class PlaybackController:
    """Owns the queue and the playback session and drives the audio output.

    States are IDLE and PLAYING(current). Playback starts automatically only
    when a track is enqueued while idle; after that, each natural completion
    reported by the audio output advances to the next queued track. Every
    state change is announced on the event bus, never rendered directly.
    """

    def __init__(
        self,
        *,
        audio_output: AudioOutput,
        event_bus: EventBus,
        queue: TrackQueue | None = None,
        session: PlaybackSession | None = None,
    ) -> None:
        self._audio_output = audio_output
        self._event_bus = event_bus
        self._queue = queue if queue is not None else TrackQueue()
        self._session = session if session is not None else PlaybackSession()
        self._progress_percent = 0.0

        self._audio_output.set_on_ended_callback(self.handle_track_ended)
        self._audio_output.set_on_progress_callback(self.handle_progress)

    # === Read-only state ===

    @property
    def state(self) -> PlaybackState:
        return self._session.state

    @property
    def current_track(self) -> TrackDescriptor | None:
        return self._session.current_track

    @property
    def is_idle(self) -> bool:
        return self._session.is_idle

    @property
    def queue_length(self) -> int:
        return self._queue.length

    @property
    def queue_snapshot(self) -> tuple[TrackDescriptor, ...]:
        return self._queue.snapshot()

    @property
    def progress_percent(self) -> float:
        return self._progress_percent

    # === Transitions ===

    async def enqueue(self, track: TrackDescriptor) -> bool:
        """Append *track* to the queue, starting playback if idle.

        Returns True when this call started playback.
        """
        length = self._queue.enqueue(track)
        logger.info(LogTemplates.TRACK_ENQUEUED, track.title, track.artist, length)
        await self._publish_queue()

        if self.is_idle:
            await self.play_next()
            return True
        return False

    async def play_next(self) -> TrackDescriptor | None:
        """Make the front of the queue current, or go idle if the queue is empty.

        Calling this while already playing overwrites the current track and
        restarts the output.
        """
        track = self._queue.dequeue_front()
        if track is None:
            await self._go_idle()
            return None

        previous = self._session.start(track)
        if previous is not None:
            logger.info(LogTemplates.PLAYBACK_OVERWRITING, previous.title, track.title)
        self._progress_percent = 0.0
        await self._publish_queue()

        logger.info(LogTemplates.PLAYBACK_STARTING, track.title, track.artist)
        try:
            await self._audio_output.play(track.preview_source_ref)
        except PlaybackStartRejectedError as e:
            # State stays PLAYING; the output may still start on a later user action.
            logger.warning(LogTemplates.PLAYBACK_START_REJECTED, track.title, e.message)
            await self._event_bus.publish(PlaybackStartFailed(track=track, reason=e.message))

        await self._event_bus.publish(TrackStartedPlaying(track=track, replaced=previous))
        await self._event_bus.publish(PlaybackProgressed(percent=0.0))
        return track

    async def handle_track_ended(self) -> None:
        """React to the audio output finishing the current source naturally."""
        current = self._session.current_track
        if current is not None:
            logger.debug(LogTemplates.PLAYBACK_ENDED, current.title)
        await self.play_next()

    async def handle_progress(self, position: float, duration: float | None) -> float:
        """Convert an audio position update into a progress notification."""
        if self.is_idle:
            logger.debug(LogTemplates.PROGRESS_WHILE_IDLE)
            return self._progress_percent

        self._progress_percent = report_progress(position, duration)
        await self._event_bus.publish(PlaybackProgressed(percent=self._progress_percent))
        return self._progress_percent

    async def pause(self) -> bool:
        if not self._session.is_playing:
            return False
        await self._audio_output.pause()
        logger.debug(LogTemplates.PLAYBACK_PAUSED)
        return True

    async def resume(self) -> bool:
        if not self._session.is_playing:
            return False
        await self._audio_output.resume()
        logger.debug(LogTemplates.PLAYBACK_RESUMED)
        return True

    async def shutdown(self) -> None:
        """Stop the audio output; the queue and session are left as they are."""
        await self._audio_output.stop()

    # === Helpers ===

    async def _go_idle(self) -> None:
        self._session.reset()
        self._progress_percent = 0.0
        logger.info(LogTemplates.QUEUE_EMPTY)
        await self._event_bus.publish(PlaybackIdle())
        await self._event_bus.publish(PlaybackProgressed(percent=0.0))

    async def _publish_queue(self) -> None:
        await self._event_bus.publish(QueueChanged(tracks=self._queue.snapshot()))
