"""Forwards domain events to a presenter and presenter clicks to the queue."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...domain.shared.events import (
    PlaybackIdle,
    PlaybackProgressed,
    QueueChanged,
    SearchCleared,
    SearchFailed,
    SearchResultsReady,
    TrackStartedPlaying,
)

if TYPE_CHECKING:
    from ...domain.shared.events import EventBus
    from ..commands.add_to_queue import AddToQueueHandler
    from ..interfaces.presenter import Presenter


class PresentationBridge:
    """Subscribes a presenter to the event bus.

    The playback controller and search service only publish events; this
    bridge is the single place that turns them into render calls, so the core
    runs unchanged with no presenter attached.
    """

    def __init__(
        self,
        *,
        presenter: Presenter,
        event_bus: EventBus,
        add_to_queue_handler: AddToQueueHandler,
    ) -> None:
        self._presenter = presenter
        self._event_bus = event_bus
        self._add_to_queue = add_to_queue_handler
        self._attached = False

    def attach(self) -> None:
        if self._attached:
            return
        self._event_bus.subscribe(QueueChanged, self._on_queue_changed)
        self._event_bus.subscribe(TrackStartedPlaying, self._on_track_started)
        self._event_bus.subscribe(PlaybackIdle, self._on_idle)
        self._event_bus.subscribe(PlaybackProgressed, self._on_progress)
        self._event_bus.subscribe(SearchResultsReady, self._on_search_results)
        self._event_bus.subscribe(SearchFailed, self._on_search_failed)
        self._event_bus.subscribe(SearchCleared, self._on_search_cleared)
        self._presenter.on_result_clicked(self._add_to_queue.add_track)
        self._attached = True

    def detach(self) -> None:
        if not self._attached:
            return
        self._event_bus.unsubscribe(QueueChanged, self._on_queue_changed)
        self._event_bus.unsubscribe(TrackStartedPlaying, self._on_track_started)
        self._event_bus.unsubscribe(PlaybackIdle, self._on_idle)
        self._event_bus.unsubscribe(PlaybackProgressed, self._on_progress)
        self._event_bus.unsubscribe(SearchResultsReady, self._on_search_results)
        self._event_bus.unsubscribe(SearchFailed, self._on_search_failed)
        self._event_bus.unsubscribe(SearchCleared, self._on_search_cleared)
        self._attached = False

    async def _on_queue_changed(self, event: QueueChanged) -> None:
        self._presenter.render_queue(event.tracks)

    async def _on_track_started(self, event: TrackStartedPlaying) -> None:
        self._presenter.render_current(event.track)

    async def _on_idle(self, event: PlaybackIdle) -> None:
        self._presenter.render_current(None)

    async def _on_progress(self, event: PlaybackProgressed) -> None:
        self._presenter.render_progress(event.percent)

    async def _on_search_results(self, event: SearchResultsReady) -> None:
        self._presenter.render_search_results(event.results)

    async def _on_search_failed(self, event: SearchFailed) -> None:
        self._presenter.render_search_error()

    async def _on_search_cleared(self, event: SearchCleared) -> None:
        self._presenter.render_search_prompt()
