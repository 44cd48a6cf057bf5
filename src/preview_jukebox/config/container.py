"""Dependency Injection Container

Manages the application's dependency graph, providing lazy initialization
and lifecycle management for the playback controller, search service,
adapters and presentation wiring. Components are created on-demand and
cached for the lifetime of one listening session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.commands.add_to_queue import AddToQueueHandler
    from ..application.interfaces.audio_output import AudioOutput
    from ..application.interfaces.catalog_client import CatalogClient
    from ..application.interfaces.presenter import Presenter
    from ..application.services.playback_service import PlaybackController
    from ..application.services.presentation_bridge import PresentationBridge
    from ..application.services.search_service import SearchService
    from ..domain.shared.events import EventBus
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    One container holds one session's worth of state: its own event bus,
    queue and playback controller. Nothing is shared between containers.
    """

    settings: Settings

    # Presentation (attached by the front end)
    _presenter: Presenter | None = None
    _presentation_bridge: PresentationBridge | None = None

    # Infrastructure adapters
    _event_bus: EventBus | None = None
    _catalog_client: CatalogClient | None = None
    _audio_output: AudioOutput | None = None

    # Application services
    _playback_controller: PlaybackController | None = None
    _search_service: SearchService | None = None

    # Command handlers
    _add_to_queue_handler: AddToQueueHandler | None = None

    def set_presenter(self, presenter: Presenter) -> None:
        """Set the presenter the presentation bridge renders to."""
        self._presenter = presenter

    @property
    def presenter(self) -> Presenter:
        """Get the attached presenter."""
        if self._presenter is None:
            raise RuntimeError(ErrorMessages.PRESENTER_NOT_SET)
        return self._presenter

    # === Event Bus ===

    @property
    def event_bus(self) -> EventBus:
        """Get the session event bus."""
        if self._event_bus is None:
            from ..domain.shared.events import EventBus

            self._event_bus = EventBus()
        return self._event_bus

    # === Infrastructure Adapters ===

    @property
    def catalog_client(self) -> CatalogClient:
        """Get the catalog client."""
        if self._catalog_client is None:
            from ..infrastructure.catalog.itunes_client import ItunesCatalogClient

            self._catalog_client = ItunesCatalogClient(self.settings.catalog)
        return self._catalog_client

    @property
    def audio_output(self) -> AudioOutput:
        """Get the audio output."""
        if self._audio_output is None:
            from ..infrastructure.audio.ffplay_output import FfplayAudioOutput

            self._audio_output = FfplayAudioOutput(self.settings.audio)
        return self._audio_output

    # === Application Services ===

    @property
    def playback_controller(self) -> PlaybackController:
        """Get the playback controller."""
        if self._playback_controller is None:
            from ..application.services.playback_service import PlaybackController

            self._playback_controller = PlaybackController(
                audio_output=self.audio_output,
                event_bus=self.event_bus,
            )
        return self._playback_controller

    @property
    def search_service(self) -> SearchService:
        """Get the search service."""
        if self._search_service is None:
            from ..application.services.search_service import SearchService

            self._search_service = SearchService(
                catalog_client=self.catalog_client,
                event_bus=self.event_bus,
                settings=self.settings.search,
            )
        return self._search_service

    @property
    def presentation_bridge(self) -> PresentationBridge:
        """Get the bridge between the event bus and the attached presenter."""
        if self._presentation_bridge is None:
            from ..application.services.presentation_bridge import PresentationBridge

            self._presentation_bridge = PresentationBridge(
                presenter=self.presenter,
                event_bus=self.event_bus,
                add_to_queue_handler=self.add_to_queue_handler,
            )
        return self._presentation_bridge

    # === Command Handlers ===

    @property
    def add_to_queue_handler(self) -> AddToQueueHandler:
        """Get the add-to-queue command handler."""
        if self._add_to_queue_handler is None:
            from ..application.commands.add_to_queue import AddToQueueHandler

            self._add_to_queue_handler = AddToQueueHandler(
                playback_controller=self.playback_controller
            )
        return self._add_to_queue_handler

    # === Lifecycle ===

    async def shutdown(self) -> None:
        """Shutdown and cleanup all resources."""
        if self._presentation_bridge is not None:
            self._presentation_bridge.detach()

        if self._search_service is not None:
            await self._search_service.aclose()

        try:
            if self._playback_controller is not None:
                await self._playback_controller.shutdown()
            elif self._audio_output is not None:
                await self._audio_output.stop()
        except Exception as exc:
            logger.warning(LogTemplates.AUDIO_STOP_FAILED, exc)

        if self._catalog_client is not None:
            await self._catalog_client.aclose()


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
