"""Domain events and the event bus that carries them to observers."""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from preview_jukebox.domain.music.entities import TrackDescriptor
from preview_jukebox.domain.shared.datetime_utils import utcnow
from preview_jukebox.domain.shared.messages import LogTemplates
from preview_jukebox.domain.shared.types import (
    NonEmptyStr,
    NonNegativeInt,
    PercentFloat,
    UtcDatetimeField,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="DomainEvent")
EventHandler = Callable[[T], Awaitable[None]]


class DomainEvent(BaseModel):
    """Base class for all domain events."""

    model_config = ConfigDict(frozen=True)

    event_id: NonEmptyStr = Field(default_factory=lambda: str(uuid4()))
    occurred_at: UtcDatetimeField = Field(default_factory=utcnow)


# === Queue & Playback Events ===


class QueueChanged(DomainEvent):
    tracks: tuple[TrackDescriptor, ...] = ()

    @property
    def length(self) -> int:
        return len(self.tracks)


class TrackStartedPlaying(DomainEvent):
    track: TrackDescriptor
    replaced: TrackDescriptor | None = None


class PlaybackStartFailed(DomainEvent):
    track: TrackDescriptor
    reason: str = ""


class PlaybackIdle(DomainEvent):
    pass


class PlaybackProgressed(DomainEvent):
    percent: PercentFloat = 0.0


# === Search Events ===


class SearchCleared(DomainEvent):
    pass


class SearchResultsReady(DomainEvent):
    query: str = ""
    request_number: NonNegativeInt = 0
    results: tuple[TrackDescriptor, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.results


class SearchFailed(DomainEvent):
    query: str = ""
    request_number: NonNegativeInt = 0
    reason: str = ""


# === Event Bus ===


class EventBus:
    """In-memory pub/sub event bus for domain events.

    Handlers are called concurrently. Exceptions in handlers are logged
    but do not prevent other handlers from running.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler[Any]]] = defaultdict(list)

    def subscribe(self, event_type: type[T], handler: EventHandler[T]) -> None:
        self._handlers[event_type].append(handler)
        logger.debug(LogTemplates.EVENT_SUBSCRIBED, event_type.__name__)

    def unsubscribe(self, event_type: type[T], handler: EventHandler[T]) -> None:
        handlers = self._handlers[event_type]
        if handler in handlers:
            handlers.remove(handler)
            logger.debug(LogTemplates.EVENT_UNSUBSCRIBED, event_type.__name__)

    async def publish(self, event: DomainEvent) -> None:
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug(LogTemplates.EVENT_NO_HANDLERS, event_type.__name__)
            return

        logger.debug(LogTemplates.EVENT_PUBLISHING, event_type.__name__, len(handlers))

        async def safe_call(handler: EventHandler[Any]) -> None:
            try:
                await handler(event)
            except Exception as e:
                logger.exception(LogTemplates.EVENT_HANDLER_ERROR, event_type.__name__, e)

        async with asyncio.TaskGroup() as tg:
            for handler in handlers:
                tg.create_task(safe_call(handler))

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()
        logger.debug(LogTemplates.EVENT_CLEARED)
