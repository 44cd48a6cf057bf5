"""Search Application Service - debounced catalog search."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from ...domain.shared.events import SearchCleared, SearchFailed, SearchResultsReady
from ...domain.shared.exceptions import CatalogError
from ...domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...config.settings import SearchSettings
    from ...domain.music.entities import TrackDescriptor
    from ...domain.shared.events import EventBus
    from ..interfaces.catalog_client import CatalogClient

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_MS = 500


def _displayable(text: str) -> str:
    """Replace code points that cannot be encoded (lone surrogates) with ``?``."""
    return text.encode("utf-8", "replace").decode("utf-8")


class SearchService:
    """Turns raw search-box input into catalog searches and result events.

    Each keystroke restarts a quiet-period timer; the search fires only after
    the input has been stable for the whole period. A search that has already
    been sent is never cancelled, so responses may arrive out of order. With
    ``discard_stale_responses`` enabled, a response that is older than the
    latest submitted request is dropped instead of rendered.
    """

    def __init__(
        self,
        *,
        catalog_client: CatalogClient,
        event_bus: EventBus,
        settings: SearchSettings | None = None,
    ) -> None:
        self._catalog_client = catalog_client
        self._event_bus = event_bus

        debounce_ms = settings.debounce_ms if settings is not None else DEFAULT_DEBOUNCE_MS
        self._debounce_seconds = debounce_ms / 1000
        self._discard_stale = settings.discard_stale_responses if settings is not None else False

        self._pending: asyncio.Task[None] | None = None
        self._inflight: set[asyncio.Task[None]] = set()
        self._request_counter = 0

    @property
    def latest_request_number(self) -> int:
        return self._request_counter

    @property
    def has_pending_input(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def on_input(self, text: str) -> asyncio.Task[None]:
        """Record new input, restarting the debounce timer.

        Returns the timer task; awaiting it waits for the resulting search (if
        the timer is not superseded first).
        """
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
            logger.debug(LogTemplates.SEARCH_DEBOUNCE_RESET)

        task = asyncio.get_running_loop().create_task(self._fire_after_quiet(text))
        self._pending = task
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        return task

    async def _fire_after_quiet(self, text: str) -> None:
        await asyncio.sleep(self._debounce_seconds)
        # From here on the request is in flight and newer input must not cancel it.
        if self._pending is asyncio.current_task():
            self._pending = None
        await self.submit(text)

    async def submit(self, text: str) -> list[TrackDescriptor] | None:
        """Search immediately, bypassing the debounce timer.

        Whitespace-only input never reaches the catalog. Catalog failures are
        published as events and never raised.
        """
        if not text.strip():
            logger.debug(LogTemplates.SEARCH_SKIPPED_EMPTY)
            await self._event_bus.publish(SearchCleared())
            return None

        self._request_counter += 1
        request_number = self._request_counter
        logger.info(LogTemplates.SEARCH_SUBMITTED, text, request_number)

        try:
            results = await self._catalog_client.search(text)
        except CatalogError as e:
            logger.error(LogTemplates.SEARCH_FAILED, text, e.message)
            if self._is_stale(request_number):
                return None
            await self._event_bus.publish(
                SearchFailed(
                    query=_displayable(text), request_number=request_number, reason=e.message
                )
            )
            return None

        if self._is_stale(request_number):
            return None

        logger.info(LogTemplates.SEARCH_COMPLETED, text, len(results))
        await self._event_bus.publish(
            SearchResultsReady(query=text, request_number=request_number, results=tuple(results))
        )
        return results

    def _is_stale(self, request_number: int) -> bool:
        if self._discard_stale and request_number != self._request_counter:
            logger.debug(LogTemplates.SEARCH_STALE_DISCARDED, request_number, self._request_counter)
            return True
        return False

    async def aclose(self) -> None:
        """Cancel the debounce timer and any search still in flight."""
        tasks = list(self._inflight)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._pending = None
