"""Port interface for the presentation layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.music.entities import TrackDescriptor

ResultClickedCallback = Callable[["TrackDescriptor"], Awaitable[None]]


class Presenter(ABC):
    """Interface for rendering queue, playback and search state.

    Every render method is a one-way notification. The application never
    reads presentation state back.
    """

    @abstractmethod
    def on_result_clicked(self, callback: ResultClickedCallback) -> None:
        """Register the handler invoked when the user selects a search result."""
        ...

    @abstractmethod
    def render_queue(self, snapshot: Sequence["TrackDescriptor"]) -> None:
        ...

    @abstractmethod
    def render_current(self, track: "TrackDescriptor | None") -> None:
        """Show the now-playing track, or the idle placeholder when None."""
        ...

    @abstractmethod
    def render_progress(self, percent: float) -> None:
        ...

    @abstractmethod
    def render_search_results(self, results: Sequence["TrackDescriptor"]) -> None:
        """Show search results; an empty sequence shows the no-results state."""
        ...

    @abstractmethod
    def render_search_error(self) -> None:
        ...

    @abstractmethod
    def render_search_prompt(self) -> None:
        """Show the placeholder displayed while the search input is empty."""
        ...
