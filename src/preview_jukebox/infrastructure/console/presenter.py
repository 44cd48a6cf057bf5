"""Presenter that renders queue, playback and search state as terminal text."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from preview_jukebox.application.interfaces.presenter import Presenter, ResultClickedCallback
from preview_jukebox.domain.music.entities import TrackDescriptor
from preview_jukebox.domain.shared.messages import DisplayMessages

PROGRESS_BAR_WIDTH = 20
SPINNER_ON = "(@)"
SPINNER_OFF = "( )"


def format_progress_bar(percent: float, width: int = PROGRESS_BAR_WIDTH) -> str:
    """Render a horizontal bar such as ``[#####---------------]  25%``."""
    percent = min(100.0, max(0.0, percent))
    filled = int(round(width * percent / 100))
    return f"[{'#' * filled}{'-' * (width - filled)}] {percent:3.0f}%"


class ConsolePresenter(Presenter):
    """Writes each notification as plain lines to a text stream.

    Search results are numbered from 1 so the input loop can turn ``+N`` into
    a result click. Progress is only written when the rendered bar changes.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._results: list[TrackDescriptor] = []
        self._on_clicked: ResultClickedCallback | None = None
        self._last_bar: str | None = None

    @property
    def results(self) -> tuple[TrackDescriptor, ...]:
        return tuple(self._results)

    def _write(self, line: str = "") -> None:
        self._stream.write(f"{line}\n")
        self._stream.flush()

    # === Presenter port ===

    def on_result_clicked(self, callback: ResultClickedCallback) -> None:
        self._on_clicked = callback

    def render_queue(self, snapshot: Sequence[TrackDescriptor]) -> None:
        self._write(f"Queue ({DisplayMessages.QUEUE_COUNT.format(count=len(snapshot))})")
        if not snapshot:
            self._write(f"  {DisplayMessages.QUEUE_EMPTY}")
            return
        for number, track in enumerate(snapshot, start=1):
            self._write(f"  {number}. {track.display_name}")

    def render_current(self, track: TrackDescriptor | None) -> None:
        self._last_bar = None
        if track is None:
            self._write(
                f"{SPINNER_OFF} {DisplayMessages.NOT_PLAYING_TITLE}"
                f" - {DisplayMessages.NOT_PLAYING_ARTIST}"
            )
            return
        self._write(f"{SPINNER_ON} {track.display_name}")

    def render_progress(self, percent: float) -> None:
        bar = format_progress_bar(percent)
        if bar == self._last_bar:
            return
        self._last_bar = bar
        self._write(f"    {bar}")

    def render_search_results(self, results: Sequence[TrackDescriptor]) -> None:
        self._results = list(results)
        if not self._results:
            self._write(DisplayMessages.NO_RESULTS)
            return
        for number, track in enumerate(self._results, start=1):
            self._write(f"{number:>3}. {track.display_name}  [+]")

    def render_search_error(self) -> None:
        self._results = []
        self._write(DisplayMessages.SEARCH_ERROR)

    def render_search_prompt(self) -> None:
        self._results = []
        self._write(DisplayMessages.SEARCH_PROMPT)

    # === Input side ===

    def show_help(self) -> None:
        self._write(DisplayMessages.HELP)

    async def select(self, number: int) -> bool:
        """Click the search result numbered *number* (1-based)."""
        if not 1 <= number <= len(self._results):
            self._write(DisplayMessages.INVALID_SELECTION.format(index=number))
            return False

        track = self._results[number - 1]
        if self._on_clicked is not None:
            await self._on_clicked(track)
        self._write(f"[OK] {DisplayMessages.ADDED_TO_QUEUE.format(title=track.title)}")
        return True
