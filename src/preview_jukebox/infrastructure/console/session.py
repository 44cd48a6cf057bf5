"""Terminal input loop wiring stdin to search input and result clicks."""

from __future__ import annotations

import asyncio
import re
import sys
import threading
from typing import TYPE_CHECKING, TextIO

from preview_jukebox.infrastructure.console.presenter import ConsolePresenter

if TYPE_CHECKING:
    from preview_jukebox.application.services.search_service import SearchService
    from preview_jukebox.config.container import Container

QUIT_COMMANDS = frozenset({":q", ":quit"})
SELECT_PATTERN = re.compile(r"^\+(\d+)$")


class ConsoleSession:
    """Reads lines from a text stream until EOF or a quit command.

    ``+N`` clicks search result N; ``:q`` quits; any other line is treated as
    the new content of the search box.
    """

    def __init__(
        self,
        *,
        presenter: ConsolePresenter,
        search_service: SearchService,
        input_stream: TextIO | None = None,
    ) -> None:
        self._presenter = presenter
        self._search = search_service
        self._input = input_stream if input_stream is not None else sys.stdin
        self._reader: threading.Thread | None = None

    async def handle_line(self, line: str) -> bool:
        """Process one input line; returns False when the session should end."""
        text = line.rstrip("\r\n")
        command = text.strip()

        if command in QUIT_COMMANDS:
            return False

        match = SELECT_PATTERN.match(command)
        if match:
            await self._presenter.select(int(match.group(1)))
            return True

        self._search.on_input(text)
        return True

    async def run(self) -> None:
        self._presenter.show_help()
        self._presenter.render_current(None)
        self._presenter.render_search_prompt()

        lines = self._start_reader()
        while True:
            line = await lines.get()
            if not line:
                break
            if not await self.handle_line(line):
                break

    def _start_reader(self) -> asyncio.Queue[str]:
        """Read the input stream on a daemon thread so a blocked read never delays exit."""
        loop = asyncio.get_running_loop()
        lines: asyncio.Queue[str] = asyncio.Queue()

        def pump() -> None:
            while True:
                line = self._input.readline()
                try:
                    loop.call_soon_threadsafe(lines.put_nowait, line)
                except RuntimeError:
                    # Loop already closed.
                    return
                if not line:
                    return

        self._reader = threading.Thread(target=pump, name="console-input", daemon=True)
        self._reader.start()
        return lines


async def run_console(container: Container, input_stream: TextIO | None = None) -> None:
    """Attach a console presenter to *container* and run until the user quits."""
    presenter = ConsolePresenter()
    container.set_presenter(presenter)
    container.presentation_bridge.attach()

    session = ConsoleSession(
        presenter=presenter,
        search_service=container.search_service,
        input_stream=input_stream,
    )
    try:
        await session.run()
    finally:
        await container.shutdown()
