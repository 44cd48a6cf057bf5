"""Terminal front end: presenter and input loop."""

from preview_jukebox.infrastructure.console.presenter import ConsolePresenter
from preview_jukebox.infrastructure.console.session import ConsoleSession, run_console

__all__ = [
    "ConsolePresenter",
    "ConsoleSession",
    "run_console",
]
