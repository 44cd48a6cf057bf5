"""
Application Commands

Write operations triggered by user intent.
"""

from preview_jukebox.application.commands.add_to_queue import (
    AddToQueueCommand,
    AddToQueueHandler,
    AddToQueueResult,
)

__all__ = [
    "AddToQueueCommand",
    "AddToQueueHandler",
    "AddToQueueResult",
]
