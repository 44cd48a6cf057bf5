"""
Domain Layer

Contains pure business logic organized by bounded contexts:
- shared/: Cross-cutting types, events, messages and exceptions
- music/: Track descriptors, queue, playback session and progress
"""

from preview_jukebox.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
