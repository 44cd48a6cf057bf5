"""
Shared Domain Kernel

Contains types, events and exceptions shared across the application.
"""

from preview_jukebox.domain.shared.exceptions import (
    CatalogError,
    CatalogNetworkError,
    CatalogParseError,
    DomainError,
    PlaybackStartRejectedError,
)

__all__ = [
    "DomainError",
    "CatalogError",
    "CatalogNetworkError",
    "CatalogParseError",
    "PlaybackStartRejectedError",
]
