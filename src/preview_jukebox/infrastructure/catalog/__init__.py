"""Catalog adapters."""

from preview_jukebox.infrastructure.catalog.itunes_client import ItunesCatalogClient

__all__ = [
    "ItunesCatalogClient",
]
