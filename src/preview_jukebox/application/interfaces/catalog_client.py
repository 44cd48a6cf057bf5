"""Port interface for searching the remote music catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.music.entities import TrackDescriptor


class CatalogClient(ABC):
    """Interface for turning a free-text query into track descriptors."""

    @abstractmethod
    async def search(self, term: str) -> list["TrackDescriptor"]:
        """Search the catalog, preserving provider order.

        Raises:
            CatalogNetworkError: The request could not complete.
            CatalogParseError: The response was not in the expected shape.
        """
        ...

    async def aclose(self) -> None:
        """Release any network resources held by the client."""
        return None
