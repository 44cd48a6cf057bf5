"""CatalogClient implementation for the iTunes Search API."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from preview_jukebox.application.interfaces.catalog_client import CatalogClient
from preview_jukebox.config.settings import CatalogSettings
from preview_jukebox.domain.music.entities import TrackDescriptor
from preview_jukebox.domain.shared.exceptions import CatalogNetworkError, CatalogParseError
from preview_jukebox.domain.shared.messages import ErrorMessages, LogTemplates
from preview_jukebox.infrastructure.catalog.models import ItunesSearchResponse

logger = logging.getLogger(__name__)


class ItunesCatalogClient(CatalogClient):
    """Searches the iTunes catalog for songs.

    Each call is a single independent GET; there are no retries. Unless a
    timeout is configured the request may wait indefinitely.
    """

    def __init__(
        self,
        settings: CatalogSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or CatalogSettings()
        self._http = http_client
        self._owns_client = http_client is None
        logger.debug(
            LogTemplates.CATALOG_CLIENT_INITIALIZED, self._settings.base_url, self._settings.limit
        )

    def _get_client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=httpx.Timeout(self._settings.timeout_s))
            self._owns_client = True
        return self._http

    def _build_params(self, term: str) -> dict[str, Any]:
        return {
            "term": term,
            "entity": self._settings.entity,
            "limit": self._settings.limit,
        }

    async def search(self, term: str) -> list[TrackDescriptor]:
        client = self._get_client()

        try:
            response = await client.get(self._settings.base_url, params=self._build_params(term))
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CatalogNetworkError(
                term,
                ErrorMessages.SEARCH_HTTP_STATUS.format(
                    term=term, status=e.response.status_code
                ),
            ) from e
        except httpx.HTTPError as e:
            raise CatalogNetworkError(
                term, ErrorMessages.SEARCH_REQUEST_FAILED.format(term=term, error=e)
            ) from e
        except (UnicodeError, httpx.InvalidURL) as e:
            raise CatalogNetworkError(
                term, ErrorMessages.SEARCH_TERM_UNSENDABLE.format(term=term, error=e)
            ) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise CatalogParseError(term, ErrorMessages.SEARCH_INVALID_JSON.format(term=term)) from e

        try:
            parsed = ItunesSearchResponse.model_validate(payload)
        except PydanticValidationError as e:
            raise CatalogParseError(
                term, ErrorMessages.SEARCH_INVALID_SHAPE.format(term=term)
            ) from e

        records = parsed.results
        if len(records) > self._settings.limit:
            logger.debug(LogTemplates.CATALOG_RECORDS_TRUNCATED, len(records), self._settings.limit)
            records = records[: self._settings.limit]

        return [record.to_domain() for record in records]

    async def aclose(self) -> None:
        if self._http is not None and self._owns_client:
            await self._http.aclose()
        self._http = None
