"""Base exception classes for domain-level errors."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class CatalogError(DomainError):
    """Raised when a catalog search does not produce a usable result list."""

    def __init__(self, term: str, message: str, code: str = "CATALOG_ERROR") -> None:
        super().__init__(message, code=code)
        self.term = term


class CatalogNetworkError(CatalogError):
    """Raised when the search request could not complete."""

    def __init__(self, term: str, message: str | None = None) -> None:
        msg = message or f"Search request for '{term}' failed"
        super().__init__(term, msg, code="NETWORK_FAILURE")


class CatalogParseError(CatalogError):
    """Raised when the search response is not in the expected shape."""

    def __init__(self, term: str, message: str | None = None) -> None:
        msg = message or f"Search response for '{term}' could not be parsed"
        super().__init__(term, msg, code="PARSE_FAILURE")


class PlaybackStartRejectedError(DomainError):
    """Raised when the audio output refuses to start a source."""

    def __init__(self, source_ref: str, message: str | None = None) -> None:
        msg = message or f"Audio output refused to start '{source_ref}'"
        super().__init__(msg, code="PLAYBACK_START_REJECTED")
        self.source_ref = source_ref
