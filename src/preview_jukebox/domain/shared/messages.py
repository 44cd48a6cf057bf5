"""Centralized message constants for error messages, log templates, and user feedback."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Playback session invariants
    CURRENT_TRACK_REQUIRED = "A playing session must have a current track"
    CURRENT_TRACK_FORBIDDEN = "An idle session cannot have a current track"

    # Catalog errors
    SEARCH_REQUEST_FAILED = "Search request for '{term}' failed: {error}"
    SEARCH_HTTP_STATUS = "Search request for '{term}' returned HTTP {status}"
    SEARCH_TERM_UNSENDABLE = "Search term {term!r} cannot be sent: {error}"
    SEARCH_INVALID_JSON = "Search response for '{term}' is not valid JSON"
    SEARCH_INVALID_SHAPE = "Search response for '{term}' has an unexpected shape"

    # Audio output errors
    EMPTY_SOURCE_REF = "Track has no playable source"
    PLAYER_NOT_FOUND = "Audio player '{binary}' was not found on PATH"
    PLAYER_START_FAILED = "Audio player '{binary}' could not be started: {error}"

    # Settings validation
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"

    # Container
    PRESENTER_NOT_SET = "Presenter not attached. Call set_presenter() first."


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Application lifecycle
    APP_STARTING = "Starting preview jukebox (environment=%s)"
    APP_STOPPED = "Preview jukebox stopped"
    APP_KEYBOARD_INTERRUPT = "Received keyboard interrupt, shutting down"
    APP_FATAL_ERROR = "Fatal error: %s"
    LOGGING_CONFIG_FALLBACK = "Could not load %s, falling back to basic config"
    AUDIO_STOP_FAILED = "Failed stopping audio output: %r"

    # Queue
    TRACK_ENQUEUED = "Queued '%s' by %s (queue length %d)"
    QUEUE_EMPTY = "Queue empty, playback idle"

    # Playback
    PLAYBACK_STARTING = "Starting '%s' by %s"
    PLAYBACK_OVERWRITING = "Replacing current track '%s' with '%s'"
    PLAYBACK_START_REJECTED = "Audio output rejected '%s': %s"
    PLAYBACK_ENDED = "Track '%s' finished"
    PLAYBACK_PAUSED = "Playback paused"
    PLAYBACK_RESUMED = "Playback resumed"
    PROGRESS_WHILE_IDLE = "Ignoring progress update while idle"

    # Search
    SEARCH_SKIPPED_EMPTY = "Search input empty, not submitting"
    SEARCH_SUBMITTED = "Searching catalog for %r (request #%d)"
    SEARCH_COMPLETED = "Search %r returned %d results"
    SEARCH_FAILED = "Search failed for %r: %s"
    SEARCH_STALE_DISCARDED = "Discarding stale response for request #%d (latest #%d)"
    SEARCH_DEBOUNCE_RESET = "Search debounce timer reset"

    # Catalog client
    CATALOG_CLIENT_INITIALIZED = "Catalog client initialized (base_url=%s, limit=%d)"
    CATALOG_RECORDS_TRUNCATED = "Provider returned %d records, keeping first %d"

    # Audio output
    PLAYER_SPAWNED = "Spawned %s (pid=%s) for %s"
    PLAYER_EXITED = "Player process exited with status %s"
    PLAYER_SUPERSEDED = "Player process superseded, suppressing completion"
    PLAYER_FAILED = "Player process failed with status %s, not advancing"
    PROBE_FAILED = "Could not probe duration of %s: %s"
    PLAYER_STOP_ERROR = "Error stopping player process"

    # Event bus
    EVENT_SUBSCRIBED = "Subscribed handler to: %s"
    EVENT_UNSUBSCRIBED = "Unsubscribed handler from %s"
    EVENT_NO_HANDLERS = "No handlers for %s"
    EVENT_PUBLISHING = "Publishing %s to %d handlers"
    EVENT_HANDLER_ERROR = "Error in handler for %s: %s"
    EVENT_CLEARED = "Cleared all event handlers"


class DisplayMessages:
    """Text shown to the user by the presentation layer."""

    NOT_PLAYING_TITLE = "Not Playing"
    NOT_PLAYING_ARTIST = "Waiting for selection..."
    SEARCH_PROMPT = "Type to find your favorite tracks..."
    NO_RESULTS = "No results found."
    SEARCH_ERROR = "Error searching tracks. Try again."
    QUEUE_EMPTY = "Queue is empty. Add some songs!"
    QUEUE_COUNT = "{count} tracks"
    ADDED_TO_QUEUE = "Added to queue: {title}"
    INVALID_SELECTION = "No search result numbered {index}."
    HELP = "Type to search, '+N' to queue result N, ':q' to quit."
