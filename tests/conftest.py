import pytest

from preview_jukebox.application.interfaces.audio_output import (
    AudioOutput,
    OnEndedCallback,
    OnProgressCallback,
)
from preview_jukebox.domain.shared.exceptions import PlaybackStartRejectedError

# ============================================================================
# Fakes
# ============================================================================


class FakeAudioOutput(AudioOutput):
    """Records every transport call and lets tests fire output events."""

    def __init__(self) -> None:
        self.played: list[str] = []
        self.calls: list[str] = []
        self.reject_next = False
        self.on_ended: OnEndedCallback | None = None
        self.on_progress: OnProgressCallback | None = None

    async def play(self, source_ref: str) -> None:
        self.calls.append("play")
        self.played.append(source_ref)
        if self.reject_next:
            self.reject_next = False
            raise PlaybackStartRejectedError(source_ref, "autoplay blocked")

    async def pause(self) -> None:
        self.calls.append("pause")

    async def resume(self) -> None:
        self.calls.append("resume")

    async def stop(self) -> None:
        self.calls.append("stop")

    def set_on_ended_callback(self, callback: OnEndedCallback) -> None:
        self.on_ended = callback

    def set_on_progress_callback(self, callback: OnProgressCallback) -> None:
        self.on_progress = callback

    async def finish_track(self) -> None:
        assert self.on_ended is not None
        await self.on_ended()

    async def report(self, position: float, duration: float | None) -> None:
        assert self.on_progress is not None
        await self.on_progress(position, duration)


class EventRecorder:
    """Subscribes to event types on a bus and keeps what it receives."""

    def __init__(self, bus, *event_types) -> None:
        self.events: list = []
        for event_type in event_types:
            bus.subscribe(event_type, self._record)

    async def _record(self, event) -> None:
        self.events.append(event)

    def of_type(self, event_type) -> list:
        return [e for e in self.events if isinstance(e, event_type)]


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


@pytest.fixture
def make_track():
    """Factory for track descriptors with predictable refs."""
    from preview_jukebox.domain.music.entities import TrackDescriptor

    def _make(title: str = "Test Track", artist: str = "Test Artist", preview: str | None = None):
        slug = title.lower().replace(" ", "-")
        return TrackDescriptor(
            title=title,
            artist=artist,
            preview_source_ref=preview if preview is not None else f"https://audio.test/{slug}.m4a",
            artwork_ref=f"https://art.test/{slug}/100x100bb.jpg",
            thumbnail_ref=f"https://art.test/{slug}/60x60bb.jpg",
        )

    return _make


@pytest.fixture
def sample_track(make_track):
    """Create a sample track for testing."""
    return make_track("Test Track", "Test Artist")


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def event_bus():
    from preview_jukebox.domain.shared.events import EventBus

    return EventBus()


@pytest.fixture
def audio_output():
    return FakeAudioOutput()


@pytest.fixture
def controller(audio_output, event_bus):
    from preview_jukebox.application.services.playback_service import PlaybackController

    return PlaybackController(audio_output=audio_output, event_bus=event_bus)


@pytest.fixture
def recorder_factory(event_bus):
    def _make(*event_types):
        return EventRecorder(event_bus, *event_types)

    return _make
