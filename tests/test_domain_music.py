"""
Unit Tests for Domain Music Layer

Tests for:
- Value Objects: PlaybackState
- Entities: TrackDescriptor, PlaybackSession
- TrackQueue
- report_progress
"""

import math

import pytest
from pydantic import ValidationError

from preview_jukebox.domain.music.entities import PlaybackSession, TrackDescriptor
from preview_jukebox.domain.music.progress import report_progress
from preview_jukebox.domain.music.queue import TrackQueue
from preview_jukebox.domain.music.value_objects import PlaybackState

# =============================================================================
# PlaybackState Value Object Tests
# =============================================================================


class TestPlaybackState:
    """Unit tests for PlaybackState enum."""

    def test_values(self):
        assert PlaybackState.IDLE.value == "idle"
        assert PlaybackState.PLAYING.value == "playing"

    def test_flags(self):
        assert PlaybackState.PLAYING.is_playing is True
        assert PlaybackState.PLAYING.is_idle is False
        assert PlaybackState.IDLE.is_idle is True
        assert PlaybackState.IDLE.is_playing is False


# =============================================================================
# TrackDescriptor Tests
# =============================================================================


class TestTrackDescriptor:
    """Unit tests for TrackDescriptor value object."""

    def test_structural_equality(self):
        """Descriptors with the same fields are equal and hash alike."""
        a = TrackDescriptor(title="A", artist="X", preview_source_ref="u1")
        b = TrackDescriptor(title="A", artist="X", preview_source_ref="u1")

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_fields_not_equal(self):
        a = TrackDescriptor(title="A", artist="X", preview_source_ref="u1")
        b = TrackDescriptor(title="A", artist="X", preview_source_ref="u2")

        assert a != b

    def test_is_immutable(self, sample_track):
        with pytest.raises(ValidationError):
            sample_track.title = "Changed"

    def test_optional_refs_default_to_empty(self):
        track = TrackDescriptor(title="A", artist="X")

        assert track.preview_source_ref == ""
        assert track.artwork_ref == ""
        assert track.thumbnail_ref == ""

    def test_display_name(self):
        track = TrackDescriptor(title="Song", artist="Band")

        assert track.display_name == "Song - Band"

    def test_strict_rejects_non_string(self):
        with pytest.raises(ValidationError):
            TrackDescriptor(title=123, artist="X")


# =============================================================================
# PlaybackSession Tests
# =============================================================================


class TestPlaybackSession:
    """Unit tests for PlaybackSession state and invariant."""

    def test_initial_state_is_idle(self):
        session = PlaybackSession()

        assert session.state == PlaybackState.IDLE
        assert session.current_track is None
        assert session.is_idle is True
        assert session.is_playing is False

    def test_start_sets_current_and_playing(self, sample_track):
        session = PlaybackSession()

        previous = session.start(sample_track)

        assert previous is None
        assert session.state == PlaybackState.PLAYING
        assert session.current_track == sample_track

    def test_start_while_playing_returns_replaced_track(self, make_track):
        session = PlaybackSession()
        first, second = make_track("First"), make_track("Second")
        session.start(first)

        previous = session.start(second)

        assert previous == first
        assert session.current_track == second
        assert session.is_playing

    def test_reset_clears_current(self, sample_track):
        session = PlaybackSession()
        session.start(sample_track)

        session.reset()

        assert session.state == PlaybackState.IDLE
        assert session.current_track is None

    def test_playing_without_track_rejected(self):
        with pytest.raises(ValidationError, match="must have a current track"):
            PlaybackSession(state=PlaybackState.PLAYING)

    def test_idle_with_track_rejected(self, sample_track):
        with pytest.raises(ValidationError, match="cannot have a current track"):
            PlaybackSession(state=PlaybackState.IDLE, current_track=sample_track)


# =============================================================================
# TrackQueue Tests
# =============================================================================


class TestTrackQueue:
    """Unit tests for the FIFO queue."""

    def test_empty_queue(self):
        queue = TrackQueue()

        assert len(queue) == 0
        assert queue.length == 0
        assert queue.is_empty
        assert queue.snapshot() == ()

    def test_enqueue_returns_new_length(self, make_track):
        queue = TrackQueue()

        assert queue.enqueue(make_track("A")) == 1
        assert queue.enqueue(make_track("B")) == 2
        assert queue.length == 2

    def test_dequeue_front_is_fifo(self, make_track):
        a, b, c = make_track("A"), make_track("B"), make_track("C")
        queue = TrackQueue()
        for track in (a, b, c):
            queue.enqueue(track)

        assert queue.dequeue_front() == a
        assert queue.dequeue_front() == b
        assert queue.dequeue_front() == c

    def test_dequeue_empty_returns_none(self):
        queue = TrackQueue()

        assert queue.dequeue_front() is None
        assert queue.dequeue_front() is None

    def test_duplicates_are_kept(self, sample_track):
        queue = TrackQueue()
        queue.enqueue(sample_track)
        queue.enqueue(sample_track)

        assert queue.length == 2
        assert queue.snapshot() == (sample_track, sample_track)

    def test_snapshot_is_detached(self, make_track):
        queue = TrackQueue([make_track("A")])

        snapshot = queue.snapshot()
        queue.enqueue(make_track("B"))

        assert isinstance(snapshot, tuple)
        assert len(snapshot) == 1

    def test_no_reordering_api(self):
        queue = TrackQueue()

        for name in ("peek", "remove_at", "shuffle", "move_track", "insert"):
            assert not hasattr(queue, name)


# =============================================================================
# report_progress Tests
# =============================================================================


class TestReportProgress:
    """Unit tests for the progress reporter."""

    def test_halfway(self):
        assert report_progress(15.0, 30.0) == pytest.approx(50.0)

    def test_complete(self):
        assert report_progress(30.0, 30.0) == pytest.approx(100.0)

    @pytest.mark.parametrize("duration", [0, 0.0, None, -1.0, math.nan, math.inf])
    def test_unknown_duration_is_zero(self, duration):
        assert report_progress(10.0, duration) == 0.0

    @pytest.mark.parametrize("position", [None, -5.0, math.nan])
    def test_unusable_position_is_zero(self, position):
        assert report_progress(position, 30.0) == 0.0

    def test_clamped_above_100(self):
        assert report_progress(45.0, 30.0) == 100.0

    def test_monotonic_and_bounded(self):
        """Percentages never decrease as position increases and stay in [0, 100]."""
        duration = 29.98
        positions = [i * 0.5 for i in range(0, 70)]

        values = [report_progress(p, duration) for p in positions]

        assert values == sorted(values)
        assert all(0.0 <= v <= 100.0 for v in values)
