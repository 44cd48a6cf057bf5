"""
Unit Tests for SearchService

Tests for:
- Debounce coalescing of rapid input
- Empty input handling
- Result and failure events
- Out-of-order responses with and without stale discarding
"""

import asyncio

import httpx
import pytest

from preview_jukebox.application.interfaces.catalog_client import CatalogClient
from preview_jukebox.application.services.search_service import SearchService
from preview_jukebox.config.settings import CatalogSettings, SearchSettings
from preview_jukebox.domain.shared.events import SearchCleared, SearchFailed, SearchResultsReady
from preview_jukebox.domain.shared.exceptions import CatalogNetworkError
from preview_jukebox.infrastructure.catalog.itunes_client import ItunesCatalogClient


class FakeCatalogClient(CatalogClient):
    """Answers searches from a canned table and records every term."""

    def __init__(self, results=None, error=None):
        self.terms: list[str] = []
        self.results = results or {}
        self.error = error
        self.gates: dict[str, asyncio.Event] = {}

    async def search(self, term):
        self.terms.append(term)
        gate = self.gates.get(term)
        if gate is not None:
            await gate.wait()
        if self.error is not None:
            raise self.error
        return list(self.results.get(term, []))


@pytest.fixture
def catalog():
    return FakeCatalogClient()


def make_service(catalog, event_bus, *, debounce_ms=10, discard_stale=False):
    return SearchService(
        catalog_client=catalog,
        event_bus=event_bus,
        settings=SearchSettings(debounce_ms=debounce_ms, discard_stale_responses=discard_stale),
    )


# =============================================================================
# Debounce Tests
# =============================================================================


class TestDebounce:
    """Tests for the quiet-period timer."""

    @pytest.mark.asyncio
    async def test_rapid_input_sends_one_search(self, catalog, event_bus):
        service = make_service(catalog, event_bus, debounce_ms=20)

        service.on_input("b")
        service.on_input("be")
        last = service.on_input("bea")
        await last

        assert catalog.terms == ["bea"]

    @pytest.mark.asyncio
    async def test_no_search_before_quiet_period(self, catalog, event_bus):
        service = make_service(catalog, event_bus, debounce_ms=200)

        service.on_input("beatles")
        await asyncio.sleep(0)

        assert catalog.terms == []
        assert service.has_pending_input is True
        await service.aclose()
        assert service.has_pending_input is False

    @pytest.mark.asyncio
    async def test_separated_input_sends_each_search(self, catalog, event_bus):
        service = make_service(catalog, event_bus, debounce_ms=5)

        await service.on_input("one")
        await service.on_input("two")

        assert catalog.terms == ["one", "two"]

    @pytest.mark.asyncio
    async def test_default_debounce_is_half_a_second(self, catalog, event_bus):
        service = SearchService(catalog_client=catalog, event_bus=event_bus)

        assert service._debounce_seconds == pytest.approx(0.5)


# =============================================================================
# Submit Tests
# =============================================================================


class TestSubmit:
    """Tests for immediate submission and the resulting events."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\t"])
    async def test_blank_input_never_hits_catalog(
        self, catalog, event_bus, recorder_factory, text
    ):
        recorder = recorder_factory(SearchCleared, SearchResultsReady)
        service = make_service(catalog, event_bus)

        result = await service.submit(text)

        assert result is None
        assert catalog.terms == []
        assert len(recorder.of_type(SearchCleared)) == 1
        assert recorder.of_type(SearchResultsReady) == []
        assert service.latest_request_number == 0

    @pytest.mark.asyncio
    async def test_blank_input_after_debounce_clears(self, catalog, event_bus, recorder_factory):
        recorder = recorder_factory(SearchCleared)
        service = make_service(catalog, event_bus, debounce_ms=1)

        await service.on_input("  ")

        assert catalog.terms == []
        assert len(recorder.events) == 1

    @pytest.mark.asyncio
    async def test_results_published_in_order(
        self, catalog, event_bus, recorder_factory, make_track
    ):
        tracks = [make_track("A"), make_track("B"), make_track("C")]
        catalog.results["abc"] = tracks
        recorder = recorder_factory(SearchResultsReady)
        service = make_service(catalog, event_bus)

        result = await service.submit("abc")

        assert result == tracks
        event = recorder.events[0]
        assert event.query == "abc"
        assert event.results == tuple(tracks)
        assert event.request_number == 1

    @pytest.mark.asyncio
    async def test_text_sent_untrimmed(self, catalog, event_bus):
        service = make_service(catalog, event_bus)

        await service.submit("  the beatles ")

        assert catalog.terms == ["  the beatles "]

    @pytest.mark.asyncio
    async def test_zero_results(self, catalog, event_bus, recorder_factory):
        recorder = recorder_factory(SearchResultsReady)
        service = make_service(catalog, event_bus)

        result = await service.submit("zzzzqqq")

        assert result == []
        assert recorder.events[0].is_empty is True

    @pytest.mark.asyncio
    async def test_failure_is_published_not_raised(self, event_bus, recorder_factory, caplog):
        catalog = FakeCatalogClient(error=CatalogNetworkError("abc", "connection refused"))
        recorder = recorder_factory(SearchFailed, SearchResultsReady)
        service = make_service(catalog, event_bus)

        result = await service.submit("abc")

        assert result is None
        failed = recorder.of_type(SearchFailed)
        assert len(failed) == 1
        assert failed[0].query == "abc"
        assert failed[0].reason == "connection refused"
        assert recorder.of_type(SearchResultsReady) == []
        assert "connection refused" in caplog.text

    @pytest.mark.asyncio
    async def test_unencodable_term_published_as_failure(self, event_bus, recorder_factory):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"resultCount": 0, "results": []})

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        catalog = ItunesCatalogClient(CatalogSettings(), http_client=http_client)
        recorder = recorder_factory(SearchFailed, SearchResultsReady)
        service = make_service(catalog, event_bus)

        result = await service.submit("abc\udcff")

        assert result is None
        assert requests == []
        failed = recorder.of_type(SearchFailed)
        assert len(failed) == 1
        assert failed[0].query == "abc?"
        assert "cannot be sent" in failed[0].reason
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_request_numbers_increase(self, catalog, event_bus):
        service = make_service(catalog, event_bus)

        await service.submit("a")
        await service.submit("b")

        assert service.latest_request_number == 2


# =============================================================================
# Out-of-order Response Tests
# =============================================================================


class TestOutOfOrderResponses:
    """Tests for responses that resolve after a newer search."""

    async def _race(self, catalog, service, make_track):
        catalog.results["slow"] = [make_track("Slow")]
        catalog.results["fast"] = [make_track("Fast")]
        catalog.gates["slow"] = asyncio.Event()

        slow = asyncio.create_task(service.submit("slow"))
        await asyncio.sleep(0)
        await service.submit("fast")
        catalog.gates["slow"].set()
        await slow

    @pytest.mark.asyncio
    async def test_stale_response_rendered_by_default(
        self, catalog, event_bus, recorder_factory, make_track
    ):
        recorder = recorder_factory(SearchResultsReady)
        service = make_service(catalog, event_bus)

        await self._race(catalog, service, make_track)

        assert [e.query for e in recorder.events] == ["fast", "slow"]

    @pytest.mark.asyncio
    async def test_stale_response_discarded_when_enabled(
        self, catalog, event_bus, recorder_factory, make_track
    ):
        recorder = recorder_factory(SearchResultsReady)
        service = make_service(catalog, event_bus, discard_stale=True)

        await self._race(catalog, service, make_track)

        assert [e.query for e in recorder.events] == ["fast"]

    @pytest.mark.asyncio
    async def test_in_flight_search_not_cancelled_by_new_input(self, catalog, event_bus):
        catalog.gates["first"] = asyncio.Event()
        service = make_service(catalog, event_bus, debounce_ms=1)

        first = service.on_input("first")
        await asyncio.sleep(0.05)
        assert catalog.terms == ["first"]

        second = service.on_input("second")
        catalog.gates["first"].set()
        await first
        await second

        assert catalog.terms == ["first", "second"]
        assert not first.cancelled()
