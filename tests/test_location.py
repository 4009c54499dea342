"""
Tests for location outcomes, browser payload mapping and place lookup.
"""

import httpx
import pytest

from astroyantra.config import Settings
from astroyantra.location import (
    FETCHING_MESSAGE,
    FOUND_MESSAGE,
    LocationFailed,
    LocationFailure,
    LocationFound,
    interpret_browser_payload,
    lookup_place,
    status_for,
)


# ============== Fixtures ==============

@pytest.fixture
def settings():
    return Settings(nominatim_url="https://nominatim.test/search", user_agent="test-agent")


def _client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


# ============== Browser Payload Tests ==============

class TestBrowserPayload:
    """Test mapping of the JS geolocation result."""

    def test_pending(self):
        """None means the browser has not answered yet."""
        assert interpret_browser_payload(None) is None

    def test_success(self):
        """Coordinates become LocationFound with 4-decimal field text."""
        result = interpret_browser_payload(
            {"coords": {"latitude": 28.61394, "longitude": 77.20902}}
        )

        assert result == LocationFound(latitude=28.61394, longitude=77.20902)
        assert result.latitude_text == "28.6139"
        assert result.longitude_text == "77.2090"

    def test_unsupported(self):
        """No navigator.geolocation is its own outcome."""
        assert interpret_browser_payload({"unsupported": True}) == LocationFailed(
            LocationFailure.UNSUPPORTED
        )

    @pytest.mark.parametrize(
        "code, reason",
        [
            (1, LocationFailure.PERMISSION_DENIED),
            (2, LocationFailure.POSITION_UNAVAILABLE),
            (3, LocationFailure.TIMEOUT),
            (99, LocationFailure.UNKNOWN),
        ],
    )
    def test_error_codes(self, code, reason):
        """W3C error codes map to the closed failure set."""
        payload = {"error": {"code": code, "message": "x"}}
        assert interpret_browser_payload(payload) == LocationFailed(reason)

    def test_messages(self):
        """Each failure has its fixed message."""
        assert LocationFailure.PERMISSION_DENIED.message == (
            "Error: You denied the request for Geolocation."
        )
        assert LocationFailure.UNKNOWN.message == "An unknown error occurred."


# ============== Place Lookup Tests ==============

class TestLookupPlace:
    """Test Nominatim lookup over a mock transport."""

    def test_found(self, settings):
        """First result's lat/lon are returned."""

        def handler(request):
            assert request.url.params["q"] == "Jaipur"
            assert request.headers["User-Agent"] == "test-agent"
            return httpx.Response(
                200, json=[{"lat": "26.9124", "lon": "75.7873", "display_name": "Jaipur"}]
            )

        with _client(handler) as client:
            result = lookup_place("Jaipur", settings, client=client)

        assert result == LocationFound(latitude=26.9124, longitude=75.7873)

    def test_not_found(self, settings):
        """Empty result list is POSITION_UNAVAILABLE."""
        with _client(lambda request: httpx.Response(200, json=[])) as client:
            result = lookup_place("Nowhere", settings, client=client)

        assert result == LocationFailed(LocationFailure.POSITION_UNAVAILABLE)

    def test_timeout(self, settings):
        """Transport timeouts map to TIMEOUT."""

        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with _client(handler) as client:
            result = lookup_place("Jaipur", settings, client=client)

        assert result == LocationFailed(LocationFailure.TIMEOUT)

    def test_http_error(self, settings):
        """Server errors map to UNKNOWN."""
        with _client(lambda request: httpx.Response(503)) as client:
            result = lookup_place("Jaipur", settings, client=client)

        assert result == LocationFailed(LocationFailure.UNKNOWN)


# ============== Status Line Tests ==============

class TestStatusLine:
    """Test status texts and auto-clear."""

    def test_pending(self):
        """Pending lookups show the fetching message."""
        status = status_for(None)

        assert status.text == FETCHING_MESSAGE
        assert not status.is_error

    def test_success_clears_after_three_seconds(self):
        """The success message disappears after 3 s."""
        status = status_for(LocationFound(1.0, 2.0), now=100.0)

        assert status.visible_text(now=102.9) == FOUND_MESSAGE
        assert status.visible_text(now=103.0) == ""

    def test_error_persists(self):
        """Error messages never expire."""
        status = status_for(LocationFailed(LocationFailure.TIMEOUT), now=0.0)

        assert status.is_error
        assert status.visible_text(now=1e9) == LocationFailure.TIMEOUT.message
