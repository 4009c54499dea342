"""Location acquisition — browser geolocation and place-name lookup.

Both sources complete once with a LocationResult: either LocationFound or
LocationFailed carrying one of the LocationFailure reasons. Failures are
values, not exceptions; each maps to a fixed status-line message.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from astroyantra.config import Settings

logger = logging.getLogger(__name__)


class LocationFailure(Enum):
    UNSUPPORTED = "Geolocation is not supported by your browser."
    PERMISSION_DENIED = "Error: You denied the request for Geolocation."
    POSITION_UNAVAILABLE = "Error: Location information is unavailable."
    TIMEOUT = "Error: The request to get user location timed out."
    UNKNOWN = "An unknown error occurred."

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class LocationFound:
    latitude: float
    longitude: float

    @property
    def latitude_text(self) -> str:
        return f"{self.latitude:.4f}"

    @property
    def longitude_text(self) -> str:
        return f"{self.longitude:.4f}"


@dataclass(frozen=True)
class LocationFailed:
    reason: LocationFailure


LocationResult = LocationFound | LocationFailed

# W3C GeolocationPositionError codes
_BROWSER_ERROR_CODES: dict[int, LocationFailure] = {
    1: LocationFailure.PERMISSION_DENIED,
    2: LocationFailure.POSITION_UNAVAILABLE,
    3: LocationFailure.TIMEOUT,
}

# Evaluated in the browser by streamlit_js_eval; resolves exactly once.
GEOLOCATION_JS = (
    "new Promise((resolve) => {"
    " if (!navigator.geolocation) { resolve({unsupported: true}); return; }"
    " navigator.geolocation.getCurrentPosition("
    "  (pos) => resolve({coords: {latitude: pos.coords.latitude,"
    " longitude: pos.coords.longitude}}),"
    "  (err) => resolve({error: {code: err.code, message: err.message}}));"
    "})"
)


def interpret_browser_payload(payload: Any) -> LocationResult | None:
    """Map the streamlit_js_eval return value to a LocationResult.

    Returns None while the browser has not answered yet.
    """
    if payload is None:
        return None
    if not isinstance(payload, dict) or payload.get("unsupported"):
        return LocationFailed(LocationFailure.UNSUPPORTED)
    coords = payload.get("coords")
    if coords is not None:
        return LocationFound(
            latitude=float(coords["latitude"]), longitude=float(coords["longitude"])
        )
    error = payload.get("error") or {}
    code = error.get("code") if isinstance(error, dict) else None
    return LocationFailed(_BROWSER_ERROR_CODES.get(code, LocationFailure.UNKNOWN))


def lookup_place(
    query: str, settings: Settings, client: httpx.Client | None = None
) -> LocationResult:
    """Nominatim (OpenStreetMap) place lookup.

    Args:
        query: Place name or address in any language.
        settings: Endpoint, user agent and timeout.
        client: Optional httpx client (tests pass one with a MockTransport).

    Returns:
        LocationFound, or LocationFailed with POSITION_UNAVAILABLE (not found),
        TIMEOUT, or UNKNOWN (any other HTTP failure).
    """
    params = {"q": query, "format": "json", "limit": 1}
    headers = {"User-Agent": settings.user_agent}
    get = client.get if client is not None else httpx.get
    try:
        resp = get(
            settings.nominatim_url,
            params=params,
            headers=headers,
            timeout=settings.http_timeout,
        )
        resp.raise_for_status()
        results = resp.json()
    except httpx.TimeoutException:
        logger.warning("Place lookup timed out: %s", query)
        return LocationFailed(LocationFailure.TIMEOUT)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Place lookup failed for %s: %s", query, e)
        return LocationFailed(LocationFailure.UNKNOWN)
    if not results:
        logger.info("Place not found: %s", query)
        return LocationFailed(LocationFailure.POSITION_UNAVAILABLE)
    r = results[0]
    logger.info("Place %s resolved to %s", query, r.get("display_name", ""))
    return LocationFound(latitude=float(r["lat"]), longitude=float(r["lon"]))


FETCHING_MESSAGE = "Fetching your location..."
FOUND_MESSAGE = "✅ Location found!"
FOUND_MESSAGE_SECONDS = 3.0


@dataclass(frozen=True)
class StatusLine:
    """Text for the location status label. expires_at=None means it persists."""

    text: str
    is_error: bool = False
    expires_at: float | None = None

    def visible_text(self, now: float | None = None) -> str:
        current = time.time() if now is None else now
        if self.expires_at is not None and current >= self.expires_at:
            return ""
        return self.text


def status_for(result: LocationResult | None, now: float | None = None) -> StatusLine:
    """Status line for a pending (None), successful, or failed lookup."""
    if result is None:
        return StatusLine(FETCHING_MESSAGE)
    if isinstance(result, LocationFound):
        started = now if now is not None else time.time()
        return StatusLine(FOUND_MESSAGE, expires_at=started + FOUND_MESSAGE_SECONDS)
    return StatusLine(result.reason.message, is_error=True)
