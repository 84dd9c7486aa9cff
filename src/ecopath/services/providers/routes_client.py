"""HTTP client for the Google Routes API."""

from __future__ import annotations

import logging
from typing import Any

from ...config import Settings
from ...models.domain import CandidateRoute
from .base import DEFAULT_TIMEOUT_SECONDS, GoogleApiClient
from .errors import RoutingProviderError

DEFAULT_ROUTES_URL = "https://routes.googleapis.com/directions/v2:computeRoutes"
ROUTES_FIELD_MASK = "routes.distanceMeters,routes.duration,routes.polyline.encodedPolyline"

logger = logging.getLogger(__name__)


def _coerce_distance(value: Any) -> int:
    # proto3 JSON omits zero values, so a missing distance is a zero distance
    if value is None or isinstance(value, bool):
        return 0
    try:
        distance = int(float(value))
    except (TypeError, ValueError):
        logger.warning(f"Ignoring malformed distanceMeters value from Routes API: {value!r}")
        return 0
    return max(distance, 0)


def parse_candidate_route(raw: Any) -> CandidateRoute:
    """Build a CandidateRoute from one element of the Routes API ``routes`` array.

    Fields outside the documented shape are treated as absent rather than
    failing the request.
    """
    if not isinstance(raw, dict):
        return CandidateRoute(distance_meters=0)

    duration = raw.get("duration")
    polyline = raw.get("polyline")
    encoded = polyline.get("encodedPolyline") if isinstance(polyline, dict) else None
    return CandidateRoute(
        distance_meters=_coerce_distance(raw.get("distanceMeters")),
        duration=duration if isinstance(duration, str) else None,
        encoded_path=encoded if isinstance(encoded, str) and encoded else None,
    )


class RoutesClient(GoogleApiClient):
    provider = "Routes API"
    error_class = RoutingProviderError

    def __init__(
        self,
        api_key: str | None,
        url: str = DEFAULT_ROUTES_URL,
        travel_mode: str = "WALK",
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        super().__init__(api_key, timeout)
        self.url = url
        self.travel_mode = travel_mode

    @classmethod
    def from_settings(cls, settings: Settings) -> "RoutesClient":
        return cls(
            settings.google_maps_api_key,
            url=settings.routes_api_url,
            travel_mode=settings.travel_mode,
            timeout=settings.request_timeout_seconds,
        )

    def compute_routes(self, origin: str, destination: str) -> list[CandidateRoute]:
        """Request the route between two addresses with alternatives, in provider order."""
        body = {
            "origin": {"address": origin},
            "destination": {"address": destination},
            "travelMode": self.travel_mode,
            "computeAlternativeRoutes": True,
        }
        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-FieldMask": ROUTES_FIELD_MASK,
        }
        data = self._request_json("POST", self.url, json=body, headers=headers)

        routes = data.get("routes") or []
        if not isinstance(routes, list):
            raise self._fail("Routes API returned a non-list 'routes' field")
        candidates = [parse_candidate_route(route) for route in routes]
        logger.debug(f"Routes API returned {len(candidates)} candidate route(s)")
        return candidates
