"""HTTP client for the Google Solar API."""

from __future__ import annotations

from ...config import Settings
from ...models.domain import RoutePoint
from .base import DEFAULT_TIMEOUT_SECONDS, GoogleApiClient
from .errors import SolarProviderError

DEFAULT_SOLAR_URL = "https://solar.googleapis.com/v1/buildingInsights:findClosest"


class SolarClient(GoogleApiClient):
    provider = "Solar API"
    error_class = SolarProviderError

    def __init__(
        self,
        api_key: str | None,
        url: str = DEFAULT_SOLAR_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        super().__init__(api_key, timeout)
        self.url = url

    @classmethod
    def from_settings(cls, settings: Settings) -> "SolarClient":
        return cls(
            settings.google_maps_api_key,
            url=settings.solar_api_url,
            timeout=settings.request_timeout_seconds,
        )

    def find_closest_building(self, point: RoutePoint) -> dict:
        """Return building insights for the building closest to a point."""
        params = {
            "location.latitude": point.lat,
            "location.longitude": point.lng,
            "key": self.api_key,
        }
        return self._request_json("GET", self.url, params=params)
