"""HTTP client for the Google Air Quality API."""

from __future__ import annotations

from ...config import Settings
from ...models.domain import RoutePoint
from .base import DEFAULT_TIMEOUT_SECONDS, GoogleApiClient
from .errors import AirQualityProviderError

DEFAULT_AIR_QUALITY_URL = "https://airquality.googleapis.com/v1/currentConditions:lookup"


class AirQualityClient(GoogleApiClient):
    provider = "Air Quality API"
    error_class = AirQualityProviderError

    def __init__(
        self,
        api_key: str | None,
        url: str = DEFAULT_AIR_QUALITY_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        super().__init__(api_key, timeout)
        self.url = url

    @classmethod
    def from_settings(cls, settings: Settings) -> "AirQualityClient":
        return cls(
            settings.google_maps_api_key,
            url=settings.air_quality_api_url,
            timeout=settings.request_timeout_seconds,
        )

    def current_conditions(self, point: RoutePoint) -> dict:
        """Return the raw current-conditions payload for a point."""
        body = {"location": {"latitude": point.lat, "longitude": point.lng}}
        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self.api_key,
        }
        return self._request_json("POST", self.url, json=body, headers=headers)
