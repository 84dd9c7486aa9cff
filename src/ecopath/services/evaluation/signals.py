"""Environmental signal collection for route sample points."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from ...models.domain import (
    DEFAULT_AQI,
    DEFAULT_SOLAR_INDEX,
    UNKNOWN_SHADE,
    EnvironmentalSignal,
    RoutePoint,
)
from .outcome import Outcome

DEFAULT_SUNLIGHT_HOURS = 2000

logger = logging.getLogger(__name__)


class AirQualityProvider(Protocol):
    def current_conditions(self, point: RoutePoint) -> dict: ...


class SolarProvider(Protocol):
    def find_closest_building(self, point: RoutePoint) -> dict: ...


def solar_index_from_sunlight_hours(hours: float) -> int:
    """Fewer yearly sunlight hours means more shade and a higher index."""
    if hours < 1500:
        return 50
    if hours < 2000:
        return 40
    return 30


def shade_label_for(solar_index: int) -> str:
    if solar_index >= 45:
        return "High Shade"
    if solar_index >= 35:
        return "Moderate Shade"
    return "Low Shade"


def aqi_from_conditions(payload: dict) -> int:
    """Take the first reported index value, defaulting when none is present."""
    indexes = payload.get("indexes")
    if not isinstance(indexes, list) or not indexes or not isinstance(indexes[0], dict):
        return DEFAULT_AQI
    aqi = indexes[0].get("aqi")
    if aqi is None or isinstance(aqi, bool):
        return DEFAULT_AQI
    try:
        return max(int(aqi), 0)
    except (TypeError, ValueError):
        return DEFAULT_AQI


def sunlight_hours_from_insights(payload: dict) -> float:
    """Read ``solarPotential.wholeRoofStats.yearlySunlightHours``.

    Missing keys give the default; a value that is present but not numeric is
    a malformed payload and raises ValueError.
    """
    stats: Any = (payload.get("solarPotential") or {}).get("wholeRoofStats") or {}
    if not isinstance(stats, dict):
        raise ValueError("wholeRoofStats is not an object")
    hours = stats.get("yearlySunlightHours")
    if hours is None:
        return DEFAULT_SUNLIGHT_HOURS
    if isinstance(hours, bool):
        raise ValueError(f"yearlySunlightHours is not numeric: {hours!r}")
    return float(hours)


class SignalCollector:
    """Fetch air quality and shade for a route sample point.

    The air quality lookup propagates provider failures. The solar lookup is
    fault tolerant and falls back to the default index with an "Unknown" shade.
    """

    def __init__(self, air_quality: AirQualityProvider, solar: SolarProvider) -> None:
        self.air_quality = air_quality
        self.solar = solar

    def fetch_aqi(self, point: RoutePoint) -> int:
        return aqi_from_conditions(self.air_quality.current_conditions(point))

    def lookup_shade(self, point: RoutePoint) -> Outcome[EnvironmentalSignal]:
        try:
            payload = self.solar.find_closest_building(point)
            hours = sunlight_hours_from_insights(payload)
        except Exception as exc:
            return Outcome.failure(exc)
        solar_index = solar_index_from_sunlight_hours(hours)
        return Outcome.success(
            EnvironmentalSignal(solar_index=solar_index, shade_label=shade_label_for(solar_index))
        )

    def collect(self, point: RoutePoint) -> EnvironmentalSignal:
        aqi = self.fetch_aqi(point)

        shade = self.lookup_shade(point)
        if not shade.ok:
            logger.warning(f"Solar lookup failed at ({point.lat}, {point.lng}), using default shade: {shade.error}")
        signal = shade.value_or(EnvironmentalSignal(solar_index=DEFAULT_SOLAR_INDEX, shade_label=UNKNOWN_SHADE))
        return EnvironmentalSignal(aqi=aqi, solar_index=signal.solar_index, shade_label=signal.shade_label)
