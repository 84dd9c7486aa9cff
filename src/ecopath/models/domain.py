"""Domain models for candidate routes and their evaluation."""

from dataclasses import dataclass
from typing import List, Optional

DEFAULT_AQI = 100
DEFAULT_SOLAR_INDEX = 30
UNKNOWN_SHADE = "Unknown"


@dataclass(frozen=True, slots=True)
class RoutePoint:
    """A single decoded coordinate on a route path."""

    lat: float
    lng: float


@dataclass(slots=True)
class CandidateRoute:
    """A walking route as returned by the routing provider, before evaluation."""

    distance_meters: int
    duration: Optional[str] = None
    encoded_path: Optional[str] = None


@dataclass(frozen=True, slots=True)
class EnvironmentalSignal:
    """Air quality and shade conditions observed at a route's sample point."""

    aqi: int = DEFAULT_AQI
    solar_index: int = DEFAULT_SOLAR_INDEX
    shade_label: str = UNKNOWN_SHADE


@dataclass(slots=True)
class EvaluatedRoute:
    route_index: int
    distance_meters: int
    duration: Optional[str]
    aqi: int
    solar_index: int
    shade_label: str
    green_index: float
    encoded_path: Optional[str] = None


@dataclass(frozen=True, slots=True)
class AqiSummary:
    """Air quality statistics across every evaluated route of a request."""

    avg_aqi: float
    min_aqi: int
    max_aqi: int


@dataclass(slots=True)
class SelectionResult:
    selected_route: EvaluatedRoute
    all_routes: List[EvaluatedRoute]
    avg_aqi: float
    min_aqi: int
    max_aqi: int
    explanation: str
