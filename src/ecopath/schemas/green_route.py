"""Green route request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class GreenRouteRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    origin: str = Field(..., min_length=1, description="Free-form start address.")
    destination: str = Field(..., min_length=1, description="Free-form end address.")


class EvaluatedRouteModel(BaseModel):
    """One evaluated candidate; keys are camelCase for the map client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    route_index: int
    distance_meters: int
    duration: Optional[str]
    aqi: int
    solar_index: int
    shade_label: str
    green_index: float
    encoded_polyline: Optional[str] = None


class CorridorAqiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    avg_aqi: float
    min_aqi: int
    max_aqi: int


class GreenRouteResponse(BaseModel):
    message: str = "Green corridor selected"
    selected_route: EvaluatedRouteModel
    alternative_routes: List[EvaluatedRouteModel]
    corridor_aqi: CorridorAqiModel
    explanation: str


class GreenRouteErrorResponse(BaseModel):
    error: str
    details: str
