"""Green route endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from ...config import Settings
from ...models.domain import EvaluatedRoute, SelectionResult
from ...schemas.green_route import (
    CorridorAqiModel,
    EvaluatedRouteModel,
    GreenRouteErrorResponse,
    GreenRouteRequest,
    GreenRouteResponse,
)
from ...services.evaluation import GREEN_ROUTE_FAILURE_MESSAGE
from ...services.evaluation.service import build_evaluator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["green-route"])


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _route_model(route: EvaluatedRoute) -> EvaluatedRouteModel:
    return EvaluatedRouteModel(
        route_index=route.route_index,
        distance_meters=route.distance_meters,
        duration=route.duration,
        aqi=route.aqi,
        solar_index=route.solar_index,
        shade_label=route.shade_label,
        green_index=route.green_index,
        encoded_polyline=route.encoded_path,
    )


def to_response(result: SelectionResult) -> GreenRouteResponse:
    return GreenRouteResponse(
        selected_route=_route_model(result.selected_route),
        alternative_routes=[_route_model(route) for route in result.all_routes],
        corridor_aqi=CorridorAqiModel(avg_aqi=result.avg_aqi, min_aqi=result.min_aqi, max_aqi=result.max_aqi),
        explanation=result.explanation,
    )


@router.post(
    "/get-green-route",
    response_model=GreenRouteResponse,
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": GreenRouteErrorResponse}},
)
def get_green_route(payload: GreenRouteRequest, settings: Settings = Depends(get_settings)):
    try:
        evaluator = build_evaluator(settings)
        result = evaluator.evaluate(payload.origin, payload.destination)
    except Exception as exc:
        logger.exception(f"Green route evaluation failed for {payload.origin!r} -> {payload.destination!r}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=GreenRouteErrorResponse(error=GREEN_ROUTE_FAILURE_MESSAGE, details=str(exc)).model_dump(),
        )
    return to_response(result)
