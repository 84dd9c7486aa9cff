"""Route selection and corridor-wide air quality statistics."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import AqiSummary, EvaluatedRoute
from .errors import NoCandidateRoutesError


def select_best_route(routes: Sequence[EvaluatedRoute]) -> EvaluatedRoute:
    """Return the route with the highest Green Index.

    A later route only replaces the current best when its index is strictly
    greater, so ties go to the earlier route.
    """
    if not routes:
        raise NoCandidateRoutesError()
    best = routes[0]
    for route in routes[1:]:
        if route.green_index > best.green_index:
            best = route
    return best


def summarize_aqi(routes: Sequence[EvaluatedRoute]) -> AqiSummary:
    """Mean, minimum and maximum AQI over every evaluated route."""
    if not routes:
        raise NoCandidateRoutesError()
    readings = [route.aqi for route in routes]
    return AqiSummary(
        avg_aqi=sum(readings) / len(readings),
        min_aqi=min(readings),
        max_aqi=max(readings),
    )
