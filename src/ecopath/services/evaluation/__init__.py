"""Route evaluation and selection pipeline."""

from .errors import GREEN_ROUTE_FAILURE_MESSAGE, NoCandidateRoutesError
from .explanation import FALLBACK_EXPLANATION, ExplanationDelegate, ExplanationInput
from .scoring import aqi_score, distance_score, green_index
from .selection import select_best_route, summarize_aqi
from .service import GreenRouteEvaluator, build_evaluator, evaluate_route
from .signals import SignalCollector

__all__ = [
    "GREEN_ROUTE_FAILURE_MESSAGE",
    "FALLBACK_EXPLANATION",
    "NoCandidateRoutesError",
    "ExplanationDelegate",
    "ExplanationInput",
    "GreenRouteEvaluator",
    "SignalCollector",
    "aqi_score",
    "distance_score",
    "green_index",
    "select_best_route",
    "summarize_aqi",
    "build_evaluator",
    "evaluate_route",
]
