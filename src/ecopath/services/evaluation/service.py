"""Green route evaluation orchestration service."""

from __future__ import annotations

import logging
import time
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Optional, Protocol, Sequence

from ...config import Settings
from ...models.domain import CandidateRoute, EnvironmentalSignal, EvaluatedRoute, SelectionResult
from ..geospatial import route_midpoint
from ..providers import AirQualityClient, GeminiClient, RoutesClient, SolarClient
from .errors import NoCandidateRoutesError
from .explanation import ExplanationDelegate, ExplanationInput
from .scoring import green_index
from .selection import select_best_route, summarize_aqi
from .signals import SignalCollector

logger = logging.getLogger(__name__)


class RouteProvider(Protocol):
    def compute_routes(self, origin: str, destination: str) -> list[CandidateRoute]: ...


def evaluate_route(index: int, candidate: CandidateRoute, collector: SignalCollector) -> EvaluatedRoute:
    """Score a single candidate. Routes without a sample point keep the default signal."""
    point = route_midpoint(candidate.encoded_path)
    signal = collector.collect(point) if point is not None else EnvironmentalSignal()

    return EvaluatedRoute(
        route_index=index,
        distance_meters=candidate.distance_meters,
        duration=candidate.duration,
        aqi=signal.aqi,
        solar_index=signal.solar_index,
        shade_label=signal.shade_label,
        green_index=green_index(candidate.distance_meters, signal.aqi, signal.solar_index),
        encoded_path=candidate.encoded_path,
    )


class GreenRouteEvaluator:
    """Turn an origin/destination pair into a selected route with an explanation."""

    def __init__(
        self,
        routes: RouteProvider,
        collector: SignalCollector,
        explainer: ExplanationDelegate,
        max_parallel_evaluations: int = 1,
    ) -> None:
        if max_parallel_evaluations < 1:
            raise ValueError("max_parallel_evaluations must be >= 1")
        self.routes = routes
        self.collector = collector
        self.explainer = explainer
        self.max_parallel_evaluations = max_parallel_evaluations

    def evaluate_candidates(self, candidates: Sequence[CandidateRoute]) -> list[EvaluatedRoute]:
        """Evaluate every candidate, returning records in input order.

        With more than one worker the per-route lookups run concurrently; results
        are still joined by position. The first failure is re-raised and queued
        work is cancelled, so no partial list is ever returned.
        """
        workers = min(self.max_parallel_evaluations, len(candidates))
        if workers <= 1:
            return [evaluate_route(index, candidate, self.collector) for index, candidate in enumerate(candidates)]

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(evaluate_route, index, candidate, self.collector)
                for index, candidate in enumerate(candidates)
            ]
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)
            failed = next((future for future in futures if future in done and future.exception() is not None), None)
            if failed is not None:
                for future in pending:
                    future.cancel()
                raise failed.exception()
            return [future.result() for future in futures]

    def select(self, evaluated: Sequence[EvaluatedRoute]) -> SelectionResult:
        best = select_best_route(evaluated)
        summary = summarize_aqi(evaluated)
        explanation = self.explainer.explain(ExplanationInput.from_selection(best, summary))
        return SelectionResult(
            selected_route=best,
            all_routes=list(evaluated),
            avg_aqi=summary.avg_aqi,
            min_aqi=summary.min_aqi,
            max_aqi=summary.max_aqi,
            explanation=explanation,
        )

    def evaluate(self, origin: str, destination: str) -> SelectionResult:
        start_time = time.time()
        candidates = self.routes.compute_routes(origin, destination)
        if not candidates:
            raise NoCandidateRoutesError()

        evaluated = self.evaluate_candidates(candidates)
        result = self.select(evaluated)

        elapsed = time.time() - start_time
        logger.info(
            f"Evaluated {len(evaluated)} route(s) in {elapsed:.2f}s: selected route {result.selected_route.route_index} "
            f"(green index {result.selected_route.green_index:.1f}, AQI {result.selected_route.aqi}, "
            f"corridor AQI {result.min_aqi}-{result.max_aqi})"
        )
        return result


def build_evaluator(settings: Settings) -> GreenRouteEvaluator:
    """Wire provider clients from explicit settings.

    Raises ValueError when the Google Maps key is missing. A missing Gemini key
    only disables generated explanations.
    """
    collector = SignalCollector(
        air_quality=AirQualityClient.from_settings(settings),
        solar=SolarClient.from_settings(settings),
    )
    generator: Optional[GeminiClient] = None
    if settings.gemini_api_key:
        generator = GeminiClient.from_settings(settings)
    else:
        logger.info("GEMINI_API_KEY not configured; explanations will use the fallback text")

    return GreenRouteEvaluator(
        routes=RoutesClient.from_settings(settings),
        collector=collector,
        explainer=ExplanationDelegate(generator),
        max_parallel_evaluations=settings.max_parallel_evaluations,
    )
