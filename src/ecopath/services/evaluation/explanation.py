"""Natural-language justification for the selected route."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from ...models.domain import AqiSummary, EvaluatedRoute
from ..providers.errors import TextGenerationProviderError
from .outcome import Outcome

FALLBACK_EXPLANATION = (
    "This route is recommended because it has cleaner air, "
    "a reasonable walking distance, and better shade for comfort."
)

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    def generate_text(self, prompt: str) -> str: ...


@dataclass(frozen=True, slots=True)
class ExplanationInput:
    distance_meters: int
    aqi: int
    green_index: float
    shade_label: str
    avg_aqi: float
    min_aqi: int
    max_aqi: int

    @classmethod
    def from_selection(cls, route: EvaluatedRoute, summary: AqiSummary) -> "ExplanationInput":
        return cls(
            distance_meters=route.distance_meters,
            aqi=route.aqi,
            green_index=route.green_index,
            shade_label=route.shade_label,
            avg_aqi=summary.avg_aqi,
            min_aqi=summary.min_aqi,
            max_aqi=summary.max_aqi,
        )


def build_prompt(data: ExplanationInput) -> str:
    return (
        "You are explaining to a normal person why ONE walking route was chosen over others.\n\n"
        "Selected route:\n"
        f"- Distance: {data.distance_meters} meters\n"
        f"- AQI: {data.aqi}\n"
        f"- Shade: {data.shade_label}\n"
        f"- Green Index: {data.green_index:.1f} out of 100\n\n"
        "Across all candidate routes:\n"
        f"- Average AQI: {data.avg_aqi:.1f}\n"
        f"- Lowest AQI: {data.min_aqi}\n"
        f"- Highest AQI: {data.max_aqi}\n\n"
        "Explain clearly WHY this route is healthier.\n"
        "Focus mainly on air quality.\n"
        "Mention distance.\n"
        "Use max 2 simple sentences.\n"
    )


class ExplanationDelegate:
    """Ask the text generator for an explanation, falling back to a fixed sentence.

    A missing generator (no API key configured) behaves like a failed call.
    """

    def __init__(self, generator: Optional[TextGenerator] = None) -> None:
        self.generator = generator

    def generate(self, data: ExplanationInput) -> Outcome[str]:
        if self.generator is None:
            return Outcome.failure(TextGenerationProviderError("text generation", "No text generator configured"))
        try:
            text = self.generator.generate_text(build_prompt(data))
        except Exception as exc:
            return Outcome.failure(exc)
        if not isinstance(text, str) or not text.strip():
            return Outcome.failure(TextGenerationProviderError("text generation", "Empty explanation returned"))
        return Outcome.success(text.strip())

    def explain(self, data: ExplanationInput) -> str:
        outcome = self.generate(data)
        if not outcome.ok:
            logger.warning(f"Explanation generation failed, using fallback text: {outcome.error}")
        return outcome.value_or(FALLBACK_EXPLANATION)
