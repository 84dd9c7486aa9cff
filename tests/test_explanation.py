from ecopath.models.domain import AqiSummary, EvaluatedRoute
from ecopath.services.evaluation.explanation import (
    FALLBACK_EXPLANATION,
    ExplanationDelegate,
    ExplanationInput,
)
from ecopath.services.providers.errors import TextGenerationProviderError

EXPECTED_FALLBACK = (
    "This route is recommended because it has cleaner air, a reasonable walking distance, "
    "and better shade for comfort."
)


class DummyGenerator:
    def __init__(self, text="Route 1 has the cleanest air and is only 1 km long.", error=None):
        self.text = text
        self.error = error
        self.prompts = []

    def generate_text(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.text


def _input() -> ExplanationInput:
    route = EvaluatedRoute(
        route_index=0,
        distance_meters=1000,
        duration="780s",
        aqi=40,
        solar_index=30,
        shade_label="Low Shade",
        green_index=79.0,
    )
    return ExplanationInput.from_selection(route, AqiSummary(avg_aqi=380 / 3, min_aqi=40, max_aqi=250))


def test_fallback_text_is_fixed():
    assert FALLBACK_EXPLANATION == EXPECTED_FALLBACK


def test_generated_text_is_returned_and_prompt_carries_summary():
    generator = DummyGenerator()

    text = ExplanationDelegate(generator).explain(_input())

    assert text == "Route 1 has the cleanest air and is only 1 km long."
    prompt = generator.prompts[0]
    assert "Distance: 1000 meters" in prompt
    assert "AQI: 40" in prompt
    assert "Shade: Low Shade" in prompt
    assert "Average AQI: 126.7" in prompt
    assert "Highest AQI: 250" in prompt


def test_provider_failure_uses_fallback():
    generator = DummyGenerator(error=TextGenerationProviderError("Gemini API", "HTTP 429"))

    assert ExplanationDelegate(generator).explain(_input()) == EXPECTED_FALLBACK


def test_unexpected_error_uses_fallback():
    generator = DummyGenerator(error=RuntimeError("socket closed"))

    assert ExplanationDelegate(generator).explain(_input()) == EXPECTED_FALLBACK


def test_blank_reply_uses_fallback():
    assert ExplanationDelegate(DummyGenerator(text="   ")).explain(_input()) == EXPECTED_FALLBACK


def test_missing_generator_uses_fallback():
    delegate = ExplanationDelegate(None)

    outcome = delegate.generate(_input())

    assert not outcome.ok
    assert delegate.explain(_input()) == EXPECTED_FALLBACK
