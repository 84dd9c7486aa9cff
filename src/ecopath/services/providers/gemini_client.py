"""HTTP client for the Gemini ``generateContent`` endpoint."""

from __future__ import annotations

from ...config import Settings
from .base import DEFAULT_TIMEOUT_SECONDS, GoogleApiClient
from .errors import TextGenerationProviderError

DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"


class GeminiClient(GoogleApiClient):
    provider = "Gemini API"
    error_class = TextGenerationProviderError

    def __init__(
        self,
        api_key: str | None,
        model: str = DEFAULT_GEMINI_MODEL,
        base_url: str = DEFAULT_GEMINI_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        super().__init__(api_key, timeout)
        self.model = model
        self.base_url = base_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClient":
        return cls(
            settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_api_base_url,
            timeout=settings.request_timeout_seconds,
        )

    def generate_text(self, prompt: str) -> str:
        """Send a single-turn prompt and return the first candidate's text."""
        url = f"{self.base_url}/models/{self.model}:generateContent"
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        data = self._request_json("POST", url, json=payload, headers=headers)

        try:
            parts = data["candidates"][0]["content"]["parts"]
            text = "".join(part.get("text", "") for part in parts)
        except (KeyError, IndexError, TypeError, AttributeError) as exc:
            raise self._fail("Gemini response has no candidate text (possibly blocked)") from exc
        return text
