"""External provider clients."""

from .air_quality_client import AirQualityClient
from .errors import (
    AirQualityProviderError,
    ProviderError,
    RoutingProviderError,
    SolarProviderError,
    TextGenerationProviderError,
)
from .gemini_client import GeminiClient
from .routes_client import RoutesClient
from .solar_client import SolarClient

__all__ = [
    "AirQualityClient",
    "GeminiClient",
    "RoutesClient",
    "SolarClient",
    "ProviderError",
    "RoutingProviderError",
    "AirQualityProviderError",
    "SolarProviderError",
    "TextGenerationProviderError",
]
