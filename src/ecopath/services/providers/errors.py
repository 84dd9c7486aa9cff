"""Errors raised by external provider clients."""

from __future__ import annotations


class ProviderError(Exception):
    """A call to an external provider failed or returned an unusable payload."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider


class RoutingProviderError(ProviderError):
    pass


class AirQualityProviderError(ProviderError):
    pass


class SolarProviderError(ProviderError):
    pass


class TextGenerationProviderError(ProviderError):
    pass
