"""Shared HTTP plumbing for Google platform API clients."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .errors import ProviderError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def _error_message(response: httpx.Response) -> str:
    """Extract the provider's error message from a failed response, if any."""
    try:
        payload = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return response.text[:200]


class GoogleApiClient:
    """Base class for the provider clients.

    Every call opens its own short-lived ``httpx.Client`` so clients can be used
    from worker threads. Failures are translated into ``error_class`` with the
    original exception chained; nothing is retried.
    """

    provider: str = "google"
    error_class: type[ProviderError] = ProviderError

    def __init__(self, api_key: str | None, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        if not api_key:
            raise ValueError(f"No API key configured for {self.provider}.")
        self.api_key = api_key
        self.timeout = timeout

    def _get_client(self) -> httpx.Client:
        return httpx.Client(timeout=httpx.Timeout(self.timeout, connect=10.0))

    def _fail(self, message: str) -> ProviderError:
        return self.error_class(self.provider, message)

    def _request_json(self, method: str, url: str, **kwargs: Any) -> dict:
        client = self._get_client()
        try:
            logger.debug(f"{self.provider}: {method} {url}")
            response = client.request(method, url, **kwargs)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            raise self._fail(
                f"{self.provider} returned HTTP {exc.response.status_code}: {_error_message(exc.response)}"
            ) from exc
        except httpx.HTTPError as exc:
            raise self._fail(f"{self.provider} request failed: {exc}") from exc
        except ValueError as exc:
            raise self._fail(f"{self.provider} returned a response that is not valid JSON") from exc
        finally:
            client.close()

        if not isinstance(data, dict):
            raise self._fail(f"{self.provider} returned an unexpected payload of type {type(data).__name__}")
        return data
