"""Errors raised by the route evaluation pipeline."""

from __future__ import annotations

GREEN_ROUTE_FAILURE_MESSAGE = "Failed to calculate green corridor"


class NoCandidateRoutesError(ValueError):
    """The routing provider returned no route to choose from."""

    def __init__(self, message: str = "No candidate routes were returned for this origin and destination.") -> None:
        super().__init__(message)
