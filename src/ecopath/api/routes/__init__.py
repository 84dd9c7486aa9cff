"""Route group exports."""

from . import green_route, health

__all__ = ["green_route", "health"]
