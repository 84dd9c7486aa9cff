"""Geospatial helper functions."""

from __future__ import annotations

import logging

from ..models.domain import RoutePoint

logger = logging.getLogger(__name__)


def _decode_value(polyline: str, index: int) -> tuple[int, int]:
    """Decode one signed varint starting at ``index``; return (value, next_index)."""
    shift = 0
    result = 0
    while True:
        if index >= len(polyline):
            raise ValueError("Encoded polyline ends in the middle of a coordinate.")
        b = ord(polyline[index]) - 63
        if b < 0 or b > 63:
            raise ValueError(f"Invalid character {polyline[index]!r} in encoded polyline.")
        index += 1
        result |= (b & 0x1f) << shift
        shift += 5
        if b < 0x20:
            break
    value = ~(result >> 1) if (result & 1) else (result >> 1)
    return value, index


def decode_polyline(polyline: str) -> list[RoutePoint]:
    """Decode a Google encoded polyline into an ordered list of points.

    Uses the standard precision of 1e5. Raises ValueError when the string is
    truncated or contains characters outside the encoding alphabet.
    """
    points: list[RoutePoint] = []
    index = 0
    lat = 0
    lng = 0

    while index < len(polyline):
        dlat, index = _decode_value(polyline, index)
        dlng, index = _decode_value(polyline, index)
        lat += dlat
        lng += dlng
        points.append(RoutePoint(lat=lat / 1e5, lng=lng / 1e5))

    return points


def route_midpoint(encoded_path: str | None) -> RoutePoint | None:
    """Return the sample point of a route: the path point at index ``count // 2``.

    The midpoint is taken by point count, not arc length. For an even count the
    later of the two middle points is returned. Absent, empty or malformed paths
    have no sample point.
    """
    if not encoded_path:
        return None
    try:
        points = decode_polyline(encoded_path)
    except ValueError as exc:
        logger.warning(f"Ignoring malformed route polyline: {exc}")
        return None
    if not points:
        return None
    return points[len(points) // 2]
