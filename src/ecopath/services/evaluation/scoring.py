"""Green Index scoring.

All functions here are pure. Bucket boundaries are inclusive on the lower
side: an AQI of exactly 50 or a distance of exactly 2000 m lands in the better
bucket.
"""

from __future__ import annotations

AQI_WEIGHT = 0.6
SOLAR_WEIGHT = 0.3
DISTANCE_WEIGHT = 0.1

# (upper bound inclusive, score)
AQI_BUCKETS: tuple[tuple[int, int], ...] = (
    (50, 100),  # Good
    (100, 80),  # Satisfactory
    (200, 60),  # Moderate
    (300, 40),  # Poor
    (400, 20),  # Very poor
)
AQI_SEVERE_SCORE = 5

DISTANCE_BUCKETS: tuple[tuple[int, int], ...] = (
    (2000, 100),
    (5000, 70),
    (10000, 40),
)
DISTANCE_FAR_SCORE = 10


def aqi_score(aqi: float) -> int:
    """Map an AQI reading to a 0-100 score, higher meaning cleaner air."""
    for upper, score in AQI_BUCKETS:
        if aqi <= upper:
            return score
    return AQI_SEVERE_SCORE


def distance_score(distance_meters: float) -> int:
    """Map a walking distance to a 0-100 score, higher meaning shorter."""
    for upper, score in DISTANCE_BUCKETS:
        if distance_meters <= upper:
            return score
    return DISTANCE_FAR_SCORE


def green_index(distance_meters: float, aqi: float, solar_index: float) -> float:
    """Weighted 0-100 composite of air quality, shade and distance.

    ``solar_index`` is already on a 0-100 scale and is used as is.
    """
    solar = max(0.0, min(100.0, float(solar_index)))
    return (
        AQI_WEIGHT * aqi_score(aqi)
        + SOLAR_WEIGHT * solar
        + DISTANCE_WEIGHT * distance_score(distance_meters)
    )
