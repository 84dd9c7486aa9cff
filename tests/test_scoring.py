import pytest

from ecopath.services.evaluation.scoring import (
    AQI_WEIGHT,
    DISTANCE_WEIGHT,
    SOLAR_WEIGHT,
    aqi_score,
    distance_score,
    green_index,
)


def test_weights_sum_to_one():
    assert AQI_WEIGHT + SOLAR_WEIGHT + DISTANCE_WEIGHT == pytest.approx(1.0)


@pytest.mark.parametrize(
    "aqi, expected",
    [(0, 100), (50, 100), (51, 80), (100, 80), (101, 60), (200, 60), (201, 40), (300, 40), (301, 20), (400, 20), (401, 5), (999, 5)],
)
def test_aqi_score_boundaries_resolve_to_lower_bucket(aqi, expected):
    assert aqi_score(aqi) == expected


@pytest.mark.parametrize(
    "distance, expected",
    [(0, 100), (2000, 100), (2001, 70), (5000, 70), (5001, 40), (10000, 40), (10001, 10)],
)
def test_distance_score_boundaries_resolve_to_lower_bucket(distance, expected):
    assert distance_score(distance) == expected


def test_scores_are_non_increasing():
    aqi_scores = [aqi_score(value) for value in range(0, 600, 5)]
    distance_scores = [distance_score(value) for value in range(0, 15000, 250)]

    assert all(a >= b for a, b in zip(aqi_scores, aqi_scores[1:]))
    assert all(a >= b for a, b in zip(distance_scores, distance_scores[1:]))


def test_green_index_worked_examples():
    assert green_index(1000, 40, 30) == pytest.approx(79.0)
    assert green_index(1200, 90, 40) == pytest.approx(70.0)
    assert green_index(900, 250, 50) == pytest.approx(49.0)


def test_green_index_stays_within_bounds():
    for distance in (0, 2000, 5000, 10000, 50000):
        for aqi in (0, 50, 100, 200, 300, 400, 500):
            for solar in (30, 40, 50):
                assert 0.0 <= green_index(distance, aqi, solar) <= 100.0
