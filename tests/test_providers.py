import json

import httpx
import pytest

from ecopath.models.domain import RoutePoint
from ecopath.services.providers import (
    AirQualityClient,
    AirQualityProviderError,
    GeminiClient,
    RoutesClient,
    RoutingProviderError,
    SolarClient,
    SolarProviderError,
    TextGenerationProviderError,
)
from ecopath.services.providers.routes_client import ROUTES_FIELD_MASK, parse_candidate_route

POINT = RoutePoint(lat=40.7, lng=-120.95)


def _use_transport(monkeypatch, client, handler):
    monkeypatch.setattr(client, "_get_client", lambda: httpx.Client(transport=httpx.MockTransport(handler)))


def test_compute_routes_sends_walking_request(monkeypatch):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["headers"] = request.headers
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "routes": [
                    {"distanceMeters": 1200, "duration": "900s", "polyline": {"encodedPolyline": "_p~iF~ps|U"}},
                    {"duration": "60s"},
                ]
            },
        )

    client = RoutesClient("maps-key")
    _use_transport(monkeypatch, client, handler)

    candidates = client.compute_routes("India Gate", "Connaught Place")

    assert seen["headers"]["X-Goog-Api-Key"] == "maps-key"
    assert seen["headers"]["X-Goog-FieldMask"] == ROUTES_FIELD_MASK
    assert seen["body"]["travelMode"] == "WALK"
    assert seen["body"]["computeAlternativeRoutes"] is True
    assert seen["body"]["origin"] == {"address": "India Gate"}
    assert [c.distance_meters for c in candidates] == [1200, 0]
    assert candidates[0].encoded_path == "_p~iF~ps|U"
    assert candidates[1].encoded_path is None
    assert candidates[1].duration == "60s"


def test_compute_routes_without_routes_is_empty(monkeypatch):
    client = RoutesClient("maps-key")
    _use_transport(monkeypatch, client, lambda request: httpx.Response(200, json={}))

    assert client.compute_routes("A", "B") == []


def test_compute_routes_http_error_is_wrapped(monkeypatch):
    client = RoutesClient("maps-key")
    _use_transport(
        monkeypatch,
        client,
        lambda request: httpx.Response(403, json={"error": {"code": 403, "message": "API key not valid."}}),
    )

    with pytest.raises(RoutingProviderError) as excinfo:
        client.compute_routes("A", "B")
    assert "403" in str(excinfo.value)
    assert "API key not valid." in str(excinfo.value)
    assert excinfo.value.provider == "Routes API"


def test_compute_routes_network_error_is_wrapped(monkeypatch):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = RoutesClient("maps-key")
    _use_transport(monkeypatch, client, handler)

    with pytest.raises(RoutingProviderError, match="connection refused"):
        client.compute_routes("A", "B")


@pytest.mark.parametrize(
    "raw, distance, duration, path",
    [
        ({"distanceMeters": "1500"}, 1500, None, None),
        ({"distanceMeters": -20, "duration": 90}, 0, None, None),
        ({"distanceMeters": "far", "polyline": "abc"}, 0, None, None),
        ({"polyline": {"encodedPolyline": ""}}, 0, None, None),
        ("not-a-route", 0, None, None),
    ],
)
def test_parse_candidate_route_tolerates_malformed_fields(raw, distance, duration, path):
    candidate = parse_candidate_route(raw)

    assert candidate.distance_meters == distance
    assert candidate.duration == duration
    assert candidate.encoded_path == path


def test_current_conditions_posts_location(monkeypatch):
    seen = {}

    def handler(request):
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"indexes": [{"code": "uaqi", "aqi": 57}]})

    client = AirQualityClient("maps-key")
    _use_transport(monkeypatch, client, handler)

    payload = client.current_conditions(POINT)

    assert seen["body"] == {"location": {"latitude": 40.7, "longitude": -120.95}}
    assert payload["indexes"][0]["aqi"] == 57


def test_current_conditions_non_json_is_wrapped(monkeypatch):
    client = AirQualityClient("maps-key")
    _use_transport(monkeypatch, client, lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(AirQualityProviderError, match="not valid JSON"):
        client.current_conditions(POINT)


def test_find_closest_building_sends_query_params(monkeypatch):
    seen = {}

    def handler(request):
        seen["params"] = request.url.params
        return httpx.Response(200, json={"solarPotential": {"wholeRoofStats": {"yearlySunlightHours": 1420.5}}})

    client = SolarClient("maps-key")
    _use_transport(monkeypatch, client, handler)

    payload = client.find_closest_building(POINT)

    assert seen["params"]["location.latitude"] == "40.7"
    assert seen["params"]["location.longitude"] == "-120.95"
    assert seen["params"]["key"] == "maps-key"
    assert payload["solarPotential"]["wholeRoofStats"]["yearlySunlightHours"] == 1420.5


def test_find_closest_building_not_found_is_wrapped(monkeypatch):
    client = SolarClient("maps-key")
    _use_transport(
        monkeypatch,
        client,
        lambda request: httpx.Response(404, json={"error": {"message": "Requested entity was not found."}}),
    )

    with pytest.raises(SolarProviderError, match="404"):
        client.find_closest_building(POINT)


def test_generate_text_joins_candidate_parts(monkeypatch):
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["headers"] = request.headers
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={"candidates": [{"content": {"parts": [{"text": "Cleaner air. "}, {"text": "Short walk."}]}}]},
        )

    client = GeminiClient("gemini-key", model="gemini-1.5-flash")
    _use_transport(monkeypatch, client, handler)

    text = client.generate_text("Why this route?")

    assert text == "Cleaner air. Short walk."
    assert seen["url"].endswith("/models/gemini-1.5-flash:generateContent")
    assert seen["headers"]["x-goog-api-key"] == "gemini-key"
    assert seen["body"] == {"contents": [{"parts": [{"text": "Why this route?"}]}]}


def test_generate_text_without_candidates_is_wrapped(monkeypatch):
    client = GeminiClient("gemini-key")
    _use_transport(monkeypatch, client, lambda request: httpx.Response(200, json={"candidates": []}))

    with pytest.raises(TextGenerationProviderError):
        client.generate_text("Why this route?")


@pytest.mark.parametrize("client_class", [RoutesClient, AirQualityClient, SolarClient, GeminiClient])
def test_clients_require_api_key(client_class):
    with pytest.raises(ValueError, match="No API key"):
        client_class(None)
