#!/usr/bin/env python3
"""Diagnostic script that calls each external provider once."""

import sys
from pathlib import Path

project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))

from ecopath.config import settings
from ecopath.services.geospatial import route_midpoint
from ecopath.services.providers import (
    AirQualityClient,
    GeminiClient,
    ProviderError,
    RoutesClient,
    SolarClient,
)

ORIGIN = "India Gate, New Delhi"
DESTINATION = "Connaught Place, New Delhi"


def main() -> int:
    print("=" * 60)
    print("Provider Connection Test")
    print("=" * 60)
    print()

    print("1. Checking configuration...")
    if not settings.google_maps_api_key:
        print("   [ERROR] GOOGLE_MAPS_API_KEY is not configured")
        return 1
    print("   [OK] Google Maps key present")
    print()

    print("2. Testing Routes API...")
    try:
        candidates = RoutesClient.from_settings(settings).compute_routes(ORIGIN, DESTINATION)
    except ProviderError as e:
        print(f"   [ERROR] {e}")
        return 1
    print(f"   [OK] {len(candidates)} candidate route(s)")
    point = next((p for p in (route_midpoint(c.encoded_path) for c in candidates) if p), None)
    if point is None:
        print("   [ERROR] No candidate has a usable polyline")
        return 1
    print(f"   [OK] Sample point: {point.lat:.5f}, {point.lng:.5f}")
    print()

    print("3. Testing Air Quality API...")
    try:
        conditions = AirQualityClient.from_settings(settings).current_conditions(point)
        print(f"   [OK] Indexes: {conditions.get('indexes', [])[:1]}")
    except ProviderError as e:
        print(f"   [ERROR] {e}")
        return 1
    print()

    print("4. Testing Solar API (failures are tolerated during evaluation)...")
    try:
        insights = SolarClient.from_settings(settings).find_closest_building(point)
        stats = (insights.get("solarPotential") or {}).get("wholeRoofStats") or {}
        print(f"   [OK] yearlySunlightHours: {stats.get('yearlySunlightHours')}")
    except ProviderError as e:
        print(f"   [WARN] {e}")
    print()

    print("5. Testing Gemini API (failures are tolerated during evaluation)...")
    if not settings.gemini_api_key:
        print("   [WARN] GEMINI_API_KEY not configured")
    else:
        try:
            text = GeminiClient.from_settings(settings).generate_text("Reply with the single word: ok")
            print(f"   [OK] {text.strip()[:60]}")
        except ProviderError as e:
            print(f"   [WARN] {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
