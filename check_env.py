#!/usr/bin/env python3
"""Helper script to check and create the .env file for provider API keys."""

from pathlib import Path
import os
import sys

ENV_TEMPLATE = """# Google Maps Platform key (Routes, Air Quality and Solar APIs). Required.
GOOGLE_MAPS_API_KEY=your-google-maps-key-here

# Gemini key for route explanations. Optional: a fixed sentence is used without it.
GEMINI_API_KEY=your-gemini-key-here

# Optional overrides
# ECOPATH_GEMINI_MODEL=gemini-1.5-flash
# ECOPATH_MAX_PARALLEL_EVALUATIONS=1
# ECOPATH_FRONTEND_ALLOWED_ORIGINS=http://localhost:5173,http://127.0.0.1:5173
# ECOPATH_LOG_LEVEL=INFO
"""

KEYS = ("GOOGLE_MAPS_API_KEY", "GEMINI_API_KEY")


def _mask(value: str) -> str:
    if len(value) > 12:
        return value[:6] + "..." + value[-4:]
    return "***"


def main() -> int:
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    print("=" * 60)
    print("EcoPath Environment Variables Checker")
    print("=" * 60)
    print()

    if not env_file.exists():
        print(f"❌ .env file NOT found at: {env_file}")
        env_file.write_text(ENV_TEMPLATE, encoding="utf-8")
        print(f"✅ Created template .env file at: {env_file}")
        print("⚠️  Please edit .env and add your API keys, then run this script again.")
        return 1

    print(f"✅ Found .env file at: {env_file}")
    print()

    for key in KEYS:
        value = os.getenv(key) or os.getenv(f"ECOPATH_{key}")
        if value:
            print(f"✅ {key} (from environment): {_mask(value)}")
        else:
            print(f"ℹ️  {key} not set in environment (may still come from .env)")
    print()

    print("Testing config loading...")
    sys.path.insert(0, str(project_root / "src"))
    try:
        from ecopath.config import Settings

        settings = Settings(_env_file=env_file)
    except Exception as e:
        print(f"❌ Error loading config: {e}")
        return 1

    ok = True
    if settings.google_maps_api_key:
        print(f"✅ Google Maps key loaded: {_mask(settings.google_maps_api_key)}")
    else:
        print("❌ Google Maps key is missing: every evaluation will fail")
        ok = False
    if settings.gemini_api_key:
        print(f"✅ Gemini key loaded: {_mask(settings.gemini_api_key)}")
    else:
        print("⚠️  Gemini key is missing: explanations will use the fallback sentence")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
