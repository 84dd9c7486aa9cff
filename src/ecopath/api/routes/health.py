"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "EcoPath backend is running"}


@router.get("/health/providers", status_code=status.HTTP_200_OK)
def health_providers(request: Request) -> dict:
    """Report which provider credentials are configured, without calling them."""
    settings = request.app.state.settings
    maps_configured = bool(settings.google_maps_api_key)
    return {
        "routes": {"configured": maps_configured, "fatal_without": True},
        "air_quality": {"configured": maps_configured, "fatal_without": True},
        "solar": {"configured": maps_configured, "fatal_without": False},
        "text_generation": {
            "configured": bool(settings.gemini_api_key),
            "fatal_without": False,
            "model": settings.gemini_model,
        },
    }
