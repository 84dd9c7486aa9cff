"""FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import green_route, health
from .config import Settings, settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    configure_logging(app_settings.log_level)

    app = FastAPI(title=app_settings.app_name, root_path="")
    app.state.settings = app_settings
    if app_settings.frontend_allowed_origins:
        allow_all = "*" in app_settings.frontend_allowed_origins
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(app_settings.frontend_allowed_origins),
            # browsers reject credentialed requests against a wildcard origin
            allow_credentials=not allow_all,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Root endpoint for diagnostics
    @app.get("/")
    def root():
        return {
            "service": app_settings.app_name,
            "status": "running",
            "api_prefix": app_settings.api_prefix,
            "health": f"{app_settings.api_prefix}/health",
            "green_route": f"{app_settings.api_prefix}/get-green-route",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=app_settings.api_prefix)
    app.include_router(green_route.router, prefix=app_settings.api_prefix)
    return app


app = create_app()
