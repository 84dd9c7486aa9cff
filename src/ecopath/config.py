"""Application configuration and settings management."""

from typing import Annotated, Any, Optional

import json
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ECOPATH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    app_name: str = "EcoPath Green Route API"
    api_prefix: str = ""
    log_level: str = Field(default="INFO", description="Root log level applied by create_app.")

    google_maps_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("ECOPATH_GOOGLE_MAPS_API_KEY", "GOOGLE_MAPS_API_KEY"),
        description="Key used for the Routes, Air Quality and Solar APIs.",
    )
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("ECOPATH_GEMINI_API_KEY", "GEMINI_API_KEY"),
        description="Key for the Gemini text generation API. Explanations fall back to a fixed sentence without it.",
    )
    gemini_model: str = Field(default="gemini-1.5-flash")

    routes_api_url: str = Field(default="https://routes.googleapis.com/directions/v2:computeRoutes")
    air_quality_api_url: str = Field(default="https://airquality.googleapis.com/v1/currentConditions:lookup")
    solar_api_url: str = Field(default="https://solar.googleapis.com/v1/buildingInsights:findClosest")
    gemini_api_base_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta")

    travel_mode: str = Field(default="WALK", description="Routes API travel mode used for candidates.")
    request_timeout_seconds: float = Field(default=30.0, gt=0.0)
    max_parallel_evaluations: int = Field(
        default=1,
        ge=1,
        description="Upper bound on routes evaluated concurrently within one request (1 = sequential).",
    )
    frontend_allowed_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=("*",),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: Any) -> Any:
        """Accept origins as a JSON array or a comma-separated string, trailing slashes dropped."""
        if isinstance(value, str):
            text = value.strip()
            items = json.loads(text) if text.startswith("[") else text.split(",")
            return tuple(str(item).strip().rstrip("/") for item in items if str(item).strip())
        return value


settings = Settings()
