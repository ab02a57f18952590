"""
Application settings.

Values come from environment variables prefixed ``BUGWATCH_`` (or a ``.env``
file). The weather API key is also accepted as plain ``WEATHER_API_KEY``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

WeatherSource = Literal["auto", "live", "mock"]


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BUGWATCH_",
        env_file=".env",
        populate_by_name=True,
        extra="ignore",
    )

    app_name: str = "bugwatch"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Default location for the CLI and the refresh flow (Portland, OR)
    lat: float = Field(default=45.5, ge=-90, le=90)
    lon: float = Field(default=-122.6, ge=-180, le=180)

    api_host: str = "127.0.0.1"
    api_port: int = 8000

    data_dir: Path = Path("data")

    # "mock" never touches the network; "auto" tries OpenWeatherMap and falls
    # back to mock data; "live" requires a key and never falls back.
    weather_source: WeatherSource = "auto"
    weather_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("BUGWATCH_WEATHER_API_KEY", "WEATHER_API_KEY"),
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
