"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

from skycast.config.defaults import (
    DEFAULT_CITY,
    GEOCODING_BASE_URL,
    WEATHER_BASE_URL,
)


class Units(StrEnum):
    # Output labels and the daily-range margins assume Celsius and m/s.
    METRIC = "metric"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    weather_base_url: str = WEATHER_BASE_URL
    geocoding_base_url: str = GEOCODING_BASE_URL
    units: Units = Units.METRIC
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class SearchConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_city: str = Field(default=DEFAULT_CITY, min_length=1)
    suggestion_limit: int = Field(default=5, ge=1, le=5)
    min_suggestion_chars: int = Field(default=2, ge=1)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    search: SearchConfig = SearchConfig()
