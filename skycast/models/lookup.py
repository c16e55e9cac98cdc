"""Lookup outcome models handed to the presentation layer."""

from dataclasses import dataclass, field
from enum import StrEnum

from skycast.models.common import EpochSeconds


class FetchError(StrEnum):
    NETWORK_ERROR = "network_error"
    CITY_NOT_FOUND = "city_not_found"
    FORECAST_UNAVAILABLE = "forecast_unavailable"  # non-fatal


@dataclass(frozen=True)
class WeatherView:
    temperature: float
    condition: str
    max_temp: float
    min_temp: float
    humidity: int
    wind_speed: float
    sunrise: EpochSeconds
    sunset: EpochSeconds
    pressure: int
    city_name: str
    timezone_offset: int
    day: str  # weekday name, city local
    date: str  # "dd Month yyyy", city local


@dataclass
class LookupResult:
    view: WeatherView | None = None
    error: FetchError | None = None
    notices: list[FetchError] = field(default_factory=list)
    suggested_city: str | None = None

    @property
    def ok(self) -> bool:
        return self.view is not None and self.error is None

    @classmethod
    def failed(
        cls, error: FetchError, suggested_city: str | None = None
    ) -> "LookupResult":
        return cls(error=error, suggested_city=suggested_city)
