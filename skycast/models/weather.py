"""OpenWeather data models."""

from dataclasses import dataclass

from skycast.models.common import EpochSeconds


@dataclass(frozen=True)
class CurrentWeather:
    city_name: str
    temperature: float
    temp_max: float
    temp_min: float
    humidity: int
    pressure: int
    wind_speed: float
    condition: str
    sunrise: EpochSeconds
    sunset: EpochSeconds
    timezone_offset: int  # seconds east of UTC


@dataclass(frozen=True)
class ForecastSample:
    dt: EpochSeconds
    temp_max: float
    temp_min: float


@dataclass(frozen=True)
class DailyRange:
    max_temp: float
    min_temp: float


@dataclass(frozen=True)
class CitySuggestion:
    name: str
    lat: float
    lon: float
    country: str
    state: str | None = None

    @property
    def label(self) -> str:
        if self.state:
            return f"{self.name}, {self.state}, {self.country}"
        return f"{self.name}, {self.country}"
