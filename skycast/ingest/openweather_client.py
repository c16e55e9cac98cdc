"""OpenWeather current-weather, forecast and geocoding API client."""

import logging
from typing import Any

import httpx

from skycast.config.defaults import GEOCODING_BASE_URL, WEATHER_BASE_URL
from skycast.config.schema import ProviderConfig

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    """Async client for the three OpenWeather endpoints used by a lookup.

    Non-success responses, empty bodies and invalid JSON come back as None.
    Transport failures surface as httpx.RequestError.
    """

    def __init__(
        self,
        api_key: str,
        weather_base_url: str = WEATHER_BASE_URL,
        geocoding_base_url: str = GEOCODING_BASE_URL,
        units: str = "metric",
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.weather_base_url = weather_base_url.rstrip("/")
        self.geocoding_base_url = geocoding_base_url.rstrip("/")
        self.units = units
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "OpenWeatherClient":
        return cls(
            api_key=config.api_key,
            weather_base_url=config.weather_base_url,
            geocoding_base_url=config.geocoding_base_url,
            units=config.units.value,
            timeout=config.timeout_seconds,
        )

    async def get_current_weather(self, city: str) -> dict | None:
        url = f"{self.weather_base_url}/weather"
        params = {"q": city, "appid": self.api_key, "units": self.units}
        return await self._get_json(url, params)

    async def get_forecast(self, city: str) -> dict | None:
        """Fetch the 5-day / 3-hour forecast for a city."""
        url = f"{self.weather_base_url}/forecast"
        params = {"q": city, "appid": self.api_key, "units": self.units}
        return await self._get_json(url, params)

    async def get_city_suggestions(self, query: str, limit: int = 5) -> list | None:
        url = f"{self.geocoding_base_url}/direct"
        params = {"q": query, "limit": limit, "appid": self.api_key}
        data = await self._get_json(url, params)
        if data is not None and not isinstance(data, list):
            logger.warning("Geocoder returned non-list payload for q=%s", query)
            return None
        return data

    async def _get_json(self, url: str, params: dict[str, Any]) -> Any | None:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(url, params=params)

        if not resp.is_success:
            logger.warning(
                "OpenWeather %s returned %d for q=%s",
                url, resp.status_code, params.get("q"),
            )
            return None
        try:
            data = resp.json()
        except ValueError:
            logger.warning("OpenWeather %s returned invalid JSON", url)
            return None
        if not data:
            logger.warning("OpenWeather %s returned an empty body", url)
            return None
        return data
