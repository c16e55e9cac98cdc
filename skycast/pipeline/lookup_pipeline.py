"""Lookup pipeline: current weather -> forecast -> daily range -> view.

The forecast request is only issued once the current-weather request has
resolved the city, so an invalid query costs a single call.
"""

import logging
from collections.abc import Sequence

import httpx

from skycast.aggregate.daily_range import compute_daily_range
from skycast.ingest.decoders import (
    PayloadError,
    decode_current_weather,
    decode_forecast,
)
from skycast.ingest.openweather_client import OpenWeatherClient
from skycast.models.common import EpochSeconds, utc_now_epoch
from skycast.models.lookup import FetchError, LookupResult, WeatherView
from skycast.models.weather import CitySuggestion, CurrentWeather, DailyRange
from skycast.reporting.formatters import format_date, format_day

logger = logging.getLogger(__name__)


class NetworkFailure(Exception):
    """Transport-level failure at any stage of a lookup."""


async def resolve_weather(
    client: OpenWeatherClient,
    city_query: str,
    suggestions: Sequence[CitySuggestion] = (),
    now: EpochSeconds | None = None,
) -> LookupResult:
    """Resolve a city query into a WeatherView or a FetchError.

    If the current-weather call finds nothing and suggestions are available,
    the first suggestion is tried once in place of the query.
    """
    if now is None:
        now = utc_now_epoch()

    city = city_query
    suggested: str | None = None
    try:
        current = await _fetch_current(client, city)
        if current is None and suggestions:
            suggested = suggestions[0].name
            logger.info("No weather for %r, retrying with suggestion %r", city, suggested)
            city = suggested
            current = await _fetch_current(client, city)
        if current is None:
            logger.info("City not found: %r", city)
            return LookupResult.failed(FetchError.CITY_NOT_FOUND, suggested)

        daily = await _fetch_daily_range(client, city, current, now)
    except NetworkFailure:
        return LookupResult.failed(FetchError.NETWORK_ERROR, suggested)

    notices: list[FetchError] = []
    if daily is None:
        notices.append(FetchError.FORECAST_UNAVAILABLE)
        daily = DailyRange(max_temp=current.temp_max, min_temp=current.temp_min)

    return LookupResult(
        view=_build_view(current, city, daily, now),
        notices=notices,
        suggested_city=suggested,
    )


async def _fetch_current(client: OpenWeatherClient, city: str) -> CurrentWeather | None:
    try:
        raw = await client.get_current_weather(city)
    except httpx.RequestError as e:
        logger.error("Current weather request failed for %r: %s", city, e)
        raise NetworkFailure(str(e)) from e
    if raw is None:
        return None
    try:
        return decode_current_weather(raw)
    except PayloadError:
        logger.exception("Could not decode current weather for %r", city)
        return None


async def _fetch_daily_range(
    client: OpenWeatherClient,
    city: str,
    current: CurrentWeather,
    now: EpochSeconds,
) -> DailyRange | None:
    """Returns None when the forecast is unusable but the network is fine."""
    try:
        raw = await client.get_forecast(city)
    except httpx.RequestError as e:
        logger.error("Forecast request failed for %r: %s", city, e)
        raise NetworkFailure(str(e)) from e
    if raw is None:
        return None
    try:
        samples = decode_forecast(raw)
    except PayloadError:
        logger.exception("Could not decode forecast for %r", city)
        return None
    if not samples:
        logger.warning("Forecast for %r has no samples", city)
        return None
    return compute_daily_range(samples, current.timezone_offset, now)


def _build_view(
    current: CurrentWeather, city: str, daily: DailyRange, now: EpochSeconds
) -> WeatherView:
    return WeatherView(
        temperature=current.temperature,
        condition=current.condition,
        max_temp=daily.max_temp,
        min_temp=daily.min_temp,
        humidity=current.humidity,
        wind_speed=current.wind_speed,
        sunrise=current.sunrise,
        sunset=current.sunset,
        pressure=current.pressure,
        city_name=city,
        timezone_offset=current.timezone_offset,
        day=format_day(now, current.timezone_offset),
        date=format_date(now, current.timezone_offset),
    )
