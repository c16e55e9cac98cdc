"""Output formatters for lookup results."""

import json

from skycast.models.common import EpochSeconds, city_local_datetime, utc_now_epoch
from skycast.models.lookup import FetchError, LookupResult, WeatherView
from skycast.models.weather import CitySuggestion
from skycast.reporting.conditions import condition_bucket, is_daytime

MSG_NO_INTERNET = "No internet connection. Please check your network."
MSG_CITY_NOT_FOUND = "City not found"
MSG_FORECAST_FAILED = "Failed to fetch forecast data"
MSG_EMPTY_QUERY = "Please enter a city name"

_MESSAGES = {
    FetchError.NETWORK_ERROR: MSG_NO_INTERNET,
    FetchError.CITY_NOT_FOUND: MSG_CITY_NOT_FOUND,
    FetchError.FORECAST_UNAVAILABLE: MSG_FORECAST_FAILED,
}


def error_message(error: FetchError) -> str:
    return _MESSAGES[error]


def did_you_mean(city: str) -> str:
    return f"Did you mean {city}?"


def format_time(epoch: EpochSeconds, timezone_offset: int) -> str:
    """HH:MM in the city's local time."""
    return city_local_datetime(epoch, timezone_offset).strftime("%H:%M")


def format_day(epoch: EpochSeconds, timezone_offset: int) -> str:
    return city_local_datetime(epoch, timezone_offset).strftime("%A")


def format_date(epoch: EpochSeconds, timezone_offset: int) -> str:
    return city_local_datetime(epoch, timezone_offset).strftime("%d %B %Y")


def format_view_text(v: WeatherView) -> str:
    """Plain text block for terminal output."""
    return "\n".join([
        f"{v.city_name} | {v.day}, {v.date}",
        f"{v.temperature} °C  {v.condition}",
        f"Max Temp: {v.max_temp:.1f} °C",
        f"Min Temp: {v.min_temp:.1f} °C",
        f"Humidity: {v.humidity} %",
        f"Wind: {v.wind_speed} m/s",
        f"Pressure: {v.pressure} hPa",
        f"Sunrise: {format_time(v.sunrise, v.timezone_offset)} | "
        f"Sunset: {format_time(v.sunset, v.timezone_offset)}",
    ])


def format_result_text(result: LookupResult) -> str:
    lines: list[str] = []
    if result.suggested_city:
        lines.append(did_you_mean(result.suggested_city))
    if result.error is not None:
        lines.append(error_message(result.error))
        return "\n".join(lines)
    lines.extend(error_message(n) for n in result.notices)
    if result.view is not None:
        lines.append(format_view_text(result.view))
    return "\n".join(lines)


def format_result_json(result: LookupResult, now: EpochSeconds | None = None) -> str:
    """JSON rendering, including the presentation hints (bucket, is_day)."""
    if now is None:
        now = utc_now_epoch()
    data: dict = {
        "ok": result.ok,
        "error": result.error.value if result.error else None,
        "notices": [n.value for n in result.notices],
        "suggested_city": result.suggested_city,
        "weather": None,
    }
    v = result.view
    if v is not None:
        data["weather"] = {
            "city_name": v.city_name,
            "temperature": v.temperature,
            "condition": v.condition,
            "condition_bucket": condition_bucket(v.condition).value,
            "is_day": is_daytime(v.sunrise, v.sunset, now),
            "max_temp": v.max_temp,
            "min_temp": v.min_temp,
            "humidity": v.humidity,
            "wind_speed": v.wind_speed,
            "pressure": v.pressure,
            "sunrise": format_time(v.sunrise, v.timezone_offset),
            "sunset": format_time(v.sunset, v.timezone_offset),
            "day": v.day,
            "date": v.date,
        }
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_suggestions(suggestions: list[CitySuggestion]) -> str:
    return "\n".join(s.label for s in suggestions)
