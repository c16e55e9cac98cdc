"""Decode raw OpenWeather JSON payloads into typed records."""

import logging

from skycast.models.weather import CitySuggestion, CurrentWeather, ForecastSample

logger = logging.getLogger(__name__)

UNKNOWN_CONDITION = "Unknown"


class PayloadError(ValueError):
    """Raised when a provider payload lacks required fields."""


def decode_current_weather(raw: dict) -> CurrentWeather:
    try:
        main = raw["main"]
        sys_ = raw["sys"]
        weather = raw.get("weather") or []
        condition = weather[0].get("main") if weather else None
        return CurrentWeather(
            city_name=raw.get("name", ""),
            temperature=float(main["temp"]),
            temp_max=float(main["temp_max"]),
            temp_min=float(main["temp_min"]),
            humidity=int(main["humidity"]),
            pressure=int(main["pressure"]),
            wind_speed=float((raw.get("wind") or {}).get("speed", 0.0)),
            condition=condition or UNKNOWN_CONDITION,
            sunrise=int(sys_["sunrise"]),
            sunset=int(sys_["sunset"]),
            timezone_offset=int(raw.get("timezone", 0)),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise PayloadError(f"Malformed current weather payload: {e!r}") from e


def decode_forecast(raw: dict) -> list[ForecastSample]:
    """Decode the forecast `list` into samples, keeping provider order."""
    try:
        items = raw["list"]
        return [
            ForecastSample(
                dt=int(item["dt"]),
                temp_max=float(item["main"]["temp_max"]),
                temp_min=float(item["main"]["temp_min"]),
            )
            for item in items
        ]
    except (KeyError, TypeError, ValueError) as e:
        raise PayloadError(f"Malformed forecast payload: {e!r}") from e


def decode_suggestions(raw: list) -> list[CitySuggestion]:
    """Decode geocoder matches. Entries missing required fields are skipped."""
    suggestions: list[CitySuggestion] = []
    for item in raw:
        try:
            suggestions.append(
                CitySuggestion(
                    name=item["name"],
                    lat=float(item["lat"]),
                    lon=float(item["lon"]),
                    country=item["country"],
                    state=item.get("state"),
                )
            )
        except (KeyError, TypeError, ValueError, AttributeError):
            logger.warning("Skipping malformed geocoder entry: %r", item)
    return suggestions
