"""Condition bucketing and day/night detection for the presentation layer."""

from enum import StrEnum

from skycast.models.common import EpochSeconds


class ConditionBucket(StrEnum):
    CLEAR = "Clear"
    CLOUDY = "Cloudy"
    RAIN = "Rain"
    SNOW = "Snow"


_KEYWORDS: dict[ConditionBucket, tuple[str, ...]] = {
    ConditionBucket.CLEAR: ("clear sky", "sunny", "clear"),
    ConditionBucket.CLOUDY: ("partly clouds", "clouds", "overcast", "mist", "foggy"),
    ConditionBucket.RAIN: (
        "rain", "light rain", "drizzle", "moderate rain", "showers", "heavy rain",
    ),
    ConditionBucket.SNOW: (
        "snow", "light snow", "moderate snow", "heavy snow", "blizzard",
    ),
}

_LOOKUP: dict[str, ConditionBucket] = {
    keyword: bucket for bucket, keywords in _KEYWORDS.items() for keyword in keywords
}


def condition_bucket(label: str | None) -> ConditionBucket:
    """Map a provider condition label to a bucket. Unknown labels are Clear."""
    if not label:
        return ConditionBucket.CLEAR
    return _LOOKUP.get(label.strip().lower(), ConditionBucket.CLEAR)


def is_daytime(sunrise: EpochSeconds, sunset: EpochSeconds, now: EpochSeconds) -> bool:
    return sunrise <= now <= sunset
