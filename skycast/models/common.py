"""Common types and helpers shared across models."""

import time
from datetime import UTC, datetime
from typing import TypeAlias

EpochSeconds: TypeAlias = int

SECONDS_PER_DAY = 86400


def utc_now_epoch() -> EpochSeconds:
    return int(time.time())


def city_local_datetime(epoch: EpochSeconds, timezone_offset: int) -> datetime:
    """Wall-clock time in a city.

    The result is tagged UTC but its fields read as the city's local clock.
    """
    return datetime.fromtimestamp(epoch + timezone_offset, UTC)
