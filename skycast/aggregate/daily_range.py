"""Today's high/low temperature derived from a 3-hourly forecast feed.

Forecast buckets are coarse and rarely line up with the queried city's
calendar day, so samples within a day on either side of "today" are
included, and sparse or flat selections are widened by a fixed margin.
"""

import logging
from collections.abc import Sequence

from skycast.models.common import SECONDS_PER_DAY, EpochSeconds
from skycast.models.weather import DailyRange, ForecastSample

logger = logging.getLogger(__name__)

WINDOW_PADDING_SECONDS = SECONDS_PER_DAY
MIN_SAMPLES = 3
MIN_SPREAD = 2.0
WIDEN_BY = 2.0


def local_day_bounds(
    timezone_offset: int, now_utc: EpochSeconds
) -> tuple[EpochSeconds, EpochSeconds]:
    """UTC start and end of the current calendar day in the city's timezone."""
    local_now = now_utc + timezone_offset
    # Floor division keeps pre-epoch values on the correct day.
    local_day_start = (local_now // SECONDS_PER_DAY) * SECONDS_PER_DAY
    today_start = local_day_start - timezone_offset
    return today_start, today_start + SECONDS_PER_DAY


def compute_daily_range(
    samples: Sequence[ForecastSample],
    timezone_offset: int,
    now_utc: EpochSeconds,
) -> DailyRange:
    """Derive today's adjusted max/min temperature.

    Samples whose timestamp falls within [today_start - 24h, today_end + 24h]
    are selected. If fewer than three are selected, or their spread is below
    2.0 degrees, the range is widened by 2.0 on both sides. An empty selection
    yields (2.0, -2.0).
    """
    today_start, today_end = local_day_bounds(timezone_offset, now_utc)
    lower = today_start - WINDOW_PADDING_SECONDS
    upper = today_end + WINDOW_PADDING_SECONDS

    selected = [s for s in samples if lower <= s.dt <= upper]

    logger.debug("Day forecast timestamps: %s", [s.dt for s in selected])
    logger.debug("Day forecast temp_max: %s", [s.temp_max for s in selected])
    logger.debug("Day forecast temp_min: %s", [s.temp_min for s in selected])

    max_temp = max((s.temp_max for s in selected), default=0.0)
    min_temp = min((s.temp_min for s in selected), default=0.0)

    if len(selected) < MIN_SAMPLES or max_temp - min_temp < MIN_SPREAD:
        adjusted = DailyRange(max_temp=max_temp + WIDEN_BY, min_temp=min_temp - WIDEN_BY)
        logger.debug(
            "Applying heuristic widening (%d samples): max=%.1f min=%.1f",
            len(selected), adjusted.max_temp, adjusted.min_temp,
        )
        return adjusted

    return DailyRange(max_temp=max_temp, min_temp=min_temp)
