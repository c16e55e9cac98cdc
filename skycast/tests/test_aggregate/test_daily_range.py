"""Tests for the daily high/low aggregation heuristic."""

from skycast.aggregate.daily_range import compute_daily_range, local_day_bounds
from skycast.models.weather import DailyRange, ForecastSample

DAY = 86400
NOW = 1700000000  # 2023-11-14 22:13:20 UTC
IST_OFFSET = 19800


def _samples(*rows: tuple[int, float, float]) -> list[ForecastSample]:
    return [ForecastSample(dt=dt, temp_max=hi, temp_min=lo) for dt, hi, lo in rows]


class TestLocalDayBounds:
    def test_ist(self):
        start, end = local_day_bounds(IST_OFFSET, NOW)
        # Local midnight 2023-11-15 00:00 IST == 2023-11-14 18:30 UTC
        assert start == 1699986600
        assert end == start + DAY

    def test_utc(self):
        start, end = local_day_bounds(0, NOW)
        assert start == 1699920000
        assert end == 1700006400

    def test_negative_offset(self):
        # UTC-5: local time 2023-11-14 17:13:20, day starts at 05:00 UTC
        start, _ = local_day_bounds(-18000, NOW)
        assert start == 1699938000

    def test_far_east_offset_rolls_day(self):
        # UTC+14: local time already on 2023-11-15 12:13:20
        start, _ = local_day_bounds(14 * 3600, NOW)
        assert start == 1700006400 - 14 * 3600


class TestComputeDailyRange:
    def test_ist_scenario(self):
        samples = _samples(
            (1700000000, 30.0, 28.0),
            (1700010800, 31.0, 27.0),
            (1700021600, 29.5, 26.5),
        )
        assert compute_daily_range(samples, IST_OFFSET, NOW) == DailyRange(31.0, 26.5)

    def test_empty(self):
        assert compute_daily_range([], IST_OFFSET, NOW) == DailyRange(2.0, -2.0)

    def test_all_outside_window(self):
        start, end = local_day_bounds(IST_OFFSET, NOW)
        samples = _samples(
            (start - DAY - 1, 40.0, 10.0),
            (end + DAY + 1, 41.0, 11.0),
            (end + 3 * DAY, 42.0, 12.0),
        )
        assert compute_daily_range(samples, IST_OFFSET, NOW) == DailyRange(2.0, -2.0)

    def test_flat_range_widened(self):
        samples = _samples(
            (NOW, 20.0, 19.5),
            (NOW + 10800, 20.5, 19.0),
            (NOW + 21600, 20.0, 19.0),
        )
        assert compute_daily_range(samples, IST_OFFSET, NOW) == DailyRange(22.5, 17.0)

    def test_identical_temps_widened(self):
        samples = _samples((NOW, 15.0, 15.0), (NOW + 10800, 15.0, 15.0), (NOW + 21600, 15.0, 15.0))
        assert compute_daily_range(samples, 0, NOW) == DailyRange(17.0, 13.0)

    def test_too_few_samples_widened(self):
        samples = _samples((NOW, 30.0, 20.0), (NOW + 10800, 28.0, 21.0))
        assert compute_daily_range(samples, 0, NOW) == DailyRange(32.0, 18.0)

    def test_spread_exactly_two_not_widened(self):
        samples = _samples((NOW, 22.0, 21.0), (NOW + 10800, 21.5, 20.0), (NOW + 21600, 21.0, 20.5))
        assert compute_daily_range(samples, 0, NOW) == DailyRange(22.0, 20.0)

    def test_lower_boundary_inclusive(self):
        start, _ = local_day_bounds(IST_OFFSET, NOW)
        edge = start - DAY
        base = _samples((NOW, 25.0, 20.0), (NOW + 10800, 25.0, 20.0))
        included = base + _samples((edge, 40.0, 20.0))
        excluded = base + _samples((edge - 1, 40.0, 20.0))

        assert compute_daily_range(included, IST_OFFSET, NOW) == DailyRange(40.0, 20.0)
        # Only two samples selected, so the heuristic widens the range
        assert compute_daily_range(excluded, IST_OFFSET, NOW) == DailyRange(27.0, 18.0)

    def test_upper_boundary_inclusive(self):
        _, end = local_day_bounds(0, NOW)
        base = _samples((NOW, 25.0, 20.0), (NOW + 10800, 25.0, 20.0))
        included = base + _samples((end + DAY, 25.0, 10.0))
        excluded = base + _samples((end + DAY + 1, 25.0, 10.0))

        assert compute_daily_range(included, 0, NOW) == DailyRange(25.0, 10.0)
        assert compute_daily_range(excluded, 0, NOW) == DailyRange(27.0, 18.0)

    def test_idempotent(self):
        samples = _samples((NOW, 30.0, 28.0), (NOW + 10800, 31.0, 27.0))
        first = compute_daily_range(samples, IST_OFFSET, NOW)
        second = compute_daily_range(samples, IST_OFFSET, NOW)
        assert first == second

    def test_unsorted_input(self):
        samples = _samples(
            (1700021600, 29.5, 26.5),
            (1700000000, 30.0, 28.0),
            (1700010800, 31.0, 27.0),
        )
        assert compute_daily_range(samples, IST_OFFSET, NOW) == DailyRange(31.0, 26.5)
