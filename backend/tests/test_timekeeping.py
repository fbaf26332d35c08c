"""Durations and UTC day boundaries."""

from datetime import date, datetime, timedelta, timezone

import pytest

from grindlog.services.timekeeping import compute_duration, day_bounds, utc_day, week_bounds


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        ("09:00", "10:30", 90),
        ("06:30", "07:15", 45),
        ("12:00", "12:00", 0),
        ("22:00", "02:00", -1200),
    ],
)
def test_compute_duration(start: str, end: str, expected: int) -> None:
    assert compute_duration(start, end) == expected


def test_utc_day_converts_offsets_to_utc() -> None:
    # 20:30 in UTC-05:00 is already the next day in UTC
    local = datetime(2024, 3, 4, 20, 30, tzinfo=timezone(timedelta(hours=-5)))
    assert utc_day(local) == date(2024, 3, 5)


def test_utc_day_treats_naive_as_utc() -> None:
    assert utc_day(datetime(2024, 3, 4, 23, 59)) == date(2024, 3, 4)
    assert utc_day(date(2024, 3, 4)) == date(2024, 3, 4)


def test_adjacent_instants_across_midnight_are_different_days() -> None:
    before = datetime(2024, 1, 15, 23, 59, tzinfo=timezone.utc)
    after = datetime(2024, 1, 16, 0, 1, tzinfo=timezone.utc)
    assert utc_day(before) != utc_day(after)


def test_day_bounds_is_half_open() -> None:
    assert day_bounds(date(2024, 2, 28)) == (date(2024, 2, 28), date(2024, 2, 29))


@pytest.mark.parametrize(
    "day",
    [date(2024, 1, 14), date(2024, 1, 15), date(2024, 1, 17), date(2024, 1, 20)],
)
def test_week_bounds_sunday_to_saturday(day: date) -> None:
    assert week_bounds(day) == (date(2024, 1, 14), date(2024, 1, 20))
