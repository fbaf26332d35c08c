"""
Wall-clock durations and calendar-day boundaries.

Day convention: every calendar day in Grindlog is a UTC day. A timestamp
belongs to the day its UTC representation falls on; naive datetimes are
taken to already be UTC. The upsert existence check, the summary/log
read filters and the reports all go through `utc_day`, so a write and a
later read of the same instant always agree on the day.
"""

from datetime import date, datetime, timedelta, timezone


def parse_clock(value: str) -> tuple[int, int]:
    """Split an ``HH:MM`` string into (hours, minutes). Raises ValueError if malformed."""
    hours, minutes = value.split(":")
    return int(hours), int(minutes)


def compute_duration(start_time: str, end_time: str) -> int:
    """
    Minutes between two ``HH:MM`` wall-clock times.

    There is no wraparound: an overnight span such as 22:00 -> 02:00
    yields a negative number (-1200). Callers that don't want negative
    durations must check the ordering themselves.
    """
    start_hour, start_min = parse_clock(start_time)
    end_hour, end_min = parse_clock(end_time)
    return (end_hour * 60 + end_min) - (start_hour * 60 + start_min)


def utc_day(value: date | datetime) -> date:
    """Return the UTC calendar day a date or datetime falls on."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def day_bounds(day: date) -> tuple[date, date]:
    """Half-open [day, next day) range."""
    return day, day + timedelta(days=1)


def week_bounds(day: date) -> tuple[date, date]:
    """Sunday and Saturday of the Sunday-to-Saturday week containing `day`."""
    # date.weekday(): Monday == 0 ... Sunday == 6
    days_since_sunday = (day.weekday() + 1) % 7
    sunday = day - timedelta(days=days_since_sunday)
    return sunday, sunday + timedelta(days=6)
