# tattoo_studio/scheduling/ranges.py

from datetime import date, datetime, time, timedelta

import pytz

from .types import TimeRange


def overlaps(a: TimeRange, b: TimeRange) -> bool:
    # half-open: [10:00, 11:00) and [11:00, 12:00) do not overlap
    return a.start < b.end and b.start < a.end


def duration_minutes(r: TimeRange) -> int:
    return int((r.end - r.start).total_seconds() // 60)


def minutes_since_midnight(dt: datetime) -> int:
    return dt.hour * 60 + dt.minute


def hour_range(day: date, hour: int) -> TimeRange:
    start = datetime.combine(day, time(hour, 0))
    return TimeRange(start=start, end=start + timedelta(hours=1))


def is_single_day(r: TimeRange) -> bool:
    """True if the range sits on one calendar day (ending at midnight is allowed)."""
    if r.start.date() == r.end.date():
        return True
    next_midnight = datetime.combine(r.start.date() + timedelta(days=1), time(0, 0))
    return r.end == next_midnight


def to_wall_clock(dt: datetime, tz_name: str) -> datetime:
    """
    Converts an aware datetime to naive wall-clock time in the studio timezone.
    Naive datetimes are assumed to already be studio-local.
    """
    if dt.tzinfo is None:
        return dt
    tz = pytz.timezone(tz_name)
    return dt.astimezone(tz).replace(tzinfo=None)
