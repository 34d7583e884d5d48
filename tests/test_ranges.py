from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from tattoo_studio.scheduling import TimeRange, duration_minutes, hour_range, overlaps, to_wall_clock
from tattoo_studio.scheduling.ranges import is_single_day, minutes_since_midnight

from tests.conftest import at


def r(start_h, start_m, end_h, end_m):
    return TimeRange(start=at(start_h, start_m), end=at(end_h, end_m))


def test_overlap_is_symmetric():
    pairs = [
        (r(10, 0, 11, 0), r(10, 30, 11, 30)),
        (r(10, 0, 11, 0), r(11, 0, 12, 0)),
        (r(9, 0, 17, 0), r(12, 0, 13, 0)),
        (r(9, 0, 10, 0), r(14, 0, 15, 0)),
    ]
    for a, b in pairs:
        assert overlaps(a, b) == overlaps(b, a)


def test_range_overlaps_itself():
    a = r(14, 0, 14, 30)
    assert overlaps(a, a)


def test_adjacent_ranges_do_not_overlap():
    assert not overlaps(r(10, 0, 11, 0), r(11, 0, 12, 0))
    assert not overlaps(r(11, 0, 12, 0), r(10, 0, 11, 0))


def test_containment_overlaps():
    assert overlaps(r(9, 0, 17, 0), r(12, 0, 12, 30))


def test_start_must_precede_end():
    with pytest.raises(ValidationError) as exc_info:
        TimeRange(start=at(11), end=at(10))
    assert exc_info.value.errors()[0]["type"] == "invalid_range"

    with pytest.raises(ValidationError) as exc_info:
        TimeRange(start=at(11), end=at(11))
    assert exc_info.value.errors()[0]["type"] == "invalid_range"


def test_range_is_immutable():
    a = r(10, 0, 11, 0)
    with pytest.raises(ValidationError):
        a.start = at(9)


def test_duration_minutes():
    assert duration_minutes(r(10, 30, 11, 15)) == 45
    assert duration_minutes(r(10, 0, 13, 0)) == 180


def test_hour_range_covers_one_hour():
    h = hour_range(date(2030, 3, 14), 14)
    assert h.start == at(14)
    assert h.end == at(15)


def test_hour_range_at_end_of_day_rolls_to_midnight():
    h = hour_range(date(2030, 3, 14), 23)
    assert h.end == datetime(2030, 3, 15, 0, 0)


def test_minutes_since_midnight():
    assert minutes_since_midnight(at(10, 30)) == 630


def test_single_day():
    assert is_single_day(r(10, 0, 11, 0))
    assert is_single_day(TimeRange(start=at(23), end=at(23) + timedelta(hours=1)))
    assert not is_single_day(TimeRange(start=at(23), end=at(23) + timedelta(hours=2)))


def test_to_wall_clock_converts_aware_datetimes():
    # Athens is UTC+2 in March (before the DST switch)
    utc = datetime(2030, 3, 14, 8, 0, tzinfo=timezone.utc)
    assert to_wall_clock(utc, "Europe/Athens") == datetime(2030, 3, 14, 10, 0)


def test_to_wall_clock_keeps_naive_datetimes():
    assert to_wall_clock(at(10), "Europe/Athens") == at(10)
