# tattoo_studio/scheduling/booking.py

"""
Client-side booking check.

This is advisory: the store enforces the same rule when it commits, and a
rejection coming back from the store wins over an acceptance given here
(two people can pass this check for the same chair at the same time).
Every outcome is returned as a value, never raised, so callers can render a
message per kind.
"""

from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from .ranges import is_single_day, overlaps
from .types import Appointment, Chair, TimeRange


class RejectionKind(str, Enum):
    invalid_range = "invalid_range"
    chair_conflict = "chair_conflict"
    out_of_working_hours = "out_of_working_hours"


class BookingRequest(BaseModel):
    chair_id: int
    start: datetime
    end: datetime
    # set when editing, so the appointment does not conflict with itself
    exclude_id: Optional[str] = None


class BookingAccepted(BaseModel):
    model_config = ConfigDict(frozen=True)

    chair_id: int
    range: TimeRange


class BookingRejected(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: RejectionKind
    message: str
    conflicting_ids: List[str] = []
    authoritative: bool = False


BookingDecision = Union[BookingAccepted, BookingRejected]


def parse_range(start: datetime, end: datetime) -> Union[TimeRange, BookingRejected]:
    if start >= end:
        return BookingRejected(
            kind=RejectionKind.invalid_range,
            message="Start time must be before end time",
        )
    r = TimeRange(start=start, end=end)
    if not is_single_day(r):
        return BookingRejected(
            kind=RejectionKind.invalid_range,
            message="Appointments cannot span more than one day",
        )
    return r


def within_working_hours(chair: Chair, r: TimeRange) -> bool:
    day = r.start.date()
    work_start = datetime.combine(day, time(chair.work_start_hour))
    work_end = datetime.combine(day, time(chair.work_end_hour))
    return work_start <= r.start and r.end <= work_end


def conflicts_for(
    chair_id: int,
    r: TimeRange,
    existing: Iterable[Appointment],
    exclude_id: Optional[str] = None,
) -> List[Appointment]:
    return [
        a for a in existing
        if a.chair_id == chair_id and a.id != exclude_id and overlaps(a.range, r)
    ]


def can_book(
    proposed: BookingRequest,
    existing: Iterable[Appointment],
    chair: Optional[Chair] = None,
) -> BookingDecision:
    # 1) Range itself
    parsed = parse_range(proposed.start, proposed.end)
    if isinstance(parsed, BookingRejected):
        return parsed

    # 2) Working hours (only when we know the chair)
    if chair is not None and not within_working_hours(chair, parsed):
        return BookingRejected(
            kind=RejectionKind.out_of_working_hours,
            message=(
                f"{chair.name} works {chair.work_start_hour:02d}:00-"
                f"{chair.work_end_hour:02d}:00"
            ),
        )

    # 3) Same-chair overlaps
    clashes = conflicts_for(proposed.chair_id, parsed, existing, proposed.exclude_id)
    if clashes:
        return BookingRejected(
            kind=RejectionKind.chair_conflict,
            message="Chair is already booked for that time",
            conflicting_ids=[a.id for a in clashes],
        )

    return BookingAccepted(chair_id=proposed.chair_id, range=parsed)


def free_starts(
    chair: Chair,
    day: date,
    duration: timedelta,
    existing: Iterable[Appointment],
    step: timedelta = timedelta(minutes=30),
) -> List[datetime]:
    """Start times on `day` at which a booking of `duration` would be accepted."""
    existing = list(existing)
    work_end = datetime.combine(day, time(chair.work_end_hour))

    starts = []
    current = datetime.combine(day, time(chair.work_start_hour))
    while current + duration <= work_end:
        request = BookingRequest(chair_id=chair.id, start=current, end=current + duration)
        if isinstance(can_book(request, existing, chair), BookingAccepted):
            starts.append(current)
        current += step
    return starts
