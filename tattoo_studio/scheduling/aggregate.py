# tattoo_studio/scheduling/aggregate.py

from datetime import date
from enum import Enum
from typing import Iterable, List

from ..data import CHAIR_COUNT, STUDIO_CLOSE_HOUR, STUDIO_OPEN_HOUR
from .ranges import hour_range, overlaps
from .types import Appointment, Slot


class AvailabilityLevel(str, Enum):
    high = "high"
    low = "low"
    none = "none"


def _occupants(day: date, hour: int, appointments: Iterable[Appointment]) -> int:
    # hours outside the day have nothing booked in them
    if not 0 <= hour <= 23:
        return 0
    window = hour_range(day, hour)
    return sum(1 for a in appointments if overlaps(a.range, window))


def available_count(
    day: date,
    hour: int,
    appointments: Iterable[Appointment],
    capacity: int = CHAIR_COUNT,
) -> int:
    """Chairs still free in the hour, treating the studio as a pool of interchangeable chairs."""
    free = capacity - _occupants(day, hour, appointments)
    return max(0, min(capacity, free))


def classify(available: int) -> AvailabilityLevel:
    if available >= 2:
        return AvailabilityLevel.high
    if available == 1:
        return AvailabilityLevel.low
    return AvailabilityLevel.none


def studio_slots(
    day: date,
    appointments: Iterable[Appointment],
    hours: Iterable[int] = range(STUDIO_OPEN_HOUR, STUDIO_CLOSE_HOUR),
    capacity: int = CHAIR_COUNT,
) -> List[Slot]:
    appointments = list(appointments)
    return [
        Slot(hour=hour, occupant_count=_occupants(day, hour, appointments), capacity=capacity)
        for hour in hours
    ]
