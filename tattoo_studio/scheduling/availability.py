# tattoo_studio/scheduling/availability.py

"""
Per-chair availability.

A chair holds at most one appointment at a time, so an hour is free only when
it is inside the chair's working window and no appointment on that chair
touches it.
"""

from datetime import date
from typing import Iterable, List

from .ranges import hour_range, overlaps
from .types import Appointment, Chair, Slot


def _for_chair(chair: Chair, appointments: Iterable[Appointment]) -> List[Appointment]:
    return [a for a in appointments if a.chair_id == chair.id]


def is_hour_free(chair: Chair, day: date, hour: int, appointments: Iterable[Appointment]) -> bool:
    if not chair.works_at(hour):
        return False

    slot = hour_range(day, hour)
    for a in _for_chair(chair, appointments):
        if overlaps(a.range, slot):
            return False
    return True


def chair_slots(chair: Chair, day: date, appointments: Iterable[Appointment]) -> List[Slot]:
    """One Slot per hour of the day; hours outside the working window have capacity 0."""
    own = _for_chair(chair, appointments)

    slots = []
    for hour in range(24):
        window = hour_range(day, hour)
        occupied = sum(1 for a in own if overlaps(a.range, window))
        slots.append(
            Slot(
                hour=hour,
                occupant_count=occupied,
                capacity=1 if chair.works_at(hour) else 0,
            )
        )
    return slots
