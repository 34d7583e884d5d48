"""
Scheduling core: pure functions over in-memory snapshots of chairs and
appointments. Nothing in here performs I/O.

- ranges.py: time ranges and overlap
- availability.py: per-chair hourly availability
- aggregate.py: studio-wide "N of 4 chairs free" view
- booking.py: advisory booking check
- layout.py: day-grid pixel placement
- summary.py: per-day count and revenue
"""

from .aggregate import AvailabilityLevel, available_count, classify, studio_slots
from .availability import chair_slots, is_hour_free
from .booking import (
    BookingAccepted,
    BookingDecision,
    BookingRejected,
    BookingRequest,
    RejectionKind,
    can_book,
    free_starts,
    parse_range,
)
from .layout import GridPlacement, project
from .ranges import duration_minutes, hour_range, overlaps, to_wall_clock
from .summary import DaySummary, summarize_day
from .types import Appointment, Artist, Chair, Slot, TimeRange

__all__ = [
    "Appointment",
    "Artist",
    "AvailabilityLevel",
    "BookingAccepted",
    "BookingDecision",
    "BookingRejected",
    "BookingRequest",
    "Chair",
    "DaySummary",
    "GridPlacement",
    "RejectionKind",
    "Slot",
    "TimeRange",
    "available_count",
    "can_book",
    "chair_slots",
    "classify",
    "duration_minutes",
    "free_starts",
    "hour_range",
    "is_hour_free",
    "overlaps",
    "parse_range",
    "project",
    "studio_slots",
    "summarize_day",
    "to_wall_clock",
]
