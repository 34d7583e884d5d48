# tattoo_studio/scheduling/summary.py

from decimal import Decimal
from typing import Iterable

from pydantic import BaseModel

from .types import Appointment


class DaySummary(BaseModel):
    appointment_count: int
    total_revenue: Decimal


def summarize_day(appointments: Iterable[Appointment]) -> DaySummary:
    count = 0
    revenue = Decimal("0")
    for a in appointments:
        count += 1
        if a.price is not None:
            revenue += a.price
    return DaySummary(appointment_count=count, total_revenue=revenue)
