# tattoo_studio/scheduling/types.py

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_core import PydanticCustomError


class TimeRange(BaseModel):
    """
    Half-open interval [start, end).

    Building one with start >= end raises a ValidationError whose error type is
    "invalid_range"; use booking.parse_range to get a rejection value instead.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def check_order(self):
        if self.start >= self.end:
            raise PydanticCustomError("invalid_range", "start must be before end")
        return self


class Chair(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    work_start_hour: int = Field(ge=0, le=23)
    work_end_hour: int = Field(ge=0, le=23)

    @model_validator(mode="after")
    def check_hours(self):
        if self.work_start_hour >= self.work_end_hour:
            raise ValueError("work_start_hour must be before work_end_hour")
        return self

    def works_at(self, hour: int) -> bool:
        return self.work_start_hour <= hour < self.work_end_hour


class Artist(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Appointment(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    chair_id: int
    artist_id: str
    range: TimeRange
    client_name: str
    service: Optional[str] = None
    price: Optional[Decimal] = None
    description: Optional[str] = None
    color: Optional[str] = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")


class Slot(BaseModel):
    model_config = ConfigDict(frozen=True)

    hour: int
    occupant_count: int
    capacity: int

    @property
    def available(self) -> int:
        # more occupants than capacity means inconsistent data upstream
        return max(0, min(self.capacity, self.capacity - self.occupant_count))
