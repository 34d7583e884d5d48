# tattoo_studio/schemas.py

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from .data import DEFAULT_DURATION

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class UserRole(str, Enum):
    employee = "employee"
    admin = "admin"
    other = "other"


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    # session context of the token's owner at login time
    role: UserRole
    display_name: Optional[str] = None
    artist_id: Optional[str] = None


class UserPublic(BaseModel):
    id: int
    email: str
    role: UserRole
    display_name: Optional[str] = None
    artist_id: Optional[str] = None


class UserCreate(BaseModel):
    email: str
    password: str = Field(min_length=8, max_length=72)
    # only "employee" is honoured, everything else signs up as "other"
    preferred_role: Optional[str] = None
    display_name: Optional[str] = None


class ProfileUpdate(BaseModel):
    display_name: Optional[str] = None
    artist_id: Optional[str] = None


class RoleUpdate(BaseModel):
    role: UserRole


class ChairPublic(BaseModel):
    id: int
    name: str
    work_start_hour: int
    work_end_hour: int


class ChairHours(BaseModel):
    work_start_hour: int = Field(ge=0, le=23)
    work_end_hour: int = Field(ge=0, le=23)


class ArtistCreate(BaseModel):
    name: str = Field(min_length=1)


class ArtistPublic(BaseModel):
    id: str
    name: str


class AppointmentCreate(BaseModel):
    chair_id: int
    artist_id: str
    client_name: str = Field(min_length=1)
    start_time: datetime
    duration_minutes: int = DEFAULT_DURATION
    service: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    description: Optional[str] = None
    color: Optional[str] = Field(default=None, pattern=HEX_COLOR)


class AppointmentUpdate(BaseModel):
    chair_id: Optional[int] = None
    artist_id: Optional[str] = None
    client_name: Optional[str] = Field(default=None, min_length=1)
    start_time: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    service: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    description: Optional[str] = None
    color: Optional[str] = Field(default=None, pattern=HEX_COLOR)

    @model_validator(mode="after")
    def not_empty(self):
        if not self.model_fields_set:
            raise ValueError("Nothing to update")
        for name in ("chair_id", "artist_id", "client_name", "start_time", "duration_minutes"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class AppointmentPublic(BaseModel):
    id: str
    chair_id: int
    artist_id: str
    artist_name: Optional[str] = None
    client_name: str
    start_time: datetime
    end_time: datetime
    service: Optional[str] = None
    price: Optional[Decimal] = None
    description: Optional[str] = None
    color: str


class SlotPublic(BaseModel):
    hour: int
    label: str
    occupant_count: int
    capacity: int
    available: int


class StudioSlot(SlotPublic):
    level: str


class StudioAvailabilityResponse(BaseModel):
    date: date
    chair_count: int
    slots: List[StudioSlot]


class ChairAvailabilityResponse(BaseModel):
    chair_id: int
    date: date
    slots: List[SlotPublic]
    duration_minutes: int
    available_starts: List[str]


class Placement(BaseModel):
    appointment_id: str
    top_offset_px: float
    height_px: float
    color: str


class ChairLayoutResponse(BaseModel):
    chair_id: int
    date: date
    window_start_hour: int
    pixels_per_hour: float
    placements: List[Placement]


class DaySummaryResponse(BaseModel):
    date: date
    appointment_count: int
    total_revenue: Optional[Decimal] = None
