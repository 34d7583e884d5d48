# tattoo_studio/models.py

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DDL, UniqueConstraint, event
from sqlmodel import Field, SQLModel

from .scheduling import types as domain


def _new_id() -> str:
    return str(uuid.uuid4())


class Chair(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    work_start_hour: int
    work_end_hour: int

    def to_domain(self) -> domain.Chair:
        return domain.Chair(
            id=self.id,
            name=self.name,
            work_start_hour=self.work_start_hour,
            work_end_hour=self.work_end_hour,
        )


class Artist(SQLModel, table=True):
    id: str = Field(default_factory=_new_id, primary_key=True)
    name: str
    created_at: datetime = Field(default_factory=datetime.utcnow)

    def to_domain(self) -> domain.Artist:
        return domain.Artist(id=self.id, name=self.name)


class Appointment(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("chair_id", "start_time", name="uq_chair_start"),
    )

    id: str = Field(default_factory=_new_id, primary_key=True)

    chair_id: int = Field(foreign_key="chair.id", index=True)
    artist_id: str = Field(foreign_key="artist.id", index=True)
    start_time: datetime = Field(index=True)
    end_time: datetime
    client_name: str
    service: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    description: Optional[str] = None
    color: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)

    def to_domain(self) -> domain.Appointment:
        return domain.Appointment(
            id=self.id,
            chair_id=self.chair_id,
            artist_id=self.artist_id,
            range=domain.TimeRange(start=self.start_time, end=self.end_time),
            client_name=self.client_name,
            service=self.service,
            price=self.price,
            description=self.description,
            color=self.color,
        )


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True)
    password_hash: str
    role: str  # employee, admin or other
    display_name: Optional[str] = None
    artist_id: Optional[str] = Field(default=None, foreign_key="artist.id")


# The store is the authority on double-booking: any write that would overlap
# another appointment on the same chair is aborted inside the transaction.
# SQLite reports RAISE(ABORT) from a trigger as a constraint violation.
_NO_OVERLAP_ON_INSERT = DDL(
    """
    CREATE TRIGGER IF NOT EXISTS appointment_no_overlap_insert
    BEFORE INSERT ON appointment
    FOR EACH ROW
    WHEN EXISTS (
        SELECT 1 FROM appointment AS a
        WHERE a.chair_id = NEW.chair_id
          AND a.start_time < NEW.end_time
          AND NEW.start_time < a.end_time
    )
    BEGIN
        SELECT RAISE(ABORT, 'chair_conflict');
    END
    """
)

_NO_OVERLAP_ON_UPDATE = DDL(
    """
    CREATE TRIGGER IF NOT EXISTS appointment_no_overlap_update
    BEFORE UPDATE OF chair_id, start_time, end_time ON appointment
    FOR EACH ROW
    WHEN EXISTS (
        SELECT 1 FROM appointment AS a
        WHERE a.chair_id = NEW.chair_id
          AND a.id != NEW.id
          AND a.start_time < NEW.end_time
          AND NEW.start_time < a.end_time
    )
    BEGIN
        SELECT RAISE(ABORT, 'chair_conflict');
    END
    """
)

event.listen(Appointment.__table__, "after_create", _NO_OVERLAP_ON_INSERT.execute_if(dialect="sqlite"))
event.listen(Appointment.__table__, "after_create", _NO_OVERLAP_ON_UPDATE.execute_if(dialect="sqlite"))
