# tattoo_studio/store.py

import logging
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from .models import Appointment, Artist, Chair
from .scheduling import BookingRejected, RejectionKind

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The database failed for a reason other than a booking conflict."""


# what SQLite reports for the overlap triggers and for uq_chair_start
_CONFLICT_MARKERS = (
    "chair_conflict",
    "appointment.chair_id, appointment.start_time",
)


def is_chair_conflict(exc: IntegrityError) -> bool:
    message = str(exc.orig)
    return any(marker in message for marker in _CONFLICT_MARKERS)


def fetch_appointments_for_day(
    session: Session,
    day: date,
    chair_id: Optional[int] = None,
) -> List[Appointment]:
    day_start_dt = datetime.combine(day, datetime.min.time())
    day_end_dt = day_start_dt + timedelta(days=1)

    stmt = (
        select(Appointment)
        .where(Appointment.start_time >= day_start_dt)
        .where(Appointment.start_time < day_end_dt)
    )
    if chair_id is not None:
        stmt = stmt.where(Appointment.chair_id == chair_id)

    return list(session.exec(stmt.order_by(Appointment.start_time)).all())


def fetch_chairs(session: Session) -> List[Chair]:
    return list(session.exec(select(Chair).order_by(Chair.id)).all())


def fetch_artists(session: Session) -> List[Artist]:
    return list(session.exec(select(Artist).order_by(Artist.name)).all())


def submit_appointment(session: Session, appt: Appointment) -> Union[Appointment, BookingRejected]:
    """
    Inserts or updates `appt` and commits.

    The store re-checks overlaps at commit time; if it refuses, the result is
    an authoritative chair_conflict even when the local check accepted the
    booking.
    """
    session.add(appt)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        if not is_chair_conflict(exc):
            logger.exception("Failed to save appointment")
            raise StoreError("Could not save appointment") from exc
        logger.warning(
            "Store rejected appointment on chair %s at %s (overlap)",
            appt.chair_id, appt.start_time,
        )
        return BookingRejected(
            kind=RejectionKind.chair_conflict,
            message="Chair was booked for that time by someone else",
            authoritative=True,
        )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Failed to save appointment")
        raise StoreError("Could not save appointment") from exc

    session.refresh(appt)
    return appt


def delete_appointment(session: Session, appt: Appointment) -> None:
    session.delete(appt)
    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Failed to delete appointment %s", appt.id)
        raise StoreError("Could not delete appointment") from exc
