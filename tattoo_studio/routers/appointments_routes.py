# tattoo_studio/routers/appointments_routes.py

import logging
from datetime import date, datetime, timedelta
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from tattoo_studio.auth import SessionContext, get_current_user
from tattoo_studio.config import STUDIO_TIMEZONE
from tattoo_studio.data import DEFAULT_COLOR, DURATION_CHOICES, MASKED_CLIENT_NAME
from tattoo_studio.db import get_session
from tattoo_studio.deps import raise_rejection, require_privileged
from tattoo_studio.models import Appointment, Artist, Chair as ChairModel
from tattoo_studio.scheduling import BookingRejected, BookingRequest, can_book, to_wall_clock
from tattoo_studio.schemas import AppointmentCreate, AppointmentPublic, AppointmentUpdate
from tattoo_studio.store import (
    delete_appointment,
    fetch_appointments_for_day,
    fetch_artists,
    submit_appointment,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/appointments",
    tags=["appointments"],
)


def _public(appt: Appointment, artist_name: Optional[str], user: SessionContext) -> dict:
    data = {
        "id": appt.id,
        "chair_id": appt.chair_id,
        "artist_id": appt.artist_id,
        "artist_name": artist_name,
        "client_name": appt.client_name,
        "start_time": appt.start_time,
        "end_time": appt.end_time,
        "service": appt.service,
        "price": appt.price,
        "description": appt.description,
        "color": appt.color or DEFAULT_COLOR,
    }
    if not user.is_privileged:
        # others only see that the slot is taken
        data.update(client_name=MASKED_CLIENT_NAME, service=None, price=None, description=None)
    return data


def _check_duration(minutes: int):
    if minutes not in DURATION_CHOICES:
        raise HTTPException(status_code=422, detail="Duration not available")


def _check_refs(session: Session, chair_id: int, artist_id: str) -> ChairModel:
    chair = session.get(ChairModel, chair_id)
    if chair is None:
        raise HTTPException(status_code=404, detail="Chair not found")
    if session.get(Artist, artist_id) is None:
        raise HTTPException(status_code=404, detail="Artist not found")
    return chair


def _validate_booking(
    session: Session,
    chair: ChairModel,
    start: datetime,
    end: datetime,
    exclude_id: Optional[str] = None,
):
    """Local, advisory check against the chair's bookings for that day."""
    existing = [
        a.to_domain()
        for a in fetch_appointments_for_day(session, start.date(), chair.id)
    ]
    request = BookingRequest(chair_id=chair.id, start=start, end=end, exclude_id=exclude_id)
    decision = can_book(request, existing, chair.to_domain())
    if isinstance(decision, BookingRejected):
        logger.info("Booking on chair %s at %s rejected: %s", chair.id, start, decision.kind.value)
        raise_rejection(decision)


def _get_or_404(session: Session, appt_id: str) -> Appointment:
    appt = session.get(Appointment, appt_id)
    if appt is None:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return appt


@router.get("", response_model=List[AppointmentPublic])
def list_appointments(
    on_date: date,
    chair_id: Optional[int] = None,
    session: Session = Depends(get_session),
    current_user: SessionContext = Depends(get_current_user),
):
    names = {a.id: a.name for a in fetch_artists(session)}
    appts = fetch_appointments_for_day(session, on_date, chair_id)
    return [_public(a, names.get(a.artist_id), current_user) for a in appts]


@router.get("/{appt_id}", response_model=AppointmentPublic)
def get_appointment(
    appt_id: str,
    session: Session = Depends(get_session),
    current_user: SessionContext = Depends(get_current_user),
):
    appt = _get_or_404(session, appt_id)
    artist = session.get(Artist, appt.artist_id)
    return _public(appt, artist.name if artist else None, current_user)


@router.post("", response_model=AppointmentPublic, status_code=201)
def create_appointment(
    appt: AppointmentCreate,
    session: Session = Depends(get_session),
    current_user: SessionContext = Depends(get_current_user),
):
    require_privileged(current_user)

    # 1) Validate duration and references
    _check_duration(appt.duration_minutes)
    chair = _check_refs(session, appt.chair_id, appt.artist_id)

    # 2) Build the interval in studio wall-clock time
    start = to_wall_clock(appt.start_time, STUDIO_TIMEZONE)
    end = start + timedelta(minutes=appt.duration_minutes)

    # 3) Working hours and overlaps (advisory)
    _validate_booking(session, chair, start, end)

    # 4) Save; the store has the final word
    db_appt = Appointment(
        chair_id=appt.chair_id,
        artist_id=appt.artist_id,
        start_time=start,
        end_time=end,
        client_name=appt.client_name,
        service=appt.service,
        price=appt.price,
        description=appt.description,
        color=appt.color,
    )
    result = submit_appointment(session, db_appt)
    if isinstance(result, BookingRejected):
        raise_rejection(result)

    logger.info("%s booked chair %s at %s", current_user.email, result.chair_id, result.start_time)
    artist = session.get(Artist, result.artist_id)
    return _public(result, artist.name, current_user)


@router.patch("/{appt_id}", response_model=AppointmentPublic)
def update_appointment(
    appt_id: str,
    update: AppointmentUpdate,
    session: Session = Depends(get_session),
    current_user: SessionContext = Depends(get_current_user),
):
    require_privileged(current_user)
    db_appt = _get_or_404(session, appt_id)
    changes = update.model_dump(exclude_unset=True)

    # 1) Resolve the new chair, artist and interval
    chair_id = changes.get("chair_id") or db_appt.chair_id
    artist_id = changes.get("artist_id") or db_appt.artist_id
    chair = _check_refs(session, chair_id, artist_id)

    if changes.get("duration_minutes") is not None:
        _check_duration(changes["duration_minutes"])
        duration = timedelta(minutes=changes["duration_minutes"])
    else:
        duration = db_appt.end_time - db_appt.start_time

    if changes.get("start_time") is not None:
        start = to_wall_clock(changes["start_time"], STUDIO_TIMEZONE)
    else:
        start = db_appt.start_time
    end = start + duration

    # 2) Check without the appointment's own record
    _validate_booking(session, chair, start, end, exclude_id=db_appt.id)

    # 3) Apply and save
    db_appt.chair_id = chair_id
    db_appt.artist_id = artist_id
    db_appt.start_time = start
    db_appt.end_time = end
    for field in ("client_name", "service", "price", "description", "color"):
        if field in changes:
            setattr(db_appt, field, changes[field])

    result = submit_appointment(session, db_appt)
    if isinstance(result, BookingRejected):
        raise_rejection(result)

    logger.info("%s updated appointment %s", current_user.email, result.id)
    artist = session.get(Artist, result.artist_id)
    return _public(result, artist.name, current_user)


@router.delete("/{appt_id}", status_code=204)
def remove_appointment(
    appt_id: str,
    session: Session = Depends(get_session),
    current_user: SessionContext = Depends(get_current_user),
):
    require_privileged(current_user)
    db_appt = _get_or_404(session, appt_id)

    delete_appointment(session, db_appt)
    logger.info("%s deleted appointment %s", current_user.email, appt_id)
