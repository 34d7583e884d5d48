# tattoo_studio/routers/chairs_routes.py

import logging
from datetime import date, timedelta
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from tattoo_studio.auth import SessionContext, get_current_user
from tattoo_studio.data import DEFAULT_COLOR, DEFAULT_DURATION, DURATION_CHOICES, PIXELS_PER_HOUR
from tattoo_studio.db import get_session
from tattoo_studio.deps import require_role
from tattoo_studio.models import Chair as ChairModel
from tattoo_studio.scheduling import chair_slots, free_starts, project
from tattoo_studio.schemas import (
    ChairAvailabilityResponse,
    ChairHours,
    ChairLayoutResponse,
    ChairPublic,
    UserRole,
)
from tattoo_studio.store import fetch_appointments_for_day, fetch_chairs

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/chairs",
    tags=["chairs"],
)


def get_chair_or_404(session: Session, chair_id: int) -> ChairModel:
    chair = session.get(ChairModel, chair_id)
    if chair is None:
        raise HTTPException(status_code=404, detail="Chair not found")
    return chair


@router.get("", response_model=List[ChairPublic])
def list_chairs(session: Session = Depends(get_session)):
    return fetch_chairs(session)


@router.put("/{chair_id}/hours", response_model=ChairPublic)
def set_chair_hours(
    chair_id: int,
    hours: ChairHours,
    session: Session = Depends(get_session),
    current_user: SessionContext = Depends(get_current_user),
):
    require_role(current_user, UserRole.admin)

    if hours.work_start_hour >= hours.work_end_hour:
        raise HTTPException(status_code=422, detail="work_start_hour must be before work_end_hour")

    chair = get_chair_or_404(session, chair_id)
    chair.work_start_hour = hours.work_start_hour
    chair.work_end_hour = hours.work_end_hour

    session.add(chair)
    session.commit()
    session.refresh(chair)

    logger.info("Chair %s now works %02d:00-%02d:00", chair.id, chair.work_start_hour, chair.work_end_hour)
    return chair


@router.get("/{chair_id}/availability", response_model=ChairAvailabilityResponse)
def chair_availability(
    chair_id: int,
    on_date: date,
    duration_minutes: int = DEFAULT_DURATION,
    session: Session = Depends(get_session),
):
    if duration_minutes not in DURATION_CHOICES:
        raise HTTPException(status_code=422, detail="Duration not available")

    # 1) Chair and its appointments for the day
    chair = get_chair_or_404(session, chair_id).to_domain()
    appts = [a.to_domain() for a in fetch_appointments_for_day(session, on_date, chair_id)]

    # 2) Hourly slots
    slots = [
        {
            "hour": s.hour,
            "label": f"{s.hour:02d}:00",
            "occupant_count": s.occupant_count,
            "capacity": s.capacity,
            "available": s.available,
        }
        for s in chair_slots(chair, on_date, appts)
    ]

    # 3) Bookable start times for the requested duration
    starts = free_starts(chair, on_date, timedelta(minutes=duration_minutes), appts)

    return {
        "chair_id": chair_id,
        "date": on_date,
        "slots": slots,
        "duration_minutes": duration_minutes,
        "available_starts": [s.strftime("%H:%M") for s in starts],
    }


@router.get("/{chair_id}/layout", response_model=ChairLayoutResponse)
def chair_layout(
    chair_id: int,
    on_date: date,
    window_start_hour: int = 0,
    session: Session = Depends(get_session),
):
    get_chair_or_404(session, chair_id)

    placements = []
    for row in fetch_appointments_for_day(session, on_date, chair_id):
        appt = row.to_domain()
        placement = project(appt.range, window_start_hour, PIXELS_PER_HOUR)
        placements.append(
            {
                "appointment_id": appt.id,
                "top_offset_px": placement.top_offset_px,
                "height_px": placement.height_px,
                "color": appt.color or DEFAULT_COLOR,
            }
        )

    return {
        "chair_id": chair_id,
        "date": on_date,
        "window_start_hour": window_start_hour,
        "pixels_per_hour": PIXELS_PER_HOUR,
        "placements": placements,
    }
