# tattoo_studio/routers/studio_routes.py

from datetime import date

from fastapi import APIRouter, Depends
from sqlmodel import Session

from tattoo_studio.auth import SessionContext, get_current_user
from tattoo_studio.data import CHAIR_COUNT
from tattoo_studio.db import get_session
from tattoo_studio.scheduling import classify, studio_slots, summarize_day
from tattoo_studio.schemas import DaySummaryResponse, StudioAvailabilityResponse
from tattoo_studio.store import fetch_appointments_for_day

router = APIRouter(
    prefix="/studio",
    tags=["studio"],
)


@router.get("/availability", response_model=StudioAvailabilityResponse)
def studio_availability(
    on_date: date,
    session: Session = Depends(get_session),
):
    appts = [a.to_domain() for a in fetch_appointments_for_day(session, on_date)]

    slots = []
    for s in studio_slots(on_date, appts, capacity=CHAIR_COUNT):
        slots.append(
            {
                "hour": s.hour,
                "label": f"{s.hour:02d}:00 - {s.hour + 1:02d}:00",
                "occupant_count": s.occupant_count,
                "capacity": s.capacity,
                "available": s.available,
                "level": classify(s.available).value,
            }
        )

    return {"date": on_date, "chair_count": CHAIR_COUNT, "slots": slots}


@router.get("/summary", response_model=DaySummaryResponse)
def day_summary(
    on_date: date,
    session: Session = Depends(get_session),
    current_user: SessionContext = Depends(get_current_user),
):
    appts = [a.to_domain() for a in fetch_appointments_for_day(session, on_date)]
    summary = summarize_day(appts)

    return {
        "date": on_date,
        "appointment_count": summary.appointment_count,
        "total_revenue": summary.total_revenue if current_user.is_privileged else None,
    }
