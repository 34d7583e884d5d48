# tattoo_studio/routers/artists_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from tattoo_studio.auth import SessionContext, get_current_user
from tattoo_studio.db import get_session
from tattoo_studio.deps import require_role
from tattoo_studio.models import Appointment, Artist
from tattoo_studio.schemas import ArtistCreate, ArtistPublic, UserRole
from tattoo_studio.store import fetch_artists

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/artists",
    tags=["artists"],
)


@router.get("", response_model=List[ArtistPublic])
def list_artists(session: Session = Depends(get_session)):
    return [a.to_domain() for a in fetch_artists(session)]


@router.post("", response_model=ArtistPublic, status_code=201)
def create_artist(
    artist: ArtistCreate,
    session: Session = Depends(get_session),
    current_user: SessionContext = Depends(get_current_user),
):
    require_role(current_user, UserRole.admin)

    db_artist = Artist(name=artist.name.strip())
    session.add(db_artist)
    session.commit()
    session.refresh(db_artist)

    logger.info("Added artist %s (%s)", db_artist.name, db_artist.id)
    return db_artist


@router.delete("/{artist_id}", status_code=204)
def delete_artist(
    artist_id: str,
    session: Session = Depends(get_session),
    current_user: SessionContext = Depends(get_current_user),
):
    require_role(current_user, UserRole.admin)

    db_artist = session.get(Artist, artist_id)
    if db_artist is None:
        raise HTTPException(status_code=404, detail="Artist not found")

    booked = session.exec(
        select(Appointment).where(Appointment.artist_id == artist_id)
    ).first()
    if booked is not None:
        raise HTTPException(status_code=409, detail="Artist still has appointments")

    session.delete(db_artist)
    session.commit()
