# tattoo_studio/routers/users_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from tattoo_studio.auth import SessionContext, get_current_user, hash_password, initial_role
from tattoo_studio.db import get_session
from tattoo_studio.deps import require_role
from tattoo_studio.models import Artist, User
from tattoo_studio.schemas import ProfileUpdate, RoleUpdate, UserCreate, UserPublic, UserRole

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["users"],
)


def _public(user: User) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "role": user.role,
        "display_name": user.display_name,
        "artist_id": user.artist_id,
    }


@router.get("/me", response_model=UserPublic)
def me(current_user: SessionContext = Depends(get_current_user)):
    return {
        "id": current_user.user_id,
        "email": current_user.email,
        "role": current_user.role,
        "display_name": current_user.display_name,
        "artist_id": current_user.artist_id,
    }


@router.post("/users", status_code=201, response_model=UserPublic)
def create_user(
    user: UserCreate,
    session: Session = Depends(get_session),
):
    # 1) Check if email already exists
    existing = session.exec(
        select(User).where(User.email == user.email)
    ).first()
    if existing is not None:
        raise HTTPException(status_code=409, detail="Email already registered")

    # 2) Create user in DB
    db_user = User(
        email=user.email,
        password_hash=hash_password(user.password),
        role=initial_role(user.preferred_role).value,
        display_name=user.display_name,
    )

    session.add(db_user)
    session.commit()
    session.refresh(db_user)  # fills db_user.id

    logger.info("Registered %s as %s", db_user.email, db_user.role)
    return _public(db_user)


@router.patch("/me/profile", response_model=UserPublic)
def update_profile(
    profile: ProfileUpdate,
    session: Session = Depends(get_session),
    current_user: SessionContext = Depends(get_current_user),
):
    db_user = session.get(User, current_user.user_id)

    changes = profile.model_dump(exclude_unset=True)
    if "artist_id" in changes:
        artist_id = changes["artist_id"]
        # only staff link themselves to an artist
        if artist_id is not None and not current_user.is_privileged:
            raise HTTPException(status_code=403, detail="Only staff can link an artist")
        if artist_id is not None and session.get(Artist, artist_id) is None:
            raise HTTPException(status_code=404, detail="Artist not found")
        db_user.artist_id = artist_id

    if "display_name" in changes:
        name = (changes["display_name"] or "").strip()
        db_user.display_name = name or None

    session.add(db_user)
    session.commit()
    session.refresh(db_user)
    return _public(db_user)


@router.get("/admin/profiles", response_model=List[UserPublic])
def list_profiles(
    session: Session = Depends(get_session),
    current_user: SessionContext = Depends(get_current_user),
):
    require_role(current_user, UserRole.admin)

    users = session.exec(select(User).order_by(User.email)).all()
    return [_public(u) for u in users]


@router.patch("/admin/users/{user_id}/role", response_model=UserPublic)
def set_role(
    user_id: int,
    update: RoleUpdate,
    session: Session = Depends(get_session),
    current_user: SessionContext = Depends(get_current_user),
):
    require_role(current_user, UserRole.admin)

    db_user = session.get(User, user_id)
    if db_user is None:
        raise HTTPException(status_code=404, detail="User not found")

    db_user.role = update.role.value
    session.add(db_user)
    session.commit()
    session.refresh(db_user)

    logger.info("%s set role of %s to %s", current_user.email, db_user.email, db_user.role)
    return _public(db_user)
