# tattoo_studio/routers/auth_routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session, select

from tattoo_studio.auth import context_for, create_access_token, verify_password
from tattoo_studio.db import get_session
from tattoo_studio.models import User
from tattoo_studio.schemas import Token

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


@router.post("/login", response_model=Token)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    session: Session = Depends(get_session),
):
    """
    Exchanges studio credentials for a bearer token.

    The response also carries the caller's role and linked artist, which
    decide whether the calendar shows client details or masked bookings.
    The role is re-read on every request, so a role change by an admin takes
    effect without logging in again.
    """
    user = session.exec(
        select(User).where(User.email == form_data.username.strip())
    ).first()

    if user is None or not verify_password(form_data.password, user.password_hash):
        logger.info("Failed login for %s", form_data.username)
        raise HTTPException(
            status_code=401,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    context = context_for(user)
    logger.info("%s signed in as %s", context.email, context.role.value)

    return Token(
        access_token=create_access_token({"sub": context.email}),
        role=context.role,
        display_name=context.display_name,
        artist_id=context.artist_id,
    )
