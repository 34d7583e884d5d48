# tattoo_studio/db.py

import logging

from sqlmodel import Session, SQLModel, create_engine, select

from .config import DATABASE_URL
from .data import DEFAULT_CHAIRS
from .models import Chair

logger = logging.getLogger(__name__)

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}  # required for SQLite + FastAPI

engine = create_engine(
    DATABASE_URL,
    echo=False,
    connect_args=connect_args,
)


# Dependency: one session per request
def get_session():
    with Session(engine) as session:
        yield session


def seed_chairs(session: Session) -> int:
    """Creates the studio's chairs on an empty database. Returns how many were added."""
    existing = session.exec(select(Chair)).first()
    if existing is not None:
        return 0

    for chair in DEFAULT_CHAIRS:
        session.add(Chair(**chair))
    session.commit()
    return len(DEFAULT_CHAIRS)


def init_db(bind=engine, seed: bool = True) -> None:
    # also installs the no-overlap triggers (see models.py)
    SQLModel.metadata.create_all(bind)
    if seed:
        with Session(bind) as session:
            added = seed_chairs(session)
        if added:
            logger.info("Seeded %d chairs", added)
