import os

os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_CHAIRS", "false")

from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from tattoo_studio.auth import hash_password
from tattoo_studio.db import get_session, init_db
from tattoo_studio.main import app
from tattoo_studio.models import Appointment, Artist, User
from tattoo_studio.scheduling import Appointment as DomainAppointment, Chair, TimeRange

DAY = date(2030, 3, 14)
PASSWORD = "correct-horse"


def at(hour, minute=0, day=DAY):
    return datetime(day.year, day.month, day.day, hour, minute)


def booking(appt_id, chair_id, start, end, artist_id="artist-1", price=None):
    return DomainAppointment(
        id=appt_id,
        chair_id=chair_id,
        artist_id=artist_id,
        range=TimeRange(start=start, end=end),
        client_name=f"client {appt_id}",
        price=price,
    )


@pytest.fixture
def chair_one():
    return Chair(id=1, name="Chair 1", work_start_hour=10, work_end_hour=18)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine, seed=True)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(session):
    def override_session():
        return session

    app.dependency_overrides[get_session] = override_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def artist(session):
    db_artist = Artist(name="Nikos")
    session.add(db_artist)
    session.commit()
    session.refresh(db_artist)
    return db_artist


def make_user(session, email, role):
    user = User(email=email, password_hash=hash_password(PASSWORD), role=role)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def login(client, email):
    response = client.post("/auth/login", data={"username": email, "password": PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def employee_headers(client, session):
    make_user(session, "employee@studio.test", "employee")
    return login(client, "employee@studio.test")


@pytest.fixture
def admin_headers(client, session):
    make_user(session, "admin@studio.test", "admin")
    return login(client, "admin@studio.test")


@pytest.fixture
def other_headers(client, session):
    make_user(session, "visitor@studio.test", "other")
    return login(client, "visitor@studio.test")


def insert_appointment(session, chair_id, artist_id, start, end, **extra):
    appt = Appointment(
        chair_id=chair_id,
        artist_id=artist_id,
        start_time=start,
        end_time=end,
        client_name=extra.pop("client_name", "Maria"),
        **extra,
    )
    session.add(appt)
    session.commit()
    session.refresh(appt)
    return appt
