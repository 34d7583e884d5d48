from datetime import timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from tattoo_studio.models import Appointment
from tattoo_studio.scheduling import BookingRejected, RejectionKind
from tattoo_studio.store import StoreError, fetch_appointments_for_day, is_chair_conflict, submit_appointment

from tests.conftest import DAY, at, insert_appointment


def new_row(artist, chair_id, start, end):
    return Appointment(chair_id=chair_id, artist_id=artist.id, start_time=start, end_time=end, client_name="Sofia")


def test_store_refuses_overlap_on_same_chair(session, artist):
    insert_appointment(session, 1, artist.id, at(12), at(13))

    result = submit_appointment(session, new_row(artist, 1, at(12, 30), at(13, 30)))
    assert isinstance(result, BookingRejected)
    assert result.kind == RejectionKind.chair_conflict
    assert result.authoritative is True
    assert len(fetch_appointments_for_day(session, DAY)) == 1


def test_store_accepts_adjacent_and_other_chairs(session, artist):
    insert_appointment(session, 1, artist.id, at(12), at(13))

    assert isinstance(submit_appointment(session, new_row(artist, 1, at(13), at(14))), Appointment)
    assert isinstance(submit_appointment(session, new_row(artist, 2, at(12), at(13))), Appointment)


def test_store_refuses_update_into_overlap(session, artist):
    first = insert_appointment(session, 1, artist.id, at(12), at(13))
    insert_appointment(session, 1, artist.id, at(14), at(15))

    first.end_time = at(14, 30)
    result = submit_appointment(session, first)
    assert isinstance(result, BookingRejected)

    session.refresh(first)
    assert first.end_time == at(13)


def test_store_allows_update_of_own_row(session, artist):
    appt = insert_appointment(session, 1, artist.id, at(12), at(13))

    appt.client_name = "Sofia M."
    appt.end_time = at(12, 30)
    assert isinstance(submit_appointment(session, appt), Appointment)


def test_fetch_for_day_filters_by_day_and_chair(session, artist):
    insert_appointment(session, 1, artist.id, at(12), at(13))
    insert_appointment(session, 2, artist.id, at(10), at(11))
    insert_appointment(session, 1, artist.id, at(12, day=DAY + timedelta(days=1)), at(13, day=DAY + timedelta(days=1)))

    assert [a.start_time for a in fetch_appointments_for_day(session, DAY)] == [at(10), at(12)]
    assert [a.chair_id for a in fetch_appointments_for_day(session, DAY, chair_id=1)] == [1]


def test_other_integrity_errors_are_store_errors(session, artist):
    row = new_row(artist, 1, at(12), at(13))
    row.client_name = None

    with pytest.raises(StoreError):
        submit_appointment(session, row)
    assert fetch_appointments_for_day(session, DAY) == []


def test_conflict_detection_reads_the_database_message():
    def error(message):
        return IntegrityError("INSERT INTO appointment", {}, Exception(message))

    assert is_chair_conflict(error("chair_conflict"))
    assert is_chair_conflict(error("UNIQUE constraint failed: appointment.chair_id, appointment.start_time"))
    assert not is_chair_conflict(error("NOT NULL constraint failed: appointment.client_name"))
    assert not is_chair_conflict(error("FOREIGN KEY constraint failed"))
