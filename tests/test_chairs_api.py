from tests.conftest import DAY, at, insert_appointment


def test_four_chairs_are_seeded(client):
    response = client.get("/chairs")
    assert response.status_code == 200
    chairs = response.json()
    assert [c["id"] for c in chairs] == [1, 2, 3, 4]
    assert chairs[0]["work_start_hour"] == 10
    assert chairs[0]["work_end_hour"] == 22


def test_admin_sets_chair_hours(client, admin_headers):
    response = client.put(
        "/chairs/1/hours",
        json={"work_start_hour": 10, "work_end_hour": 18},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["work_end_hour"] == 18


def test_chair_hours_must_be_ordered(client, admin_headers):
    response = client.put(
        "/chairs/1/hours",
        json={"work_start_hour": 18, "work_end_hour": 10},
        headers=admin_headers,
    )
    assert response.status_code == 422


def test_employee_cannot_set_chair_hours(client, employee_headers):
    response = client.put(
        "/chairs/1/hours",
        json={"work_start_hour": 9, "work_end_hour": 17},
        headers=employee_headers,
    )
    assert response.status_code == 403


def test_chair_availability(client, session, artist):
    insert_appointment(session, 1, artist.id, at(12), at(13, 30))
    insert_appointment(session, 2, artist.id, at(10), at(11))

    response = client.get("/chairs/1/availability", params={"on_date": DAY.isoformat()})
    assert response.status_code == 200
    body = response.json()

    slots = {s["hour"]: s for s in body["slots"]}
    assert slots[9]["capacity"] == 0
    assert slots[10]["available"] == 1
    assert slots[12]["available"] == 0
    assert slots[13]["available"] == 0
    assert slots[14]["available"] == 1

    assert body["duration_minutes"] == 60
    assert "11:00" in body["available_starts"]
    assert "12:00" not in body["available_starts"]
    assert "13:30" in body["available_starts"]
    assert body["available_starts"][-1] == "21:00"


def test_chair_availability_unknown_chair(client):
    response = client.get("/chairs/7/availability", params={"on_date": DAY.isoformat()})
    assert response.status_code == 404


def test_chair_layout(client, session, artist):
    appt = insert_appointment(session, 1, artist.id, at(10, 30), at(11, 15), color="#FF0000")

    response = client.get("/chairs/1/layout", params={"on_date": DAY.isoformat(), "window_start_hour": 10})
    assert response.status_code == 200

    [placement] = response.json()["placements"]
    assert placement["appointment_id"] == appt.id
    assert placement["top_offset_px"] == 40
    assert placement["height_px"] == 60
    assert placement["color"] == "#FF0000"
