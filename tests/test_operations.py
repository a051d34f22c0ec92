import pytest

REQUEST = {"student_id": "STU001", "type": "maintenance", "category": "plumbing", "description": "Leaking tap"}


def _file_request(client, auth, user_id="STU001", **overrides):
    response = client.post("/api/requests", json=dict(REQUEST, **overrides), headers=auth(user_id))
    assert response.status_code == 201, response.text
    return response.json()["data"]


# Requests

def test_student_files_own_request(client, seed, auth):
    data = _file_request(client, auth)

    assert data["status"] == "pending"
    assert data["priority"] == "medium"
    assert data["student_id"] == "STU001"


def test_student_cannot_file_for_someone_else(client, seed, auth):
    response = client.post("/api/requests", json=dict(REQUEST, student_id="STU002"), headers=auth("STU001"))
    assert response.status_code == 403


def test_request_for_unknown_student(client, seed, auth):
    response = client.post("/api/requests", json=dict(REQUEST, student_id="NOPE"), headers=auth("ADM001"))
    assert response.status_code == 404


def test_request_description_limit(client, seed, auth):
    response = client.post("/api/requests", json=dict(REQUEST, description="x" * 401), headers=auth("STU001"))
    assert response.status_code == 422


def test_students_only_see_own_requests(client, seed, auth):
    _file_request(client, auth, "STU001")
    _file_request(client, auth, "STU002", student_id="STU002", type="complaint", description="Noise")

    own = client.get("/api/requests?student_id=STU002", headers=auth("STU001")).json()["data"]
    assert [r["student_id"] for r in own] == ["STU001"]
    assert own[0]["student"] == {"name": "Kidus Abel Mengistu", "email": "stu001@dorm.test"}

    everything = client.get("/api/requests", headers=auth("PRO001")).json()["data"]
    assert [r["student_id"] for r in everything] == ["STU002", "STU001"]

    complaints = client.get("/api/requests?type=complaint", headers=auth("ADM001")).json()["data"]
    assert [r["type"] for r in complaints] == ["complaint"]


@pytest.mark.parametrize(
    "action, status, stamp",
    [("approve", "approved", "approved_by"), ("reject", "rejected", "resolved_by"), ("complete", "done", "resolved_by")],
)
def test_request_actions(client, seed, auth, action, status, stamp):
    request = _file_request(client, auth)

    response = client.put(f"/api/requests/{request['id']}", json={"action": action}, headers=auth("PRO001"))

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == status
    assert data[stamp] == "PRO001"


def test_request_update_rules(client, seed, auth):
    request = _file_request(client, auth)
    url = f"/api/requests/{request['id']}"

    assert client.put(url, json={"action": "approve"}, headers=auth("STU001")).status_code == 403
    assert client.put(url, json={"action": "escalate"}, headers=auth("ADM001")).status_code == 400

    response = client.put(url, json={"priority": "urgent"}, headers=auth("ADM001"))
    assert response.json()["data"]["priority"] == "urgent"
    assert response.json()["data"]["status"] == "pending"


def test_request_delete_rules(client, seed, auth):
    first = _file_request(client, auth)
    second = _file_request(client, auth)

    assert client.delete(f"/api/requests/{first['id']}", headers=auth("STU002")).status_code == 403
    assert client.delete(f"/api/requests/{first['id']}", headers=auth("PRO001")).status_code == 403
    assert client.delete(f"/api/requests/{first['id']}", headers=auth("STU001")).status_code == 200

    client.put(f"/api/requests/{second['id']}", json={"action": "approve"}, headers=auth("ADM001"))
    assert client.delete(f"/api/requests/{second['id']}", headers=auth("STU001")).status_code == 400
    assert client.delete(f"/api/requests/{second['id']}", headers=auth("DIR001")).status_code == 200
    assert client.get("/api/requests", headers=auth("ADM001")).json()["data"] == []


# Emergencies

CONTACT = {
    "father_name": "Abel",
    "grand_father": "Mengistu",
    "grand_grand_father": "Haile",
    "mother_name": "Almaz",
    "phone": "0711223344",
    "region": "Oromia",
    "woreda": "Adama",
    "kebele": "02",
}


def test_report_emergency_snapshots_contact(client, seed, auth):
    client.post("/api/students/STU001/emergency-contact", json=CONTACT, headers=auth("STU001"))

    response = client.post(
        "/api/emergencies",
        json={"student_id": "STU001", "type": "medical", "description": "Fainted in the hall"},
        headers=auth("SEC001"),
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "reported"
    assert data["reported_by"] == "SEC001"
    assert data["phone"] == "+251711223344"
    assert data["mother_name"] == "Almaz"


def test_report_emergency_without_contact(client, seed, auth):
    response = client.post(
        "/api/emergencies",
        json={"student_id": "STU002", "type": "fire", "description": "Smoke"},
        headers=auth("STU002"),
    )

    assert response.status_code == 201
    assert response.json()["data"]["phone"] is None


def test_emergency_listing_and_resolution(client, seed, auth):
    created = client.post(
        "/api/emergencies",
        json={"student_id": "STU001", "type": "security", "description": "Lost key"},
        headers=auth("STU001"),
    ).json()["data"]

    assert client.get("/api/emergencies", headers=auth("STU001")).status_code == 403
    assert len(client.get("/api/emergencies?status=reported", headers=auth("PRO001")).json()["data"]) == 1

    url = f"/api/emergencies/{created['id']}"
    progress = client.put(url, json={"status": "in_progress"}, headers=auth("PRO001")).json()["data"]
    assert progress["resolved_date"] is None

    resolved = client.put(url, json={"status": "resolved"}, headers=auth("PRO001")).json()["data"]
    assert resolved["status"] == "resolved"
    assert resolved["resolved_date"] is not None

    assert client.put(url, json={"status": "closed"}, headers=auth("PRO001")).status_code == 422


# Materials

def test_material_crud(client, seed, auth):
    payload = {"block": "A", "room": "A101", "locker": 2, "chair": 2, "unlocker": "Copy"}

    created = client.post("/api/materials", json=payload, headers=auth("PRO001"))
    assert created.status_code == 201
    material_id = created.json()["data"]["id"]

    assert client.post("/api/materials", json=payload, headers=auth("PRO001")).status_code == 409

    updated = client.put(f"/api/materials/{material_id}", json={"chair": 6}, headers=auth("COO001"))
    assert updated.json()["data"]["chair"] == 6
    assert client.get(f"/api/materials/{material_id}", headers=auth("STU001")).json()["data"]["locker"] == 2

    assert client.delete(f"/api/materials/{material_id}", headers=auth("STU001")).status_code == 403
    assert client.delete(f"/api/materials/{material_id}", headers=auth("ADM001")).status_code == 200
    assert client.get(f"/api/materials/{material_id}", headers=auth("ADM001")).status_code == 404


@pytest.mark.parametrize("count, expected", [(0, 201), (6, 201), (7, 422), (-1, 422)])
def test_material_count_bounds(client, seed, auth, count, expected):
    payload = {"block": "A", "room": "A101", "tables": count}
    assert client.post("/api/materials", json=payload, headers=auth("ADM001")).status_code == expected


def test_material_search(client, seed, auth):
    for block, room in (("A", "A101"), ("A", "A102"), ("B", "B101")):
        client.post("/api/materials", json={"block": block, "room": room}, headers=auth("ADM001"))

    by_block = client.get("/api/materials?block=A", headers=auth("ADM001")).json()["data"]
    assert sorted(m["room"] for m in by_block) == ["A101", "A102"]

    by_room = client.get("/api/materials?search=102", headers=auth("ADM001")).json()["data"]
    assert [m["room"] for m in by_room] == ["A102"]


# Notifications

def test_notifications_target_roles(client, seed, auth):
    headers = auth("DIR001")
    client.post("/api/notifications", json={"title": "All", "message": "Everyone"}, headers=headers)
    client.post(
        "/api/notifications",
        json={"title": "Students", "message": "Exams", "target_audience": ["student"]},
        headers=headers,
    )
    client.post(
        "/api/notifications",
        json={"title": "Proctors", "message": "Meeting", "target_audience": ["proctor"]},
        headers=headers,
    )
    client.post(
        "/api/notifications",
        json={"title": "Old", "message": "Expired", "expires_date": "2020-01-01T00:00:00Z"},
        headers=headers,
    )

    student_view = client.get("/api/notifications", headers=auth("STU001")).json()["data"]
    assert [n["title"] for n in student_view] == ["Students", "All"]

    proctor_view = client.get("/api/notifications?limit=1", headers=auth("PRO001")).json()["data"]
    assert [n["title"] for n in proctor_view] == ["Proctors"]


def test_create_notification_defaults_and_roles(client, seed, auth):
    response = client.post("/api/notifications", json={"title": "Hi", "message": "There"}, headers=auth("PRO001"))

    assert response.status_code == 201
    data = response.json()["data"]
    assert (data["type"], data["priority"], data["created_by"]) == ("info", "medium", "PRO001")

    assert client.post(
        "/api/notifications", json={"title": "Hi", "message": "There"}, headers=auth("COO001")
    ).status_code == 403
    assert client.post(
        "/api/notifications",
        json={"title": "Hi", "message": "There", "target_audience": ["aliens"]},
        headers=auth("ADM001"),
    ).status_code == 422
