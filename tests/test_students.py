import pytest

from conftest import PASSWORD
from dormitory.models.housing import StudentPlacement
from dormitory.models.user import Employee, Student

NEW_STUDENT = {
    "student_id": "STU100",
    "first_name": "Eden",
    "second_name": "Solomon",
    "last_name": "Desta",
    "email": "Eden.Desta@Dorm.test",
    "gender": "Female",
    "batch": "2025",
}


@pytest.mark.parametrize(
    "user_id, expected",
    [
        ("ADM001", 200),
        ("DIR001", 200),
        ("COO001", 200),
        ("REG001", 200),
        ("PRO001", 200),
        ("PM001", 200),
        ("SEC001", 403),
        ("MNT001", 403),
        ("STU001", 403),
    ],
)
def test_list_students_role_matrix(client, seed, auth, user_id, expected):
    response = client.get("/api/students", headers=auth(user_id))
    assert response.status_code == expected


def test_list_students_paginates_and_searches(client, seed, auth):
    response = client.get("/api/students?page=1&limit=2", headers=auth("ADM001"))

    body = response.json()
    assert len(body["data"]) == 2
    assert body["pagination"] == {"page": 1, "limit": 2, "total": 3, "totalPages": 2}
    assert all("password" not in s for s in body["data"])

    response = client.get("/api/students?search=liya", headers=auth("ADM001"))
    assert [s["student_id"] for s in response.json()["data"]] == ["STU002"]


def test_list_students_rejects_oversized_limit(client, seed, auth):
    response = client.get("/api/students?limit=500", headers=auth("ADM001"))
    assert response.status_code == 422


@pytest.mark.parametrize("user_id, expected", [("REG001", 201), ("DIR001", 201), ("COO001", 403), ("STU001", 403)])
def test_create_student_roles(client, seed, auth, user_id, expected):
    response = client.post("/api/students", json=NEW_STUDENT, headers=auth(user_id))
    assert response.status_code == expected


def test_create_student_defaults_password_and_normalizes(client, seed, auth):
    response = client.post("/api/students", json=NEW_STUDENT, headers=auth("ADM001"))

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["email"] == "eden.desta@dorm.test"
    assert data["gender"] == "female"
    assert data["status"] == "active"
    assert data["disability_status"] == "none"
    assert "password" not in data

    login = client.post("/api/auth/login", json={"identifier": "STU100", "password": "Desta1234abcd#"})
    assert login.status_code == 200


def test_create_student_duplicate_is_conflict(client, seed, auth):
    duplicate = dict(NEW_STUDENT, student_id="STU001")
    response = client.post("/api/students", json=duplicate, headers=auth("ADM001"))
    assert response.status_code == 409

    duplicate_email = dict(NEW_STUDENT, email="stu002@dorm.test")
    response = client.post("/api/students", json=duplicate_email, headers=auth("ADM001"))
    assert response.status_code == 409


def test_create_student_missing_fields_is_unprocessable(client, seed, auth):
    response = client.post("/api/students", json={"student_id": "X1"}, headers=auth("ADM001"))

    assert response.status_code == 422
    assert response.json()["success"] is False
    assert response.json()["error_code"] == "VALIDATION_ERROR"


def test_bulk_status_actions(client, seed, auth, db):
    response = client.put("/api/students", json={"action": "deactivate_all"}, headers=auth("REG001"))

    assert response.status_code == 200
    assert response.json()["data"] == {"count": 3}
    db.expire_all()
    assert {s.status for s in db.query(Student).all()} == {"inactive"}

    response = client.put("/api/students", json={"action": "graduate_all"}, headers=auth("REG001"))
    assert response.status_code == 400


def test_student_can_read_only_own_record(client, seed, auth):
    own = client.get("/api/students/STU001", headers=auth("STU001"))
    assert own.status_code == 200
    assert own.json()["data"]["placement"] is None

    other = client.get("/api/students/STU002", headers=auth("STU001"))
    assert other.status_code == 403

    staff = client.get("/api/students/STU002", headers=auth("SEC001"))
    assert staff.status_code == 200


def test_get_unknown_student_is_not_found(client, seed, auth):
    response = client.get("/api/students/NOPE", headers=auth("ADM001"))
    assert response.status_code == 404


def test_update_student_persists(client, seed, auth):
    response = client.put(
        "/api/students/STU001",
        json={"first_name": "Kaleb", "batch": "2026", "student_id": "HACK"},
        headers=auth("REG001"),
    )

    assert response.status_code == 200
    fetched = client.get("/api/students/STU001", headers=auth("ADM001")).json()["data"]
    assert fetched["first_name"] == "Kaleb"
    assert fetched["batch"] == "2026"
    assert fetched["student_id"] == "STU001"


def test_update_student_forbidden_for_coordinator(client, seed, auth):
    response = client.put("/api/students/STU001", json={"first_name": "X"}, headers=auth("COO001"))
    assert response.status_code == 403


def test_delete_student_frees_room(client, seed, auth, db, make_block):
    make_block("A", reserved_for="male")
    placed = client.post(
        "/api/placements",
        json={"student_id": "STU001", "room": "A101", "block": "A"},
        headers=auth("ADM001"),
    )
    assert placed.status_code == 201

    assert client.delete("/api/students/STU001", headers=auth("REG001")).status_code == 403
    response = client.delete("/api/students/STU001", headers=auth("DIR001"))

    assert response.status_code == 200
    assert client.get("/api/students/STU001", headers=auth("ADM001")).status_code == 404
    db.expire_all()
    assert db.query(StudentPlacement).filter_by(student_id="STU001").first() is None
    room = client.get("/api/rooms/A101?block=A", headers=auth("ADM001")).json()["data"]
    assert room["current_occupancy"] == 0
    assert room["status"] == "available"


def test_reset_password(client, seed, auth):
    assert client.post("/api/students/STU001/reset-password", headers=auth("DIR001")).status_code == 403

    response = client.post("/api/students/STU001/reset-password", headers=auth("REG001"))

    assert response.status_code == 200
    assert response.json()["data"] == {"new_password": "Mengistu1234abcd#"}
    old = client.post("/api/auth/login", json={"identifier": "STU001", "password": PASSWORD})
    assert old.status_code == 401
    new = client.post("/api/auth/login", json={"identifier": "STU001", "password": "Mengistu1234abcd#"})
    assert new.status_code == 200


CONTACT = {
    "father_name": "Abel",
    "grand_father": "Mengistu",
    "grand_grand_father": "Haile",
    "mother_name": "Almaz",
    "phone": "0911223344",
    "region": "Amhara",
    "woreda": "Bahir Dar",
    "kebele": "04",
}


def test_emergency_contact_upsert_normalizes_phone(client, seed, auth):
    missing = client.get("/api/students/STU001/emergency-contact", headers=auth("STU001"))
    assert missing.status_code == 404

    created = client.post("/api/students/STU001/emergency-contact", json=CONTACT, headers=auth("STU001"))
    assert created.status_code == 200
    assert created.json()["data"]["phone"] == "+251911223344"

    updated = client.put(
        "/api/students/STU001/emergency-contact",
        json=dict(CONTACT, phone="+251722334455"),
        headers=auth("REG001"),
    )
    assert updated.status_code == 200

    fetched = client.get("/api/students/STU001/emergency-contact", headers=auth("PRO001"))
    assert fetched.json()["data"]["phone"] == "+251722334455"


def test_emergency_contact_rejects_bad_phone(client, seed, auth):
    response = client.post(
        "/api/students/STU001/emergency-contact",
        json=dict(CONTACT, phone="12345"),
        headers=auth("STU001"),
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid phone number format"


def test_emergency_contact_requires_every_field(client, seed, auth):
    partial = {k: v for k, v in CONTACT.items() if k != "kebele"}
    response = client.post("/api/students/STU001/emergency-contact", json=partial, headers=auth("STU001"))
    assert response.status_code == 422


def test_student_cannot_write_other_contact(client, seed, auth):
    response = client.post("/api/students/STU002/emergency-contact", json=CONTACT, headers=auth("STU001"))
    assert response.status_code == 403


def test_employee_sharing_a_student_id_cannot_write_contact(client, seed, hasher):
    seed.add(Employee(
        employee_id="STU001",
        first_name="Tigist",
        last_name="Alemayehu",
        email="tigist.alemayehu@dorm.test",
        gender="female",
        role="maintainer",
        status="active",
        password=hasher.hash("staff-pass"),
    ))
    seed.commit()
    login = client.post("/api/auth/login", json={"identifier": "STU001", "password": "staff-pass"})
    assert login.json()["data"]["user"]["userType"] == "employee"

    response = client.post(
        "/api/students/STU001/emergency-contact",
        json=CONTACT,
        headers={"Authorization": "Bearer " + login.json()["data"]["token"]},
    )

    assert response.status_code == 403


def test_student_views_when_unplaced(client, seed, auth):
    assert client.get("/api/students/STU001/placement", headers=auth("STU001")).status_code == 404
    materials = client.get("/api/students/STU001/materials", headers=auth("STU001"))
    assert materials.json()["data"] == []


def test_student_placement_view(client, seed, auth, make_block):
    make_block("A", reserved_for="male")
    client.post(
        "/api/blocks/assign-proctors",
        json={"assignments": [{"blockId": "A", "proctorId": "PRO001"}]},
        headers=auth("COO001"),
    )
    client.post(
        "/api/placements",
        json={"student_id": "STU001", "room": "A102", "block": "A"},
        headers=auth("ADM001"),
    )

    response = client.get("/api/students/STU001/placement", headers=auth("STU001"))

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["student_name"] == "Kidus Abel Mengistu"
    assert data["block"] == {"block_id": "A", "name": "Block A", "reserved_for": "male"}
    assert data["room"]["room_id"] == "A102"
    assert data["room"]["current_occupancy"] == 1
    assert data["proctor_name"] == "Yonas Alemu"
