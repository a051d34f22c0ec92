import pytest

from dormitory.models.user import Student


def _room(client, auth, room_id, block):
    return client.get(f"/api/rooms/{room_id}?block={block}", headers=auth("ADM001")).json()["data"]


def _assign(client, auth, student_id, room, block, user_id="ADM001"):
    return client.post(
        "/api/placements",
        json={"student_id": student_id, "room": room, "block": block},
        headers=auth(user_id),
    )


def test_auto_assign_respects_gender_and_disability(client, seed, auth, make_block):
    make_block("A", reserved_for="male")

    response = client.post("/api/placements", json={"action": "auto_assign"}, headers=auth("COO001"))

    assert response.status_code == 200
    assert response.json()["data"] == {
        "assigned": 2,
        "failed": 1,
        "errors": ["STU002: No suitable blocks available for this gender"],
    }
    placements = {
        p["student_id"]: p for p in client.get("/api/placements", headers=auth("ADM001")).json()["data"]
    }
    # Non-disabled students skip ground-floor accessible rooms when others are free
    assert placements["STU001"]["room"] == "A101"
    assert placements["STU003"]["room"] == "A001"
    assert placements["STU001"]["status"] == "active"
    assert placements["STU001"]["student_name"] == "Kidus Abel Mengistu"


def test_auto_assign_female_into_mixed_block(client, seed, auth, make_block):
    make_block("M", reserved_for="mixed", floors=1, rooms_per_floor=1, room_capacity=4)

    response = client.post(
        "/api/placements",
        json={"action": "auto_assign_student", "student_id": "STU002"},
        headers=auth("ADM001"),
    )

    assert response.status_code == 200
    assert response.json()["data"]["room"] == "M001"
    assert response.json()["data"]["block"] == "M"


def test_auto_assign_respects_capacity(client, seed, auth, make_block):
    make_block("A", reserved_for="male", floors=1, rooms_per_floor=1, room_capacity=1)

    response = client.post("/api/placements", json={"action": "auto_assign"}, headers=auth("ADM001"))

    result = response.json()["data"]
    assert result["assigned"] == 1
    assert "STU003: No available rooms found" in result["errors"]
    room = _room(client, auth, "A001", "A")
    assert room["current_occupancy"] == 1
    assert room["status"] == "occupied"


def test_disabled_student_needs_accessible_room(client, seed, auth, make_block):
    make_block("A", reserved_for="male", floors=2, rooms_per_floor=1, room_capacity=2)
    client.put(
        "/api/rooms",
        json={"action": "update_status", "room_id": "A001", "block": "A", "status": "maintenance"},
        headers=auth("ADM001"),
    )

    auto = client.post(
        "/api/placements",
        json={"action": "auto_assign_student", "student_id": "STU003"},
        headers=auth("ADM001"),
    )
    assert auto.status_code == 400
    assert auto.json()["error"] == "No available rooms found"

    manual = _assign(client, auth, "STU003", "A101", "A")
    assert manual.status_code == 400
    assert manual.json()["error"] == "Disabled students must be placed in accessible rooms"


def test_auto_assign_specific_student_errors(client, seed, auth, make_block):
    make_block("A", reserved_for="male")

    missing = client.post(
        "/api/placements",
        json={"action": "auto_assign_student", "student_id": "NOPE"},
        headers=auth("ADM001"),
    )
    assert missing.status_code == 404
    assert missing.json()["error"] == "Student not found or not active"

    client.post("/api/placements", json={"action": "auto_assign_student", "student_id": "STU001"}, headers=auth("ADM001"))
    again = client.post(
        "/api/placements",
        json={"action": "auto_assign_student", "student_id": "STU001"},
        headers=auth("ADM001"),
    )
    assert again.status_code == 409
    assert again.json()["error"] == "Student already has a placement"


@pytest.mark.parametrize(
    "student_id, room, block, status_code",
    [
        ("NOPE", "A101", "A", 404),
        ("STU001", "A101", "X", 404),
        ("STU001", "A999", "A", 404),
        ("STU002", "A101", "A", 400),
    ],
)
def test_manual_assign_checks(client, seed, auth, make_block, student_id, room, block, status_code):
    make_block("A", reserved_for="male")
    assert _assign(client, auth, student_id, room, block).status_code == status_code


def test_manual_assign_rejects_inactive_student_and_block(client, seed, auth, db, make_block):
    make_block("A", reserved_for="male")
    make_block("B", reserved_for="male", status="inactive")
    student = db.query(Student).filter_by(student_id="STU003").one()
    student.status = "suspended"
    db.commit()

    assert _assign(client, auth, "STU003", "A001", "A").status_code == 400
    assert _assign(client, auth, "STU001", "B101", "B").status_code == 400


def test_manual_assign_and_duplicate(client, seed, auth, make_block):
    make_block("A", reserved_for="male", room_capacity=1)

    created = _assign(client, auth, "STU001", "A101", "A", user_id="COO001")
    assert created.status_code == 201
    assert created.json()["data"]["room"] == "A101"

    assert _assign(client, auth, "STU001", "A102", "A").status_code == 409
    assert _room(client, auth, "A101", "A")["status"] == "occupied"
    assert _assign(client, auth, "STU003", "A101", "A").status_code == 400


def test_placement_writes_require_housing_roles(client, seed, auth, make_block):
    make_block("A")
    assert _assign(client, auth, "STU001", "A101", "A", user_id="PRO001").status_code == 403
    assert client.get("/api/placements", headers=auth("STU001")).status_code == 403


def test_transfer_moves_occupancy(client, seed, auth, make_block):
    make_block("A", reserved_for="male", room_capacity=1)
    _assign(client, auth, "STU001", "A101", "A")

    response = client.put(
        "/api/placements/STU001",
        json={"action": "transfer", "room": "A102", "block": "A"},
        headers=auth("COO001"),
    )

    assert response.status_code == 200
    assert response.json()["data"]["room"] == "A102"
    old_room = _room(client, auth, "A101", "A")
    new_room = _room(client, auth, "A102", "A")
    assert (old_room["current_occupancy"], old_room["status"]) == (0, "available")
    assert (new_room["current_occupancy"], new_room["status"]) == (1, "occupied")


def test_transfer_rejects_full_room(client, seed, auth, make_block):
    make_block("A", reserved_for="male", room_capacity=1)
    _assign(client, auth, "STU001", "A101", "A")
    _assign(client, auth, "STU003", "A001", "A")

    response = client.put(
        "/api/placements/STU001",
        json={"action": "transfer", "room": "A001", "block": "A"},
        headers=auth("ADM001"),
    )

    assert response.status_code == 400
    assert _room(client, auth, "A101", "A")["current_occupancy"] == 1


def test_plain_placement_update(client, seed, auth, make_block):
    make_block("A")
    _assign(client, auth, "STU001", "A101", "A")

    response = client.put("/api/placements/STU001", json={"year": 2030}, headers=auth("ADM001"))

    assert response.status_code == 200
    assert response.json()["data"]["year"] == 2030
    assert client.get("/api/placements/STU001", headers=auth("STU001")).json()["data"]["year"] == 2030
    assert client.get("/api/placements/STU001", headers=auth("STU003")).status_code == 403


def test_unassign_frees_room(client, seed, auth, make_block):
    make_block("A", room_capacity=1)
    _assign(client, auth, "STU001", "A101", "A")

    response = client.delete("/api/placements/STU001", headers=auth("ADM001"))

    assert response.status_code == 200
    assert client.get("/api/placements/STU001", headers=auth("ADM001")).status_code == 404
    room = _room(client, auth, "A101", "A")
    assert (room["current_occupancy"], room["status"]) == (0, "available")
    assert client.delete("/api/placements/STU001", headers=auth("ADM001")).status_code == 404


def test_unassign_all_resets_rooms(client, seed, auth, make_block):
    make_block("A", room_capacity=1)
    client.post("/api/placements", json={"action": "auto_assign"}, headers=auth("ADM001"))

    response = client.post("/api/placements", json={"action": "unassign_all"}, headers=auth("DIR001"))

    assert response.status_code == 200
    assert response.json()["data"] == {"count": 2}
    assert client.get("/api/placements", headers=auth("ADM001")).json()["data"] == []
    rooms = client.get("/api/rooms?block=A", headers=auth("ADM001")).json()["data"]
    assert all(r["current_occupancy"] == 0 and r["status"] == "available" for r in rooms)


def test_list_placements_search(client, seed, auth, make_block):
    make_block("A")
    _assign(client, auth, "STU001", "A101", "A")
    _assign(client, auth, "STU003", "A001", "A")

    response = client.get("/api/placements?search=a00", headers=auth("PRO001"))

    assert [p["student_id"] for p in response.json()["data"]] == ["STU003"]
