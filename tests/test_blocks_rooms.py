import pytest

from dormitory.services.housing import block_statistics, generate_rooms, occupancy_rate


def test_generate_rooms_numbering_and_accessibility():
    rooms = generate_rooms("B", floors=3, rooms_per_floor=12, room_capacity=4)

    assert len(rooms) == 36
    ids = [room.room_id for room in rooms]
    assert ids[:2] == ["B001", "B002"]
    assert "B012" in ids and "B101" in ids and "B212" in ids
    assert all(room.capacity == 4 and room.current_occupancy == 0 for room in rooms)
    assert all(room.status == "available" for room in rooms)
    assert {room.room_id for room in rooms if room.disability_accessible} == {
        f"B0{n:02d}" for n in range(1, 13)
    }
    assert rooms[13].floor == 1 and rooms[13].room_number == "02"


def test_occupancy_rate_handles_zero_capacity():
    assert occupancy_rate(0, 0) == 0
    assert occupancy_rate(1, 3) == 33
    assert occupancy_rate(2, 3) == 67


def test_block_statistics_counts_active_placements():
    rooms = generate_rooms("C", floors=1, rooms_per_floor=2, room_capacity=2)
    rooms[0].current_occupancy = 2
    rooms[0].status = "occupied"

    class Placement:
        def __init__(self, status):
            self.status = status

    stats = block_statistics(rooms, [Placement("active"), Placement("active"), Placement("inactive")])

    assert stats == {
        "total_rooms": 2,
        "occupied_rooms": 1,
        "available_rooms": 1,
        "total_students": 2,
        "total_capacity": 4,
        "current_occupancy": 2,
        "occupancy_rate": 50,
    }


def test_create_block_with_layout(client, seed, auth, make_block):
    block = make_block("A", floors=2, rooms_per_floor=3, room_capacity=4)

    assert block["capacity"] == 24
    assert len(block["rooms"]) == 6
    assert block["statistics"]["total_capacity"] == 24
    assert block["statistics"]["occupancy_rate"] == 0


def test_create_block_with_capacity_only(client, seed, auth):
    payload = {"block_id": "Z", "reserved_for": "female", "capacity": 40}
    response = client.post("/api/blocks", json=payload, headers=auth("COO001"))

    assert response.status_code == 201
    assert response.json()["data"]["rooms"] == []


def test_create_block_validation(client, seed, auth, make_block):
    no_capacity = {"block_id": "Y", "reserved_for": "male"}
    assert client.post("/api/blocks", json=no_capacity, headers=auth("ADM001")).status_code == 422

    make_block("A")
    duplicate = {"block_id": "A", "reserved_for": "male", "capacity": 10}
    assert client.post("/api/blocks", json=duplicate, headers=auth("ADM001")).status_code == 409


@pytest.mark.parametrize("user_id, expected", [("COO001", 201), ("PRO001", 403), ("REG001", 403)])
def test_create_block_roles(client, seed, auth, user_id, expected):
    payload = {"block_id": "R", "reserved_for": "mixed", "capacity": 10}
    assert client.post("/api/blocks", json=payload, headers=auth(user_id)).status_code == expected


def test_list_and_filter_blocks(client, seed, auth, make_block):
    make_block("A", reserved_for="male")
    make_block("B", reserved_for="female")

    everything = client.get("/api/blocks", headers=auth("STU001")).json()["data"]
    assert [b["block_id"] for b in everything] == ["A", "B"]

    female = client.get("/api/blocks?reserved_for=female", headers=auth("STU001")).json()["data"]
    assert [b["block_id"] for b in female] == ["B"]


def test_update_block_keeps_block_id(client, seed, auth, make_block):
    make_block("A")
    response = client.put(
        "/api/blocks/A",
        json={"name": "North Hall", "status": "maintenance", "block_id": "Q"},
        headers=auth("COO001"),
    )

    assert response.status_code == 200
    fetched = client.get("/api/blocks/A", headers=auth("ADM001")).json()["data"]
    assert fetched["name"] == "North Hall"
    assert fetched["status"] == "maintenance"
    assert fetched["placements"] == []


def test_delete_block(client, seed, auth, make_block):
    make_block("A")
    make_block("B")
    client.post(
        "/api/placements",
        json={"student_id": "STU001", "room": "B101", "block": "B"},
        headers=auth("ADM001"),
    )

    assert client.delete("/api/blocks/A", headers=auth("COO001")).status_code == 403
    assert client.delete("/api/blocks/NOPE", headers=auth("ADM001")).status_code == 404
    assert client.delete("/api/blocks/B", headers=auth("ADM001")).status_code == 400

    response = client.delete("/api/blocks/A", headers=auth("DIR001"))

    assert response.status_code == 200
    assert client.get("/api/blocks/A", headers=auth("ADM001")).status_code == 404
    assert client.get("/api/rooms?block=A", headers=auth("ADM001")).json()["data"] == []


def test_assign_proctors(client, seed, auth, make_block):
    make_block("A")
    make_block("B")
    body = {"assignments": [{"blockId": "A", "proctorId": "PRO001"}, {"blockId": "B", "proctorId": "PM001"}]}

    response = client.post("/api/blocks/assign-proctors", json=body, headers=auth("COO001"))

    assert response.status_code == 200
    assert {b["block_id"]: b["proctor_id"] for b in response.json()["data"]} == {"A": "PRO001", "B": "PM001"}

    cleared = client.post(
        "/api/directorate/proctor-assignments",
        json={"assignments": [{"blockId": "A", "proctorId": None}]},
        headers=auth("DIR001"),
    )
    assert cleared.status_code == 200
    assert cleared.json()["data"][0]["proctor_id"] is None


def test_assign_proctors_validation(client, seed, auth, make_block):
    make_block("A")
    headers = auth("COO001")

    assert client.post("/api/blocks/assign-proctors", json={"nope": 1}, headers=headers).status_code == 400
    malformed = client.post("/api/blocks/assign-proctors", json={"assignments": [{"proctorId": "PRO001"}]}, headers=headers)
    assert malformed.status_code == 400
    assert malformed.json()["error"] == "Invalid assignments data"
    assert malformed.json()["details"]["errors"] == ["Field required"]
    assert client.post(
        "/api/blocks/assign-proctors",
        json={"assignments": [{"blockId": "A", "proctorId": "REG001"}]},
        headers=headers,
    ).status_code == 400
    assert client.post(
        "/api/blocks/assign-proctors",
        json={"assignments": [{"blockId": "A", "proctorId": "PRO001"}]},
        headers=auth("PRO001"),
    ).status_code == 403
    assert client.post(
        "/api/directorate/proctor-assignments",
        json={"assignments": []},
        headers=auth("COO001"),
    ).status_code == 403


def test_list_rooms_filters(client, seed, auth, make_block):
    make_block("A", floors=1, rooms_per_floor=2, room_capacity=1)
    client.post(
        "/api/placements",
        json={"student_id": "STU001", "room": "A001", "block": "A"},
        headers=auth("ADM001"),
    )

    rooms = client.get("/api/rooms?block=A", headers=auth("ADM001")).json()["data"]
    full = next(r for r in rooms if r["room_id"] == "A001")
    assert full["status"] == "occupied"
    assert full["occupancy_rate"] == 100
    assert full["students"] == [{"student_id": "STU001", "name": "Kidus Abel Mengistu"}]

    available = client.get("/api/rooms?block=A&available_only=true", headers=auth("ADM001")).json()["data"]
    assert [r["room_id"] for r in available] == ["A002"]


def test_get_room_requires_block(client, seed, auth, make_block):
    make_block("A")
    assert client.get("/api/rooms/A001", headers=auth("ADM001")).status_code == 400
    assert client.get("/api/rooms/A999?block=A", headers=auth("ADM001")).status_code == 404
    assert client.get("/api/rooms/A001?block=A", headers=auth("ADM001")).status_code == 200


def test_room_status_action(client, seed, auth, make_block):
    make_block("A")
    body = {"action": "update_status", "room_id": "A001", "block": "A", "status": "maintenance"}

    assert client.put("/api/rooms", json=body, headers=auth("REG001")).status_code == 403
    response = client.put("/api/rooms", json=body, headers=auth("PRO001"))

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "maintenance"
    bad = dict(body, action="explode")
    assert client.put("/api/rooms", json=bad, headers=auth("ADM001")).status_code == 400


def test_update_room_capacity_bounds(client, seed, auth, make_block):
    make_block("A", room_capacity=2)
    client.post(
        "/api/placements",
        json={"student_id": "STU001", "room": "A101", "block": "A"},
        headers=auth("ADM001"),
    )
    client.post(
        "/api/placements",
        json={"student_id": "STU003", "room": "A001", "block": "A"},
        headers=auth("ADM001"),
    )

    too_small = client.put("/api/rooms/A101", json={"block": "A", "capacity": 0}, headers=auth("ADM001"))
    assert too_small.status_code == 422

    response = client.put("/api/rooms/A101", json={"block": "A", "capacity": 1}, headers=auth("PRO001"))
    assert response.status_code == 200
    assert response.json()["data"]["capacity"] == 1

    missing_block = client.put("/api/rooms/A101", json={"capacity": 3}, headers=auth("ADM001"))
    assert missing_block.status_code == 422
    assert client.put("/api/rooms/A101", json={"block": "A", "capacity": 3}, headers=auth("COO001")).status_code == 403
