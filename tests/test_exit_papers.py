import pytest

ITEMS = {"items": [{"type_of_cloth": " Jacket ", "number_of_items": 2, "color": "black "}]}


def _file(client, auth, student_id="STU001"):
    response = client.post("/api/exit-papers", json=ITEMS, headers=auth(student_id))
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_student_files_exit_paper(client, seed, auth):
    paper = _file(client, auth)

    assert paper["status"] == "pending"
    assert paper["student_id"] == "STU001"
    assert paper["student_name"] == "Kidus Abel Mengistu"
    assert paper["items"] == [{"type_of_cloth": "Jacket", "number_of_items": 2, "color": "black"}]


def test_exit_paper_creation_rules(client, seed, auth):
    assert client.post("/api/exit-papers", json=ITEMS, headers=auth("PRO001")).status_code == 403
    assert client.post("/api/exit-papers", json={"items": []}, headers=auth("STU001")).status_code == 400

    zero = {"items": [{"type_of_cloth": "Shirt", "number_of_items": 0, "color": "red"}]}
    assert client.post("/api/exit-papers", json=zero, headers=auth("STU001")).status_code == 422


def test_exit_paper_visibility(client, seed, auth):
    mine = _file(client, auth, "STU001")
    theirs = _file(client, auth, "STU002")
    client.put(f"/api/exit-papers/{theirs['id']}", json={"action": "approve"}, headers=auth("PRO001"))

    student_view = client.get("/api/exit-papers", headers=auth("STU001")).json()["data"]
    assert [p["id"] for p in student_view] == [mine["id"]]

    reviewer_view = client.get("/api/exit-papers", headers=auth("COO001")).json()["data"]
    assert [p["id"] for p in reviewer_view] == [theirs["id"], mine["id"]]

    guard_view = client.get("/api/exit-papers", headers=auth("SEC001")).json()["data"]
    assert [p["id"] for p in guard_view] == [theirs["id"]]

    assert client.get("/api/exit-papers", headers=auth("REG001")).status_code == 403
    assert client.get(f"/api/exit-papers/{theirs['id']}", headers=auth("STU001")).status_code == 403
    assert client.get(f"/api/exit-papers/{mine['id']}", headers=auth("SEC001")).status_code == 403
    assert client.get(f"/api/exit-papers/{mine['id']}", headers=auth("STU001")).status_code == 200


def test_approve_exit_paper(client, seed, auth):
    paper = _file(client, auth)

    response = client.put(f"/api/exit-papers/{paper['id']}", json={"action": "approve"}, headers=auth("PRO001"))

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "approved"
    assert data["approved_by"] == "PRO001"
    assert data["approved_by_name"] == "Yonas Alemu"
    assert data["approved_at"] is not None

    again = client.put(f"/api/exit-papers/{paper['id']}", json={"action": "reject", "rejection_reason": "x"},
                       headers=auth("PRO001"))
    assert again.status_code == 400
    assert again.json()["error"] == "Exit paper has already been processed"


def test_reject_requires_reason(client, seed, auth):
    paper = _file(client, auth)
    url = f"/api/exit-papers/{paper['id']}"

    assert client.put(url, json={"action": "reject"}, headers=auth("COO001")).status_code == 400

    response = client.put(url, json={"action": "reject", "rejection_reason": "Too many items"}, headers=auth("COO001"))
    assert response.json()["data"]["status"] == "rejected"
    assert response.json()["data"]["rejection_reason"] == "Too many items"


@pytest.mark.parametrize("user_id", ["STU001", "SEC001", "REG001"])
def test_only_reviewers_review(client, seed, auth, user_id):
    paper = _file(client, auth)
    response = client.put(f"/api/exit-papers/{paper['id']}", json={"action": "approve"}, headers=auth(user_id))
    assert response.status_code == 403


def test_delete_exit_paper_rules(client, seed, auth):
    mine = _file(client, auth, "STU001")
    approved = _file(client, auth, "STU001")
    client.put(f"/api/exit-papers/{approved['id']}", json={"action": "approve"}, headers=auth("ADM001"))

    assert client.delete(f"/api/exit-papers/{mine['id']}", headers=auth("STU002")).status_code == 403
    assert client.delete(f"/api/exit-papers/{approved['id']}", headers=auth("STU001")).status_code == 400
    assert client.delete(f"/api/exit-papers/{approved['id']}", headers=auth("PRO001")).status_code == 403
    assert client.delete(f"/api/exit-papers/{mine['id']}", headers=auth("STU001")).status_code == 200
    assert client.delete(f"/api/exit-papers/{approved['id']}", headers=auth("DIR001")).status_code == 200
    assert client.get("/api/exit-papers", headers=auth("ADM001")).json()["data"] == []
