from conftest import PASSWORD


def test_employee_login_sets_session_cookie(client, seed):
    response = client.post("/api/auth/login", json={"identifier": "ADM001", "password": PASSWORD})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["user"]["id"] == "ADM001"
    assert body["data"]["user"]["role"] == "admin"
    assert body["data"]["user"]["name"] == "Abebe Kebede"
    assert body["data"]["token"]

    cookie = response.headers["set-cookie"]
    assert "dormitory_session=" in cookie
    assert "HttpOnly" in cookie
    assert "Max-Age=86400" in cookie


def test_student_login_uses_full_name(client, seed):
    response = client.post("/api/auth/login", json={"identifier": "STU001", "password": PASSWORD})

    assert response.status_code == 200
    user = response.json()["data"]["user"]
    assert user["role"] == "student"
    assert user["userType"] == "student"
    assert user["name"] == "Kidus Abel Mengistu"


def test_login_accepts_username_alias(client, seed):
    response = client.post("/api/auth/login", json={"username": "REG001", "password": PASSWORD})
    assert response.status_code == 200


def test_login_rejects_wrong_password(client, seed):
    response = client.post("/api/auth/login", json={"identifier": "ADM001", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "error": "Invalid credentials",
        "error_code": "AUTHENTICATION_FAILED",
    }


def test_login_rejects_inactive_account(client, seed, db):
    from dormitory.models.user import Student

    student = db.query(Student).filter_by(student_id="STU002").one()
    student.status = "inactive"
    db.commit()

    response = client.post("/api/auth/login", json={"identifier": "STU002", "password": PASSWORD})
    assert response.status_code == 401


def test_session_from_cookie_and_logout(client, seed):
    client.post("/api/auth/login", json={"identifier": "COO001", "password": PASSWORD})

    session = client.get("/api/auth/session")
    assert session.status_code == 200
    assert session.json()["data"]["user"]["id"] == "COO001"

    logout = client.post("/api/auth/logout")
    assert logout.status_code == 200
    client.cookies.clear()

    assert client.get("/api/auth/session").status_code == 401


def test_missing_session_is_unauthorized(client, seed):
    response = client.get("/api/dashboard/stats")

    assert response.status_code == 401
    assert response.json()["error"] == "Unauthorized"


def test_invalid_bearer_token_is_unauthorized(client, seed):
    response = client.get("/api/dashboard/stats", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json()["error_code"] == "TOKEN_INVALID"


def test_health_endpoint(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
