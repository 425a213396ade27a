from starlette.requests import Request

from app.services.session import is_authenticated


def test_session_round_trip(client, user):
    assert client.get("/session").status_code == 404

    stored = client.post(
        "/session",
        json={"userId": user["id"], "phoneNumber": user["phoneNumber"], "name": user["name"]},
    )
    assert stored.status_code == 200

    current = client.get("/session")
    assert current.status_code == 200
    assert current.json() == {"userId": user["id"], "phoneNumber": "9876543210", "name": "Rajesh Kumar"}

    cleared = client.delete("/session")
    assert cleared.status_code == 200
    assert client.get("/session").json()["code"] == "SESSION_NOT_FOUND"


def test_session_requires_identity_fields(client):
    response = client.post("/session", json={"name": "Nobody"})

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_REQUEST"


def test_employee_session_is_independent(client):
    client.post("/employee/session", json={"employeeId": 3, "phoneNumber": "9000000003"})

    assert client.get("/session").status_code == 404
    employee = client.get("/employee/session")
    assert employee.json()["employeeId"] == 3

    client.delete("/employee/session")
    assert client.get("/employee/session").status_code == 404


def test_is_authenticated_reads_user_session():
    empty = Request({"type": "http", "session": {}})
    assert is_authenticated(empty) is False

    stored = Request({"type": "http", "session": {"snapfix_session": {"userId": 1, "phoneNumber": "9876543210"}}})
    assert is_authenticated(stored) is True

    garbled = Request({"type": "http", "session": {"snapfix_session": {"name": "Nobody"}}})
    assert is_authenticated(garbled) is False
