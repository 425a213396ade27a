def _register(client, phone="9000000001", **fields):
    body = {"phoneNumber": phone, "name": " Anil Singh ", "specialization": " electrician ", **fields}
    return client.post("/employee/profile", json=body)


def test_register_and_fetch(client):
    response = _register(client)

    assert response.status_code == 201
    employee = response.json()
    assert employee["name"] == "Anil Singh"
    assert employee["specialization"] == "electrician"
    assert employee["status"] == "available"

    by_phone = client.get("/employee/profile", params={"phone": "9000000001"})
    by_id = client.get("/employee/profile", params={"id": employee["id"]})
    assert by_phone.json() == by_id.json() == employee


def test_register_rejects_existing_phone(client):
    _register(client)

    duplicate = _register(client)

    assert duplicate.status_code == 409
    assert duplicate.json()["code"] == "EMPLOYEE_EXISTS"


def test_register_validation(client):
    missing = client.post("/employee/profile", json={"phoneNumber": "9000000001", "name": "Anil"})
    assert missing.status_code == 400
    assert missing.json()["code"] == "MISSING_FIELDS"

    for phone in ("900000000", "90000000011", "90000abcde", "9000000001\n"):
        invalid = _register(client, phone=phone)
        assert invalid.status_code == 400
        assert invalid.json()["code"] == "INVALID_PHONE"


def test_get_errors(client):
    assert client.get("/employee/profile").json()["code"] == "MISSING_PARAMETER"
    assert client.get("/employee/profile", params={"id": "x"}).json()["code"] == "INVALID_ID"
    missing = client.get("/employee/profile", params={"phone": "9999999999"})
    assert missing.status_code == 404
    assert missing.json()["code"] == "EMPLOYEE_NOT_FOUND"


def test_get_matches_either_identifier(client):
    employee = _register(client).json()

    response = client.get("/employee/profile", params={"id": 9999, "phone": "9000000001"})

    assert response.status_code == 200
    assert response.json()["id"] == employee["id"]


def test_partial_update_normalizes_email(client):
    employee = _register(client).json()

    response = client.put(
        "/employee/profile",
        params={"id": employee["id"]},
        json={"email": "  Anil.Singh@Example.COM ", "status": "busy"},
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["email"] == "anil.singh@example.com"
    assert updated["status"] == "busy"
    assert updated["name"] == "Anil Singh"
    assert updated["specialization"] == "electrician"


def test_update_errors(client):
    assert client.put("/employee/profile", json={}).json()["code"] == "MISSING_PARAMETER"
    assert client.put("/employee/profile", params={"id": "abc"}, json={}).json()["code"] == "INVALID_ID"
    missing = client.put("/employee/profile", params={"id": 42}, json={"name": "X"})
    assert missing.status_code == 404
    assert missing.json()["code"] == "EMPLOYEE_NOT_FOUND"
