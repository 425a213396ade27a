from app.models.address import Address


def _create(client, user_id, **fields):
    response = client.post("/addresses", json={"userId": user_id, **fields})
    assert response.status_code == 201
    return response.json()


def test_create_trims_fields_and_defaults_flag(client, user):
    created = _create(client, user["id"], apartmentBuilding="  Flat 302 ", streetArea="   ", city="Mumbai")

    assert created["apartmentBuilding"] == "Flat 302"
    assert created["streetArea"] is None
    assert created["isDefault"] is False
    assert created["userId"] == user["id"]


def test_new_default_clears_previous_default(client, user, db_session):
    first = _create(client, user["id"], city="Mumbai", isDefault=True)
    second = _create(client, user["id"], city="Pune", isDefault=True)

    defaults = (
        db_session.query(Address)
        .filter(Address.user_id == user["id"], Address.is_default == True)
        .all()
    )
    assert [address.id for address in defaults] == [second["id"]]
    assert first["id"] != second["id"]


def test_list_orders_default_first_then_newest(client, user):
    oldest = _create(client, user["id"], city="A")
    default = _create(client, user["id"], city="B", isDefault=True)
    newest = _create(client, user["id"], city="C")

    response = client.get("/addresses", params={"userId": user["id"]})

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [default["id"], newest["id"], oldest["id"]]


def test_list_requires_valid_user_id(client):
    assert client.get("/addresses").json()["code"] == "INVALID_USER_ID"
    assert client.get("/addresses", params={"userId": "x"}).status_code == 400


def test_create_validates_user_id(client):
    missing = client.post("/addresses", json={"city": "Mumbai"})
    assert missing.json()["code"] == "MISSING_USER_ID"

    invalid = client.post("/addresses", json={"userId": "abc"})
    assert invalid.status_code == 400
    assert invalid.json()["code"] == "INVALID_USER_ID"


def test_update_only_touches_supplied_fields(client, user):
    created = _create(client, user["id"], city="Mumbai", state="Maharashtra", pincode="400001")

    response = client.put("/addresses", params={"id": created["id"]}, json={"city": " Pune "})

    assert response.status_code == 200
    updated = response.json()
    assert updated["city"] == "Pune"
    assert updated["state"] == "Maharashtra"
    assert updated["pincode"] == "400001"


def test_update_to_default_leaves_single_default(client, user, db_session):
    first = _create(client, user["id"], city="A", isDefault=True)
    second = _create(client, user["id"], city="B")

    response = client.put("/addresses", params={"id": second["id"]}, json={"isDefault": True})

    assert response.status_code == 200
    assert response.json()["isDefault"] is True
    defaults = db_session.query(Address).filter(Address.user_id == user["id"], Address.is_default == True).all()
    assert [address.id for address in defaults] == [second["id"]]
    assert first["id"] not in [address.id for address in defaults]


def test_reasserting_existing_default_keeps_it(client, user):
    created = _create(client, user["id"], city="A", isDefault=True)

    response = client.put("/addresses", params={"id": created["id"]}, json={"isDefault": True})

    assert response.json()["isDefault"] is True


def test_update_missing_address(client):
    invalid = client.put("/addresses", params={"id": "x"}, json={})
    assert invalid.json()["code"] == "INVALID_ID"

    absent = client.put("/addresses", params={"id": 999}, json={"city": "Pune"})
    assert absent.status_code == 404
    assert absent.json()["code"] == "ADDRESS_NOT_FOUND"
