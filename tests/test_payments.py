CARD = {"cardNumber": "4111111111111111", "expiryDate": "12/29", "cvv": "123"}


def test_mock_payment_succeeds_with_default_amount(client, booking):
    response = client.post("/payments", json={"bookingId": booking["id"], **CARD})

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "success"
    assert payload["bookingId"] == booking["id"]
    assert payload["amount"] == 499
    assert payload["transactionId"].startswith("txn_")


def test_mock_payment_requires_card_details(client, booking):
    response = client.post("/payments", json={"bookingId": booking["id"], "cardNumber": "4111111111111111"})

    assert response.status_code == 400
    assert response.json()["code"] == "MISSING_FIELDS"


def test_mock_payment_for_unknown_booking(client):
    response = client.post("/payments", json={"bookingId": 555, **CARD})

    assert response.status_code == 404
    assert response.json()["code"] == "BOOKING_NOT_FOUND"


def test_mock_payment_checks_amount_before_booking(client):
    response = client.post("/payments", json={"bookingId": 555, "amount": 0, **CARD})

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_AMOUNT"
