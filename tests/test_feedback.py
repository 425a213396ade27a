def test_second_feedback_for_booking_is_rejected(client, user, booking):
    payload = {"bookingId": booking["id"], "userId": user["id"], "rating": 5, "comments": " Great work "}

    first = client.post("/feedback", json=payload)
    assert first.status_code == 201
    assert first.json()["comments"] == "Great work"
    assert first.json()["rating"] == 5

    second = client.post("/feedback", json={**payload, "rating": 1})
    assert second.status_code == 400
    assert second.json() == {"error": "Feedback already submitted for this booking", "code": "DUPLICATE_FEEDBACK"}


def test_get_feedback_by_booking(client, user, booking):
    client.post("/feedback", json={"bookingId": booking["id"], "userId": user["id"], "rating": "4"})

    response = client.get("/feedback", params={"bookingId": booking["id"]})

    assert response.status_code == 200
    assert response.json()["rating"] == 4
    assert response.json()["comments"] is None


def test_get_feedback_errors(client):
    assert client.get("/feedback").json()["code"] == "INVALID_BOOKING_ID"
    missing = client.get("/feedback", params={"bookingId": 77})
    assert missing.status_code == 404
    assert missing.json()["code"] == "FEEDBACK_NOT_FOUND"


def test_rating_validation(client):
    base = {"bookingId": 1, "userId": 1}

    assert client.post("/feedback", json={"userId": 1, "rating": 3}).json()["code"] == "MISSING_BOOKING_ID"
    assert client.post("/feedback", json={"bookingId": 1, "rating": 3}).json()["code"] == "MISSING_USER_ID"
    assert client.post("/feedback", json=base).json()["code"] == "MISSING_RATING"
    assert client.post("/feedback", json={**base, "rating": "great"}).json()["code"] == "INVALID_RATING"
    out_of_range = client.post("/feedback", json={**base, "rating": 6})
    assert out_of_range.status_code == 400
    assert out_of_range.json()["code"] == "INVALID_RATING_RANGE"
