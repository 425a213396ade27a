def _employee(client):
    response = client.post(
        "/employee/profile",
        json={"phoneNumber": "9000000001", "name": "Ramesh Yadav", "specialization": "plumber"},
    )
    assert response.status_code == 201
    return response.json()


def test_assignment_copies_professional_onto_booking(client, booking):
    employee = _employee(client)

    response = client.post("/bookings/assignments", json={"bookingId": booking["id"], "employeeId": employee["id"]})

    assert response.status_code == 201
    assert response.json()["status"] == "assigned"
    updated = client.get("/bookings", params={"id": booking["id"]}).json()
    assert updated["status"] == "confirmed"
    assert updated["professionalName"] == "Ramesh Yadav"
    assert updated["professionalContact"] == "9000000001"

    by_employee = client.get("/bookings/assignments", params={"employeeId": employee["id"]})
    assert [item["bookingId"] for item in by_employee.json()] == [booking["id"]]


def test_assignment_requires_existing_rows(client, booking):
    missing_employee = client.post("/bookings/assignments", json={"bookingId": booking["id"], "employeeId": 99})
    assert missing_employee.status_code == 404
    assert missing_employee.json()["code"] == "EMPLOYEE_NOT_FOUND"

    employee = _employee(client)
    missing_booking = client.post("/bookings/assignments", json={"bookingId": 99, "employeeId": employee["id"]})
    assert missing_booking.json()["code"] == "BOOKING_NOT_FOUND"

    assert client.get("/bookings/assignments").json()["code"] == "MISSING_PARAMETER"


def test_assignment_status_update(client, booking):
    employee = _employee(client)
    assignment = client.post(
        "/bookings/assignments", json={"bookingId": booking["id"], "employeeId": employee["id"]}
    ).json()

    accepted = client.put("/bookings/assignments", params={"id": assignment["id"]}, json={"status": "accepted"})
    assert accepted.json()["status"] == "accepted"

    invalid = client.put("/bookings/assignments", params={"id": assignment["id"]}, json={"status": "maybe"})
    assert invalid.status_code == 400
