import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure predictable environment variables for tests before importing the app.
BASE_DIR = Path(__file__).resolve().parents[1]
TEST_DB_PATH = BASE_DIR / "test.db"

if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

os.environ.setdefault("DATABASE_URL", f"sqlite:///{TEST_DB_PATH}")
os.environ.setdefault("SESSION_SECRET", "test-secret")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("PINCODE_REMOTE_LOOKUP_ENABLED", "false")

import app.main as main  # noqa: E402  (import after env vars are set)
from app.database import Base, SessionLocal  # noqa: E402


@pytest.fixture(autouse=True)
def clean_tables():
    """Empty every table so each test starts from a blank store."""
    session = SessionLocal()
    try:
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
    finally:
        session.close()
    yield


@pytest.fixture()
def client(monkeypatch):
    """Provide a TestClient with startup seeding patched out for isolation."""
    monkeypatch.setattr(main, "run_seed", lambda: None)

    with TestClient(main.app) as test_client:
        yield test_client


@pytest.fixture()
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def user(client):
    response = client.post("/users", json={"phone_number": "9876543210", "name": "Rajesh Kumar"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture()
def address(client, user):
    response = client.post(
        "/addresses",
        json={"userId": user["id"], "city": "Mumbai", "state": "Maharashtra", "pincode": "400001", "isDefault": True},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture()
def booking(client, user, address):
    response = client.post(
        "/bookings",
        json={"userId": user["id"], "addressId": address["id"], "serviceType": "plumber"},
    )
    assert response.status_code == 201
    return response.json()
