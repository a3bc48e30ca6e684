"""Shared fixtures for the storefront tests."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from auth import SessionStore
from config import Settings
from database import MemoryStorage
from main import create_app


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def settings():
    # keep PBKDF2 cheap in tests
    return Settings(PASSWORD_HASH_ITERATIONS=1000)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def sessions(clock):
    return SessionStore(ttl=timedelta(days=7), clock=clock)


@pytest.fixture
def app(storage, sessions, settings):
    return create_app(storage=storage, sessions=sessions, settings=settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def address_payload():
    def make(**overrides):
        data = {
            "fullName": "Priya Sharma",
            "phone": "9876543210",
            "addressLine1": "12 MG Road",
            "city": "Bengaluru",
            "state": "Karnataka",
            "pincode": "560001",
        }
        data.update(overrides)
        return data
    return make


@pytest.fixture
def signed_in(client):
    """Register a shopper; the client keeps the session cookie."""
    resp = client.post("/api/auth/register", json={
        "email": "priya@vastra.in",
        "password": "secret123",
        "fullName": "Priya Sharma",
    })
    assert resp.status_code == 201
    return resp.json()
