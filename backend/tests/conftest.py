"""
Shared fixtures: a fresh in-memory schema (with the seeded admin) per test.
"""

import os
from datetime import datetime

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from config import settings
from database import Base, SessionLocal, engine, init_db
from services.auth import seed_admin
from services.store import EntityStore


T0 = datetime(2026, 3, 14, 12, 0, 0)


class FixedClock:
    """Callable clock returning a settable UTC-naive 'now'."""

    def __init__(self, now: datetime = T0):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture(autouse=True)
def fresh_db():
    init_db()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        seed_admin(EntityStore(session), settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
    finally:
        session.close()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def store(db, clock):
    return EntityStore(db, clock=clock)


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def widget(client):
    resp = client.post(
        "/api/products",
        json={"name": "Widget", "sku": "W-1", "category": "office", "currentStock": 10},
    )
    assert resp.status_code == 201
    return resp.json()
