# File: tests/conftest.py

"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database; the app's ``get_db``
dependency is overridden to hand out sessions bound to it.
"""

import os

# Must be set before app.core.config is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.db.init_db import init_db
from app.main import app
from app.models.base import Base


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def created_user(client):
    resp = client.post(
        "/api/users",
        json={"name": "Test User", "email": "test@example.com", "phone": "1234567890"},
    )
    assert resp.status_code == 201
    return resp.json()
