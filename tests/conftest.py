"""Pytest configuration: run the API against an in-memory SQLite database."""

from __future__ import annotations

import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Must be set before app.core.config builds its settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from app.core.database import SessionLocal, create_database_tables, drop_database_tables
from app.main import app


@pytest.fixture()
def app_with_db():
    create_database_tables()
    yield app
    app.dependency_overrides.clear()
    drop_database_tables()


@pytest.fixture()
def client(app_with_db):
    with TestClient(app_with_db) as c:
        yield c


@pytest.fixture()
def db_session(app_with_db):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def student_payload():
    return {"name": "Ada", "phone": "555-0100", "grade": 10, "license": "D1234567"}


@pytest.fixture()
def create_student(client):
    def _create(**overrides):
        payload = {"name": "Ada", "phone": "555-0100", "grade": 10, "license": None}
        payload.update(overrides)
        resp = client.post("/students", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create
