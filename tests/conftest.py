"""Shared fixtures for the Harmonia test-suite."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["WEBSOCKET_PATH"] = "/ws"


@dataclass
class SignedUpUser:
    id: str
    email: str
    token: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture()
def database():
    """Recreate every table so each test starts from an empty database."""

    from harmonia.infrastructure import database as db_module
    from harmonia.infrastructure import models  # noqa: F401

    db_module.Base.metadata.drop_all(bind=db_module.engine, checkfirst=True)
    db_module.initialize_database()
    yield db_module
    db_module.Base.metadata.drop_all(bind=db_module.engine, checkfirst=True)


@pytest.fixture()
def db_session(database):
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(database):
    """Return a test client bound to a fresh application instance."""

    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from harmonia.main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def signup(client):
    """Return a helper registering an account and returning its session."""

    def _signup(
        email: str,
        *,
        role: str = "patient",
        password: str = "Secret123",
        first_name: str = "Test",
        last_name: str = "User",
    ) -> SignedUpUser:
        response = client.post(
            "/api/auth/signup",
            json={
                "email": email,
                "password": password,
                "firstName": first_name,
                "lastName": last_name,
                "role": role,
            },
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return SignedUpUser(id=body["user"]["id"], email=email, token=body["accessToken"])

    return _signup
