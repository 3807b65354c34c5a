"""Shared fixtures: one in-memory store per test, seeded with the admin account."""
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from tests.helpers import bearer, login

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET="test-secret",
        BCRYPT_ROUNDS=4,
        ADMIN_USERNAME=ADMIN_USERNAME,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        UPLOAD_DIR=str(tmp_path / "uploads"),
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan: schema creation + admin seed
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app, client):
    session = app.state.session_factory()
    yield session
    session.close()


@pytest.fixture
def admin_headers(client):
    response = login(client, ADMIN_USERNAME, ADMIN_PASSWORD)
    assert response.status_code == 200
    return bearer(response.json()["token"])


@pytest.fixture
def operator(client, admin_headers):
    response = client.post(
        "/api/users",
        json={"username": "operator1", "password": "secret1", "role": "operator"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def operator_headers(client, operator):
    response = login(client, "operator1", "secret1")
    assert response.status_code == 200
    return bearer(response.json()["token"])
