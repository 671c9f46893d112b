"""Shared fixtures for the Users API tests."""

import pytest
from fastapi.testclient import TestClient

from users_api.app.core.config import Settings
from users_api.app.core.store import UserStore
from users_api.app.main import create_app
from users_api.app.services.user_service import UserService


@pytest.fixture
def app():
    """A fresh application; its store is created by the lifespan."""
    return create_app(Settings())


@pytest.fixture
def client(app):
    """Test client running the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store() -> UserStore:
    return UserStore()


@pytest.fixture
def service(store) -> UserService:
    return UserService(store)


@pytest.fixture
def create_user(client):
    """Create a user through the API and return the response JSON."""

    def _create(name: str = "John Doe", email: str = "john@x.com") -> dict:
        response = client.post("/users", json={"name": name, "email": email})
        assert response.status_code == 201, response.text
        return response.json()

    return _create
