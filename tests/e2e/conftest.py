"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from forum.config import Settings
from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.interface.api.app import create_app
from forum.util.jwt import create_token
from tests.conftest import make_user
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    app_instance = create_app(build_test_container())
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def register_user(client):
    """Store a user and return it with a cookie jar holding its token."""

    def _register(username: str, role: str = "user") -> tuple[User, dict]:
        user = make_user(username, role=role)
        container = client.app.state.dishka_container
        repo = client.portal.call(container.get, UserRepository)
        client.portal.call(repo.save, user)
        token = create_token(str(user.id), username, role, Settings().auth)
        return user, {"auth_token": token}

    return _register
