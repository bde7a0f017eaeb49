"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (conftest.py sets test defaults).
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from connector.interface.api.app import create_app
from connector.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating request-scoped test environment fixtures.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields a request-scoped AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            post_service = await unit_env.get(PostService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for creating TestClient fixtures backed by a test container.

    Every test gets a fresh container, so in-memory state never leaks
    between tests.
    """

    @pytest.fixture
    def _client():
        app = create_app(build_test_container(unmock=unmock or set()))
        with TestClient(app) as client:
            yield client

    return _client


def register(client, name="Ann", email="ann@x.com", password="longenough") -> str:
    """Register an account through the API and return its token."""
    response = client.post(
        "/api/users", json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 200, response.text
    return response.json()["token"]


def auth(token: str) -> dict[str, str]:
    """Headers for an authenticated request."""
    return {"x-auth-token": token}
