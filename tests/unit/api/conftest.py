"""Fixtures for API unit tests: mocked index store, replay client, publisher, repositories."""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from digit_services.main import app


@pytest.fixture
def index_store():
    s = AsyncMock()
    s.fetch = AsyncMock(return_value={"data": []})
    return s


@pytest.fixture
def replay_client():
    r = AsyncMock()
    r.replay = AsyncMock(return_value=None)
    return r


@pytest.fixture
def mock_publisher():
    """Mock RabbitMQ publisher so tests do not connect to real broker."""
    p = AsyncMock()
    p.push = AsyncMock(return_value=None)
    return p


@pytest.fixture
def definition_repository():
    r = AsyncMock()
    r.get_service_definitions = AsyncMock(return_value=[])
    return r


@pytest.fixture
def service_repository():
    r = AsyncMock()
    r.get_services = AsyncMock(return_value=[])
    return r


@pytest.fixture
def app_with_overrides(
    index_store, replay_client, mock_publisher, definition_repository, service_repository
):
    """App with external collaborators overridden for testing."""
    from digit_services.api import dependencies

    app.dependency_overrides[dependencies.get_index_store] = lambda: index_store
    app.dependency_overrides[dependencies.get_replay_client] = lambda: replay_client
    app.dependency_overrides[dependencies.get_publisher] = lambda: mock_publisher
    app.dependency_overrides[dependencies.get_service_definition_repository] = (
        lambda: definition_repository
    )
    app.dependency_overrides[dependencies.get_service_repository] = lambda: service_repository
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app_with_overrides):
    """Async HTTP client for testing; uses overridden app."""
    transport = ASGITransport(app=app_with_overrides)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def request_info():
    return {"apiId": "digit", "ver": "1.0", "msgId": "msg-1", "userInfo": {"uuid": "user-1"}}
