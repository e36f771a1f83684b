"""
Shared test fixtures for the Book Reviews API test suite.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from bookreviews.config import Settings
from bookreviews.database import Database


class FakeClock:
    """Controllable time source for token and session expiry."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def test_settings():
    """Settings configured for testing."""
    return Settings(
        access_token_secret="test-access-secret",
        session_secret="test-session-secret",
        catalog_read_delay=0.0,
        debug=True,
        log_level="DEBUG",
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def db():
    """Fresh, seeded in-memory data container."""
    return Database.create()


@pytest_asyncio.fixture
async def app_client(test_settings, db):
    """Create a test client around an isolated app instance."""
    from bookreviews.main import create_app

    app = create_app(test_settings, db=db)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def alice_client(app_client):
    """Client with alice registered and logged in."""
    response = await app_client.post(
        "/register", json={"username": "alice", "password": "pw1"}
    )
    assert response.status_code == 200
    response = await app_client.post(
        "/login", json={"username": "alice", "password": "pw1"}
    )
    assert response.status_code == 200
    return app_client
