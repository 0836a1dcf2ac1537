"""Pytest fixtures for testing."""
from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from api.main import create_app
from core.config import Settings
from db.memory import BookmarkStore

TEST_API_TOKEN = "test-token-123"


@pytest.fixture
def settings() -> Settings:
    """Settings for a development-mode app, isolated from any local .env."""
    return Settings(
        _env_file=None,
        API_TOKEN=TEST_API_TOKEN,
        ENVIRONMENT="development",
        SEED_BOOKMARKS="false",
    )


@pytest.fixture
def store() -> BookmarkStore:
    """A fresh, empty bookmark store for each test."""
    return BookmarkStore()


@pytest.fixture
def app(settings: Settings, store: BookmarkStore) -> FastAPI:
    """Application wired to the per-test settings and store."""
    return create_app(settings=settings, store=store)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create a test client that sends the configured bearer token."""
    # raise_app_exceptions=False so 500 responses can be asserted on
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
        headers={"Authorization": f"Bearer {TEST_API_TOKEN}"},
    ) as test_client:
        yield test_client


@pytest.fixture
async def anonymous_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create a test client that sends no Authorization header."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as test_client:
        yield test_client
