"""Pytest configuration and fixtures for settings and API tests."""
import os

# Set test env BEFORE any imports that use config
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ADMIN_API_SECRET"] = "testsecret123"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import delete

from wiki.models import SiteConfiguration, init_db
from wiki.models.base import async_session_factory
from web.api.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
async def _init_db():
    """Ensure tables exist (ASGI lifespan doesn't run with httpx) and start each test with no stored settings."""
    await init_db()
    async with async_session_factory() as session:
        await session.execute(delete(SiteConfiguration))
        await session.commit()


@pytest.fixture
async def session():
    async with async_session_factory() as s:
        yield s


@pytest.fixture
async def client():
    """Async HTTP client for testing the API."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def auth_headers():
    """Authorization headers carrying the admin secret."""
    return {"Authorization": "Bearer testsecret123"}
