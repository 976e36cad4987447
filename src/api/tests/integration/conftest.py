"""Integration test fixtures for database tests.

These fixtures require a running PostgreSQL instance.
Use docker-compose for testing.
"""

import os
import uuid

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_write_engine
from infrastructure.database.models import Base
from infrastructure.settings import DatabaseSettings
from registry.infrastructure import models  # noqa: F401 - registers tables


@pytest.fixture(scope="session")
def integration_db_settings() -> DatabaseSettings:
    """Database settings for integration tests.

    Override with environment variables:
        LAUNCHPAD_DB_HOST, LAUNCHPAD_DB_PORT, etc.
    """
    return DatabaseSettings(
        host=os.getenv("LAUNCHPAD_DB_HOST", "localhost"),
        port=int(os.getenv("LAUNCHPAD_DB_PORT", "5432")),
        database=os.getenv("LAUNCHPAD_DB_DATABASE", "launchpad"),
        username=os.getenv("LAUNCHPAD_DB_USERNAME", "launchpad"),
        password=SecretStr(os.getenv("LAUNCHPAD_DB_PASSWORD", "launchpad_dev_password")),
    )


@pytest_asyncio.fixture
async def write_engine(integration_db_settings):
    """Provide an engine against a database holding the registry schema."""
    engine = create_write_engine(integration_db_settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(write_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(write_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def async_client(write_engine):
    """Create async HTTP client for testing with lifespan support."""
    from main import app

    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


def _owner_headers() -> dict[str, str]:
    return {"X-User-Id": f"test-user-{uuid.uuid4().hex[:12]}"}


@pytest_asyncio.fixture
async def alice(async_client):
    """Headers of a fresh owner whose data is purged after the test."""
    headers = _owner_headers()
    yield headers
    await async_client.delete("/registry/data", headers=headers)


@pytest_asyncio.fixture
async def bob(async_client):
    headers = _owner_headers()
    yield headers
    await async_client.delete("/registry/data", headers=headers)
