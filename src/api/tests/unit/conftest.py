"""Unit test fixtures with mocked dependencies."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import SecretStr

from registry.domain.value_objects import OwnerId


@pytest.fixture
def mock_db_settings():
    """Provide test database settings."""
    from infrastructure.settings import DatabaseSettings

    return DatabaseSettings(
        host="testhost",
        port=5432,
        database="testdb",
        username="testuser",
        password=SecretStr("testpass"),
    )


@pytest.fixture
def owner_id() -> OwnerId:
    return OwnerId(value="user-alice")


@pytest.fixture
def other_owner_id() -> OwnerId:
    return OwnerId(value="user-bob")


@pytest.fixture
def mock_session():
    """Create mock async session with transaction support."""
    session = AsyncMock()
    # Mock transaction context manager properly
    mock_transaction = MagicMock()
    mock_transaction.__aenter__ = AsyncMock(return_value=None)
    mock_transaction.__aexit__ = AsyncMock(return_value=None)
    session.begin = MagicMock(return_value=mock_transaction)
    # add/add_all are synchronous on AsyncSession
    session.add = MagicMock()
    session.add_all = MagicMock()
    return session
