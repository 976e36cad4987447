"""Fixtures for Registry route tests."""

from unittest.mock import AsyncMock, create_autospec

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from registry.application.services import (
    CategoryService,
    RegistryService,
    ResourceService,
    WidgetService,
    WorkspaceService,
)


@pytest.fixture
def mock_resource_service():
    return create_autospec(ResourceService, instance=True)


@pytest.fixture
def mock_category_service():
    return create_autospec(CategoryService, instance=True)


@pytest.fixture
def mock_workspace_service():
    return create_autospec(WorkspaceService, instance=True)


@pytest.fixture
def mock_widget_service():
    return create_autospec(WidgetService, instance=True)


@pytest.fixture
def mock_registry_service():
    return create_autospec(RegistryService, instance=True)


@pytest.fixture
def test_client(
    mock_resource_service,
    mock_category_service,
    mock_workspace_service,
    mock_widget_service,
    mock_registry_service,
):
    """Create TestClient with mocked service dependencies."""
    from registry.dependencies import services
    from registry.presentation import router

    app = FastAPI()

    # Override dependencies with mocks
    app.dependency_overrides[services.get_resource_service] = (
        lambda: mock_resource_service
    )
    app.dependency_overrides[services.get_category_service] = (
        lambda: mock_category_service
    )
    app.dependency_overrides[services.get_workspace_service] = (
        lambda: mock_workspace_service
    )
    app.dependency_overrides[services.get_widget_service] = lambda: mock_widget_service
    app.dependency_overrides[services.get_registry_service] = (
        lambda: mock_registry_service
    )

    app.include_router(router)

    return TestClient(app)


@pytest.fixture
def unauthenticated_client():
    """Create TestClient where only the database session is mocked.

    Services are built for real, so the identity header is enforced.
    """
    from infrastructure.database.dependencies import get_write_session
    from registry.presentation import router

    async def _session():
        yield AsyncMock()

    app = FastAPI()
    app.dependency_overrides[get_write_session] = _session
    app.include_router(router)

    return TestClient(app)
