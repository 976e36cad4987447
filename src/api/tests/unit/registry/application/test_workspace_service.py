"""Unit tests for WorkspaceService and CategoryService."""

from unittest.mock import create_autospec

import pytest

from registry.application.observability import RegistryServiceProbe
from registry.application.services import CategoryService, WorkspaceService
from registry.domain.exceptions import ValidationError
from registry.domain.value_objects import CategoryId, Icon, WorkspaceId
from registry.ports.repositories import ICategoryRepository, IWorkspaceRepository


@pytest.fixture
def mock_probe():
    return create_autospec(RegistryServiceProbe, instance=True)


@pytest.fixture
def workspace_repository():
    return create_autospec(IWorkspaceRepository, instance=True)


@pytest.fixture
def workspace_service(mock_session, workspace_repository, owner_id, mock_probe):
    return WorkspaceService(
        session=mock_session,
        workspace_repository=workspace_repository,
        scope_to_owner=owner_id,
        probe=mock_probe,
    )


class TestWorkspaceService:
    @pytest.mark.asyncio
    async def test_create_workspace_defaults(
        self, workspace_service, workspace_repository
    ):
        workspace_repository.add.side_effect = lambda workspace: workspace

        workspace = await workspace_service.create_workspace(name="Acme Corp")

        assert workspace.icon is Icon.BUILDING_2
        workspace_repository.add.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_workspace_rejects_unknown_icon(
        self, workspace_service, mock_session
    ):
        with pytest.raises(ValidationError):
            await workspace_service.create_workspace(name="Acme", icon="Rocket")

        mock_session.begin.assert_not_called()

    @pytest.mark.asyncio
    async def test_reorder_runs_in_transaction(
        self, workspace_service, mock_session, workspace_repository, owner_id
    ):
        await workspace_service.reorder_workspaces(["a", "b"])

        mock_session.begin.assert_called_once()
        workspace_repository.reorder.assert_awaited_once_with(owner_id, ["a", "b"])

    @pytest.mark.asyncio
    async def test_delete_missing_workspace_returns_false(
        self, workspace_service, workspace_repository
    ):
        workspace_repository.delete.return_value = False

        assert await workspace_service.delete_workspace(WorkspaceId.generate()) is False

    @pytest.mark.asyncio
    async def test_get_membership_delegates(
        self, workspace_service, workspace_repository, owner_id
    ):
        wid = WorkspaceId.generate()
        workspace_repository.get_membership.return_value = []

        assert await workspace_service.get_membership(wid) == []
        workspace_repository.get_membership.assert_awaited_once_with(wid, owner_id)


class TestCategoryService:
    @pytest.fixture
    def category_repository(self):
        return create_autospec(ICategoryRepository, instance=True)

    @pytest.fixture
    def category_service(self, mock_session, category_repository, owner_id, mock_probe):
        return CategoryService(
            session=mock_session,
            category_repository=category_repository,
            scope_to_owner=owner_id,
            probe=mock_probe,
        )

    @pytest.mark.asyncio
    async def test_create_category(self, category_service, category_repository):
        category_repository.add.side_effect = lambda category: category

        category = await category_service.create_category(name="Finance", icon="DollarSign")

        assert category.icon is Icon.DOLLAR_SIGN
        assert category.name == "Finance"

    @pytest.mark.asyncio
    async def test_update_missing_category(
        self, category_service, category_repository, mock_probe
    ):
        category_repository.update.return_value = None

        result = await category_service.update_category(
            CategoryId.generate(), {"name": "Mail"}
        )

        assert result is None
        mock_probe.entity_not_found.assert_called_once()
