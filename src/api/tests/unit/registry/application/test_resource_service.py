"""Unit tests for ResourceService."""

from unittest.mock import create_autospec

import pytest

from registry.application.observability import RegistryServiceProbe
from registry.application.services import ResourceService
from registry.domain.aggregates import Resource
from registry.domain.exceptions import ValidationError
from registry.domain.patches import ResourcePatch
from registry.domain.value_objects import ResourceId
from registry.ports.exceptions import StorageError
from registry.ports.repositories import IResourceRepository


@pytest.fixture
def mock_repository():
    return create_autospec(IResourceRepository, instance=True)


@pytest.fixture
def mock_probe():
    return create_autospec(RegistryServiceProbe, instance=True)


@pytest.fixture
def service(mock_session, mock_repository, owner_id, mock_probe):
    return ResourceService(
        session=mock_session,
        resource_repository=mock_repository,
        scope_to_owner=owner_id,
        probe=mock_probe,
    )


class TestCreateResource:
    """Tests for ResourceService.create_resource."""

    @pytest.mark.asyncio
    async def test_creates_in_transaction(
        self, service, mock_session, mock_repository, mock_probe, owner_id
    ):
        mock_repository.add.side_effect = lambda resource: resource

        resource = await service.create_resource(
            name=" Stripe ", category="Finance", notification_count=150
        )

        mock_session.begin.assert_called_once()
        mock_repository.add.assert_awaited_once()
        assert resource.owner_id == owner_id
        assert resource.name == "Stripe"
        assert resource.notification_count == 99
        mock_probe.entity_created.assert_called_once_with(
            "resource", resource.id.value, owner_id.value
        )

    @pytest.mark.asyncio
    async def test_blank_name_fails_before_transaction(
        self, service, mock_session, mock_repository
    ):
        with pytest.raises(ValidationError):
            await service.create_resource(name="  ", category="Finance")

        mock_session.begin.assert_not_called()
        mock_repository.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_storage_error_is_reported_and_reraised(
        self, service, mock_repository, mock_probe, owner_id
    ):
        mock_repository.add.side_effect = StorageError("resource.add")

        with pytest.raises(StorageError):
            await service.create_resource(name="Stripe", category="Finance")

        mock_probe.use_case_failed.assert_called_once()
        assert mock_probe.use_case_failed.call_args[0][0] == "create_resource"
        mock_probe.entity_created.assert_not_called()


class TestUpdateResource:
    """Tests for ResourceService.update_resource."""

    @pytest.mark.asyncio
    async def test_passes_patch_scoped_to_owner(
        self, service, mock_repository, owner_id
    ):
        rid = ResourceId.generate()
        updated = Resource.create(owner_id=owner_id, name="Stripe", category="Finance")
        mock_repository.update.return_value = updated

        result = await service.update_resource(rid, {"is_favorite": True, "bogus": 1})

        assert result is updated
        args = mock_repository.update.await_args.args
        assert args[0] == rid
        assert args[1] == owner_id
        assert isinstance(args[2], ResourcePatch)
        assert dict(args[2].changes) == {"is_favorite": True}

    @pytest.mark.asyncio
    async def test_returns_none_when_not_found(
        self, service, mock_repository, mock_probe
    ):
        mock_repository.update.return_value = None

        assert await service.update_resource(ResourceId.generate(), {"name": "X"}) is None
        mock_probe.entity_not_found.assert_called_once()

    @pytest.mark.asyncio
    async def test_invalid_field_fails_before_transaction(
        self, service, mock_session, mock_repository
    ):
        with pytest.raises(ValidationError):
            await service.update_resource(ResourceId.generate(), {"name": ""})

        mock_session.begin.assert_not_called()
        mock_repository.update.assert_not_awaited()


class TestRemoveResource:
    @pytest.mark.asyncio
    async def test_reports_deletion(self, service, mock_repository, mock_probe):
        mock_repository.remove.return_value = True

        assert await service.remove_resource(ResourceId.generate()) is True
        mock_probe.entity_deleted.assert_called_once()

    @pytest.mark.asyncio
    async def test_missing_resource_is_not_an_error(
        self, service, mock_repository, mock_probe
    ):
        mock_repository.remove.return_value = False

        assert await service.remove_resource(ResourceId.generate()) is False
        mock_probe.entity_not_found.assert_called_once()


@pytest.mark.asyncio
async def test_list_resources_scopes_to_owner(service, mock_repository, owner_id):
    mock_repository.list_by_owner.return_value = []

    assert await service.list_resources() == []
    mock_repository.list_by_owner.assert_awaited_once_with(owner_id)
