"""Unit tests for ResourceRepository with a mocked session."""

from datetime import UTC, datetime
from unittest.mock import MagicMock, create_autospec

import pytest
from sqlalchemy.exc import OperationalError

from registry.domain.aggregates import Resource
from registry.domain.patches import ResourcePatch
from registry.domain.value_objects import OwnerId, ResourceId
from registry.infrastructure.models import ResourceModel
from registry.infrastructure.observability import RepositoryProbe
from registry.infrastructure.resource_repository import ResourceRepository
from registry.ports.exceptions import StorageError
from registry.ports.repositories import IResourceRepository


@pytest.fixture
def mock_probe():
    return create_autospec(RepositoryProbe, instance=True)


@pytest.fixture
def repository(mock_session, mock_probe):
    return ResourceRepository(session=mock_session, probe=mock_probe)


def _model(resource_id: str, owner_id: str = "user-alice", **overrides) -> ResourceModel:
    fields = dict(
        id=resource_id,
        owner_id=owner_id,
        name="Stripe",
        category="Finance",
        color="#6366F1",
        url=None,
        is_favorite=False,
        notification_count=0,
        sort_order=0,
        created_at=datetime(2026, 1, 1, tzinfo=UTC),
    )
    fields.update(overrides)
    return ResourceModel(**fields)


def _result(scalar=None, scalars=None, rowcount=0):
    result = MagicMock()
    result.scalar_one_or_none.return_value = scalar
    result.scalars.return_value.all.return_value = scalars or []
    result.rowcount = rowcount
    return result


class TestProtocolCompliance:
    def test_implements_protocol(self, repository):
        assert isinstance(repository, IResourceRepository)


class TestListByOwner:
    @pytest.mark.asyncio
    async def test_maps_rows_to_domain(self, repository, mock_session, owner_id):
        rid = ResourceId.generate().value
        mock_session.execute.return_value = _result(
            scalars=[_model(rid, name="Gmail", notification_count=4)]
        )

        resources = await repository.list_by_owner(owner_id)

        assert len(resources) == 1
        assert resources[0].id == ResourceId(value=rid)
        assert resources[0].name == "Gmail"
        assert resources[0].notification_count == 4

    @pytest.mark.asyncio
    async def test_wraps_database_errors(
        self, repository, mock_session, mock_probe, owner_id
    ):
        mock_session.execute.side_effect = OperationalError("SELECT", {}, Exception())

        with pytest.raises(StorageError) as exc_info:
            await repository.list_by_owner(owner_id)

        assert exc_info.value.operation == "resource.list"
        assert isinstance(exc_info.value.__cause__, OperationalError)
        mock_probe.storage_failed.assert_called_once()


class TestAdd:
    @pytest.mark.asyncio
    async def test_adds_and_flushes(self, repository, mock_session, mock_probe, owner_id):
        resource = Resource.create(owner_id=owner_id, name="Stripe", category="Finance")

        saved = await repository.add(resource)

        mock_session.add.assert_called_once()
        model = mock_session.add.call_args[0][0]
        assert model.id == resource.id.value
        assert model.owner_id == owner_id.value
        mock_session.flush.assert_awaited_once()
        mock_probe.entity_saved.assert_called_once_with(
            "resource", resource.id.value, owner_id.value
        )
        assert saved.id == resource.id


class TestUpdate:
    @pytest.mark.asyncio
    async def test_returns_none_when_not_owned(
        self, repository, mock_session, mock_probe, owner_id
    ):
        mock_session.execute.return_value = _result(scalar=None)
        rid = ResourceId.generate()

        result = await repository.update(
            rid, owner_id, ResourcePatch.from_mapping({"name": "X"})
        )

        assert result is None
        mock_session.flush.assert_not_awaited()
        mock_probe.entity_not_found.assert_called_once_with(
            "resource", rid.value, owner_id.value
        )

    @pytest.mark.asyncio
    async def test_applies_patch_and_writes_back(
        self, repository, mock_session, mock_probe, owner_id
    ):
        rid = ResourceId.generate()
        model = _model(rid.value, notification_count=5)
        mock_session.execute.return_value = _result(scalar=model)

        result = await repository.update(
            rid,
            owner_id,
            ResourcePatch.from_mapping({"notification_count": 500, "is_favorite": True}),
        )

        assert result.notification_count == 99
        assert model.notification_count == 99
        assert model.is_favorite is True
        assert model.name == "Stripe"
        mock_session.flush.assert_awaited_once()
        mock_probe.entity_updated.assert_called_once()


class TestRemove:
    @pytest.mark.asyncio
    async def test_returns_false_when_missing(self, repository, mock_session, owner_id):
        mock_session.execute.return_value = _result(scalar=None)

        assert await repository.remove(ResourceId.generate(), owner_id) is False
        mock_session.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_deletes_memberships_then_row(
        self, repository, mock_session, mock_probe, owner_id
    ):
        rid = ResourceId.generate()
        model = _model(rid.value)
        mock_session.execute.side_effect = [_result(scalar=model), _result()]

        assert await repository.remove(rid, owner_id) is True

        assert mock_session.execute.await_count == 2
        mock_session.delete.assert_awaited_once_with(model)
        mock_probe.entity_deleted.assert_called_once_with(
            "resource", rid.value, owner_id.value
        )


class TestRemoveAll:
    @pytest.mark.asyncio
    async def test_returns_deleted_row_count(
        self, repository, mock_session, mock_probe, owner_id
    ):
        mock_session.execute.side_effect = [_result(rowcount=2), _result(rowcount=3)]

        assert await repository.remove_all(owner_id) == 3
        mock_probe.owner_rows_deleted.assert_called_once_with(
            "resource", owner_id.value, 3
        )
