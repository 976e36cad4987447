"""Unit tests for CategoryRepository with a mocked session."""

from datetime import UTC, datetime
from unittest.mock import MagicMock, create_autospec

import pytest

from registry.domain.patches import CategoryPatch
from registry.domain.value_objects import CategoryId, Icon
from registry.infrastructure.category_repository import CategoryRepository
from registry.infrastructure.models import CategoryModel
from registry.infrastructure.observability import RepositoryProbe


@pytest.fixture
def mock_probe():
    return create_autospec(RepositoryProbe, instance=True)


@pytest.fixture
def repository(mock_session, mock_probe):
    return CategoryRepository(session=mock_session, probe=mock_probe)


def _result(scalar=None):
    result = MagicMock()
    result.scalar_one_or_none.return_value = scalar
    return result


@pytest.mark.asyncio
async def test_update_changes_icon(repository, mock_session, owner_id):
    cid = CategoryId.generate()
    model = CategoryModel(
        id=cid.value,
        owner_id=owner_id.value,
        name="Finance",
        icon="Folder",
        color="#6366F1",
        sort_order=0,
        created_at=datetime(2026, 1, 1, tzinfo=UTC),
    )
    mock_session.execute.return_value = _result(scalar=model)

    category = await repository.update(
        cid, owner_id, CategoryPatch.from_mapping({"icon": "DollarSign"})
    )

    assert category.icon is Icon.DOLLAR_SIGN
    assert model.icon == "DollarSign"


@pytest.mark.asyncio
async def test_remove_missing_returns_false(
    repository, mock_session, mock_probe, owner_id
):
    mock_session.execute.return_value = _result(scalar=None)

    assert await repository.remove(CategoryId.generate(), owner_id) is False
    mock_probe.entity_not_found.assert_called_once()
    mock_probe.entity_deleted.assert_not_called()
