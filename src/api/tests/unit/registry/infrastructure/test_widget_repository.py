"""Unit tests for WidgetRepository with a mocked session."""

from unittest.mock import MagicMock, create_autospec

import pytest

from registry.domain.aggregates import DashboardWidget
from registry.infrastructure.observability import RepositoryProbe
from registry.infrastructure.widget_repository import WidgetRepository


@pytest.fixture
def mock_probe():
    return create_autospec(RepositoryProbe, instance=True)


@pytest.fixture
def repository(mock_session, mock_probe):
    return WidgetRepository(session=mock_session, probe=mock_probe)


@pytest.mark.asyncio
async def test_replace_all_deletes_then_inserts_in_order(
    repository, mock_session, owner_id
):
    widgets = [
        DashboardWidget.create(owner_id=owner_id, widget_type="clock", title="Time"),
        DashboardWidget.create(
            owner_id=owner_id, widget_type="favorites", title="Pinned", w=2
        ),
    ]

    saved = await repository.replace_all(owner_id, widgets)

    mock_session.execute.assert_awaited_once()
    models = mock_session.add_all.call_args[0][0]
    assert [m.position for m in models] == [0, 1]
    assert [m.widget_type for m in models] == ["clock", "favorites"]
    assert [w.id for w in saved] == [w.id for w in widgets]
    assert saved[1].w == 2


@pytest.mark.asyncio
async def test_replace_all_with_empty_layout_clears(repository, mock_session, owner_id):
    assert await repository.replace_all(owner_id, []) == []
    mock_session.execute.assert_awaited_once()
    mock_session.add_all.assert_called_once_with([])


@pytest.mark.asyncio
async def test_remove_all_counts_rows(repository, mock_session, mock_probe, owner_id):
    result = MagicMock()
    result.rowcount = 4
    mock_session.execute.return_value = result

    assert await repository.remove_all(owner_id) == 4
    mock_probe.owner_rows_deleted.assert_called_once_with("widget", owner_id.value, 4)
