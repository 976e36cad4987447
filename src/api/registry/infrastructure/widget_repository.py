"""PostgreSQL implementation of IWidgetRepository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from registry.domain.aggregates import DashboardWidget
from registry.domain.value_objects import OwnerId, WidgetId
from registry.infrastructure.models import DashboardWidgetModel
from registry.infrastructure.observability import (
    DefaultRepositoryProbe,
    RepositoryProbe,
)
from registry.infrastructure.storage import storage_errors
from registry.ports.repositories import IWidgetRepository


class WidgetRepository(IWidgetRepository):
    """Repository storing dashboard widget layouts in PostgreSQL.

    A layout is always written as a whole: the previous rows of the owner
    are deleted and the new ones inserted in list order.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: RepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultRepositoryProbe()

    async def list_by_owner(self, owner_id: OwnerId) -> list[DashboardWidget]:
        stmt = (
            select(DashboardWidgetModel)
            .where(DashboardWidgetModel.owner_id == owner_id.value)
            .order_by(DashboardWidgetModel.position, DashboardWidgetModel.id)
        )
        with storage_errors("widget.list", self._probe):
            result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def replace_all(
        self, owner_id: OwnerId, widgets: Sequence[DashboardWidget]
    ) -> list[DashboardWidget]:
        models = [
            DashboardWidgetModel(
                id=widget.id.value,
                owner_id=owner_id.value,
                widget_type=widget.widget_type,
                title=widget.title,
                x=widget.x,
                y=widget.y,
                w=widget.w,
                h=widget.h,
                visible=widget.visible,
                position=position,
            )
            for position, widget in enumerate(widgets)
        ]
        with storage_errors("widget.replace_all", self._probe):
            await self._session.execute(
                delete(DashboardWidgetModel).where(
                    DashboardWidgetModel.owner_id == owner_id.value
                )
            )
            self._session.add_all(models)
            await self._session.flush()

        for model in models:
            self._probe.entity_saved("widget", model.id, owner_id.value)
        return [self._to_domain(model) for model in models]

    async def remove_all(self, owner_id: OwnerId) -> int:
        with storage_errors("widget.remove_all", self._probe):
            result = await self._session.execute(
                delete(DashboardWidgetModel).where(
                    DashboardWidgetModel.owner_id == owner_id.value
                )
            )
        count = result.rowcount or 0
        self._probe.owner_rows_deleted("widget", owner_id.value, count)
        return count

    @staticmethod
    def _to_domain(model: DashboardWidgetModel) -> DashboardWidget:
        return DashboardWidget(
            id=WidgetId(value=model.id),
            owner_id=OwnerId(value=model.owner_id),
            widget_type=model.widget_type,
            title=model.title,
            x=model.x,
            y=model.y,
            w=model.w,
            h=model.h,
            visible=model.visible,
        )
