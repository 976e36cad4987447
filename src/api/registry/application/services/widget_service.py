"""Dashboard widget application service for the Registry bounded context."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from registry.application.observability import (
    DefaultRegistryServiceProbe,
    RegistryServiceProbe,
)
from registry.domain.aggregates import DashboardWidget
from registry.domain.exceptions import TooManyWidgetsError
from registry.domain.value_objects import OwnerId
from registry.ports.repositories import IWidgetRepository


class WidgetService:
    """Application service for an owner's dashboard widget layout."""

    def __init__(
        self,
        session: AsyncSession,
        widget_repository: IWidgetRepository,
        scope_to_owner: OwnerId,
        widget_limit: int,
        probe: RegistryServiceProbe | None = None,
    ):
        self._session = session
        self._widget_repository = widget_repository
        self._scope_to_owner = scope_to_owner
        self._widget_limit = widget_limit
        self._probe = probe or DefaultRegistryServiceProbe()

    async def list_widgets(self) -> list[DashboardWidget]:
        widgets = await self._widget_repository.list_by_owner(self._scope_to_owner)
        self._probe.entities_listed("widget", self._scope_to_owner.value, len(widgets))
        return widgets

    async def replace_widgets(
        self, layout: Sequence[Mapping[str, Any]]
    ) -> list[DashboardWidget]:
        """Replace the owner's whole layout.

        Args:
            layout: Widget fields (widget_type, title, x, y, w, h, visible)
                in display order

        Returns:
            The stored widgets

        Raises:
            TooManyWidgetsError: If the layout exceeds the widget limit
            ValidationError: If any widget is invalid
        """
        if len(layout) > self._widget_limit:
            self._probe.widgets_rejected(
                self._scope_to_owner.value, len(layout), self._widget_limit
            )
            raise TooManyWidgetsError(len(layout), self._widget_limit)

        widgets = [
            DashboardWidget.create(owner_id=self._scope_to_owner, **fields)
            for fields in layout
        ]

        async with self._session.begin():
            saved = await self._widget_repository.replace_all(
                self._scope_to_owner, widgets
            )

        self._probe.widgets_replaced(self._scope_to_owner.value, len(saved))
        return saved
