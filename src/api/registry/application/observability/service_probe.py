"""Probes for Registry application service observability.

Defines the interface for domain probes that capture application-level
events of the resource, category, workspace and widget services.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class RegistryServiceProbe(Protocol):
    """Domain probe for registry CRUD use cases."""

    def entities_listed(self, entity: str, owner_id: str, count: int) -> None:
        """Record that an owner's entities were listed."""
        ...

    def entity_created(self, entity: str, entity_id: str, owner_id: str) -> None:
        """Record that an entity was created."""
        ...

    def entity_updated(self, entity: str, entity_id: str, owner_id: str) -> None:
        """Record that an entity was updated."""
        ...

    def entity_deleted(self, entity: str, entity_id: str, owner_id: str) -> None:
        """Record that an entity was deleted."""
        ...

    def entity_not_found(self, entity: str, entity_id: str, owner_id: str) -> None:
        """Record that the targeted entity is missing or foreign."""
        ...

    def widgets_replaced(self, owner_id: str, count: int) -> None:
        """Record that a dashboard layout was replaced."""
        ...

    def widgets_rejected(self, owner_id: str, count: int, limit: int) -> None:
        """Record that a dashboard layout was over the widget limit."""
        ...

    def use_case_failed(self, use_case: str, owner_id: str, error: str) -> None:
        """Record that a use case failed after validation."""
        ...

    def with_context(self, context: ObservationContext) -> RegistryServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultRegistryServiceProbe:
    """Default implementation of RegistryServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultRegistryServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultRegistryServiceProbe(logger=self._logger, context=context)

    def entities_listed(self, entity: str, owner_id: str, count: int) -> None:
        self._logger.debug(
            f"{entity}s_listed",
            owner_id=owner_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def entity_created(self, entity: str, entity_id: str, owner_id: str) -> None:
        self._logger.info(
            f"{entity}_created",
            entity_id=entity_id,
            owner_id=owner_id,
            **self._get_context_kwargs(),
        )

    def entity_updated(self, entity: str, entity_id: str, owner_id: str) -> None:
        self._logger.info(
            f"{entity}_updated",
            entity_id=entity_id,
            owner_id=owner_id,
            **self._get_context_kwargs(),
        )

    def entity_deleted(self, entity: str, entity_id: str, owner_id: str) -> None:
        self._logger.info(
            f"{entity}_deleted",
            entity_id=entity_id,
            owner_id=owner_id,
            **self._get_context_kwargs(),
        )

    def entity_not_found(self, entity: str, entity_id: str, owner_id: str) -> None:
        self._logger.debug(
            f"{entity}_not_found",
            entity_id=entity_id,
            owner_id=owner_id,
            **self._get_context_kwargs(),
        )

    def widgets_replaced(self, owner_id: str, count: int) -> None:
        self._logger.info(
            "dashboard_widgets_replaced",
            owner_id=owner_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def widgets_rejected(self, owner_id: str, count: int, limit: int) -> None:
        self._logger.warning(
            "dashboard_widgets_rejected",
            owner_id=owner_id,
            count=count,
            limit=limit,
            **self._get_context_kwargs(),
        )

    def use_case_failed(self, use_case: str, owner_id: str, error: str) -> None:
        self._logger.error(
            "registry_use_case_failed",
            use_case=use_case,
            owner_id=owner_id,
            error=error,
            **self._get_context_kwargs(),
        )
