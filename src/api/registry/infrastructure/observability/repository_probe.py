"""Domain probe for Registry repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events of the resource, category, workspace and widget
repositories. The ``entity`` argument names the table-backed aggregate
("resource", "category", "workspace", "widget").
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class RepositoryProbe(Protocol):
    """Domain probe for registry repository operations."""

    def entity_saved(self, entity: str, entity_id: str, owner_id: str) -> None:
        """Record that a new row was added."""
        ...

    def entity_updated(self, entity: str, entity_id: str, owner_id: str) -> None:
        """Record that an owned row was updated."""
        ...

    def entity_not_found(self, entity: str, entity_id: str, owner_id: str) -> None:
        """Record that no row matched (id, owner)."""
        ...

    def entity_deleted(self, entity: str, entity_id: str, owner_id: str) -> None:
        """Record that an owned row was deleted."""
        ...

    def owner_rows_deleted(self, entity: str, owner_id: str, count: int) -> None:
        """Record that every row of an owner was deleted."""
        ...

    def membership_replaced(
        self, workspace_id: str, owner_id: str, kept: int, dropped: int
    ) -> None:
        """Record that a workspace membership set was replaced."""
        ...

    def workspaces_reordered(self, owner_id: str, updated: int, skipped: int) -> None:
        """Record that workspace sort orders were rewritten."""
        ...

    def storage_failed(self, operation: str, error: Exception) -> None:
        """Record that the database rejected an operation."""
        ...

    def with_context(self, context: ObservationContext) -> RepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultRepositoryProbe:
    """Default implementation of RepositoryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultRepositoryProbe(logger=self._logger, context=context)

    def entity_saved(self, entity: str, entity_id: str, owner_id: str) -> None:
        self._logger.info(
            f"{entity}_saved",
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

    def entity_not_found(self, entity: str, entity_id: str, owner_id: str) -> None:
        self._logger.debug(
            f"{entity}_not_found",
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

    def owner_rows_deleted(self, entity: str, owner_id: str, count: int) -> None:
        self._logger.info(
            f"{entity}_rows_purged",
            owner_id=owner_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def membership_replaced(
        self, workspace_id: str, owner_id: str, kept: int, dropped: int
    ) -> None:
        self._logger.info(
            "workspace_membership_replaced",
            workspace_id=workspace_id,
            owner_id=owner_id,
            kept=kept,
            dropped=dropped,
            **self._get_context_kwargs(),
        )

    def workspaces_reordered(self, owner_id: str, updated: int, skipped: int) -> None:
        self._logger.info(
            "workspaces_reordered",
            owner_id=owner_id,
            updated=updated,
            skipped=skipped,
            **self._get_context_kwargs(),
        )

    def storage_failed(self, operation: str, error: Exception) -> None:
        self._logger.error(
            "registry_storage_failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
