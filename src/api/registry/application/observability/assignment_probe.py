"""Probe for workspace assignment and owner data purge.

These use cases span several repositories in one transaction, so they
report their outcome as a whole rather than per row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AssignmentProbe(Protocol):
    """Domain probe for cross-aggregate registry use cases."""

    def assignment_completed(
        self,
        workspace_id: str,
        owner_id: str,
        reused: int,
        created: int,
        members: int,
    ) -> None:
        """Record that resources were assigned to a workspace."""
        ...

    def assignment_workspace_not_found(self, workspace_id: str, owner_id: str) -> None:
        """Record that the target workspace is missing or foreign."""
        ...

    def owner_data_purged(self, owner_id: str, counts: dict[str, int]) -> None:
        """Record that all registry data of an owner was deleted."""
        ...

    def with_context(self, context: ObservationContext) -> AssignmentProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAssignmentProbe:
    """Default implementation of AssignmentProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultAssignmentProbe:
        """Create a new probe with observation context bound."""
        return DefaultAssignmentProbe(logger=self._logger, context=context)

    def assignment_completed(
        self,
        workspace_id: str,
        owner_id: str,
        reused: int,
        created: int,
        members: int,
    ) -> None:
        self._logger.info(
            "workspace_assignment_completed",
            workspace_id=workspace_id,
            owner_id=owner_id,
            reused=reused,
            created=created,
            members=members,
            **self._get_context_kwargs(),
        )

    def assignment_workspace_not_found(self, workspace_id: str, owner_id: str) -> None:
        self._logger.debug(
            "workspace_assignment_target_not_found",
            workspace_id=workspace_id,
            owner_id=owner_id,
            **self._get_context_kwargs(),
        )

    def owner_data_purged(self, owner_id: str, counts: dict[str, int]) -> None:
        self._logger.info(
            "owner_data_purged",
            owner_id=owner_id,
            **counts,
            **self._get_context_kwargs(),
        )
