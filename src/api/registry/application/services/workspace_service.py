"""Workspace application service for the Registry bounded context."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from registry.application.observability import (
    DefaultRegistryServiceProbe,
    RegistryServiceProbe,
)
from registry.domain.aggregates import Workspace, WorkspaceMembership
from registry.domain.patches import WorkspacePatch
from registry.domain.value_objects import Icon, OwnerId, WorkspaceId
from registry.ports.repositories import IWorkspaceRepository


class WorkspaceService:
    """Application service for an owner's client workspaces.

    Membership replacement lives in RegistryService because it may create
    resources on the way.
    """

    def __init__(
        self,
        session: AsyncSession,
        workspace_repository: IWorkspaceRepository,
        scope_to_owner: OwnerId,
        probe: RegistryServiceProbe | None = None,
    ):
        """Initialize WorkspaceService with dependencies.

        Args:
            session: Database session for transaction management
            workspace_repository: Repository for workspace persistence
            scope_to_owner: The owner to which this service is scoped
            probe: Optional domain probe for observability
        """
        self._session = session
        self._workspace_repository = workspace_repository
        self._scope_to_owner = scope_to_owner
        self._probe = probe or DefaultRegistryServiceProbe()

    async def list_workspaces(self) -> list[Workspace]:
        """List the owner's workspaces by sort order, then creation time."""
        workspaces = await self._workspace_repository.list_by_owner(
            self._scope_to_owner
        )
        self._probe.entities_listed(
            "workspace", self._scope_to_owner.value, len(workspaces)
        )
        return workspaces

    async def create_workspace(
        self,
        name: str,
        color: str | None = None,
        icon: Icon | str = Icon.BUILDING_2,
        sort_order: int = 0,
    ) -> Workspace:
        """Create a workspace for the owner.

        Raises:
            ValidationError: If name is blank or icon unknown
        """
        workspace = Workspace.create(
            owner_id=self._scope_to_owner,
            name=name,
            color=color,
            icon=icon,
            sort_order=sort_order,
        )
        async with self._session.begin():
            saved = await self._workspace_repository.add(workspace)

        self._probe.entity_created("workspace", saved.id.value, saved.owner_id.value)
        return saved

    async def get_workspace(self, workspace_id: WorkspaceId) -> Workspace | None:
        return await self._workspace_repository.get_by_id(
            workspace_id, self._scope_to_owner
        )

    async def update_workspace(
        self, workspace_id: WorkspaceId, changes: Mapping[str, Any]
    ) -> Workspace | None:
        """Apply a partial update to one of the owner's workspaces.

        Returns:
            The updated workspace, or None if missing or foreign

        Raises:
            ValidationError: If a supplied field is invalid
        """
        patch = WorkspacePatch.from_mapping(changes)

        async with self._session.begin():
            updated = await self._workspace_repository.update(
                workspace_id, self._scope_to_owner, patch
            )

        if updated is None:
            self._probe.entity_not_found(
                "workspace", workspace_id.value, self._scope_to_owner.value
            )
            return None

        self._probe.entity_updated(
            "workspace", workspace_id.value, self._scope_to_owner.value
        )
        return updated

    async def delete_workspace(self, workspace_id: WorkspaceId) -> bool:
        """Delete a workspace and its membership records in one transaction."""
        async with self._session.begin():
            deleted = await self._workspace_repository.delete(
                workspace_id, self._scope_to_owner
            )

        if deleted:
            self._probe.entity_deleted(
                "workspace", workspace_id.value, self._scope_to_owner.value
            )
        return deleted

    async def reorder_workspaces(self, ordered_ids: Sequence[str]) -> None:
        """Rewrite sort orders to follow ordered_ids; unknown ids are skipped."""
        async with self._session.begin():
            await self._workspace_repository.reorder(self._scope_to_owner, ordered_ids)

    async def get_membership(
        self, workspace_id: WorkspaceId
    ) -> list[WorkspaceMembership]:
        """Return membership records, empty when the workspace is missing or foreign."""
        return await self._workspace_repository.get_membership(
            workspace_id, self._scope_to_owner
        )
