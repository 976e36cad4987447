"""PostgreSQL implementation of IWorkspaceRepository.

Workspaces and their membership records live in two tables. Membership
records keep the order in which resources were assigned.
"""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from registry.domain.aggregates import Workspace, WorkspaceMembership
from registry.domain.exceptions import ValidationError
from registry.domain.patches import WorkspacePatch
from registry.domain.value_objects import (
    Icon,
    MembershipId,
    OwnerId,
    ResourceId,
    WorkspaceId,
)
from registry.infrastructure.models import (
    ResourceModel,
    WorkspaceModel,
    WorkspaceResourceModel,
)
from registry.infrastructure.observability import (
    DefaultRepositoryProbe,
    RepositoryProbe,
)
from registry.infrastructure.storage import storage_errors
from registry.ports.repositories import IWorkspaceRepository


class WorkspaceRepository(IWorkspaceRepository):
    """Repository storing workspaces and membership sets in PostgreSQL."""

    def __init__(
        self,
        session: AsyncSession,
        probe: RepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultRepositoryProbe()

    async def list_by_owner(self, owner_id: OwnerId) -> list[Workspace]:
        stmt = (
            select(WorkspaceModel)
            .where(WorkspaceModel.owner_id == owner_id.value)
            .order_by(
                WorkspaceModel.sort_order,
                WorkspaceModel.created_at,
                WorkspaceModel.id,
            )
        )
        with storage_errors("workspace.list", self._probe):
            result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def add(self, workspace: Workspace) -> Workspace:
        model = WorkspaceModel(
            id=workspace.id.value,
            owner_id=workspace.owner_id.value,
            name=workspace.name,
            color=workspace.color,
            icon=workspace.icon.value,
            sort_order=workspace.sort_order,
        )
        if workspace.created_at is not None:
            model.created_at = workspace.created_at
        with storage_errors("workspace.add", self._probe):
            self._session.add(model)
            await self._session.flush()

        self._probe.entity_saved(
            "workspace", workspace.id.value, workspace.owner_id.value
        )
        return self._to_domain(model)

    async def get_by_id(
        self, workspace_id: WorkspaceId, owner_id: OwnerId
    ) -> Workspace | None:
        with storage_errors("workspace.get", self._probe):
            model = await self._get_model(workspace_id, owner_id)
        if model is None:
            self._probe.entity_not_found("workspace", workspace_id.value, owner_id.value)
            return None
        return self._to_domain(model)

    async def update(
        self, workspace_id: WorkspaceId, owner_id: OwnerId, patch: WorkspacePatch
    ) -> Workspace | None:
        with storage_errors("workspace.update", self._probe):
            model = await self._get_model(workspace_id, owner_id)
            if model is None:
                self._probe.entity_not_found(
                    "workspace", workspace_id.value, owner_id.value
                )
                return None

            workspace = self._to_domain(model)
            workspace.apply(patch)

            model.name = workspace.name
            model.color = workspace.color
            model.icon = workspace.icon.value
            model.sort_order = workspace.sort_order
            await self._session.flush()

        self._probe.entity_updated("workspace", workspace_id.value, owner_id.value)
        return workspace

    async def delete(self, workspace_id: WorkspaceId, owner_id: OwnerId) -> bool:
        """Delete an owned workspace and its membership records.

        Returns:
            True if deleted, False if not found
        """
        with storage_errors("workspace.delete", self._probe):
            model = await self._get_model(workspace_id, owner_id)
            if model is None:
                self._probe.entity_not_found(
                    "workspace", workspace_id.value, owner_id.value
                )
                return False

            await self._session.execute(
                delete(WorkspaceResourceModel).where(
                    WorkspaceResourceModel.workspace_id == workspace_id.value
                )
            )
            await self._session.delete(model)
            await self._session.flush()

        self._probe.entity_deleted("workspace", workspace_id.value, owner_id.value)
        return True

    async def reorder(self, owner_id: OwnerId, ordered_ids: Sequence[str]) -> None:
        """Set sort_order to each id's position in ordered_ids.

        Positions are kept even when an earlier id is skipped, so the
        result only depends on the list itself.
        """
        updated = skipped = 0
        with storage_errors("workspace.reorder", self._probe):
            for position, raw_id in enumerate(ordered_ids):
                try:
                    workspace_id = WorkspaceId.from_string(raw_id)
                except ValidationError:
                    skipped += 1
                    continue

                result = await self._session.execute(
                    update(WorkspaceModel)
                    .where(
                        WorkspaceModel.id == workspace_id.value,
                        WorkspaceModel.owner_id == owner_id.value,
                    )
                    .values(sort_order=position)
                )
                if result.rowcount:
                    updated += 1
                else:
                    skipped += 1

        self._probe.workspaces_reordered(owner_id.value, updated, skipped)

    async def get_membership(
        self, workspace_id: WorkspaceId, owner_id: OwnerId
    ) -> list[WorkspaceMembership]:
        with storage_errors("workspace.get_membership", self._probe):
            if await self._get_model(workspace_id, owner_id) is None:
                self._probe.entity_not_found(
                    "workspace", workspace_id.value, owner_id.value
                )
                return []

            result = await self._session.execute(
                select(WorkspaceResourceModel)
                .where(WorkspaceResourceModel.workspace_id == workspace_id.value)
                .order_by(WorkspaceResourceModel.position, WorkspaceResourceModel.id)
            )
        return [self._membership_to_domain(m) for m in result.scalars().all()]

    async def set_membership(
        self,
        workspace_id: WorkspaceId,
        owner_id: OwnerId,
        resource_ids: Sequence[ResourceId],
    ) -> list[WorkspaceMembership]:
        """Replace the membership set with the owner's resources among resource_ids.

        Returns:
            The new membership records, empty when the workspace is missing
            or foreign
        """
        requested = list(dict.fromkeys(rid.value for rid in resource_ids))

        with storage_errors("workspace.set_membership", self._probe):
            if await self._get_model(workspace_id, owner_id) is None:
                self._probe.entity_not_found(
                    "workspace", workspace_id.value, owner_id.value
                )
                return []

            owned: set[str] = set()
            if requested:
                result = await self._session.execute(
                    select(ResourceModel.id).where(
                        ResourceModel.owner_id == owner_id.value,
                        ResourceModel.id.in_(requested),
                    )
                )
                owned = set(result.scalars().all())
            kept = [rid for rid in requested if rid in owned]

            await self._session.execute(
                delete(WorkspaceResourceModel).where(
                    WorkspaceResourceModel.workspace_id == workspace_id.value
                )
            )
            models = [
                WorkspaceResourceModel(
                    id=MembershipId.generate().value,
                    workspace_id=workspace_id.value,
                    resource_id=rid,
                    position=position,
                )
                for position, rid in enumerate(kept)
            ]
            self._session.add_all(models)
            await self._session.flush()

        self._probe.membership_replaced(
            workspace_id.value,
            owner_id.value,
            kept=len(kept),
            dropped=len(requested) - len(kept),
        )
        return [self._membership_to_domain(m) for m in models]

    async def remove_all(self, owner_id: OwnerId) -> int:
        owned_ids = select(WorkspaceModel.id).where(
            WorkspaceModel.owner_id == owner_id.value
        )
        with storage_errors("workspace.remove_all", self._probe):
            await self._session.execute(
                delete(WorkspaceResourceModel).where(
                    WorkspaceResourceModel.workspace_id.in_(owned_ids)
                )
            )
            result = await self._session.execute(
                delete(WorkspaceModel).where(WorkspaceModel.owner_id == owner_id.value)
            )
        count = result.rowcount or 0
        self._probe.owner_rows_deleted("workspace", owner_id.value, count)
        return count

    async def _get_model(
        self, workspace_id: WorkspaceId, owner_id: OwnerId
    ) -> WorkspaceModel | None:
        stmt = select(WorkspaceModel).where(
            WorkspaceModel.id == workspace_id.value,
            WorkspaceModel.owner_id == owner_id.value,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_domain(model: WorkspaceModel) -> Workspace:
        return Workspace(
            id=WorkspaceId(value=model.id),
            owner_id=OwnerId(value=model.owner_id),
            name=model.name,
            color=model.color,
            icon=Icon(model.icon),
            sort_order=model.sort_order,
            created_at=model.created_at,
        )

    @staticmethod
    def _membership_to_domain(model: WorkspaceResourceModel) -> WorkspaceMembership:
        return WorkspaceMembership(
            id=MembershipId(value=model.id),
            workspace_id=WorkspaceId(value=model.workspace_id),
            resource_id=ResourceId(value=model.resource_id),
        )
