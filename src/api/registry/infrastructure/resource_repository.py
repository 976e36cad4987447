"""PostgreSQL implementation of IResourceRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from registry.domain.aggregates import Resource
from registry.domain.patches import ResourcePatch
from registry.domain.value_objects import OwnerId, ResourceId
from registry.infrastructure.models import ResourceModel, WorkspaceResourceModel
from registry.infrastructure.observability import (
    DefaultRepositoryProbe,
    RepositoryProbe,
)
from registry.infrastructure.storage import storage_errors
from registry.ports.repositories import IResourceRepository


class ResourceRepository(IResourceRepository):
    """Repository storing launchable resources in PostgreSQL.

    Every query filters on owner_id. Removing a resource also removes
    its workspace membership records within the caller's transaction.
    """

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

    async def list_by_owner(self, owner_id: OwnerId) -> list[Resource]:
        stmt = (
            select(ResourceModel)
            .where(ResourceModel.owner_id == owner_id.value)
            .order_by(
                ResourceModel.sort_order,
                ResourceModel.created_at,
                ResourceModel.id,
            )
        )
        with storage_errors("resource.list", self._probe):
            result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def add(self, resource: Resource) -> Resource:
        model = ResourceModel(
            id=resource.id.value,
            owner_id=resource.owner_id.value,
            name=resource.name,
            category=resource.category,
            color=resource.color,
            url=resource.url,
            is_favorite=resource.is_favorite,
            notification_count=resource.notification_count,
            sort_order=resource.sort_order,
        )
        if resource.created_at is not None:
            model.created_at = resource.created_at
        with storage_errors("resource.add", self._probe):
            self._session.add(model)
            await self._session.flush()

        self._probe.entity_saved("resource", resource.id.value, resource.owner_id.value)
        return self._to_domain(model)

    async def update(
        self, resource_id: ResourceId, owner_id: OwnerId, patch: ResourcePatch
    ) -> Resource | None:
        """Apply a partial update; notification counts are clamped by the domain.

        Returns:
            The updated resource, or None when (id, owner) matches nothing
        """
        with storage_errors("resource.update", self._probe):
            model = await self._get_model(resource_id, owner_id)
            if model is None:
                self._probe.entity_not_found("resource", resource_id.value, owner_id.value)
                return None

            resource = self._to_domain(model)
            resource.apply(patch)

            model.name = resource.name
            model.category = resource.category
            model.color = resource.color
            model.url = resource.url
            model.is_favorite = resource.is_favorite
            model.notification_count = resource.notification_count
            model.sort_order = resource.sort_order
            await self._session.flush()

        self._probe.entity_updated("resource", resource_id.value, owner_id.value)
        return resource

    async def remove(self, resource_id: ResourceId, owner_id: OwnerId) -> bool:
        """Delete an owned resource and every membership naming it.

        Returns:
            True if deleted, False if not found
        """
        with storage_errors("resource.remove", self._probe):
            model = await self._get_model(resource_id, owner_id)
            if model is None:
                self._probe.entity_not_found("resource", resource_id.value, owner_id.value)
                return False

            await self._session.execute(
                delete(WorkspaceResourceModel).where(
                    WorkspaceResourceModel.resource_id == resource_id.value
                )
            )
            await self._session.delete(model)
            await self._session.flush()

        self._probe.entity_deleted("resource", resource_id.value, owner_id.value)
        return True

    async def remove_all(self, owner_id: OwnerId) -> int:
        owned_ids = select(ResourceModel.id).where(
            ResourceModel.owner_id == owner_id.value
        )
        with storage_errors("resource.remove_all", self._probe):
            await self._session.execute(
                delete(WorkspaceResourceModel).where(
                    WorkspaceResourceModel.resource_id.in_(owned_ids)
                )
            )
            result = await self._session.execute(
                delete(ResourceModel).where(ResourceModel.owner_id == owner_id.value)
            )
        count = result.rowcount or 0
        self._probe.owner_rows_deleted("resource", owner_id.value, count)
        return count

    async def _get_model(
        self, resource_id: ResourceId, owner_id: OwnerId
    ) -> ResourceModel | None:
        stmt = select(ResourceModel).where(
            ResourceModel.id == resource_id.value,
            ResourceModel.owner_id == owner_id.value,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_domain(model: ResourceModel) -> Resource:
        return Resource(
            id=ResourceId(value=model.id),
            owner_id=OwnerId(value=model.owner_id),
            name=model.name,
            category=model.category,
            color=model.color,
            url=model.url,
            is_favorite=model.is_favorite,
            notification_count=model.notification_count,
            sort_order=model.sort_order,
            created_at=model.created_at,
        )
