"""Resource application service for the Registry bounded context."""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from registry.application.observability import (
    DefaultRegistryServiceProbe,
    RegistryServiceProbe,
)
from registry.domain.aggregates import Resource
from registry.domain.patches import ResourcePatch
from registry.domain.value_objects import OwnerId, ResourceId
from registry.ports.exceptions import StorageError
from registry.ports.repositories import IResourceRepository


class ResourceService:
    """Application service for an owner's launchable resources.

    Scoped to one owner at construction; every use case acts on that
    owner's rows only and runs in its own transaction.
    """

    def __init__(
        self,
        session: AsyncSession,
        resource_repository: IResourceRepository,
        scope_to_owner: OwnerId,
        probe: RegistryServiceProbe | None = None,
    ):
        """Initialize ResourceService with dependencies.

        Args:
            session: Database session for transaction management
            resource_repository: Repository for resource persistence
            scope_to_owner: The owner to which this service is scoped
            probe: Optional domain probe for observability
        """
        self._session = session
        self._resource_repository = resource_repository
        self._scope_to_owner = scope_to_owner
        self._probe = probe or DefaultRegistryServiceProbe()

    async def list_resources(self) -> list[Resource]:
        """List the owner's resources in display order."""
        resources = await self._resource_repository.list_by_owner(self._scope_to_owner)
        self._probe.entities_listed(
            "resource", self._scope_to_owner.value, len(resources)
        )
        return resources

    async def create_resource(
        self,
        name: str,
        category: str,
        color: str | None = None,
        url: str | None = None,
        is_favorite: bool = False,
        notification_count: int | float = 0,
        sort_order: int = 0,
    ) -> Resource:
        """Create a resource for the owner.

        Raises:
            ValidationError: If name or category is blank
            StorageError: If the database rejects the insert
        """
        resource = Resource.create(
            owner_id=self._scope_to_owner,
            name=name,
            category=category,
            color=color,
            url=url,
            is_favorite=is_favorite,
            notification_count=notification_count,
            sort_order=sort_order,
        )
        try:
            async with self._session.begin():
                saved = await self._resource_repository.add(resource)
        except StorageError as e:
            self._probe.use_case_failed(
                "create_resource", self._scope_to_owner.value, str(e)
            )
            raise

        self._probe.entity_created("resource", saved.id.value, saved.owner_id.value)
        return saved

    async def update_resource(
        self, resource_id: ResourceId, changes: Mapping[str, Any]
    ) -> Resource | None:
        """Apply a partial update to one of the owner's resources.

        Args:
            resource_id: The resource to update
            changes: Field values keyed by attribute name; unknown keys
                are ignored

        Returns:
            The updated resource, or None if the owner holds no such resource

        Raises:
            ValidationError: If a supplied field is invalid
        """
        patch = ResourcePatch.from_mapping(changes)

        async with self._session.begin():
            updated = await self._resource_repository.update(
                resource_id, self._scope_to_owner, patch
            )

        if updated is None:
            self._probe.entity_not_found(
                "resource", resource_id.value, self._scope_to_owner.value
            )
            return None

        self._probe.entity_updated("resource", resource_id.value, self._scope_to_owner.value)
        return updated

    async def remove_resource(self, resource_id: ResourceId) -> bool:
        """Remove a resource and its workspace memberships.

        Returns:
            True if a resource was removed, False if none matched
        """
        async with self._session.begin():
            removed = await self._resource_repository.remove(
                resource_id, self._scope_to_owner
            )

        if removed:
            self._probe.entity_deleted(
                "resource", resource_id.value, self._scope_to_owner.value
            )
        else:
            self._probe.entity_not_found(
                "resource", resource_id.value, self._scope_to_owner.value
            )
        return removed
