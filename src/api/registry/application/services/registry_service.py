"""Registry application service for cross-aggregate use cases.

Assigning resources to a workspace may create resources, and purging an
owner touches every registry table. Both run in a single transaction.
"""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from registry.application.observability import (
    AssignmentProbe,
    DefaultAssignmentProbe,
)
from registry.domain.aggregates import Resource, WorkspaceMembership
from registry.domain.assignment import NewResourceSpec, plan_assignment
from registry.domain.value_objects import OwnerId, ResourceId, WorkspaceId
from registry.ports.repositories import (
    ICategoryRepository,
    IResourceRepository,
    IWidgetRepository,
    IWorkspaceRepository,
)


class RegistryService:
    """Application service coordinating several registry repositories."""

    def __init__(
        self,
        session: AsyncSession,
        resource_repository: IResourceRepository,
        category_repository: ICategoryRepository,
        workspace_repository: IWorkspaceRepository,
        widget_repository: IWidgetRepository,
        scope_to_owner: OwnerId,
        assign_batch_limit: int,
        probe: AssignmentProbe | None = None,
    ):
        """Initialize RegistryService with dependencies.

        Args:
            session: Database session for transaction management
            resource_repository: Repository for resource persistence
            category_repository: Repository for category persistence
            workspace_repository: Repository for workspaces and membership
            widget_repository: Repository for dashboard widgets
            scope_to_owner: The owner to which this service is scoped
            assign_batch_limit: Maximum new resource specs considered per
                assignment
            probe: Optional domain probe for observability
        """
        self._session = session
        self._resource_repository = resource_repository
        self._category_repository = category_repository
        self._workspace_repository = workspace_repository
        self._widget_repository = widget_repository
        self._scope_to_owner = scope_to_owner
        self._assign_batch_limit = assign_batch_limit
        self._probe = probe or DefaultAssignmentProbe()

    async def assign_to_workspace(
        self,
        workspace_id: WorkspaceId,
        resource_ids: Sequence[str],
        new_resource_specs: Sequence[Any] = (),
    ) -> list[WorkspaceMembership]:
        """Replace a workspace's membership with existing and catalog resources.

        Ids the owner does not hold are dropped. Catalog specs beyond the
        batch limit are ignored, as are entries without a string name.
        Specs are deduplicated by case-insensitive name, and a spec naming
        an existing resource reuses it instead of creating a duplicate.

        Args:
            workspace_id: The workspace to update
            resource_ids: Ids of existing resources to include
            new_resource_specs: Untrusted catalog entries with name,
                category, color and url

        Returns:
            The new membership records, empty when the workspace is missing
            or foreign (nothing is created in that case)
        """
        owner_id = self._scope_to_owner

        async with self._session.begin():
            workspace = await self._workspace_repository.get_by_id(
                workspace_id, owner_id
            )
            if workspace is None:
                self._probe.assignment_workspace_not_found(
                    workspace_id.value, owner_id.value
                )
                return []

            owned = await self._resource_repository.list_by_owner(owner_id)
            plan = plan_assignment(
                owned=owned,
                resource_ids=resource_ids,
                raw_specs=new_resource_specs,
                batch_limit=self._assign_batch_limit,
            )

            member_ids: list[ResourceId] = []
            created = 0
            for entry in plan.entries:
                if isinstance(entry, NewResourceSpec):
                    resource = await self._resource_repository.add(
                        self._resource_from_spec(entry)
                    )
                    created += 1
                    member_ids.append(resource.id)
                else:
                    member_ids.append(entry)

            memberships = await self._workspace_repository.set_membership(
                workspace_id, owner_id, member_ids
            )

        self._probe.assignment_completed(
            workspace_id=workspace_id.value,
            owner_id=owner_id.value,
            reused=len(plan.reused_ids),
            created=created,
            members=len(memberships),
        )
        return memberships

    async def purge_owner_data(self) -> dict[str, int]:
        """Delete every resource, category, workspace and widget of the owner.

        Membership records go with their workspaces and resources.

        Returns:
            Number of deleted rows per entity
        """
        owner_id = self._scope_to_owner

        async with self._session.begin():
            counts = {
                "widgets": await self._widget_repository.remove_all(owner_id),
                "workspaces": await self._workspace_repository.remove_all(owner_id),
                "resources": await self._resource_repository.remove_all(owner_id),
                "categories": await self._category_repository.remove_all(owner_id),
            }

        self._probe.owner_data_purged(owner_id.value, counts)
        return counts

    def _resource_from_spec(self, spec: NewResourceSpec) -> Resource:
        return Resource.create(
            owner_id=self._scope_to_owner,
            name=spec.name,
            category=spec.category,
            color=spec.color,
            url=spec.url,
            is_favorite=False,
        )
