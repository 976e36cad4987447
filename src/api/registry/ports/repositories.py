"""Repository protocols (ports) for the Registry bounded context.

Every operation is scoped by owner: an id belonging to another owner is
treated exactly like an id that does not exist. Implementations only
flush; the application service owns the transaction.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from registry.domain.aggregates import (
    Category,
    DashboardWidget,
    Resource,
    Workspace,
    WorkspaceMembership,
)
from registry.domain.patches import CategoryPatch, ResourcePatch, WorkspacePatch
from registry.domain.value_objects import (
    CategoryId,
    OwnerId,
    ResourceId,
    WorkspaceId,
)


@runtime_checkable
class IResourceRepository(Protocol):
    """Repository for Resource persistence."""

    async def list_by_owner(self, owner_id: OwnerId) -> list[Resource]:
        """List an owner's resources by sort order, then creation time.

        Returns:
            Ordered list of resources (empty when the owner has none)
        """
        ...

    async def add(self, resource: Resource) -> Resource:
        """Persist a new resource and return it as stored."""
        ...

    async def update(
        self, resource_id: ResourceId, owner_id: OwnerId, patch: ResourcePatch
    ) -> Resource | None:
        """Apply a partial update to an owned resource.

        Returns:
            The updated resource, or None if no resource matches (id, owner)
        """
        ...

    async def remove(self, resource_id: ResourceId, owner_id: OwnerId) -> bool:
        """Delete an owned resource and every membership record naming it.

        Returns:
            True if a resource was deleted, False if none matched
        """
        ...

    async def remove_all(self, owner_id: OwnerId) -> int:
        """Delete every resource of an owner, with their memberships.

        Returns:
            Number of resources deleted
        """
        ...


@runtime_checkable
class ICategoryRepository(Protocol):
    """Repository for Category persistence.

    Resources reference categories by label, so nothing cascades.
    """

    async def list_by_owner(self, owner_id: OwnerId) -> list[Category]:
        ...

    async def add(self, category: Category) -> Category:
        ...

    async def update(
        self, category_id: CategoryId, owner_id: OwnerId, patch: CategoryPatch
    ) -> Category | None:
        ...

    async def remove(self, category_id: CategoryId, owner_id: OwnerId) -> bool:
        ...

    async def remove_all(self, owner_id: OwnerId) -> int:
        ...


@runtime_checkable
class IWorkspaceRepository(Protocol):
    """Repository for Workspace persistence, ordering and membership."""

    async def list_by_owner(self, owner_id: OwnerId) -> list[Workspace]:
        """List an owner's workspaces by sort order, then creation time."""
        ...

    async def add(self, workspace: Workspace) -> Workspace:
        ...

    async def get_by_id(
        self, workspace_id: WorkspaceId, owner_id: OwnerId
    ) -> Workspace | None:
        ...

    async def update(
        self, workspace_id: WorkspaceId, owner_id: OwnerId, patch: WorkspacePatch
    ) -> Workspace | None:
        ...

    async def delete(self, workspace_id: WorkspaceId, owner_id: OwnerId) -> bool:
        """Delete an owned workspace together with its membership records.

        Returns:
            True if deleted, False if not found
        """
        ...

    async def reorder(self, owner_id: OwnerId, ordered_ids: Sequence[str]) -> None:
        """Assign sort orders 0, 1, 2, ... following the given id order.

        Ids that are malformed or not owned by the owner are skipped.
        """
        ...

    async def get_membership(
        self, workspace_id: WorkspaceId, owner_id: OwnerId
    ) -> list[WorkspaceMembership]:
        """Return the membership records of an owned workspace.

        Returns:
            Membership records, empty when the workspace is missing or foreign
        """
        ...

    async def set_membership(
        self,
        workspace_id: WorkspaceId,
        owner_id: OwnerId,
        resource_ids: Sequence[ResourceId],
    ) -> list[WorkspaceMembership]:
        """Replace the membership set of an owned workspace.

        Resource ids not owned by the owner are dropped. Duplicates keep
        their first position.

        Returns:
            The new membership records, empty when the workspace is
            missing or foreign
        """
        ...

    async def remove_all(self, owner_id: OwnerId) -> int:
        ...


@runtime_checkable
class IWidgetRepository(Protocol):
    """Repository for the dashboard widget layout of an owner."""

    async def list_by_owner(self, owner_id: OwnerId) -> list[DashboardWidget]:
        ...

    async def replace_all(
        self, owner_id: OwnerId, widgets: Sequence[DashboardWidget]
    ) -> list[DashboardWidget]:
        """Delete the owner's layout and insert the given widgets."""
        ...

    async def remove_all(self, owner_id: OwnerId) -> int:
        ...
