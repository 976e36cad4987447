"""Workspace aggregate for the Registry context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from registry.domain.patches import WorkspacePatch
from registry.domain.value_objects import (
    DEFAULT_COLOR,
    Icon,
    MembershipId,
    OwnerId,
    ResourceId,
    WorkspaceId,
    normalize_color,
    normalize_name,
)


@dataclass
class Workspace:
    """A named grouping of an owner's resources, typically one per client.

    The membership set is persisted separately and only ever holds
    resources owned by the workspace owner.
    """

    id: WorkspaceId
    owner_id: OwnerId
    name: str
    color: str = DEFAULT_COLOR
    icon: Icon = Icon.BUILDING_2
    sort_order: int = 0
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        self.name = normalize_name(self.name)
        self.icon = Icon.parse(self.icon)

    @classmethod
    def create(
        cls,
        owner_id: OwnerId,
        name: str,
        color: str | None = None,
        icon: Icon | str = Icon.BUILDING_2,
        sort_order: int = 0,
    ) -> Workspace:
        """Factory method for creating a new workspace.

        Raises:
            ValidationError: If name is blank or icon is unknown
        """
        return cls(
            id=WorkspaceId.generate(),
            owner_id=owner_id,
            name=name,
            color=normalize_color(color),
            icon=Icon.parse(icon),
            sort_order=sort_order,
            created_at=datetime.now(UTC),
        )

    def apply(self, patch: WorkspacePatch) -> None:
        """Apply a partial update in place."""
        for key, value in patch.changes.items():
            setattr(self, key, value)


@dataclass(frozen=True)
class WorkspaceMembership:
    """Record linking one resource to one workspace."""

    id: MembershipId
    workspace_id: WorkspaceId
    resource_id: ResourceId
