"""Pydantic models for workspace API requests and responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, Field

from registry.domain.aggregates import Workspace, WorkspaceMembership
from registry.domain.value_objects import Icon
from registry.presentation.models import CamelModel


class CreateWorkspaceRequest(CamelModel):
    """Request model for creating a client workspace."""

    name: str = Field(..., description="Workspace name")
    color: str | None = Field(default=None, description="Display color")
    icon: str = Field(default=Icon.BUILDING_2.value, description="Icon label")
    sort_order: int = Field(default=0)


class UpdateWorkspaceRequest(CamelModel):
    """Request model for a partial workspace update."""

    name: str | None = None
    color: str | None = None
    icon: str | None = None
    sort_order: int | None = None


class ReorderWorkspacesRequest(CamelModel):
    """Request model for rewriting the workspace display order."""

    ordered_ids: list[str] = Field(
        ..., description="Workspace IDs in the desired order"
    )


class AssignMembersRequest(CamelModel):
    """Request model for replacing a workspace's membership.

    ``newResourceSpecs`` (also accepted as ``catalogApps``) names resources
    to create or reuse by case-insensitive name. Entries are untrusted:
    malformed ones are skipped rather than rejected.
    """

    app_ids: list[str] = Field(..., description="IDs of existing resources")
    new_resource_specs: list[Any] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "newResourceSpecs", "catalogApps", "new_resource_specs"
        ),
        description="Catalog entries with name, category, color and url",
    )


class WorkspaceResponse(CamelModel):
    """Response model for a workspace."""

    id: str = Field(..., description="Workspace ID (ULID format)")
    owner_id: str
    name: str
    color: str
    icon: Icon
    sort_order: int
    created_at: datetime | None

    @classmethod
    def from_domain(cls, workspace: Workspace) -> WorkspaceResponse:
        """Convert domain Workspace aggregate to API response."""
        return cls(
            id=workspace.id.value,
            owner_id=workspace.owner_id.value,
            name=workspace.name,
            color=workspace.color,
            icon=workspace.icon,
            sort_order=workspace.sort_order,
            created_at=workspace.created_at,
        )


class MembershipResponse(CamelModel):
    """Response model for a workspace membership record."""

    id: str
    workspace_id: str
    app_id: str = Field(..., description="Member resource ID")

    @classmethod
    def from_domain(cls, membership: WorkspaceMembership) -> MembershipResponse:
        return cls(
            id=membership.id.value,
            workspace_id=membership.workspace_id.value,
            app_id=membership.resource_id.value,
        )
