"""HTTP routes for client workspaces and their membership."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from registry.application.services import RegistryService, WorkspaceService
from registry.dependencies.services import (
    get_registry_service,
    get_workspace_service,
)
from registry.domain.exceptions import ValidationError
from registry.domain.value_objects import WorkspaceId
from registry.ports.exceptions import StorageError
from registry.presentation.errors import (
    bad_request,
    not_found,
    parse_path_id,
    storage_failure,
)
from registry.presentation.workspaces.models import (
    AssignMembersRequest,
    CreateWorkspaceRequest,
    MembershipResponse,
    ReorderWorkspacesRequest,
    UpdateWorkspaceRequest,
    WorkspaceResponse,
)

router = APIRouter(
    prefix="/workspaces",
    tags=["workspaces"],
)


@router.get(
    "",
    response_model=list[WorkspaceResponse],
    summary="List workspaces",
    description="List the caller's workspaces by sort order, then creation time",
)
async def list_workspaces(
    service: Annotated[WorkspaceService, Depends(get_workspace_service)],
) -> list[WorkspaceResponse]:
    try:
        workspaces = await service.list_workspaces()
    except StorageError:
        raise storage_failure("list workspaces")
    return [WorkspaceResponse.from_domain(w) for w in workspaces]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_workspace(
    request: CreateWorkspaceRequest,
    service: Annotated[WorkspaceService, Depends(get_workspace_service)],
) -> WorkspaceResponse:
    try:
        workspace = await service.create_workspace(
            name=request.name,
            color=request.color,
            icon=request.icon,
            sort_order=request.sort_order,
        )
    except ValidationError as e:
        raise bad_request(e)
    except StorageError:
        raise storage_failure("create workspace")
    return WorkspaceResponse.from_domain(workspace)


@router.put("/reorder", status_code=status.HTTP_204_NO_CONTENT)
async def reorder_workspaces(
    request: ReorderWorkspacesRequest,
    service: Annotated[WorkspaceService, Depends(get_workspace_service)],
) -> Response:
    """Set each workspace's sort order to its position in orderedIds.

    IDs that are malformed or belong to someone else are skipped.
    """
    try:
        await service.reorder_workspaces(request.ordered_ids)
    except StorageError:
        raise storage_failure("reorder workspaces")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{workspace_id}")
async def update_workspace(
    workspace_id: str,
    request: UpdateWorkspaceRequest,
    service: Annotated[WorkspaceService, Depends(get_workspace_service)],
) -> WorkspaceResponse:
    workspace_id_obj = parse_path_id(WorkspaceId, workspace_id, "workspace")

    try:
        workspace = await service.update_workspace(
            workspace_id_obj, request.model_dump(exclude_unset=True)
        )
    except ValidationError as e:
        raise bad_request(e)
    except StorageError:
        raise storage_failure("update workspace")

    if workspace is None:
        raise not_found("Workspace")
    return WorkspaceResponse.from_domain(workspace)


@router.delete("/{workspace_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workspace(
    workspace_id: str,
    service: Annotated[WorkspaceService, Depends(get_workspace_service)],
) -> Response:
    """Delete a workspace with its membership records. Idempotent."""
    workspace_id_obj = parse_path_id(WorkspaceId, workspace_id, "workspace")

    try:
        await service.delete_workspace(workspace_id_obj)
    except StorageError:
        raise storage_failure("delete workspace")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{workspace_id}/members", response_model=list[MembershipResponse])
async def get_workspace_members(
    workspace_id: str,
    service: Annotated[WorkspaceService, Depends(get_workspace_service)],
) -> list[MembershipResponse]:
    """List membership records; empty for a missing or foreign workspace."""
    workspace_id_obj = parse_path_id(WorkspaceId, workspace_id, "workspace")

    try:
        memberships = await service.get_membership(workspace_id_obj)
    except StorageError:
        raise storage_failure("list workspace members")
    return [MembershipResponse.from_domain(m) for m in memberships]


@router.put("/{workspace_id}/members", response_model=list[MembershipResponse])
async def assign_workspace_members(
    workspace_id: str,
    request: AssignMembersRequest,
    service: Annotated[RegistryService, Depends(get_registry_service)],
) -> list[MembershipResponse]:
    """Replace a workspace's membership, creating catalog resources as needed.

    Foreign resource IDs and catalog entries past the batch limit are
    silently ignored. A missing or foreign workspace yields an empty list
    and creates nothing.
    """
    workspace_id_obj = parse_path_id(WorkspaceId, workspace_id, "workspace")

    try:
        memberships = await service.assign_to_workspace(
            workspace_id_obj,
            resource_ids=request.app_ids,
            new_resource_specs=request.new_resource_specs,
        )
    except ValidationError as e:
        raise bad_request(e)
    except StorageError:
        raise storage_failure("assign workspace members")
    return [MembershipResponse.from_domain(m) for m in memberships]
