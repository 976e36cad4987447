"""HTTP routes for launchable resources."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from registry.application.services import ResourceService
from registry.dependencies.services import get_resource_service
from registry.domain.exceptions import ValidationError
from registry.domain.value_objects import ResourceId
from registry.ports.exceptions import StorageError
from registry.presentation.errors import (
    bad_request,
    not_found,
    parse_path_id,
    storage_failure,
)
from registry.presentation.resources.models import (
    CreateResourceRequest,
    ResourceResponse,
    UpdateResourceRequest,
)

router = APIRouter(
    prefix="/resources",
    tags=["resources"],
)


@router.get(
    "",
    response_model=list[ResourceResponse],
    summary="List resources",
    description="List the caller's resources by sort order, then creation time",
    responses={
        200: {"description": "Resources listed successfully"},
        401: {"description": "Authentication required"},
        500: {"description": "Internal server error"},
    },
)
async def list_resources(
    service: Annotated[ResourceService, Depends(get_resource_service)],
) -> list[ResourceResponse]:
    try:
        resources = await service.list_resources()
    except StorageError:
        raise storage_failure("list resources")
    return [ResourceResponse.from_domain(r) for r in resources]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_resource(
    request: CreateResourceRequest,
    service: Annotated[ResourceService, Depends(get_resource_service)],
) -> ResourceResponse:
    """Register a launchable resource for the caller.

    Raises:
        HTTPException: 400 if name or category is blank
        HTTPException: 500 if storage fails
    """
    try:
        resource = await service.create_resource(
            name=request.name,
            category=request.category,
            color=request.color,
            url=request.url,
            is_favorite=request.is_favorite,
            notification_count=request.notification_count,
            sort_order=request.sort_order,
        )
    except ValidationError as e:
        raise bad_request(e)
    except StorageError:
        raise storage_failure("create resource")
    return ResourceResponse.from_domain(resource)


@router.patch("/{resource_id}")
async def update_resource(
    resource_id: str,
    request: UpdateResourceRequest,
    service: Annotated[ResourceService, Depends(get_resource_service)],
) -> ResourceResponse:
    """Apply a partial update to one of the caller's resources.

    A resource owned by someone else is reported exactly like a missing one.

    Raises:
        HTTPException: 400 if the ID or a field is invalid
        HTTPException: 404 if the caller holds no such resource
    """
    resource_id_obj = parse_path_id(ResourceId, resource_id, "resource")

    try:
        resource = await service.update_resource(
            resource_id_obj, request.model_dump(exclude_unset=True)
        )
    except ValidationError as e:
        raise bad_request(e)
    except StorageError:
        raise storage_failure("update resource")

    if resource is None:
        raise not_found("Resource")
    return ResourceResponse.from_domain(resource)


@router.delete("/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_resource(
    resource_id: str,
    service: Annotated[ResourceService, Depends(get_resource_service)],
) -> Response:
    """Remove a resource and its workspace memberships.

    Idempotent: removing a missing resource also returns 204.
    """
    resource_id_obj = parse_path_id(ResourceId, resource_id, "resource")

    try:
        await service.remove_resource(resource_id_obj)
    except StorageError:
        raise storage_failure("delete resource")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
