"""HTTP route purging all registry data of the caller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from registry.application.services import RegistryService
from registry.dependencies.services import get_registry_service
from registry.ports.exceptions import StorageError
from registry.presentation.errors import storage_failure

router = APIRouter(tags=["owner-data"])


@router.delete("/data", status_code=status.HTTP_204_NO_CONTENT)
async def purge_owner_data(
    service: Annotated[RegistryService, Depends(get_registry_service)],
) -> Response:
    """Delete every resource, category, workspace and widget of the caller.

    Runs in a single transaction: either everything is gone or nothing is.
    """
    try:
        await service.purge_owner_data()
    except StorageError:
        raise storage_failure("delete registry data")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
