"""Application service providers, each scoped to the current owner.

Repositories and services share one session per request through FastAPI
dependency caching, so a service's transaction covers its repositories.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_write_session
from infrastructure.settings import RegistrySettings, get_registry_settings
from registry.application.observability import (
    AssignmentProbe,
    DefaultAssignmentProbe,
    DefaultRegistryServiceProbe,
    RegistryServiceProbe,
)
from registry.application.services import (
    CategoryService,
    RegistryService,
    ResourceService,
    WidgetService,
    WorkspaceService,
)
from registry.application.value_objects import CurrentOwner
from registry.dependencies.owner import get_current_owner
from registry.dependencies.repositories import (
    get_category_repository,
    get_resource_repository,
    get_widget_repository,
    get_workspace_repository,
)
from registry.infrastructure.category_repository import CategoryRepository
from registry.infrastructure.resource_repository import ResourceRepository
from registry.infrastructure.widget_repository import WidgetRepository
from registry.infrastructure.workspace_repository import WorkspaceRepository


def get_registry_service_probe() -> RegistryServiceProbe:
    """Get RegistryServiceProbe instance.

    Returns:
        DefaultRegistryServiceProbe instance for observability
    """
    return DefaultRegistryServiceProbe()


def get_assignment_probe() -> AssignmentProbe:
    return DefaultAssignmentProbe()


def get_resource_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    resource_repo: Annotated[ResourceRepository, Depends(get_resource_repository)],
    probe: Annotated[RegistryServiceProbe, Depends(get_registry_service_probe)],
    current_owner: Annotated[CurrentOwner, Depends(get_current_owner)],
) -> ResourceService:
    """Get ResourceService scoped to the current owner."""
    return ResourceService(
        session=session,
        resource_repository=resource_repo,
        scope_to_owner=current_owner.owner_id,
        probe=probe,
    )


def get_category_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    category_repo: Annotated[CategoryRepository, Depends(get_category_repository)],
    probe: Annotated[RegistryServiceProbe, Depends(get_registry_service_probe)],
    current_owner: Annotated[CurrentOwner, Depends(get_current_owner)],
) -> CategoryService:
    """Get CategoryService scoped to the current owner."""
    return CategoryService(
        session=session,
        category_repository=category_repo,
        scope_to_owner=current_owner.owner_id,
        probe=probe,
    )


def get_workspace_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    workspace_repo: Annotated[
        WorkspaceRepository, Depends(get_workspace_repository)
    ],
    probe: Annotated[RegistryServiceProbe, Depends(get_registry_service_probe)],
    current_owner: Annotated[CurrentOwner, Depends(get_current_owner)],
) -> WorkspaceService:
    """Get WorkspaceService scoped to the current owner."""
    return WorkspaceService(
        session=session,
        workspace_repository=workspace_repo,
        scope_to_owner=current_owner.owner_id,
        probe=probe,
    )


def get_widget_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    widget_repo: Annotated[WidgetRepository, Depends(get_widget_repository)],
    probe: Annotated[RegistryServiceProbe, Depends(get_registry_service_probe)],
    current_owner: Annotated[CurrentOwner, Depends(get_current_owner)],
    settings: Annotated[RegistrySettings, Depends(get_registry_settings)],
) -> WidgetService:
    """Get WidgetService scoped to the current owner."""
    return WidgetService(
        session=session,
        widget_repository=widget_repo,
        scope_to_owner=current_owner.owner_id,
        widget_limit=settings.widget_limit,
        probe=probe,
    )


def get_registry_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    resource_repo: Annotated[ResourceRepository, Depends(get_resource_repository)],
    category_repo: Annotated[CategoryRepository, Depends(get_category_repository)],
    workspace_repo: Annotated[
        WorkspaceRepository, Depends(get_workspace_repository)
    ],
    widget_repo: Annotated[WidgetRepository, Depends(get_widget_repository)],
    probe: Annotated[AssignmentProbe, Depends(get_assignment_probe)],
    current_owner: Annotated[CurrentOwner, Depends(get_current_owner)],
    settings: Annotated[RegistrySettings, Depends(get_registry_settings)],
) -> RegistryService:
    """Get RegistryService scoped to the current owner.

    All repositories share the request session, so assignment and purge
    each commit or roll back as a whole.
    """
    return RegistryService(
        session=session,
        resource_repository=resource_repo,
        category_repository=category_repo,
        workspace_repository=workspace_repo,
        widget_repository=widget_repo,
        scope_to_owner=current_owner.owner_id,
        assign_batch_limit=settings.assign_batch_limit,
        probe=probe,
    )
