"""Repository providers sharing the request's write session."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_write_session
from registry.infrastructure.category_repository import CategoryRepository
from registry.infrastructure.resource_repository import ResourceRepository
from registry.infrastructure.widget_repository import WidgetRepository
from registry.infrastructure.workspace_repository import WorkspaceRepository


def get_resource_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> ResourceRepository:
    return ResourceRepository(session=session)


def get_category_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> CategoryRepository:
    return CategoryRepository(session=session)


def get_workspace_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> WorkspaceRepository:
    return WorkspaceRepository(session=session)


def get_widget_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> WidgetRepository:
    return WidgetRepository(session=session)
