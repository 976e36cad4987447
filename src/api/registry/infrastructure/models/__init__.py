"""ORM models for the Registry bounded context."""

from registry.infrastructure.models.category import CategoryModel
from registry.infrastructure.models.resource import ResourceModel
from registry.infrastructure.models.widget import DashboardWidgetModel
from registry.infrastructure.models.workspace import (
    WorkspaceModel,
    WorkspaceResourceModel,
)

__all__ = [
    "CategoryModel",
    "DashboardWidgetModel",
    "ResourceModel",
    "WorkspaceModel",
    "WorkspaceResourceModel",
]
