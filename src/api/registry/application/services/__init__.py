"""Application services for the Registry bounded context.

Application services orchestrate domain aggregates and repositories to
fulfill use cases. Each is scoped to one owner at construction.
"""

from registry.application.services.category_service import CategoryService
from registry.application.services.registry_service import RegistryService
from registry.application.services.resource_service import ResourceService
from registry.application.services.widget_service import WidgetService
from registry.application.services.workspace_service import WorkspaceService

__all__ = [
    "CategoryService",
    "RegistryService",
    "ResourceService",
    "WidgetService",
    "WorkspaceService",
]
