"""Aggregates for the Registry bounded context."""

from registry.domain.aggregates.category import Category
from registry.domain.aggregates.resource import Resource
from registry.domain.aggregates.widget import DashboardWidget
from registry.domain.aggregates.workspace import Workspace, WorkspaceMembership

__all__ = [
    "Category",
    "DashboardWidget",
    "Resource",
    "Workspace",
    "WorkspaceMembership",
]
