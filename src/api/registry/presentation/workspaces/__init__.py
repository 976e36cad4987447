"""Workspace presentation: routes and API models."""

from registry.presentation.workspaces.routes import router

__all__ = ["router"]
