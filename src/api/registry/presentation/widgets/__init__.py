"""Dashboard widget presentation: routes and API models."""

from registry.presentation.widgets.routes import router

__all__ = ["router"]
