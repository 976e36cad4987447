"""Category presentation: routes and API models."""

from registry.presentation.categories.routes import router

__all__ = ["router"]
