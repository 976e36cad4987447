"""Resource presentation: routes and API models."""

from registry.presentation.resources.routes import router

__all__ = ["router"]
