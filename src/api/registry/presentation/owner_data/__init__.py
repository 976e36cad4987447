"""Owner data presentation: bulk deletion of a caller's registry data."""

from registry.presentation.owner_data.routes import router

__all__ = ["router"]
