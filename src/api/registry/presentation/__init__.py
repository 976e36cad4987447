"""Registry presentation layer - aggregate-based organization.

Each aggregate package (resources, categories, workspaces, widgets) holds
its own routes and models. Every endpoint resolves the caller through the
service dependencies, so auth is enforced per endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

from registry.presentation import (
    categories,
    owner_data,
    resources,
    widgets,
    workspaces,
)

router = APIRouter(
    prefix="/registry",
    tags=["registry"],
)

router.include_router(resources.router)
router.include_router(categories.router)
router.include_router(workspaces.router)
router.include_router(widgets.router)
router.include_router(owner_data.router)

__all__ = ["router"]
