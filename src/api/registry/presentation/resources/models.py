"""Pydantic models for resource API requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from registry.domain.aggregates import Resource
from registry.presentation.models import CamelModel


class CreateResourceRequest(CamelModel):
    """Request model for registering a launchable resource.

    Blank names and categories are rejected by the domain with 400.
    """

    name: str = Field(..., description="Display name")
    category: str = Field(..., description="Category label")
    color: str | None = Field(default=None, description="Display color")
    url: str | None = Field(default=None, description="External address")
    is_favorite: bool = Field(default=False)
    notification_count: float = Field(
        default=0, description="Badge count, floored and clamped to [0, 99]"
    )
    sort_order: int = Field(default=0)


class UpdateResourceRequest(CamelModel):
    """Request model for a partial resource update.

    Only fields present in the body are applied.
    """

    name: str | None = None
    category: str | None = None
    color: str | None = None
    url: str | None = None
    is_favorite: bool | None = None
    notification_count: float | None = None
    sort_order: int | None = None


class ResourceResponse(CamelModel):
    """Response model for a resource."""

    id: str = Field(..., description="Resource ID (ULID format)")
    owner_id: str
    name: str
    category: str
    color: str
    url: str | None
    is_favorite: bool
    notification_count: int
    sort_order: int
    created_at: datetime | None

    @classmethod
    def from_domain(cls, resource: Resource) -> ResourceResponse:
        """Convert domain Resource aggregate to API response."""
        return cls(
            id=resource.id.value,
            owner_id=resource.owner_id.value,
            name=resource.name,
            category=resource.category,
            color=resource.color,
            url=resource.url,
            is_favorite=resource.is_favorite,
            notification_count=resource.notification_count,
            sort_order=resource.sort_order,
            created_at=resource.created_at,
        )
