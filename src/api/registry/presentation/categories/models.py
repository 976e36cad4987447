"""Pydantic models for category API requests and responses."""

from __future__ import annotations

from pydantic import Field

from registry.domain.aggregates import Category
from registry.domain.value_objects import Icon
from registry.presentation.models import CamelModel


class CreateCategoryRequest(CamelModel):
    """Request model for creating a category.

    The icon is checked against the closed icon set by the domain, so an
    unknown label yields 400 rather than a schema error.
    """

    name: str = Field(..., description="Category name")
    icon: str = Field(default=Icon.FOLDER.value, description="Icon label")
    color: str | None = Field(default=None, description="Display color")
    sort_order: int = Field(default=0)


class UpdateCategoryRequest(CamelModel):
    """Request model for a partial category update."""

    name: str | None = None
    icon: str | None = None
    color: str | None = None
    sort_order: int | None = None


class CategoryResponse(CamelModel):
    """Response model for a category."""

    id: str = Field(..., description="Category ID (ULID format)")
    owner_id: str
    name: str
    icon: Icon
    color: str
    sort_order: int

    @classmethod
    def from_domain(cls, category: Category) -> CategoryResponse:
        """Convert domain Category aggregate to API response."""
        return cls(
            id=category.id.value,
            owner_id=category.owner_id.value,
            name=category.name,
            icon=category.icon,
            color=category.color,
            sort_order=category.sort_order,
        )
