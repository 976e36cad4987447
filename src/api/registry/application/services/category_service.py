"""Category application service for the Registry bounded context."""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from registry.application.observability import (
    DefaultRegistryServiceProbe,
    RegistryServiceProbe,
)
from registry.domain.aggregates import Category
from registry.domain.patches import CategoryPatch
from registry.domain.value_objects import CategoryId, Icon, OwnerId
from registry.ports.repositories import ICategoryRepository


class CategoryService:
    """Application service for an owner's categories."""

    def __init__(
        self,
        session: AsyncSession,
        category_repository: ICategoryRepository,
        scope_to_owner: OwnerId,
        probe: RegistryServiceProbe | None = None,
    ):
        self._session = session
        self._category_repository = category_repository
        self._scope_to_owner = scope_to_owner
        self._probe = probe or DefaultRegistryServiceProbe()

    async def list_categories(self) -> list[Category]:
        categories = await self._category_repository.list_by_owner(
            self._scope_to_owner
        )
        self._probe.entities_listed(
            "category", self._scope_to_owner.value, len(categories)
        )
        return categories

    async def create_category(
        self,
        name: str,
        icon: Icon | str = Icon.FOLDER,
        color: str | None = None,
        sort_order: int = 0,
    ) -> Category:
        """Create a category for the owner.

        Raises:
            ValidationError: If name is blank or icon unknown
        """
        category = Category.create(
            owner_id=self._scope_to_owner,
            name=name,
            icon=icon,
            color=color,
            sort_order=sort_order,
        )
        async with self._session.begin():
            saved = await self._category_repository.add(category)

        self._probe.entity_created("category", saved.id.value, saved.owner_id.value)
        return saved

    async def update_category(
        self, category_id: CategoryId, changes: Mapping[str, Any]
    ) -> Category | None:
        patch = CategoryPatch.from_mapping(changes)

        async with self._session.begin():
            updated = await self._category_repository.update(
                category_id, self._scope_to_owner, patch
            )

        if updated is None:
            self._probe.entity_not_found(
                "category", category_id.value, self._scope_to_owner.value
            )
            return None

        self._probe.entity_updated("category", category_id.value, self._scope_to_owner.value)
        return updated

    async def remove_category(self, category_id: CategoryId) -> bool:
        """Remove a category. Resources labelled with it are left untouched."""
        async with self._session.begin():
            removed = await self._category_repository.remove(
                category_id, self._scope_to_owner
            )

        if removed:
            self._probe.entity_deleted(
                "category", category_id.value, self._scope_to_owner.value
            )
        return removed
