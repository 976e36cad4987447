"""PostgreSQL implementation of ICategoryRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from registry.domain.aggregates import Category
from registry.domain.patches import CategoryPatch
from registry.domain.value_objects import CategoryId, Icon, OwnerId
from registry.infrastructure.models import CategoryModel
from registry.infrastructure.observability import (
    DefaultRepositoryProbe,
    RepositoryProbe,
)
from registry.infrastructure.storage import storage_errors
from registry.ports.repositories import ICategoryRepository


class CategoryRepository(ICategoryRepository):
    """Repository storing user-defined categories in PostgreSQL."""

    def __init__(
        self,
        session: AsyncSession,
        probe: RepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultRepositoryProbe()

    async def list_by_owner(self, owner_id: OwnerId) -> list[Category]:
        stmt = (
            select(CategoryModel)
            .where(CategoryModel.owner_id == owner_id.value)
            .order_by(
                CategoryModel.sort_order,
                CategoryModel.created_at,
                CategoryModel.id,
            )
        )
        with storage_errors("category.list", self._probe):
            result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def add(self, category: Category) -> Category:
        model = CategoryModel(
            id=category.id.value,
            owner_id=category.owner_id.value,
            name=category.name,
            icon=category.icon.value,
            color=category.color,
            sort_order=category.sort_order,
        )
        if category.created_at is not None:
            model.created_at = category.created_at
        with storage_errors("category.add", self._probe):
            self._session.add(model)
            await self._session.flush()

        self._probe.entity_saved("category", category.id.value, category.owner_id.value)
        return self._to_domain(model)

    async def update(
        self, category_id: CategoryId, owner_id: OwnerId, patch: CategoryPatch
    ) -> Category | None:
        with storage_errors("category.update", self._probe):
            model = await self._get_model(category_id, owner_id)
            if model is None:
                self._probe.entity_not_found("category", category_id.value, owner_id.value)
                return None

            category = self._to_domain(model)
            category.apply(patch)

            model.name = category.name
            model.icon = category.icon.value
            model.color = category.color
            model.sort_order = category.sort_order
            await self._session.flush()

        self._probe.entity_updated("category", category_id.value, owner_id.value)
        return category

    async def remove(self, category_id: CategoryId, owner_id: OwnerId) -> bool:
        """Delete an owned category; resources keep their label."""
        with storage_errors("category.remove", self._probe):
            model = await self._get_model(category_id, owner_id)
            if model is None:
                self._probe.entity_not_found("category", category_id.value, owner_id.value)
                return False
            await self._session.delete(model)
            await self._session.flush()

        self._probe.entity_deleted("category", category_id.value, owner_id.value)
        return True

    async def remove_all(self, owner_id: OwnerId) -> int:
        with storage_errors("category.remove_all", self._probe):
            result = await self._session.execute(
                delete(CategoryModel).where(CategoryModel.owner_id == owner_id.value)
            )
        count = result.rowcount or 0
        self._probe.owner_rows_deleted("category", owner_id.value, count)
        return count

    async def _get_model(
        self, category_id: CategoryId, owner_id: OwnerId
    ) -> CategoryModel | None:
        stmt = select(CategoryModel).where(
            CategoryModel.id == category_id.value,
            CategoryModel.owner_id == owner_id.value,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_domain(model: CategoryModel) -> Category:
        return Category(
            id=CategoryId(value=model.id),
            owner_id=OwnerId(value=model.owner_id),
            name=model.name,
            icon=Icon(model.icon),
            color=model.color,
            sort_order=model.sort_order,
            created_at=model.created_at,
        )
