"""Category aggregate for the Registry context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from registry.domain.patches import CategoryPatch
from registry.domain.value_objects import (
    DEFAULT_COLOR,
    CategoryId,
    Icon,
    OwnerId,
    normalize_color,
    normalize_name,
)


@dataclass
class Category:
    """A user-defined label with icon and color for grouping resources.

    Deleting a category never touches resources: they reference it by
    name only, and built-in categories are not persisted at all.
    """

    id: CategoryId
    owner_id: OwnerId
    name: str
    icon: Icon = Icon.FOLDER
    color: str = DEFAULT_COLOR
    sort_order: int = 0
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        self.name = normalize_name(self.name)
        self.icon = Icon.parse(self.icon)

    @classmethod
    def create(
        cls,
        owner_id: OwnerId,
        name: str,
        icon: Icon | str = Icon.FOLDER,
        color: str | None = None,
        sort_order: int = 0,
    ) -> Category:
        """Factory method for creating a new category.

        Raises:
            ValidationError: If name is blank or icon is unknown
        """
        return cls(
            id=CategoryId.generate(),
            owner_id=owner_id,
            name=name,
            icon=Icon.parse(icon),
            color=normalize_color(color),
            sort_order=sort_order,
            created_at=datetime.now(UTC),
        )

    def apply(self, patch: CategoryPatch) -> None:
        """Apply a partial update in place."""
        for key, value in patch.changes.items():
            setattr(self, key, value)
