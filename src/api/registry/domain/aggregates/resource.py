"""Resource aggregate for the Registry context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from registry.domain.patches import ResourcePatch
from registry.domain.value_objects import (
    DEFAULT_COLOR,
    OwnerId,
    ResourceId,
    clamp_notification_count,
    normalize_color,
    normalize_name,
    normalize_url,
)


@dataclass
class Resource:
    """A stored reference to a launchable external web application.

    Business rules:
    - name and category are non-empty after trimming, at most 255 characters
    - notification_count stays within [0, 99]
    - owner_id never changes after creation
    - category links to a Category by label only
    """

    id: ResourceId
    owner_id: OwnerId
    name: str
    category: str
    color: str = DEFAULT_COLOR
    url: str | None = None
    is_favorite: bool = False
    notification_count: int = 0
    sort_order: int = 0
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        self.name = normalize_name(self.name)
        self.category = normalize_name(self.category, "category")
        self.notification_count = clamp_notification_count(self.notification_count)

    @classmethod
    def create(
        cls,
        owner_id: OwnerId,
        name: str,
        category: str,
        color: str | None = None,
        url: str | None = None,
        is_favorite: bool = False,
        notification_count: int | float = 0,
        sort_order: int = 0,
    ) -> Resource:
        """Factory method for creating a new resource.

        Raises:
            ValidationError: If name or category is blank
        """
        return cls(
            id=ResourceId.generate(),
            owner_id=owner_id,
            name=name,
            category=category,
            color=normalize_color(color),
            url=normalize_url(url),
            is_favorite=is_favorite,
            notification_count=clamp_notification_count(notification_count),
            sort_order=sort_order,
            created_at=datetime.now(UTC),
        )

    def apply(self, patch: ResourcePatch) -> None:
        """Apply a partial update in place."""
        for key, value in patch.changes.items():
            if key == "notification_count":
                value = clamp_notification_count(value, self.notification_count)
            setattr(self, key, value)
