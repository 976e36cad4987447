"""Dashboard widget for the Registry context."""

from __future__ import annotations

from dataclasses import dataclass

from registry.domain.exceptions import ValidationError
from registry.domain.value_objects import OwnerId, WidgetId


@dataclass(frozen=True)
class DashboardWidget:
    """One tile of an owner's dashboard grid layout."""

    id: WidgetId
    owner_id: OwnerId
    widget_type: str
    title: str
    x: int = 0
    y: int = 0
    w: int = 1
    h: int = 1
    visible: bool = True

    def __post_init__(self) -> None:
        if not self.widget_type or not self.widget_type.strip():
            raise ValidationError("widgetType must not be empty")
        if not self.title or not self.title.strip():
            raise ValidationError("title must not be empty")
        if self.x < 0 or self.y < 0:
            raise ValidationError("Widget position must not be negative")
        if self.w < 1 or self.h < 1:
            raise ValidationError("Widget size must be at least 1x1")

    @classmethod
    def create(
        cls,
        owner_id: OwnerId,
        widget_type: str,
        title: str,
        x: int = 0,
        y: int = 0,
        w: int = 1,
        h: int = 1,
        visible: bool = True,
    ) -> DashboardWidget:
        return cls(
            id=WidgetId.generate(),
            owner_id=owner_id,
            widget_type=widget_type,
            title=title,
            x=x,
            y=y,
            w=w,
            h=h,
            visible=visible,
        )
