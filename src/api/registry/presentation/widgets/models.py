"""Pydantic models for dashboard widget API requests and responses."""

from __future__ import annotations

from pydantic import Field

from registry.domain.aggregates import DashboardWidget
from registry.presentation.models import CamelModel


class WidgetRequest(CamelModel):
    """One widget of a dashboard layout being saved."""

    widget_type: str = Field(..., description="Widget kind, e.g. clock or favorites")
    title: str
    x: int = 0
    y: int = 0
    w: int = 1
    h: int = 1
    visible: bool = True


class WidgetResponse(CamelModel):
    """Response model for a dashboard widget."""

    id: str
    widget_type: str
    title: str
    x: int
    y: int
    w: int
    h: int
    visible: bool

    @classmethod
    def from_domain(cls, widget: DashboardWidget) -> WidgetResponse:
        return cls(
            id=widget.id.value,
            widget_type=widget.widget_type,
            title=widget.title,
            x=widget.x,
            y=widget.y,
            w=widget.w,
            h=widget.h,
            visible=widget.visible,
        )
