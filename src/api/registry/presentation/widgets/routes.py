"""HTTP routes for the dashboard widget layout."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from registry.application.services import WidgetService
from registry.dependencies.services import get_widget_service
from registry.domain.exceptions import ValidationError
from registry.ports.exceptions import StorageError
from registry.presentation.errors import bad_request, storage_failure
from registry.presentation.widgets.models import WidgetRequest, WidgetResponse

router = APIRouter(
    prefix="/widgets",
    tags=["widgets"],
)


@router.get("", response_model=list[WidgetResponse], summary="Get dashboard layout")
async def list_widgets(
    service: Annotated[WidgetService, Depends(get_widget_service)],
) -> list[WidgetResponse]:
    try:
        widgets = await service.list_widgets()
    except StorageError:
        raise storage_failure("list widgets")
    return [WidgetResponse.from_domain(w) for w in widgets]


@router.put("", response_model=list[WidgetResponse], summary="Replace dashboard layout")
async def replace_widgets(
    request: list[WidgetRequest],
    service: Annotated[WidgetService, Depends(get_widget_service)],
) -> list[WidgetResponse]:
    """Replace the caller's whole layout.

    Raises:
        HTTPException: 400 if the layout has too many widgets or a widget
            is invalid
    """
    try:
        widgets = await service.replace_widgets(
            [widget.model_dump() for widget in request]
        )
    except ValidationError as e:
        raise bad_request(e)
    except StorageError:
        raise storage_failure("save widgets")
    return [WidgetResponse.from_domain(w) for w in widgets]
