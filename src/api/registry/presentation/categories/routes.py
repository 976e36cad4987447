"""HTTP routes for user-defined categories."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from registry.application.services import CategoryService
from registry.dependencies.services import get_category_service
from registry.domain.exceptions import ValidationError
from registry.domain.value_objects import CategoryId
from registry.ports.exceptions import StorageError
from registry.presentation.categories.models import (
    CategoryResponse,
    CreateCategoryRequest,
    UpdateCategoryRequest,
)
from registry.presentation.errors import (
    bad_request,
    not_found,
    parse_path_id,
    storage_failure,
)

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
)


@router.get("", response_model=list[CategoryResponse], summary="List categories")
async def list_categories(
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> list[CategoryResponse]:
    try:
        categories = await service.list_categories()
    except StorageError:
        raise storage_failure("list categories")
    return [CategoryResponse.from_domain(c) for c in categories]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CreateCategoryRequest,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> CategoryResponse:
    try:
        category = await service.create_category(
            name=request.name,
            icon=request.icon,
            color=request.color,
            sort_order=request.sort_order,
        )
    except ValidationError as e:
        raise bad_request(e)
    except StorageError:
        raise storage_failure("create category")
    return CategoryResponse.from_domain(category)


@router.patch("/{category_id}")
async def update_category(
    category_id: str,
    request: UpdateCategoryRequest,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> CategoryResponse:
    category_id_obj = parse_path_id(CategoryId, category_id, "category")

    try:
        category = await service.update_category(
            category_id_obj, request.model_dump(exclude_unset=True)
        )
    except ValidationError as e:
        raise bad_request(e)
    except StorageError:
        raise storage_failure("update category")

    if category is None:
        raise not_found("Category")
    return CategoryResponse.from_domain(category)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> Response:
    """Remove a category; resources labelled with it keep their label."""
    category_id_obj = parse_path_id(CategoryId, category_id, "category")

    try:
        await service.remove_category(category_id_obj)
    except StorageError:
        raise storage_failure("delete category")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
