"""Translation of registry failures into HTTP errors."""

from __future__ import annotations

from typing import TypeVar

from fastapi import HTTPException, status

from registry.domain.exceptions import ValidationError
from registry.domain.value_objects import EntityId

_IdT = TypeVar("_IdT", bound=EntityId)


def parse_path_id(id_type: type[_IdT], raw: str, label: str) -> _IdT:
    """Parse a ULID path parameter.

    Raises:
        HTTPException: 400 if the value is not a valid ULID
    """
    try:
        return id_type.from_string(raw)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {label} ID format",
        )


def bad_request(error: ValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def not_found(label: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{label} not found",
    )


def storage_failure(action: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )
