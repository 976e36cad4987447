"""Partial updates for registry aggregates.

A patch holds only the fields the caller supplied, already normalized.
Unrecognized keys are dropped rather than rejected, so older clients that
send extra fields keep working.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Mapping

from registry.domain.exceptions import ValidationError
from registry.domain.value_objects import (
    Icon,
    normalize_color,
    normalize_name,
    normalize_sort_order,
    normalize_url,
)


def _boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValidationError("isFavorite must be a boolean")
    return value


def _count(value: Any) -> Any:
    # Clamped against the current value when applied
    return value


@dataclass(frozen=True)
class _Patch:
    changes: Mapping[str, Any] = field(default_factory=dict)

    normalizers: ClassVar[dict[str, Callable[[Any], Any]]] = {}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]):
        """Build a patch from caller-supplied fields.

        Raises:
            ValidationError: If a recognized field holds an invalid value
        """
        changes = {
            key: cls.normalizers[key](value)
            for key, value in data.items()
            if key in cls.normalizers
        }
        return cls(changes=MappingProxyType(changes))

    def __bool__(self) -> bool:
        return bool(self.changes)


@dataclass(frozen=True)
class ResourcePatch(_Patch):
    normalizers: ClassVar[dict[str, Callable[[Any], Any]]] = {
        "name": normalize_name,
        "category": lambda v: normalize_name(v, "category"),
        "color": normalize_color,
        "url": normalize_url,
        "is_favorite": _boolean,
        "notification_count": _count,
        "sort_order": normalize_sort_order,
    }


@dataclass(frozen=True)
class CategoryPatch(_Patch):
    normalizers: ClassVar[dict[str, Callable[[Any], Any]]] = {
        "name": normalize_name,
        "icon": Icon.parse,
        "color": normalize_color,
        "sort_order": normalize_sort_order,
    }


@dataclass(frozen=True)
class WorkspacePatch(_Patch):
    normalizers: ClassVar[dict[str, Callable[[Any], Any]]] = {
        "name": normalize_name,
        "icon": Icon.parse,
        "color": normalize_color,
        "sort_order": normalize_sort_order,
    }
