"""Value objects for the Registry domain.

Identifiers are ULIDs wrapped in frozen dataclasses so that a resource id
can never be passed where a workspace id is expected. Field rules shared
by several aggregates (names, colors, notification counts) live here too.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeVar

from ulid import ULID

from registry.domain.exceptions import ValidationError

DEFAULT_COLOR = "#6366F1"
NOTIFICATION_COUNT_MAX = 99
NAME_MAX_LENGTH = 255

_IdT = TypeVar("_IdT", bound="EntityId")


@dataclass(frozen=True)
class EntityId:
    """Base for ULID-backed aggregate identifiers."""

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls: type[_IdT]) -> _IdT:
        """Generate a new identifier using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls: type[_IdT], value: str) -> _IdT:
        """Create an identifier from its string form.

        Raises:
            ValidationError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid {cls.__name__}: {value}") from e
        return cls(value=value)


class ResourceId(EntityId):
    """Identifier for a Resource aggregate."""


class CategoryId(EntityId):
    """Identifier for a Category aggregate."""


class WorkspaceId(EntityId):
    """Identifier for a Workspace aggregate."""


class MembershipId(EntityId):
    """Identifier for a workspace membership record."""


class WidgetId(EntityId):
    """Identifier for a dashboard widget."""


@dataclass(frozen=True)
class OwnerId:
    """Principal owning registry data.

    The value comes from the upstream identity provider and is opaque to
    the registry: any non-blank string is accepted.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("Owner id must be a non-empty string")

    def __str__(self) -> str:
        return self.value


class Icon(StrEnum):
    """Closed set of icon labels for categories and workspaces."""

    FOLDER = "Folder"
    BRIEFCASE = "Briefcase"
    DOLLAR_SIGN = "DollarSign"
    MAIL = "Mail"
    GLOBE = "Globe"
    BAR_CHART_3 = "BarChart3"
    MESSAGE_SQUARE = "MessageSquare"
    LAYOUT = "Layout"
    BUILDING_2 = "Building2"
    MEGAPHONE = "Megaphone"
    STAR = "Star"
    HEART = "Heart"
    ZAP = "Zap"
    SHIELD = "Shield"
    CODE = "Code"
    CAMERA = "Camera"
    MUSIC = "Music"
    SHOPPING_CART = "ShoppingCart"
    TRUCK = "Truck"
    USERS = "Users"

    @classmethod
    def parse(cls, value: Any) -> Icon:
        """Look up an icon by its label.

        Raises:
            ValidationError: If the label is not part of the closed set
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise ValidationError(f"Unknown icon: {value!r}") from e


def normalize_name(value: Any, field_name: str = "name") -> str:
    """Trim a name field and enforce 1-255 characters.

    Raises:
        ValidationError: If the value is not a string, is blank after
            trimming, or is too long
    """
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(f"{field_name} must not be empty")
    if len(trimmed) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"{field_name} must be at most {NAME_MAX_LENGTH} characters"
        )
    return trimmed


def normalize_color(value: Any) -> str:
    """Return a display color, falling back to the default when unset."""
    if value is None:
        return DEFAULT_COLOR
    if not isinstance(value, str):
        raise ValidationError("color must be a string")
    return value.strip() or DEFAULT_COLOR


def normalize_url(value: Any) -> str | None:
    """Return a stripped URL, or None when empty."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("url must be a string")
    return value.strip() or None


def clamp_notification_count(value: Any, current: int = 0) -> int:
    """Floor a numeric count and clamp it into [0, 99].

    Booleans and non-finite numbers are not counts; the current value is
    kept for them.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return current
    if isinstance(value, float) and not math.isfinite(value):
        return current
    return max(0, min(NOTIFICATION_COUNT_MAX, math.floor(value)))


def normalize_sort_order(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("sortOrder must be an integer")
    return value
