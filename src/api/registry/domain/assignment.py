"""Planning of a bulk workspace assignment.

An assignment combines explicit resource ids with "catalog" specs that
name resources which may not exist yet. Planning is pure: it decides
which owned resources to reuse and which specs to create, leaving all
persistence to the application layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence

from registry.domain.aggregates import Resource
from registry.domain.value_objects import DEFAULT_COLOR, ResourceId

SPEC_NAME_MAX = 255
SPEC_CATEGORY_MAX = 50
SPEC_COLOR_MAX = 10
SPEC_URL_MAX = 500
DEFAULT_SPEC_CATEGORY = "Other"


def name_key(name: str) -> str:
    """Key under which resource names are compared: trimmed, case-folded."""
    return name.strip().lower()


def _capped(value: Any, default: str, limit: int) -> str:
    text = str(value).strip() if value else ""
    return (text or default)[:limit]


@dataclass(frozen=True)
class NewResourceSpec:
    """A resource to create during assignment, with fields already capped."""

    name: str
    category: str = DEFAULT_SPEC_CATEGORY
    color: str = DEFAULT_COLOR
    url: str | None = None

    @property
    def key(self) -> str:
        return name_key(self.name)

    @classmethod
    def from_raw(cls, raw: Any) -> NewResourceSpec | None:
        """Build a spec from untrusted input.

        Returns None for entries that carry no usable string name.
        """
        if not isinstance(raw, Mapping):
            return None
        name = raw.get("name")
        if not isinstance(name, str) or not name.strip():
            return None
        url = _capped(raw.get("url"), "", SPEC_URL_MAX)
        return cls(
            name=name.strip()[:SPEC_NAME_MAX],
            category=_capped(raw.get("category"), DEFAULT_SPEC_CATEGORY, SPEC_CATEGORY_MAX),
            color=_capped(raw.get("color"), DEFAULT_COLOR, SPEC_COLOR_MAX),
            url=url or None,
        )


@dataclass(frozen=True)
class AssignmentPlan:
    """Ordered outcome of planning.

    ``entries`` lists every membership to set, in first-seen order. An
    entry is either the id of an owned resource or a spec to create.
    """

    entries: tuple[ResourceId | NewResourceSpec, ...] = field(default_factory=tuple)

    @property
    def new_specs(self) -> list[NewResourceSpec]:
        return [e for e in self.entries if isinstance(e, NewResourceSpec)]

    @property
    def reused_ids(self) -> list[ResourceId]:
        return [e for e in self.entries if isinstance(e, ResourceId)]


def plan_assignment(
    owned: Sequence[Resource],
    resource_ids: Iterable[str],
    raw_specs: Sequence[Any],
    batch_limit: int,
) -> AssignmentPlan:
    """Decide which resources a workspace assignment should reference.

    Args:
        owned: The owner's resources in display order
        resource_ids: Requested existing resource ids; ids the owner does
            not hold are dropped
        raw_specs: Untrusted catalog entries; only the first ``batch_limit``
            are considered, the rest are ignored
        batch_limit: Maximum number of specs considered per call

    Returns:
        AssignmentPlan with explicit ids first, then one entry per unique
        spec name (reused resource id or spec to create)
    """
    owned_by_id = {r.id.value: r for r in owned}
    owned_by_name: dict[str, Resource] = {}
    for resource in owned:
        owned_by_name.setdefault(name_key(resource.name), resource)

    entries: list[ResourceId | NewResourceSpec] = []
    seen_ids: set[str] = set()

    def add_id(resource_id: ResourceId) -> None:
        if resource_id.value not in seen_ids:
            seen_ids.add(resource_id.value)
            entries.append(resource_id)

    for raw_id in resource_ids:
        resource = owned_by_id.get(raw_id) if isinstance(raw_id, str) else None
        if resource is not None:
            add_id(resource.id)

    seen_names: set[str] = set()
    for raw in list(raw_specs)[:batch_limit]:
        spec = NewResourceSpec.from_raw(raw)
        if spec is None or spec.key in seen_names:
            continue
        seen_names.add(spec.key)
        existing = owned_by_name.get(spec.key)
        if existing is not None:
            add_id(existing.id)
        else:
            entries.append(spec)

    return AssignmentPlan(entries=tuple(entries))
