"""Application-layer value objects for the Registry bounded context."""

from __future__ import annotations

from dataclasses import dataclass

from registry.domain.value_objects import OwnerId


@dataclass(frozen=True)
class CurrentOwner:
    """The principal on whose behalf the current request runs.

    Resolved from the trusted identity header set by the gateway. This is
    an application-layer concept because it describes the request, not a
    registry entity.
    """

    owner_id: OwnerId
