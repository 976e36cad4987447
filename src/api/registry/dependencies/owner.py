"""Resolution of the request principal.

Authentication happens upstream: the gateway authenticates the user and
forwards the user id in the ``X-User-Id`` header. This service trusts
that header and uses it as the owner of all registry data.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Header, HTTPException, status

from registry.application.value_objects import CurrentOwner
from registry.domain.exceptions import ValidationError
from registry.domain.value_objects import OwnerId


async def get_current_owner(
    x_user_id: Annotated[
        str | None, Header(description="Authenticated user id set by the gateway")
    ] = None,
) -> CurrentOwner:
    """Extract the current owner from the trusted identity header.

    Raises:
        HTTPException: 401 if the header is missing or blank
    """
    try:
        owner_id = OwnerId(value=(x_user_id or "").strip())
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        ) from e
    return CurrentOwner(owner_id=owner_id)
