"""Translation of database failures into registry storage errors."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

from registry.infrastructure.observability import RepositoryProbe
from registry.ports.exceptions import StorageError


@contextmanager
def storage_errors(operation: str, probe: RepositoryProbe) -> Iterator[None]:
    """Re-raise any SQLAlchemy error raised in the block as StorageError.

    Usable around ``await`` expressions inside coroutines.
    """
    try:
        yield
    except SQLAlchemyError as e:
        probe.storage_failed(operation, e)
        raise StorageError(operation) from e
