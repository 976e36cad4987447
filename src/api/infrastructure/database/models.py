"""SQLAlchemy declarative base and shared model utilities.

Every ORM model in the application inherits from ``Base``. The metadata
carries a constraint naming convention so Alembic autogenerate produces
stable, predictable names for indexes, keys and foreign keys.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, MetaData, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def _utc_now() -> datetime:
    """Generate UTC timestamp for database defaults.

    Uses a named function instead of lambda so the default is evaluated
    at INSERT time.
    """
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class TimestampMixin:
    """Mixin providing created_at and updated_at timestamp columns."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        insert_default=_utc_now,
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        insert_default=_utc_now,
        onupdate=_utc_now,
        nullable=False,
    )


class OwnedMixin:
    """Mixin for rows that belong to exactly one owner.

    All reads and writes against these tables are filtered by owner_id.
    """

    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)


class SortableMixin:
    """Mixin for rows displayed in a user-defined order."""

    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
