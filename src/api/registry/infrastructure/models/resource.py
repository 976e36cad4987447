"""SQLAlchemy ORM model for the resources table."""

from sqlalchemy import Boolean, CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import (
    Base,
    OwnedMixin,
    SortableMixin,
    TimestampMixin,
)


class ResourceModel(Base, OwnedMixin, SortableMixin, TimestampMixin):
    """ORM model for launchable resources.

    category is a free-form label, deliberately not a foreign key to
    categories: built-in categories are never persisted.
    """

    __tablename__ = "resources"
    __table_args__ = (
        CheckConstraint(
            "notification_count BETWEEN 0 AND 99",
            name="notification_count_range",
        ),
    )

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(255), nullable=False)
    color: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    notification_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0
    )

    def __repr__(self) -> str:
        return f"<ResourceModel(id={self.id}, owner_id={self.owner_id}, name={self.name})>"
