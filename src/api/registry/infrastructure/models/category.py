"""SQLAlchemy ORM model for the categories table."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import (
    Base,
    OwnedMixin,
    SortableMixin,
    TimestampMixin,
)


class CategoryModel(Base, OwnedMixin, SortableMixin, TimestampMixin):
    """ORM model for user-defined categories."""

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    icon: Mapped[str] = mapped_column(String(32), nullable=False, default="Folder")
    color: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, owner_id={self.owner_id}, name={self.name})>"
