"""SQLAlchemy ORM models for workspaces and their membership records."""

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import (
    Base,
    OwnedMixin,
    SortableMixin,
    TimestampMixin,
)


class WorkspaceModel(Base, OwnedMixin, SortableMixin, TimestampMixin):
    """ORM model for client workspaces."""

    __tablename__ = "workspaces"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    color: Mapped[str] = mapped_column(Text, nullable=False)
    icon: Mapped[str] = mapped_column(String(32), nullable=False, default="Building2")

    def __repr__(self) -> str:
        return f"<WorkspaceModel(id={self.id}, owner_id={self.owner_id}, name={self.name})>"


class WorkspaceResourceModel(Base):
    """ORM model for workspace membership records.

    Foreign keys cascade on delete at the database level as well, but the
    repositories delete membership rows explicitly in the same transaction
    so the behaviour does not depend on the cascade.
    """

    __tablename__ = "workspace_resources"
    __table_args__ = (
        UniqueConstraint(
            "workspace_id",
            "resource_id",
            name="uq_workspace_resources_workspace_id_resource_id",
        ),
    )

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    workspace_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    resource_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("resources.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(nullable=False, default=0)

    def __repr__(self) -> str:
        return (
            f"<WorkspaceResourceModel(workspace_id={self.workspace_id}, "
            f"resource_id={self.resource_id})>"
        )
