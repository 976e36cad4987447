"""SQLAlchemy ORM model for the dashboard_widgets table."""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, OwnedMixin, TimestampMixin


class DashboardWidgetModel(Base, OwnedMixin, TimestampMixin):
    """ORM model for dashboard widget layout entries."""

    __tablename__ = "dashboard_widgets"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    widget_type: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    x: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    y: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    w: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    h: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
