"""create registry tables

Revision ID: 4f1c2a9b7d3e
Revises:
Create Date: 2026-10-19 09:12:44.118203

Creates the launchable resource registry: resources, categories,
workspaces with their membership records, and dashboard widgets. Every
owned table is indexed on owner_id since all queries filter on it.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "4f1c2a9b7d3e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create registry tables.

    Key constraints:
    - workspace_resources FKs CASCADE on both sides
    - (workspace_id, resource_id) is unique: a resource joins a workspace once
    - resources.category is a plain label, not a foreign key
    """
    op.create_table(
        "resources",
        sa.Column("id", sa.String(26), primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("category", sa.String(255), nullable=False),
        sa.Column("color", sa.Text, nullable=False),
        sa.Column("url", sa.Text, nullable=True),
        sa.Column(
            "is_favorite", sa.Boolean, nullable=False, server_default=sa.false()
        ),
        sa.Column(
            "notification_count", sa.Integer, nullable=False, server_default="0"
        ),
        sa.Column("sort_order", sa.Integer, nullable=False, server_default="0"),
        *_timestamps(),
        sa.CheckConstraint(
            "notification_count BETWEEN 0 AND 99",
            name="ck_resources_notification_count_range",
        ),
    )
    op.create_index("ix_resources_owner_id", "resources", ["owner_id"])

    op.create_table(
        "categories",
        sa.Column("id", sa.String(26), primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("icon", sa.String(32), nullable=False, server_default="Folder"),
        sa.Column("color", sa.Text, nullable=False),
        sa.Column("sort_order", sa.Integer, nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_categories_owner_id", "categories", ["owner_id"])

    op.create_table(
        "workspaces",
        sa.Column("id", sa.String(26), primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("color", sa.Text, nullable=False),
        sa.Column("icon", sa.String(32), nullable=False, server_default="Building2"),
        sa.Column("sort_order", sa.Integer, nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_workspaces_owner_id", "workspaces", ["owner_id"])

    op.create_table(
        "workspace_resources",
        sa.Column("id", sa.String(26), primary_key=True),
        sa.Column(
            "workspace_id",
            sa.String(26),
            sa.ForeignKey(
                "workspaces.id",
                ondelete="CASCADE",
                name="fk_workspace_resources_workspace_id_workspaces",
            ),
            nullable=False,
        ),
        sa.Column(
            "resource_id",
            sa.String(26),
            sa.ForeignKey(
                "resources.id",
                ondelete="CASCADE",
                name="fk_workspace_resources_resource_id_resources",
            ),
            nullable=False,
        ),
        sa.Column("position", sa.Integer, nullable=False, server_default="0"),
        sa.UniqueConstraint(
            "workspace_id",
            "resource_id",
            name="uq_workspace_resources_workspace_id_resource_id",
        ),
    )
    op.create_index(
        "ix_workspace_resources_workspace_id", "workspace_resources", ["workspace_id"]
    )
    op.create_index(
        "ix_workspace_resources_resource_id", "workspace_resources", ["resource_id"]
    )

    op.create_table(
        "dashboard_widgets",
        sa.Column("id", sa.String(26), primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("widget_type", sa.String(255), nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("x", sa.Integer, nullable=False, server_default="0"),
        sa.Column("y", sa.Integer, nullable=False, server_default="0"),
        sa.Column("w", sa.Integer, nullable=False, server_default="1"),
        sa.Column("h", sa.Integer, nullable=False, server_default="1"),
        sa.Column("visible", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("position", sa.Integer, nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_dashboard_widgets_owner_id", "dashboard_widgets", ["owner_id"])


def downgrade() -> None:
    """Drop registry tables, membership first."""
    op.drop_index("ix_dashboard_widgets_owner_id", table_name="dashboard_widgets")
    op.drop_table("dashboard_widgets")
    op.drop_index(
        "ix_workspace_resources_resource_id", table_name="workspace_resources"
    )
    op.drop_index(
        "ix_workspace_resources_workspace_id", table_name="workspace_resources"
    )
    op.drop_table("workspace_resources")
    op.drop_index("ix_workspaces_owner_id", table_name="workspaces")
    op.drop_table("workspaces")
    op.drop_index("ix_categories_owner_id", table_name="categories")
    op.drop_table("categories")
    op.drop_index("ix_resources_owner_id", table_name="resources")
    op.drop_table("resources")
