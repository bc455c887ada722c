"""Initial schema — members, projects, tasks, teams, labels, api_keys.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _entity_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "members",
        *_entity_columns(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=False, unique=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="member"),
        sa.Column("github_id", sa.String(100), nullable=True),
        sa.Column("google_id", sa.String(100), nullable=True),
        sa.Column("photo_url", sa.String(2000), nullable=True),
    )

    op.create_table(
        "projects",
        *_entity_columns(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("prefix", sa.String(10), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="none"),
        sa.Column("visibility", sa.String(20), nullable=False, server_default="none"),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("lead_id", sa.Uuid(as_uuid=True), nullable=True),
        sa.Column("owner_id", sa.Uuid(as_uuid=True), nullable=False),
    )
    op.create_index("ix_projects_owner_id", "projects", ["owner_id"])

    op.create_table(
        "tasks",
        *_entity_columns(),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="none"),
        sa.Column("priority", sa.String(20), nullable=False, server_default="none"),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("project_id", sa.Uuid(as_uuid=True), nullable=True),
        sa.Column("lead_id", sa.Uuid(as_uuid=True), nullable=True),
        sa.Column("parent_id", sa.Uuid(as_uuid=True), nullable=True),
        sa.Column("owner_id", sa.Uuid(as_uuid=True), nullable=False),
    )
    op.create_index("ix_tasks_project_id", "tasks", ["project_id"])
    op.create_index("ix_tasks_owner_id", "tasks", ["owner_id"])

    op.create_table(
        "teams",
        *_entity_columns(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("prefix", sa.String(10), nullable=True),
        sa.Column("visibility", sa.String(20), nullable=False, server_default="none"),
        sa.Column("owner_id", sa.Uuid(as_uuid=True), nullable=False),
    )

    op.create_table(
        "labels",
        *_entity_columns(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("color", sa.String(7), nullable=True),
    )

    op.create_table(
        "api_keys",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("key_hash", sa.String(64), nullable=False, unique=True),
        sa.Column(
            "member_id", sa.Uuid(as_uuid=True),
            sa.ForeignKey("members.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("revoked_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_api_keys_member_id", "api_keys", ["member_id"])


def downgrade() -> None:
    op.drop_table("api_keys")
    op.drop_table("labels")
    op.drop_table("teams")
    op.drop_table("tasks")
    op.drop_table("projects")
    op.drop_table("members")
