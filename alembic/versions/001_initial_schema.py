"""Initial schema - profile, usergroup, profile_group, resource.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

MODIFIERS = "('none', 'read', 'read_write')"


def upgrade() -> None:
    op.create_table(
        "usergroup",
        sa.Column("group_id", sa.String(32), primary_key=True),
        sa.Column("name", sa.String(80), nullable=True),
        sa.Column("description", sa.String(256), nullable=True),
    )

    op.create_table(
        "profile",
        sa.Column("username", sa.String(20), primary_key=True),
        sa.Column("email", sa.String(50), nullable=True),
        sa.Column("full_name", sa.String(60), nullable=True),
        sa.Column("superuser", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_access", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_profile_email", "profile", ["email"], unique=True)

    op.create_table(
        "profile_group",
        sa.Column("username", sa.String(20), sa.ForeignKey("profile.username", ondelete="CASCADE"), primary_key=True),
        sa.Column("group_id", sa.String(32), sa.ForeignKey("usergroup.group_id", ondelete="CASCADE"), primary_key=True),
    )

    op.create_table(
        "resource",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("owner_id", sa.String(32), nullable=True),
        sa.Column("group_id", sa.String(32), nullable=True),
        sa.Column("owner_modifier", sa.String(16), nullable=False, server_default="read_write"),
        sa.Column("group_modifier", sa.String(16), nullable=False, server_default="read"),
        sa.Column("all_modifier", sa.String(16), nullable=False, server_default="none"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(f"owner_modifier IN {MODIFIERS}", name="ck_resource_owner_modifier"),
        sa.CheckConstraint(f"group_modifier IN {MODIFIERS}", name="ck_resource_group_modifier"),
        sa.CheckConstraint(f"all_modifier IN {MODIFIERS}", name="ck_resource_all_modifier"),
    )
    op.create_index("ix_resource_owner_id", "resource", ["owner_id"])
    op.create_index("ix_resource_group_id", "resource", ["group_id"])

    op.execute("""
        INSERT INTO usergroup (group_id, name, description) VALUES
        ('user', 'Users', 'Standard users'),
        ('staff', 'Staff', 'Staff users')
    """)


def downgrade() -> None:
    op.drop_table("resource")
    op.drop_table("profile_group")
    op.drop_table("profile")
    op.drop_table("usergroup")
