"""Initial schema - resource and permission_grant.

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


def upgrade() -> None:
    op.create_table(
        "resource",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(1024), nullable=False),
        sa.Column("mimetype", sa.String(255), nullable=True),
        sa.Column("size", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("size >= 0", name="ck_resource_size_non_negative"),
    )
    op.create_index("ix_resource_owner_id", "resource", ["owner_id"])

    # Owner access is implicit; only read/write/delete are ever stored.
    op.create_table(
        "permission_grant",
        sa.Column(
            "resource_id",
            sa.UUID(),
            sa.ForeignKey("resource.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("principal_id", sa.String(255), nullable=False),
        sa.Column("level", sa.String(16), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("resource_id", "principal_id", name="pk_permission_grant"),
        sa.CheckConstraint(
            "level IN ('read', 'write', 'delete')", name="ck_permission_grant_level"
        ),
    )
    op.create_index("ix_permission_grant_principal_id", "permission_grant", ["principal_id"])


def downgrade() -> None:
    op.drop_index("ix_permission_grant_principal_id", table_name="permission_grant")
    op.drop_table("permission_grant")
    op.drop_index("ix_resource_owner_id", table_name="resource")
    op.drop_table("resource")
