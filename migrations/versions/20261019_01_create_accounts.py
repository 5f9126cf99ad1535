"""create accounts table

Revision ID: 3f9c2a7d1b04
Revises: 
Create Date: 2026-10-19 09:30:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f9c2a7d1b04"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=100)),
        sa.Column("lastname", sa.String(length=100)),
        sa.Column("role", sa.String(length=20), nullable=False, server_default="user"),
        sa.Column("is_logged_in", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("current_token", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_accounts_username", "accounts", ["username"], unique=True)
    op.create_index("ix_accounts_email", "accounts", ["email"], unique=True)
    op.create_index("ix_accounts_current_token", "accounts", ["current_token"])


def downgrade() -> None:
    op.drop_index("ix_accounts_current_token", table_name="accounts")
    op.drop_index("ix_accounts_email", table_name="accounts")
    op.drop_index("ix_accounts_username", table_name="accounts")
    op.drop_table("accounts")
