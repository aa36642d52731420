"""ticket sequences

Revision ID: a41e6c2d9b38
Revises:
Create Date: 2026-10-17 09:00:00.000000
"""
from alembic import op
import sqlalchemy as sa


revision = "a41e6c2d9b38"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "ticket_sequences",
        sa.Column("name", sa.String(length=64), primary_key=True),
        sa.Column("last_number", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("ticket_sequences")
