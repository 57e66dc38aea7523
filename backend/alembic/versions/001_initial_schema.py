"""Initial schema — users, exercises.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

from app.core.domain_types import USERNAME_MAX_LENGTH, DESCRIPTION_MAX_LENGTH

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(USERNAME_MAX_LENGTH), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    op.create_table(
        "exercises",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", UUID(as_uuid=True), nullable=False),
        sa.Column("description", sa.String(DESCRIPTION_MAX_LENGTH), nullable=False),
        sa.Column("duration", sa.Integer, nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index(
        "ix_exercises_user_id_date", "exercises", ["user_id", "date"],
    )


def downgrade() -> None:
    op.drop_index("ix_exercises_user_id_date", table_name="exercises")
    op.drop_table("exercises")
    op.drop_table("users")
