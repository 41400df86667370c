"""Create dogs table.

Revision ID: 001_create_dogs
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_dogs"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "dogs",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("breed", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("age", sa.Float, nullable=False),
    )


def downgrade() -> None:
    op.drop_table("dogs")
