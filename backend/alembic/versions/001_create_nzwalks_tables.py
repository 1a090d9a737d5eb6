"""Create regions, walk_difficulties and walks tables

Revision ID: 001
Revises: None
Create Date: 2024-03-01 00:00:00.000000+00:00

What:  Initial schema plus the three standard walk difficulty levels.
How:   Uses the portable UUID type so the same revision runs on PostgreSQL
       and SQLite.

Rollback: downgrade() drops all three tables (destructive).
"""

import uuid
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Fixed ids so clients and fixtures can reference the seeded levels
SEEDED_DIFFICULTIES = [
    (uuid.UUID("f7248fc3-2585-4efb-8d1d-1c555f4087f6"), "Easy"),
    (uuid.UUID("54466f17-02af-48e7-8ed3-5a4a8bfacf6f"), "Medium"),
    (uuid.UUID("ea294873-7a8c-4c0f-bfa7-a2eb492cbf8c"), "Hard"),
]


def upgrade() -> None:
    op.create_table(
        "regions",
        sa.Column("id", sa.Uuid(), nullable=False, comment="Unique identifier, assigned on creation"),
        sa.Column("code", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("area", sa.Float(), nullable=False),
        sa.Column("lat", sa.Float(), nullable=False),
        sa.Column("long", sa.Float(), nullable=False),
        sa.Column("population", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    walk_difficulties = op.create_table(
        "walk_difficulties",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "walks",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("length", sa.Float(), nullable=False),
        sa.Column("region_id", sa.Uuid(), nullable=False),
        sa.Column("walk_difficulty_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["region_id"], ["regions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["walk_difficulty_id"], ["walk_difficulties.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_walks_region_id", "walks", ["region_id"])
    op.create_index("idx_walks_walk_difficulty_id", "walks", ["walk_difficulty_id"])

    op.bulk_insert(
        walk_difficulties,
        [{"id": difficulty_id, "name": name} for difficulty_id, name in SEEDED_DIFFICULTIES],
    )


def downgrade() -> None:
    op.drop_index("idx_walks_walk_difficulty_id", table_name="walks")
    op.drop_index("idx_walks_region_id", table_name="walks")
    op.drop_table("walks")
    op.drop_table("walk_difficulties")
    op.drop_table("regions")
