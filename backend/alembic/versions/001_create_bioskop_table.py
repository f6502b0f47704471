"""Create bioskop_db table

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `bioskop_db` table holding cinema venue records.

Rollback: downgrade() drops the table (all rows lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the bioskop_db table; see bioskop_api/models/bioskop.py."""
    op.create_table(
        "bioskop_db",

        # SERIAL on PostgreSQL
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
        ),

        sa.Column(
            "nama",
            sa.String(255),
            nullable=False,
            comment="Cinema name",
        ),

        sa.Column(
            "lokasi",
            sa.String(255),
            nullable=False,
            comment="Free-form location, e.g. mall or street address",
        ),

        sa.Column(
            "rating",
            sa.Float(),
            nullable=False,
            server_default=sa.text("0"),
            comment="Numeric rating; range not constrained",
        ),

        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("bioskop_db")
