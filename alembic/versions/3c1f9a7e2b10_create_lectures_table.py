"""Create lectures table

Revision ID: 3c1f9a7e2b10
Revises:
Create Date: 2026-10-19 10:02:11.418203

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7e2b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "lectures",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("instructor", sa.String(length=200), nullable=False),
        sa.Column("video_url", sa.Text(), nullable=False),
        sa.Column("thumbnail_url", sa.Text(), nullable=False),
        sa.Column("week_number", sa.Integer(), nullable=False),
        sa.Column("course_id", sa.String(length=50), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False, server_default="0"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.UniqueConstraint("video_url", name="uq_lectures_video_url"),
    )
    op.create_index("ix_lectures_course_id", "lectures", ["course_id"])
    # Page queries sort by rank first
    op.create_index("ix_lectures_rating_created_at", "lectures", ["rating", "created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_lectures_rating_created_at", table_name="lectures")
    op.drop_index("ix_lectures_course_id", table_name="lectures")
    op.drop_table("lectures")
