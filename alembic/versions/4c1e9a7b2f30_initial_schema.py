"""initial schema

Revision ID: 4c1e9a7b2f30
Revises:
Create Date: 2026-02-03 09:12:41.208117

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4c1e9a7b2f30"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the experiments and daily_logs tables."""
    op.create_table(
        "experiments",
        sa.Column("pk", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("record_id", sa.Text, nullable=False, unique=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("category", sa.Text, nullable=True),
        sa.Column("subcategory", sa.Text, nullable=True),
        sa.Column("status", sa.Text, nullable=False, server_default="active"),
        sa.Column("created_at", sa.Text, nullable=False),
        sa.Column("updated_at", sa.Text, nullable=False),
        sa.Column("completed_at", sa.Text, nullable=True),
        sa.Column("review_json", sa.Text, nullable=True),
        sa.CheckConstraint("status IN ('active', 'completed')", name="ck_experiments_status"),
    )

    op.create_table(
        "daily_logs",
        sa.Column("pk", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("entry_id", sa.Text, nullable=False),
        sa.Column(
            "experiment_pk",
            sa.Integer,
            sa.ForeignKey("experiments.pk", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("date", sa.Text, nullable=False),
        sa.Column("note", sa.Text, nullable=False, server_default=""),
        sa.Column("mood", sa.Text, nullable=True),
        sa.UniqueConstraint("experiment_pk", "date", name="uq_daily_logs_experiment_date"),
    )
    op.create_index("idx_daily_logs_experiment", "daily_logs", ["experiment_pk"])


def downgrade() -> None:
    """Drop all lifelab tables."""
    op.drop_index("idx_daily_logs_experiment", table_name="daily_logs")
    op.drop_table("daily_logs")
    op.drop_table("experiments")
