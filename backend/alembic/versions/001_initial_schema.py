"""Initial schema.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-16

This migration creates the complete Grindlog database schema:
- Tables: users, plans, activity_blocks, custom_activity_blocks, daily_logs, daily_summaries
- Unique constraint: one daily summary per user per day
- Cascades: plans -> blocks, users -> everything they own
- Triggers: updated_at auto-update function and triggers
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TIMESTAMPED_TABLES = [
    "users",
    "plans",
    "activity_blocks",
    "custom_activity_blocks",
    "daily_logs",
    "daily_summaries",
]


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", postgresql.TIMESTAMP(timezone=True), server_default=sa.text("NOW()"), nullable=False),
        sa.Column("updated_at", postgresql.TIMESTAMP(timezone=True), server_default=sa.text("NOW()"), nullable=False),
    ]


def _block_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column("plan_id", sa.Uuid(), sa.ForeignKey("plans.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("start_time", sa.String(5), nullable=False),
        sa.Column("end_time", sa.String(5), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), nullable=False),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("order", sa.Integer(), server_default="0", nullable=False),
    ]


def upgrade() -> None:
    # ==========================================================================
    # USERS
    # ==========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("selected_plan_id", sa.Uuid(), nullable=True),
        sa.Column("selected_plan_name", sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.CheckConstraint("email = lower(email)", name="email_lowercase"),
    )
    op.create_index("ix_users_email", "users", ["email"])

    # ==========================================================================
    # PLANS
    # ==========================================================================
    op.create_table(
        "plans",
        sa.Column("id", sa.Uuid(), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("day_type", sa.String(10), server_default="weekday", nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.false(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("day_type IN ('weekday', 'weekend')", name="valid_plan_day_type"),
    )
    op.create_index("idx_plans_user_created", "plans", ["user_id", "created_at"])

    # ==========================================================================
    # ACTIVITY BLOCKS (template origin) / CUSTOM ACTIVITY BLOCKS (user authored)
    # ==========================================================================
    op.create_table(
        "activity_blocks",
        *_block_columns(),
        sa.Column("day_type", sa.String(10), server_default="weekday", nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("day_type IN ('weekday', 'weekend')", name="valid_block_day_type"),
    )
    op.create_index("idx_activity_blocks_plan_order", "activity_blocks", ["plan_id", "order"])

    op.create_table(
        "custom_activity_blocks",
        *_block_columns(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_custom_activity_blocks_plan_order", "custom_activity_blocks", ["plan_id", "order"]
    )

    # ==========================================================================
    # DAILY LOGS
    # ==========================================================================
    op.create_table(
        "daily_logs",
        sa.Column("id", sa.Uuid(), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("log_date", sa.Date(), nullable=False),
        sa.Column("activity_block_id", sa.Uuid(), nullable=False),
        sa.Column("completed", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("actual_start_time", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("actual_end_time", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("energy_level", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "energy_level IS NULL OR (energy_level >= 1 AND energy_level <= 5)",
            name="valid_energy_level",
        ),
    )
    op.create_index("idx_daily_logs_user_date", "daily_logs", ["user_id", "log_date"])

    # ==========================================================================
    # DAILY SUMMARIES
    # ==========================================================================
    op.create_table(
        "daily_summaries",
        sa.Column("id", sa.Uuid(), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("log_date", sa.Date(), nullable=False),
        sa.Column("dsa_problems", sa.Integer(), server_default="0", nullable=False),
        sa.Column("project_hours", sa.Float(), server_default="0", nullable=False),
        sa.Column("commits_pushed", sa.Integer(), server_default="0", nullable=False),
        sa.Column("system_design_topic", sa.String(255), nullable=True),
        sa.Column("applications_sent", sa.Integer(), server_default="0", nullable=False),
        sa.Column("mock_interviews", sa.Integer(), server_default="0", nullable=False),
        sa.Column("energy_rating", sa.Integer(), nullable=True),
        sa.Column("blocker", sa.Text(), nullable=True),
        sa.Column("top3_priorities", postgresql.JSONB(), server_default=sa.text("'[]'::jsonb"), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        # One summary per user per UTC day; the upsert engine relies on this
        sa.UniqueConstraint("user_id", "log_date", name="unique_user_daily_summary"),
        sa.CheckConstraint(
            "energy_rating IS NULL OR (energy_rating >= 1 AND energy_rating <= 5)",
            name="valid_energy_rating",
        ),
    )
    op.create_index("idx_daily_summaries_user_date", "daily_summaries", ["user_id", "log_date"])

    # ==========================================================================
    # UPDATED_AT TRIGGER FUNCTION
    # ==========================================================================
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
    """)

    for table in TIMESTAMPED_TABLES:
        op.execute(f"""
            CREATE TRIGGER update_{table}_updated_at
                BEFORE UPDATE ON {table}
                FOR EACH ROW EXECUTE FUNCTION update_updated_at_column();
        """)


def downgrade() -> None:
    for table in TIMESTAMPED_TABLES:
        op.execute(f"DROP TRIGGER IF EXISTS update_{table}_updated_at ON {table}")

    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    # Drop tables in reverse dependency order
    op.drop_table("daily_summaries")
    op.drop_table("daily_logs")
    op.drop_table("custom_activity_blocks")
    op.drop_table("activity_blocks")
    op.drop_table("plans")
    op.drop_table("users")
