"""
SQLAlchemy 2.0 Models for Grindlog.

Uses modern declarative syntax with Mapped[] type annotations.
All models use UUID primary keys. Column types are the portable
SQLAlchemy ones (Uuid, DateTime, JSON with a JSONB variant) so the same
metadata runs against PostgreSQL in production and SQLite in tests.

Calendar days (`log_date`) are stored as DATE values holding the UTC
calendar day; see `grindlog.services.timekeeping`.
"""

from datetime import date, datetime, timezone
from enum import Enum as PyEnum
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import (
    JSON,
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from grindlog.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ENUMS
# =============================================================================


class DayType(str, PyEnum):
    """Which kind of day a plan is meant for."""

    WEEKDAY = "weekday"
    WEEKEND = "weekend"


class ActivityCategory(str, PyEnum):
    """Categories offered by the schedule editor."""

    EXERCISE = "exercise"
    WORK = "work"
    MEAL = "meal"
    BREAK = "break"
    PERSONAL = "personal"
    LEARNING = "learning"
    OTHER = "other"


# =============================================================================
# MODELS
# =============================================================================


class User(Base):
    """
    User account.

    Email is stored lower-cased so uniqueness is case-insensitive.
    `selected_plan_id` is a plain column (no FK) to keep users/plans acyclic;
    the plan delete route clears it.
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    selected_plan_id: Mapped[Optional[UUID]] = mapped_column(Uuid, nullable=True)
    selected_plan_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, server_default=func.now(), nullable=False
    )

    # Relationships
    plans: Mapped[list["Plan"]] = relationship(
        "Plan", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )


class Plan(Base):
    """A named daily schedule owned by one user."""

    __tablename__ = "plans"
    __table_args__ = (
        Index("idx_plans_user_created", "user_id", "created_at"),
        CheckConstraint("day_type IN ('weekday', 'weekend')", name="valid_plan_day_type"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    day_type: Mapped[str] = mapped_column(String(10), nullable=False, default=DayType.WEEKDAY.value)
    is_active: Mapped[bool] = mapped_column(default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, server_default=func.now(), nullable=False
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="plans")
    activity_blocks: Mapped[list["ActivityBlock"]] = relationship(
        "ActivityBlock", back_populates="plan", passive_deletes=True
    )
    custom_activity_blocks: Mapped[list["CustomActivityBlock"]] = relationship(
        "CustomActivityBlock", back_populates="plan", passive_deletes=True
    )


class ActivityBlock(Base):
    """
    Scheduled slot created from a template plan.

    duration_minutes is derived from start_time/end_time by the service
    layer; the database does not check it.
    """

    __tablename__ = "activity_blocks"
    __table_args__ = (
        Index("idx_activity_blocks_plan_order", "plan_id", "order"),
        CheckConstraint("day_type IN ('weekday', 'weekend')", name="valid_block_day_type"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    plan_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("plans.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)  # HH:MM
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)  # HH:MM
    duration_minutes: Mapped[int] = mapped_column(nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column(nullable=False, default=0)
    day_type: Mapped[str] = mapped_column(String(10), nullable=False, default=DayType.WEEKDAY.value)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, server_default=func.now(), nullable=False
    )

    # Relationships
    plan: Mapped["Plan"] = relationship("Plan", back_populates="activity_blocks")


class CustomActivityBlock(Base):
    """
    User-authored slot within a plan.

    `order` is assigned as max + 1 on insert and never compacted, so it may
    be sparse after deletes.
    """

    __tablename__ = "custom_activity_blocks"
    __table_args__ = (Index("idx_custom_activity_blocks_plan_order", "plan_id", "order"),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    plan_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("plans.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    duration_minutes: Mapped[int] = mapped_column(nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column(nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, server_default=func.now(), nullable=False
    )

    # Relationships
    plan: Mapped["Plan"] = relationship("Plan", back_populates="custom_activity_blocks")


class DailyLog(Base):
    """
    Per-day, per-activity completion record.

    activity_block_id may point at either block table, so it carries no FK.
    """

    __tablename__ = "daily_logs"
    __table_args__ = (
        Index("idx_daily_logs_user_date", "user_id", "log_date"),
        CheckConstraint(
            "energy_level IS NULL OR (energy_level >= 1 AND energy_level <= 5)",
            name="valid_energy_level",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    log_date: Mapped[date] = mapped_column(nullable=False)  # UTC calendar day
    activity_block_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    completed: Mapped[bool] = mapped_column(default=False, nullable=False)
    actual_start_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    actual_end_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    energy_level: Mapped[Optional[int]] = mapped_column(nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, server_default=func.now(), nullable=False
    )


class DailySummary(Base):
    """
    End-of-day summary (one per user per UTC day).

    The unique constraint is what makes the upsert engine race-safe: a
    losing concurrent insert fails instead of creating a duplicate.
    """

    __tablename__ = "daily_summaries"
    __table_args__ = (
        UniqueConstraint("user_id", "log_date", name="unique_user_daily_summary"),
        Index("idx_daily_summaries_user_date", "user_id", "log_date"),
        CheckConstraint(
            "energy_rating IS NULL OR (energy_rating >= 1 AND energy_rating <= 5)",
            name="valid_energy_rating",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    log_date: Mapped[date] = mapped_column(nullable=False)  # UTC calendar day
    dsa_problems: Mapped[int] = mapped_column(nullable=False, default=0)
    project_hours: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    commits_pushed: Mapped[int] = mapped_column(nullable=False, default=0)
    system_design_topic: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    applications_sent: Mapped[int] = mapped_column(nullable=False, default=0)
    mock_interviews: Mapped[int] = mapped_column(nullable=False, default=0)
    energy_rating: Mapped[Optional[int]] = mapped_column(nullable=True)
    blocker: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    top3_priorities: Mapped[list[str]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=False, default=list
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, server_default=func.now(), nullable=False
    )
