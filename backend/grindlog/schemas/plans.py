"""Plan and custom activity schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from grindlog.schemas.base import BaseSchema, ClockTime, DayTypeLiteral, RequestSchema


class CustomActivityCreate(RequestSchema):
    """Schema for adding a user-authored activity to a plan.

    duration_minutes is not accepted; it is always derived from the times.
    """

    name: str = Field(..., min_length=1, max_length=255)
    start_time: ClockTime
    end_time: ClockTime
    category: str = Field(..., min_length=1, max_length=50)
    description: str | None = None


class CustomActivityUpdate(RequestSchema):
    """Schema for updating a custom activity. All fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    start_time: ClockTime | None = None
    end_time: ClockTime | None = None
    category: str | None = Field(None, min_length=1, max_length=50)
    description: str | None = None
    order: int | None = Field(None, ge=0)


class CustomActivityRead(BaseSchema):
    """Schema for reading a custom activity."""

    id: UUID
    plan_id: UUID
    name: str
    start_time: str
    end_time: str
    duration_minutes: int
    category: str
    description: str | None = None
    order: int
    created_at: datetime
    updated_at: datetime


class PlanCreate(RequestSchema):
    """Schema for creating a plan, optionally with its activities."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    day_type: DayTypeLiteral = "weekday"
    activities: list[CustomActivityCreate] = Field(default_factory=list)


class PlanUpdate(RequestSchema):
    """Schema for updating a plan. All fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    day_type: DayTypeLiteral | None = None
    is_active: bool | None = None


class PlanRead(BaseSchema):
    """Schema for reading a plan."""

    id: UUID
    user_id: UUID
    name: str
    description: str | None = None
    day_type: DayTypeLiteral
    is_active: bool
    created_at: datetime
    updated_at: datetime
