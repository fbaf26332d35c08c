"""Template-origin activity block schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from grindlog.schemas.base import BaseSchema, ClockTime, DayTypeLiteral, RequestSchema


class ActivityBlockCreate(RequestSchema):
    """Schema for creating an activity block on one of the user's plans."""

    plan_id: UUID
    name: str = Field(..., min_length=1, max_length=255)
    start_time: ClockTime
    end_time: ClockTime
    category: str = Field(..., min_length=1, max_length=50)
    day_type: DayTypeLiteral = "weekday"
    description: str | None = None


class ActivityBlockRead(BaseSchema):
    """Schema for reading an activity block."""

    id: UUID
    plan_id: UUID
    name: str
    start_time: str
    end_time: str
    duration_minutes: int
    category: str
    description: str | None = None
    order: int
    day_type: DayTypeLiteral
    created_at: datetime
    updated_at: datetime


class DurationRead(BaseSchema):
    """Minutes between two wall-clock times. Negative for overnight spans."""

    start_time: str
    end_time: str
    duration_minutes: int
