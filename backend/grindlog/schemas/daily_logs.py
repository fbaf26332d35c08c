"""Daily log schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from grindlog.schemas.base import BaseSchema, RequestSchema
from grindlog.schemas.daily_summaries import LogDateInput


class DailyLogCreate(RequestSchema):
    """Schema for logging one activity on one day."""

    log_date: LogDateInput
    activity_block_id: UUID
    completed: bool = False
    actual_start_time: datetime | None = None
    actual_end_time: datetime | None = None
    notes: str | None = None
    energy_level: int | None = Field(None, ge=1, le=5)


class DailyLogUpdate(RequestSchema):
    """Schema for updating a daily log. All fields optional."""

    completed: bool | None = None
    actual_start_time: datetime | None = None
    actual_end_time: datetime | None = None
    notes: str | None = None
    energy_level: int | None = Field(None, ge=1, le=5)


class DailyLogRead(BaseSchema):
    """Schema for reading a daily log."""

    id: UUID
    user_id: UUID
    log_date: date
    activity_block_id: UUID
    completed: bool
    actual_start_time: datetime | None = None
    actual_end_time: datetime | None = None
    notes: str | None = None
    energy_level: int | None = None
    created_at: datetime
    updated_at: datetime
