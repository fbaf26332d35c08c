"""Selected-plan preference schemas."""

from uuid import UUID

from pydantic import Field

from grindlog.schemas.base import BaseSchema, RequestSchema


class PlanPreferenceUpdate(RequestSchema):
    """Schema for choosing which plan the schedule view shows."""

    plan_id: UUID
    plan_name: str | None = Field(None, max_length=255)


class PlanPreferenceRead(BaseSchema):
    """The user's selected plan, or nulls when none is selected."""

    selected_plan_id: UUID | None = None
    selected_plan_name: str | None = None
