"""Template catalog and plan cloning schemas."""

from pydantic import Field

from grindlog.schemas.activity_blocks import ActivityBlockRead
from grindlog.schemas.base import BaseSchema, ClockTime, DayTypeLiteral, RequestSchema
from grindlog.schemas.plans import PlanRead


class TemplateActivity(BaseSchema):
    """One activity inside a built-in template."""

    name: str
    start_time: ClockTime
    end_time: ClockTime
    category: str
    description: str


class DefaultPlanTemplate(BaseSchema):
    """A built-in plan offered to every user for cloning."""

    name: str
    description: str
    day_type: DayTypeLiteral
    activities: list[TemplateActivity]


class ClonePlanRequest(RequestSchema):
    """Request schema for copying a built-in plan into the user's plans."""

    plan_name: str = Field(..., min_length=1, description="Exact name of a built-in plan")


class ClonePlanResponse(BaseSchema):
    """The new plan and its activity blocks, in template order."""

    plan: PlanRead
    activities: list[ActivityBlockRead]
    message: str = "Default plan copied successfully"
