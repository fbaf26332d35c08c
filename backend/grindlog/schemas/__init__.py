"""Pydantic schemas for API request/response validation."""

from grindlog.schemas.user import UserRead
from grindlog.schemas.auth import (
    CredentialsRequest,
    MessageResponse,
    SessionResponse,
    SessionUser,
    SignInResponse,
)
from grindlog.schemas.plans import (
    CustomActivityCreate,
    CustomActivityRead,
    CustomActivityUpdate,
    PlanCreate,
    PlanRead,
    PlanUpdate,
)
from grindlog.schemas.activity_blocks import ActivityBlockCreate, ActivityBlockRead, DurationRead
from grindlog.schemas.default_plans import (
    ClonePlanRequest,
    ClonePlanResponse,
    DefaultPlanTemplate,
    TemplateActivity,
)
from grindlog.schemas.daily_logs import DailyLogCreate, DailyLogRead, DailyLogUpdate
from grindlog.schemas.daily_summaries import DailySummaryRead, DailySummaryUpdate, DailySummaryUpsert
from grindlog.schemas.reports import DailyReport, WeeklyReport
from grindlog.schemas.preferences import PlanPreferenceRead, PlanPreferenceUpdate

__all__ = [
    # User
    "UserRead",
    # Auth
    "CredentialsRequest",
    "MessageResponse",
    "SessionResponse",
    "SessionUser",
    "SignInResponse",
    # Plans
    "CustomActivityCreate",
    "CustomActivityRead",
    "CustomActivityUpdate",
    "PlanCreate",
    "PlanRead",
    "PlanUpdate",
    # Activity blocks
    "ActivityBlockCreate",
    "ActivityBlockRead",
    "DurationRead",
    # Default plans
    "ClonePlanRequest",
    "ClonePlanResponse",
    "DefaultPlanTemplate",
    "TemplateActivity",
    # Daily logs
    "DailyLogCreate",
    "DailyLogRead",
    "DailyLogUpdate",
    # Daily summaries
    "DailySummaryRead",
    "DailySummaryUpdate",
    "DailySummaryUpsert",
    # Reports
    "DailyReport",
    "WeeklyReport",
    # Preferences
    "PlanPreferenceRead",
    "PlanPreferenceUpdate",
]
