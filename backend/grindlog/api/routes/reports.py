"""Daily and weekly report routes."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Query

from grindlog.api.deps import CurrentUser, DbSession
from grindlog.schemas.reports import DailyReport, WeeklyReport
from grindlog.services import reports
from grindlog.services.timekeeping import utc_today

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/daily", response_model=DailyReport)
async def get_daily_report(
    current_user: CurrentUser,
    db: DbSession,
    day: Annotated[date | None, Query(alias="date")] = None,
) -> DailyReport:
    """Completion rate and summary for one UTC day (default: today)."""
    return await reports.daily_report(db, current_user.id, day or utc_today())


@router.get("/weekly", response_model=WeeklyReport)
async def get_weekly_report(
    current_user: CurrentUser,
    db: DbSession,
    day: Annotated[date | None, Query(alias="date")] = None,
) -> WeeklyReport:
    """Totals for the Sunday-to-Saturday week containing `date` (default: today)."""
    return await reports.weekly_report(db, current_user.id, day or utc_today())
