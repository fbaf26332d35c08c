"""
Daily and weekly reports.

The `build_*` functions are pure reducers over already-loaded rows; the
async wrappers load the rows for one user and hand them over. Empty input
gives zeroed reports, never an error.
"""

from collections.abc import Sequence
from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from grindlog.db.models import DailyLog, DailySummary
from grindlog.schemas.daily_summaries import DailySummaryRead
from grindlog.schemas.reports import DailyReport, WeeklyReport
from grindlog.services.summaries import find_summary_for_day, list_daily_summaries
from grindlog.services.timekeeping import day_bounds, week_bounds


def completion_rate(completed: int, total: int) -> int:
    """Whole percent, rounded half up. 0 when there is nothing to complete."""
    if total == 0:
        return 0
    return (completed * 200 + total) // (2 * total)


def build_daily_report(
    day: date,
    logs: Sequence[DailyLog],
    summary: DailySummary | None,
) -> DailyReport:
    completed = sum(1 for log in logs if log.completed)
    return DailyReport(
        day=day,
        total_activities=len(logs),
        completed_activities=completed,
        completion_rate=completion_rate(completed, len(logs)),
        summary=DailySummaryRead.model_validate(summary) if summary is not None else None,
    )


def build_weekly_report(day: date, summaries: Sequence[DailySummary]) -> WeeklyReport:
    """
    Totals for the Sunday-to-Saturday week containing `day`.

    Summaries outside that week are ignored. average_energy is the mean of
    the summaries that carry a rating, rounded to one decimal.
    """
    week_start, week_end = week_bounds(day)
    in_week = sorted(
        (s for s in summaries if week_start <= s.log_date <= week_end),
        key=lambda s: s.log_date,
    )
    ratings = [s.energy_rating for s in in_week if s.energy_rating is not None]

    return WeeklyReport(
        week_start=week_start,
        week_end=week_end,
        total_dsa_problems=sum(s.dsa_problems for s in in_week),
        total_project_hours=sum(s.project_hours for s in in_week),
        total_commits_pushed=sum(s.commits_pushed for s in in_week),
        total_applications_sent=sum(s.applications_sent for s in in_week),
        total_mock_interviews=sum(s.mock_interviews for s in in_week),
        average_energy=round(sum(ratings) / len(ratings), 1) if ratings else None,
        days_tracked=len({s.log_date for s in in_week}),
        summaries=[DailySummaryRead.model_validate(s) for s in in_week],
    )


async def daily_report(db: AsyncSession, user_id: UUID, day: date) -> DailyReport:
    start, end = day_bounds(day)
    result = await db.execute(
        select(DailyLog).where(
            DailyLog.user_id == user_id,
            DailyLog.log_date >= start,
            DailyLog.log_date < end,
        )
    )
    logs = list(result.scalars())
    summary = await find_summary_for_day(db, user_id, day)
    return build_daily_report(day, logs, summary)


async def weekly_report(db: AsyncSession, user_id: UUID, day: date) -> WeeklyReport:
    week_start, week_end = week_bounds(day)
    summaries = await list_daily_summaries(db, user_id, start_date=week_start, end_date=week_end)
    return build_weekly_report(day, summaries)
