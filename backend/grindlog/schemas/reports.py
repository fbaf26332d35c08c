"""Report schemas."""

from datetime import date

from grindlog.schemas.base import BaseSchema
from grindlog.schemas.daily_summaries import DailySummaryRead


class DailyReport(BaseSchema):
    """Completion rate of one day's logs plus that day's summary."""

    day: date
    total_activities: int
    completed_activities: int
    completion_rate: int  # whole percent
    summary: DailySummaryRead | None = None


class WeeklyReport(BaseSchema):
    """Totals over the Sunday-to-Saturday week containing the requested date."""

    week_start: date
    week_end: date
    total_dsa_problems: int
    total_project_hours: float
    total_commits_pushed: int
    total_applications_sent: int
    total_mock_interviews: int
    average_energy: float | None = None
    days_tracked: int
    days_in_week: int = 7
    summaries: list[DailySummaryRead]
