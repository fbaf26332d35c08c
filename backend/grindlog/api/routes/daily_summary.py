"""Daily summary routes."""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from grindlog.api.deps import CurrentUser, DbSession
from grindlog.schemas.daily_summaries import (
    DailySummaryRead,
    DailySummaryUpdate,
    DailySummaryUpsert,
)
from grindlog.services.summaries import (
    list_daily_summaries,
    patch_daily_summary,
    upsert_daily_summary,
)

router = APIRouter(prefix="/daily-summary", tags=["daily-summary"])


@router.get("/", response_model=list[DailySummaryRead])
async def get_daily_summaries(
    current_user: CurrentUser,
    db: DbSession,
    day: Annotated[date | None, Query(alias="date")] = None,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[DailySummaryRead]:
    """
    List the user's summaries, most recent first.

    Filters:
    - date: a single UTC day
    - start_date/end_date: an inclusive range (both required)
    """
    summaries = await list_daily_summaries(
        db, current_user.id, day=day, start_date=start_date, end_date=end_date
    )
    return [DailySummaryRead.model_validate(s) for s in summaries]


@router.post(
    "/",
    response_model=DailySummaryRead,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_200_OK: {"model": DailySummaryRead, "description": "Existing summary replaced"}},
)
async def upsert_summary(
    data: DailySummaryUpsert,
    response: Response,
    current_user: CurrentUser,
    db: DbSession,
) -> DailySummaryRead:
    """
    Create or replace the summary for a day.

    Returns 201 when a new summary was created and 200 when the day's
    existing summary was replaced.
    """
    user_id = current_user.id
    summary, created = await upsert_daily_summary(db, user_id, data)
    await db.commit()
    if not created:
        response.status_code = status.HTTP_200_OK
    return DailySummaryRead.model_validate(summary)


@router.patch("/{summary_id}", response_model=DailySummaryRead)
async def update_summary(
    summary_id: UUID,
    data: DailySummaryUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> DailySummaryRead:
    """Change only the supplied fields of a summary."""
    summary = await patch_daily_summary(db, current_user.id, summary_id, data)
    await db.commit()
    return DailySummaryRead.model_validate(summary)
