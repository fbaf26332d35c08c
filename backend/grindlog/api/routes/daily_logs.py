"""Daily log CRUD routes."""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status
from sqlalchemy import select

from grindlog.api.deps import (
    CurrentUser,
    DbSession,
    get_user_activity_block_or_404,
    get_user_resource_or_404,
)
from grindlog.db.models import DailyLog
from grindlog.schemas.daily_logs import DailyLogCreate, DailyLogRead, DailyLogUpdate
from grindlog.services.timekeeping import day_bounds, utc_day

router = APIRouter(prefix="/daily-logs", tags=["daily-logs"])


@router.get("/", response_model=list[DailyLogRead])
async def list_daily_logs(
    current_user: CurrentUser,
    db: DbSession,
    day: Annotated[date, Query(alias="date")],
) -> list[DailyLogRead]:
    """List the user's logs for one UTC day, oldest first."""
    start, end = day_bounds(day)
    result = await db.execute(
        select(DailyLog)
        .where(
            DailyLog.user_id == current_user.id,
            DailyLog.log_date >= start,
            DailyLog.log_date < end,
        )
        .order_by(DailyLog.created_at.asc())
    )
    return [DailyLogRead.model_validate(log) for log in result.scalars()]


@router.post("/", response_model=DailyLogRead, status_code=status.HTTP_201_CREATED)
async def create_daily_log(
    data: DailyLogCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> DailyLogRead:
    """Log one activity on one day. The block must be in one of the user's plans."""
    await get_user_activity_block_or_404(db, data.activity_block_id, current_user.id)

    log = DailyLog(
        user_id=current_user.id,
        **data.model_dump(exclude={"log_date"}),
        log_date=utc_day(data.log_date),
    )
    db.add(log)
    await db.commit()
    await db.refresh(log)
    return DailyLogRead.model_validate(log)


@router.patch("/{log_id}", response_model=DailyLogRead)
async def update_daily_log(
    log_id: UUID,
    data: DailyLogUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> DailyLogRead:
    """Update a daily log."""
    log = await get_user_resource_or_404(db, DailyLog, log_id, current_user.id)
    for key, value in data.model_dump(exclude_unset=True).items():
        if value is None and key == "completed":
            continue
        setattr(log, key, value)
    await db.commit()
    await db.refresh(log)
    return DailyLogRead.model_validate(log)


@router.delete("/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_daily_log(
    log_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> None:
    """Delete a daily log."""
    log = await get_user_resource_or_404(db, DailyLog, log_id, current_user.id)
    await db.delete(log)
    await db.commit()
