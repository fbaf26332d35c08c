"""Template-origin activity block routes."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status
from sqlalchemy import func, select

from grindlog.api.deps import CurrentUser, DbSession, get_user_plan_or_404
from grindlog.db.models import ActivityBlock
from grindlog.schemas.activity_blocks import ActivityBlockCreate, ActivityBlockRead, DurationRead
from grindlog.schemas.base import DayTypeLiteral
from grindlog.services.timekeeping import compute_duration

router = APIRouter(prefix="/activity-blocks", tags=["activity-blocks"])

CLOCK_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


@router.get("/", response_model=list[ActivityBlockRead])
async def list_activity_blocks(
    current_user: CurrentUser,
    db: DbSession,
    plan_id: UUID,
    day_type: DayTypeLiteral | None = None,
) -> list[ActivityBlockRead]:
    """
    List the activity blocks of one of the user's plans.

    Filters:
    - day_type: weekday or weekend

    Sorted by start time, then by position in the plan.
    """
    await get_user_plan_or_404(db, plan_id, current_user.id)

    query = select(ActivityBlock).where(ActivityBlock.plan_id == plan_id)
    if day_type:
        query = query.where(ActivityBlock.day_type == day_type)
    query = query.order_by(ActivityBlock.start_time.asc(), ActivityBlock.order.asc())

    result = await db.execute(query)
    return [ActivityBlockRead.model_validate(b) for b in result.scalars()]


@router.post("/", response_model=ActivityBlockRead, status_code=status.HTTP_201_CREATED)
async def create_activity_block(
    data: ActivityBlockCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> ActivityBlockRead:
    """Add a block to one of the user's plans, after its current last block."""
    await get_user_plan_or_404(db, data.plan_id, current_user.id)

    result = await db.execute(
        select(func.max(ActivityBlock.order)).where(ActivityBlock.plan_id == data.plan_id)
    )
    last_order = result.scalar_one_or_none()

    block = ActivityBlock(
        duration_minutes=compute_duration(data.start_time, data.end_time),
        order=0 if last_order is None else last_order + 1,
        **data.model_dump(),
    )
    db.add(block)
    await db.commit()
    await db.refresh(block)
    return ActivityBlockRead.model_validate(block)


@router.get("/duration", response_model=DurationRead)
async def get_duration(
    start_time: Annotated[str, Query(pattern=CLOCK_PATTERN)],
    end_time: Annotated[str, Query(pattern=CLOCK_PATTERN)],
) -> DurationRead:
    """Minutes between two HH:MM times. Overnight spans come back negative."""
    return DurationRead(
        start_time=start_time,
        end_time=end_time,
        duration_minutes=compute_duration(start_time, end_time),
    )
