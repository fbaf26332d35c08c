"""Plan and custom activity CRUD routes."""

import logging
from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from grindlog.api.deps import CurrentUser, DbSession, get_user_plan_or_404
from grindlog.db.models import ActivityBlock, CustomActivityBlock, Plan
from grindlog.errors import NotFoundError
from grindlog.schemas.base import DayTypeLiteral
from grindlog.schemas.plans import (
    CustomActivityCreate,
    CustomActivityRead,
    CustomActivityUpdate,
    PlanCreate,
    PlanRead,
    PlanUpdate,
)
from grindlog.services.timekeeping import compute_duration

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/plans", tags=["plans"])


@router.get("/", response_model=list[PlanRead])
async def list_plans(
    current_user: CurrentUser,
    db: DbSession,
    day_type: DayTypeLiteral | None = None,
) -> list[PlanRead]:
    """
    List plans for the current user, newest first.

    Filters:
    - day_type: weekday or weekend
    """
    query = select(Plan).where(Plan.user_id == current_user.id)

    if day_type:
        query = query.where(Plan.day_type == day_type)

    query = query.order_by(Plan.created_at.desc())

    result = await db.execute(query)
    return [PlanRead.model_validate(p) for p in result.scalars()]


@router.post("/", response_model=PlanRead, status_code=status.HTTP_201_CREATED)
async def create_plan(
    data: PlanCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> PlanRead:
    """Create a plan. Inline activities are stored in the given order."""
    plan = Plan(
        user_id=current_user.id,
        **data.model_dump(exclude={"activities"}),
    )
    db.add(plan)
    await db.flush()  # Get plan.id

    db.add_all(
        CustomActivityBlock(
            plan_id=plan.id,
            duration_minutes=compute_duration(activity.start_time, activity.end_time),
            order=index,
            **activity.model_dump(),
        )
        for index, activity in enumerate(data.activities)
    )

    await db.commit()
    await db.refresh(plan)
    return PlanRead.model_validate(plan)


@router.get("/{plan_id}", response_model=PlanRead)
async def get_plan(
    plan_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> PlanRead:
    """Get a specific plan by ID."""
    plan = await get_user_plan_or_404(db, plan_id, current_user.id)
    return PlanRead.model_validate(plan)


@router.patch("/{plan_id}", response_model=PlanRead)
async def update_plan(
    plan_id: UUID,
    data: PlanUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> PlanRead:
    """Update a plan."""
    plan = await get_user_plan_or_404(db, plan_id, current_user.id)
    for key, value in data.model_dump(exclude_unset=True).items():
        if value is None and key in {"name", "day_type", "is_active"}:
            continue
        setattr(plan, key, value)
    await db.commit()
    await db.refresh(plan)
    return PlanRead.model_validate(plan)


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_plan(
    plan_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> None:
    """
    Delete a plan and everything scheduled in it.

    Blocks and custom blocks are deleted first, then the plan, all in one
    transaction. If the plan was the user's selected plan, the selection
    is cleared.
    """
    await get_user_plan_or_404(db, plan_id, current_user.id)

    blocks = await db.execute(delete(ActivityBlock).where(ActivityBlock.plan_id == plan_id))
    custom = await db.execute(
        delete(CustomActivityBlock).where(CustomActivityBlock.plan_id == plan_id)
    )
    await db.execute(delete(Plan).where(Plan.id == plan_id, Plan.user_id == current_user.id))

    if current_user.selected_plan_id == plan_id:
        current_user.selected_plan_id = None
        current_user.selected_plan_name = None

    await db.commit()
    logger.info(
        "Deleted plan %s with %d blocks and %d custom blocks",
        plan_id,
        blocks.rowcount,
        custom.rowcount,
    )


# =============================================================================
# CUSTOM ACTIVITIES
# =============================================================================


async def _get_custom_activity_or_404(
    db: AsyncSession, plan_id: UUID, activity_id: UUID
) -> CustomActivityBlock:
    result = await db.execute(
        select(CustomActivityBlock).where(
            CustomActivityBlock.id == activity_id,
            CustomActivityBlock.plan_id == plan_id,
        )
    )
    activity = result.scalar_one_or_none()
    if activity is None:
        raise NotFoundError("Activity not found")
    return activity


@router.get("/{plan_id}/activities", response_model=list[CustomActivityRead])
async def list_custom_activities(
    plan_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> list[CustomActivityRead]:
    """List a plan's custom activities in their stored order."""
    await get_user_plan_or_404(db, plan_id, current_user.id)
    result = await db.execute(
        select(CustomActivityBlock)
        .where(CustomActivityBlock.plan_id == plan_id)
        .order_by(CustomActivityBlock.order.asc(), CustomActivityBlock.created_at.asc())
    )
    return [CustomActivityRead.model_validate(a) for a in result.scalars()]


@router.post(
    "/{plan_id}/activities",
    response_model=CustomActivityRead,
    status_code=status.HTTP_201_CREATED,
)
async def add_custom_activity(
    plan_id: UUID,
    data: CustomActivityCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> CustomActivityRead:
    """Append an activity after the plan's current last one."""
    await get_user_plan_or_404(db, plan_id, current_user.id)

    result = await db.execute(
        select(func.max(CustomActivityBlock.order)).where(CustomActivityBlock.plan_id == plan_id)
    )
    last_order = result.scalar_one_or_none()
    next_order = 0 if last_order is None else last_order + 1

    activity = CustomActivityBlock(
        plan_id=plan_id,
        duration_minutes=compute_duration(data.start_time, data.end_time),
        order=next_order,
        **data.model_dump(),
    )
    db.add(activity)
    await db.commit()
    await db.refresh(activity)
    return CustomActivityRead.model_validate(activity)


@router.patch("/{plan_id}/activities/{activity_id}", response_model=CustomActivityRead)
async def update_custom_activity(
    plan_id: UUID,
    activity_id: UUID,
    data: CustomActivityUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> CustomActivityRead:
    """Update an activity. Changing either time re-derives the duration."""
    await get_user_plan_or_404(db, plan_id, current_user.id)
    activity = await _get_custom_activity_or_404(db, plan_id, activity_id)

    for key, value in data.model_dump(exclude_unset=True).items():
        if value is None and key != "description":
            continue
        setattr(activity, key, value)
    activity.duration_minutes = compute_duration(activity.start_time, activity.end_time)

    await db.commit()
    await db.refresh(activity)
    return CustomActivityRead.model_validate(activity)


@router.delete("/{plan_id}/activities/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_custom_activity(
    plan_id: UUID,
    activity_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> None:
    """Delete an activity. Remaining activities keep their order values."""
    await get_user_plan_or_404(db, plan_id, current_user.id)
    activity = await _get_custom_activity_or_404(db, plan_id, activity_id)
    await db.delete(activity)
    await db.commit()
