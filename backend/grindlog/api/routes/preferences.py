"""Selected-plan preference routes."""

from fastapi import APIRouter

from grindlog.api.deps import CurrentUser, DbSession, get_user_plan_or_404
from grindlog.schemas.preferences import PlanPreferenceRead, PlanPreferenceUpdate

router = APIRouter(prefix="/user-preference", tags=["user-preference"])


@router.get("/", response_model=PlanPreferenceRead)
async def get_preference(current_user: CurrentUser) -> PlanPreferenceRead:
    """Get the plan the user last selected."""
    return PlanPreferenceRead.model_validate(current_user)


@router.put("/", response_model=PlanPreferenceRead)
async def set_preference(
    data: PlanPreferenceUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> PlanPreferenceRead:
    """Select one of the user's plans. The plan name defaults to the plan's own name."""
    plan = await get_user_plan_or_404(db, data.plan_id, current_user.id)
    current_user.selected_plan_id = plan.id
    current_user.selected_plan_name = data.plan_name or plan.name
    await db.commit()
    return PlanPreferenceRead.model_validate(current_user)


@router.delete("/", response_model=PlanPreferenceRead)
async def clear_preference(current_user: CurrentUser, db: DbSession) -> PlanPreferenceRead:
    """Clear the selected plan."""
    current_user.selected_plan_id = None
    current_user.selected_plan_name = None
    await db.commit()
    return PlanPreferenceRead.model_validate(current_user)
