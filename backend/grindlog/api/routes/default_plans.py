"""Built-in plan catalog and cloning routes."""

from fastapi import APIRouter, status

from grindlog.api.deps import CurrentUser, DbSession
from grindlog.schemas.activity_blocks import ActivityBlockRead
from grindlog.schemas.default_plans import ClonePlanRequest, ClonePlanResponse, DefaultPlanTemplate
from grindlog.schemas.plans import PlanRead
from grindlog.services.catalog import list_default_plans
from grindlog.services.plan_cloning import clone_default_plan

router = APIRouter(prefix="/default-plans", tags=["default-plans"])


@router.get("/", response_model=list[DefaultPlanTemplate])
async def get_default_plans() -> list[DefaultPlanTemplate]:
    """List the built-in plans. No authentication required."""
    return list(list_default_plans())


@router.post("/clone", response_model=ClonePlanResponse, status_code=status.HTTP_201_CREATED)
async def clone_plan(
    data: ClonePlanRequest,
    current_user: CurrentUser,
    db: DbSession,
) -> ClonePlanResponse:
    """
    Copy a built-in plan into the user's plans.

    Returns 404 if no built-in plan has exactly this name.
    """
    plan, blocks = await clone_default_plan(db, current_user.id, data.plan_name)
    await db.commit()
    return ClonePlanResponse(
        plan=PlanRead.model_validate(plan),
        activities=[ActivityBlockRead.model_validate(b) for b in blocks],
    )
