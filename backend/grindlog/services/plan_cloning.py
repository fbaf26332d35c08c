"""Copy a built-in template into a user-owned plan with its activity blocks."""

import logging
from uuid import UUID

from sqlalchemy.exc import InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from grindlog.db.models import ActivityBlock, Plan
from grindlog.errors import StoreUnavailableError
from grindlog.services.catalog import get_default_plan
from grindlog.services.timekeeping import compute_duration

logger = logging.getLogger(__name__)


async def clone_default_plan(
    db: AsyncSession,
    user_id: UUID,
    plan_name: str,
) -> tuple[Plan, list[ActivityBlock]]:
    """
    Create a plan for `user_id` from the template named `plan_name`.

    Flow:
    1. Look up the template by exact name (NotFoundError if absent)
    2. Insert the plan, copying name, description and day_type
    3. Insert one block per template activity, in template order, with
       order = position and duration_minutes derived from the times

    Both inserts share the caller's transaction. If either fails the
    transaction is rolled back, so no plan is left without its blocks.
    A lost connection surfaces as StoreUnavailableError; any other store
    error is re-raised as is. Cloning the same template twice produces two independent plans.
    """
    template = get_default_plan(plan_name)

    plan = Plan(
        user_id=user_id,
        name=template.name,
        description=template.description,
        day_type=template.day_type,
    )
    try:
        db.add(plan)
        await db.flush()  # Get plan.id

        blocks = [
            ActivityBlock(
                plan_id=plan.id,
                name=activity.name,
                start_time=activity.start_time,
                end_time=activity.end_time,
                duration_minutes=compute_duration(activity.start_time, activity.end_time),
                category=activity.category,
                description=activity.description,
                order=index,
                day_type=template.day_type,
            )
            for index, activity in enumerate(template.activities)
        ]
        db.add_all(blocks)
        await db.flush()
    except (OperationalError, InterfaceError) as e:
        await db.rollback()
        logger.exception(
            "Cloning template %r for user %s failed; plan and blocks rolled back",
            plan_name,
            user_id,
        )
        raise StoreUnavailableError("Could not copy the plan. Nothing was saved.") from e
    except SQLAlchemyError:
        # Constraint or data errors: rolled back, re-raised unchanged
        await db.rollback()
        logger.exception("Cloning template %r for user %s was rejected by the store", plan_name, user_id)
        raise

    logger.info(
        "Cloned template %r for user %s into plan %s (%d blocks)",
        plan_name,
        user_id,
        plan.id,
        len(blocks),
    )
    return plan, blocks
