"""
Daily summary upsert engine.

Maintains at most one summary per (user, UTC day) across repeated and
concurrent submissions:

1. Reduce log_date to its UTC day and look for an existing summary in
   [day, day + 1).
2. Found: replace every mutable field in place (not a merge) and stamp
   updated_at. Status "updated".
3. Not found: insert a new summary for that day. Status "created".

Steps 1 and 3 are not atomic. The (user_id, log_date) unique constraint
turns a lost race into an IntegrityError; the loser rolls back, re-reads
the winner's row and applies its values as an update. If the winner's row
is gone by then, ConflictError tells the caller to re-fetch and retry.
"""

import logging
from datetime import date, datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from grindlog.db.models import DailySummary
from grindlog.errors import ConflictError, NotFoundError, ValidationError
from grindlog.schemas.daily_summaries import DailySummaryUpdate, DailySummaryUpsert
from grindlog.services.timekeeping import day_bounds, utc_day

logger = logging.getLogger(__name__)

# Columns that cannot be cleared to null by a patch
_REQUIRED_FIELDS = frozenset(
    {
        "dsa_problems",
        "project_hours",
        "commits_pushed",
        "applications_sent",
        "mock_interviews",
        "top3_priorities",
    }
)


async def find_summary_for_day(db: AsyncSession, user_id: UUID, day: date) -> DailySummary | None:
    """Return the user's summary for one UTC day, if any."""
    start, end = day_bounds(day)
    result = await db.execute(
        select(DailySummary).where(
            DailySummary.user_id == user_id,
            DailySummary.log_date >= start,
            DailySummary.log_date < end,
        )
    )
    return result.scalar_one_or_none()


def _replace_fields(summary: DailySummary, fields: dict[str, Any]) -> None:
    for key, value in fields.items():
        setattr(summary, key, value)
    summary.updated_at = datetime.now(timezone.utc)


async def upsert_daily_summary(
    db: AsyncSession,
    user_id: UUID,
    data: DailySummaryUpsert,
) -> tuple[DailySummary, bool]:
    """
    Create or replace the summary for the UTC day of `data.log_date`.

    Returns (summary, created). `created` is False when an existing
    summary was updated, including when this call lost an insert race.
    """
    day = utc_day(data.log_date)
    fields = data.model_dump(exclude={"log_date"})

    summary = await find_summary_for_day(db, user_id, day)
    if summary is not None:
        _replace_fields(summary, fields)
        await db.flush()
        return summary, False

    summary = DailySummary(user_id=user_id, log_date=day, **fields)
    db.add(summary)
    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        logger.info(
            "Concurrent insert of daily summary for user %s on %s; updating the stored one",
            user_id,
            day,
        )
        winner = await find_summary_for_day(db, user_id, day)
        if winner is None:
            raise ConflictError(
                "The summary for this day was changed concurrently. Please retry."
            ) from None
        _replace_fields(winner, fields)
        await db.flush()
        return winner, False

    return summary, True


async def list_daily_summaries(
    db: AsyncSession,
    user_id: UUID,
    day: date | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[DailySummary]:
    """
    List the user's summaries, most recent first.

    `day` selects a single UTC day; `start_date`/`end_date` select an
    inclusive range and must be given together.
    """
    query = select(DailySummary).where(DailySummary.user_id == user_id)

    if day is not None:
        start, end = day_bounds(day)
        query = query.where(DailySummary.log_date >= start, DailySummary.log_date < end)
    elif start_date is not None or end_date is not None:
        if start_date is None or end_date is None:
            raise ValidationError("start_date and end_date must be provided together")
        query = query.where(
            DailySummary.log_date >= start_date,
            DailySummary.log_date <= end_date,
        )

    query = query.order_by(DailySummary.log_date.desc())
    result = await db.execute(query)
    return list(result.scalars())


async def patch_daily_summary(
    db: AsyncSession,
    user_id: UUID,
    summary_id: UUID,
    data: DailySummaryUpdate,
) -> DailySummary:
    """Apply only the supplied fields to one of the user's summaries."""
    result = await db.execute(
        select(DailySummary).where(
            DailySummary.id == summary_id,
            DailySummary.user_id == user_id,
        )
    )
    summary = result.scalar_one_or_none()
    if summary is None:
        raise NotFoundError("Summary not found")

    fields = {
        key: value
        for key, value in data.model_dump(exclude_unset=True).items()
        if value is not None or key not in _REQUIRED_FIELDS
    }
    _replace_fields(summary, fields)
    await db.flush()
    return summary
