"""Daily summary schemas."""

from datetime import date, datetime
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, BeforeValidator, Field

from grindlog.schemas.base import BaseSchema, RequestSchema


def parse_log_date(value: object) -> object:
    """Accept ``YYYY-MM-DD`` as well as full ISO-8601 timestamps (``Z`` or offset)."""
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            raise ValueError("must be an ISO-8601 date or datetime") from None
    return value


# Any instant or calendar date; the service reduces it to its UTC day.
LogDateInput = Annotated[datetime | date, BeforeValidator(parse_log_date)]


def clean_priorities(value: list[str]) -> list[str]:
    """Drop blank entries; at most three real priorities remain."""
    kept = [item.strip() for item in value if item and item.strip()]
    if len(kept) > 3:
        raise ValueError("at most 3 priorities are allowed")
    return kept


Priorities = Annotated[list[str], AfterValidator(clean_priorities)]


class DailySummaryUpsert(RequestSchema):
    """Schema for creating or replacing the summary of one day.

    Uses upsert semantics: if a summary for the UTC day of log_date exists,
    every mutable field is replaced (omitted fields fall back to their
    defaults); otherwise a new summary is created.
    """

    log_date: LogDateInput
    dsa_problems: int = Field(0, ge=0)
    project_hours: float = Field(0, ge=0)
    commits_pushed: int = Field(0, ge=0)
    system_design_topic: str | None = Field(None, max_length=255)
    applications_sent: int = Field(0, ge=0)
    mock_interviews: int = Field(0, ge=0)
    energy_rating: int | None = Field(None, ge=1, le=5)
    blocker: str | None = None
    top3_priorities: Priorities = Field(default_factory=list)


class DailySummaryUpdate(RequestSchema):
    """Schema for patching a summary by id. Only supplied fields change."""

    dsa_problems: int | None = Field(None, ge=0)
    project_hours: float | None = Field(None, ge=0)
    commits_pushed: int | None = Field(None, ge=0)
    system_design_topic: str | None = Field(None, max_length=255)
    applications_sent: int | None = Field(None, ge=0)
    mock_interviews: int | None = Field(None, ge=0)
    energy_rating: int | None = Field(None, ge=1, le=5)
    blocker: str | None = None
    top3_priorities: Priorities | None = None


class DailySummaryRead(BaseSchema):
    """Schema for reading a daily summary."""

    id: UUID
    user_id: UUID
    log_date: date
    dsa_problems: int
    project_hours: float
    commits_pushed: int
    system_design_topic: str | None = None
    applications_sent: int
    mock_interviews: int
    energy_rating: int | None = None
    blocker: str | None = None
    top3_priorities: list[str]
    created_at: datetime
    updated_at: datetime
