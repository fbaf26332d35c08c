"""User schemas."""

from datetime import datetime
from uuid import UUID

from grindlog.schemas.base import BaseSchema


class UserRead(BaseSchema):
    """Schema for reading user data. Never exposes the password hash."""

    id: UUID
    email: str
    selected_plan_id: UUID | None = None
    selected_plan_name: str | None = None
    created_at: datetime
    updated_at: datetime
