"""API routes package."""

from grindlog.api.routes import (
    activity_blocks,
    auth,
    daily_logs,
    daily_summary,
    default_plans,
    plans,
    preferences,
    reports,
)

__all__ = [
    "activity_blocks",
    "auth",
    "daily_logs",
    "daily_summary",
    "default_plans",
    "plans",
    "preferences",
    "reports",
]
