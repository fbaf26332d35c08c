"""Domain services: durations, template catalog, cloning, summaries, reports."""

from grindlog.services.catalog import get_default_plan, list_default_plans
from grindlog.services.plan_cloning import clone_default_plan
from grindlog.services.summaries import upsert_daily_summary
from grindlog.services.timekeeping import compute_duration

__all__ = [
    "clone_default_plan",
    "compute_duration",
    "get_default_plan",
    "list_default_plans",
    "upsert_daily_summary",
]
