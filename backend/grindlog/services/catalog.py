"""
Built-in plan templates.

Read-only starter plans that every user can clone into their own plans.
Lookup is by exact name.
"""

from grindlog.errors import NotFoundError
from grindlog.schemas.default_plans import DefaultPlanTemplate, TemplateActivity

DEFAULT_PLANS: tuple[DefaultPlanTemplate, ...] = (
    DefaultPlanTemplate(
        name="Weekday Grind",
        description="Full-time job hunt: DSA practice, project work and applications every weekday.",
        day_type="weekday",
        activities=[
            TemplateActivity(
                name="Morning Workout",
                start_time="06:30",
                end_time="07:15",
                category="exercise",
                description="Run or bodyweight circuit to start the day.",
            ),
            TemplateActivity(
                name="Breakfast",
                start_time="07:15",
                end_time="07:45",
                category="meal",
                description="Eat and review today's top 3 priorities.",
            ),
            TemplateActivity(
                name="DSA Practice",
                start_time="08:00",
                end_time="10:00",
                category="learning",
                description="Two to three problems, focus on one pattern.",
            ),
            TemplateActivity(
                name="Break",
                start_time="10:00",
                end_time="10:15",
                category="break",
                description="Step away from the screen.",
            ),
            TemplateActivity(
                name="Project Deep Work",
                start_time="10:15",
                end_time="12:30",
                category="work",
                description="Ship one feature or fix on the portfolio project and push commits.",
            ),
            TemplateActivity(
                name="Lunch",
                start_time="12:30",
                end_time="13:15",
                category="meal",
                description="Lunch away from the desk.",
            ),
            TemplateActivity(
                name="System Design Study",
                start_time="13:15",
                end_time="14:30",
                category="learning",
                description="Read about one system design topic and sketch it.",
            ),
            TemplateActivity(
                name="Job Applications",
                start_time="14:30",
                end_time="16:00",
                category="work",
                description="Tailor resume and send applications.",
            ),
            TemplateActivity(
                name="Mock Interview / Networking",
                start_time="16:00",
                end_time="17:00",
                category="work",
                description="Mock interview, referral outreach or recruiter follow-ups.",
            ),
            TemplateActivity(
                name="Evening Review",
                start_time="21:00",
                end_time="21:30",
                category="personal",
                description="Fill in the daily summary and plan tomorrow.",
            ),
        ],
    ),
    DefaultPlanTemplate(
        name="Balanced Weekday",
        description="Lighter weekday with a normal job or classes alongside interview prep.",
        day_type="weekday",
        activities=[
            TemplateActivity(
                name="DSA Warm-up",
                start_time="07:00",
                end_time="08:00",
                category="learning",
                description="One problem before the day starts.",
            ),
            TemplateActivity(
                name="Day Job",
                start_time="09:00",
                end_time="17:00",
                category="work",
                description="Regular work or classes.",
            ),
            TemplateActivity(
                name="Gym",
                start_time="17:30",
                end_time="18:30",
                category="exercise",
                description="Strength or cardio session.",
            ),
            TemplateActivity(
                name="Dinner",
                start_time="18:30",
                end_time="19:15",
                category="meal",
                description="Dinner.",
            ),
            TemplateActivity(
                name="Side Project",
                start_time="19:30",
                end_time="21:00",
                category="work",
                description="Small, shippable increments.",
            ),
            TemplateActivity(
                name="Wind Down",
                start_time="21:30",
                end_time="22:00",
                category="personal",
                description="Daily summary and reading.",
            ),
        ],
    ),
    DefaultPlanTemplate(
        name="Weekend Recharge",
        description="Weekend plan: one focused block, the rest for rest and review.",
        day_type="weekend",
        activities=[
            TemplateActivity(
                name="Long Run",
                start_time="08:00",
                end_time="09:30",
                category="exercise",
                description="Easy pace, outdoors.",
            ),
            TemplateActivity(
                name="Brunch",
                start_time="10:00",
                end_time="11:00",
                category="meal",
                description="Slow brunch.",
            ),
            TemplateActivity(
                name="Contest / Mock Assessment",
                start_time="11:00",
                end_time="13:00",
                category="learning",
                description="Timed contest or online assessment practice.",
            ),
            TemplateActivity(
                name="Free Time",
                start_time="13:00",
                end_time="18:00",
                category="personal",
                description="Friends, family, hobbies.",
            ),
            TemplateActivity(
                name="Weekly Review",
                start_time="19:00",
                end_time="20:00",
                category="personal",
                description="Read the weekly report and plan next week.",
            ),
        ],
    ),
)


def list_default_plans() -> tuple[DefaultPlanTemplate, ...]:
    return DEFAULT_PLANS


def get_default_plan(plan_name: str) -> DefaultPlanTemplate:
    """Return the template whose name matches exactly, or raise NotFoundError."""
    for template in DEFAULT_PLANS:
        if template.name == plan_name:
            return template
    raise NotFoundError("Default plan not found")
