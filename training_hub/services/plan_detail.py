"""Plan detail view model."""

from training_hub.models import TrainingPlan

NOT_AVAILABLE = "N/A"
UNKNOWN_COACH = "Unknown Coach"
NO_DESCRIPTION = "No description provided for this training plan."


def quick_hitters(plan: TrainingPlan) -> list[dict]:
    """Label/value cards shown under the plan header."""
    rows = [
        ("Category", plan.category),
        ("Fitness Level", plan.fitness_level),
        ("Daily Training Time", plan.daily_training_time),
        ("Sessions Per Day", plan.sessions_per_day),
        ("Days Per Week", plan.days_per_week),
        ("Hours Per Week", plan.hours_per_week),
        ("Cost", plan.price_text),
    ]
    return [{"label": label, "value": value or NOT_AVAILABLE} for label, value in rows]


def plan_view(plan: TrainingPlan) -> dict:
    return {
        "plan": plan,
        "heading": f"{plan.title} by {plan.coaches[0] if plan.coaches else UNKNOWN_COACH}",
        "description": plan.description or NO_DESCRIPTION,
        "external_link": plan.external_link or "#",
        "image": plan.detail_image,
        "quick_hitters": quick_hitters(plan),
    }
