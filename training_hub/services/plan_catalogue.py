"""Training-plan catalogue — fixed option sets and the plan filter instance."""

from __future__ import annotations

from typing import Sequence

from training_hub.filters import (
    COST_RANGES,
    Dimension,
    FilterState,
    cost_range_matcher,
    field_equals,
)
from training_hub.models import TrainingPlan

FITNESS_LEVELS = ("Beginner", "Intermediate", "Rx", "Scaled", "Very Active")
DAYS_PER_WEEK_OPTIONS = ("2-3", "3-5", "5-7", "Individual")


def plan_filter(plans: Sequence[TrainingPlan]) -> FilterState[TrainingPlan]:
    """Filter state over plans: fitness level, days/week, cost range; search on title.

    The cost dimension is declared last so it runs after the categorical ones.
    """
    return FilterState(
        plans,
        [
            Dimension("level", "Fitness Level", FITNESS_LEVELS, field_equals("fitness_level")),
            Dimension("days", "Days/Week", DAYS_PER_WEEK_OPTIONS, field_equals("days_per_week")),
            Dimension(
                "cost",
                "Cost Range",
                tuple(r.label for r in COST_RANGES),
                cost_range_matcher(lambda plan: plan.cost, COST_RANGES),
            ),
        ],
        text_of=lambda plan: plan.title,
    )
