"""List filtering shared by the gym directory and the training-plan catalogue."""

from training_hub.filters.cost import COST_RANGES, CostRange, cost_range_matcher, parse_cost_number
from training_hub.filters.params import apply_params, filter_menu, state_params, toggle_href
from training_hub.filters.selection import UNSELECTED, Selected, Selection, toggle
from training_hub.filters.state import Dimension, FilterState, field_equals

__all__ = [
    "COST_RANGES",
    "CostRange",
    "Dimension",
    "FilterState",
    "Selected",
    "Selection",
    "UNSELECTED",
    "apply_params",
    "cost_range_matcher",
    "field_equals",
    "filter_menu",
    "parse_cost_number",
    "state_params",
    "toggle",
    "toggle_href",
]
