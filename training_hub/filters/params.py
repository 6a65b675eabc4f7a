"""Carry filter state between requests in the query string.

`q` holds the search text; every dimension uses its own key. An absent or
empty parameter means no selection.
"""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode

from training_hub.filters.selection import UNSELECTED, Selected, Selection, selected_value, toggle
from training_hub.filters.state import FilterState

QUERY_PARAM = "q"


def state_params(state: FilterState, selections: Mapping[str, Selection] | None = None) -> dict[str, str]:
    """Encode a state (optionally with overridden selections) as query parameters."""
    sels = state.selections() if selections is None else selections
    params: dict[str, str] = {}
    if state.query:
        params[QUERY_PARAM] = state.query
    for dim in state.dimensions:
        value = selected_value(sels.get(dim.key, UNSELECTED))
        if value is not None:
            params[dim.key] = value
    return params


def apply_params(state: FilterState, params: Mapping[str, Any]) -> FilterState:
    """Decode query parameters into `state`. Unknown parameters are ignored."""
    selections: dict[str, Selection] = {}
    for dim in state.dimensions:
        value = params.get(dim.key) or ""
        selections[dim.key] = Selected(value) if value else UNSELECTED
    state.restore(params.get(QUERY_PARAM) or "", selections)
    return state


def _href(path: str, params: Mapping[str, str]) -> str:
    return f"{path}?{urlencode(params)}" if params else path


def toggle_href(path: str, state: FilterState, key: str, value: str) -> str:
    """Link to the current state with `value` toggled on dimension `key`."""
    sels = state.selections()
    sels[key] = toggle(sels[key], value)
    return _href(path, state_params(state, sels))


def filter_menu(state: FilterState, path: str) -> list[dict]:
    """Option groups for the filter menu, one per dimension."""
    groups = []
    for dim in state.dimensions:
        groups.append({
            "key": dim.key,
            "label": dim.label,
            "options": [
                {
                    "value": option,
                    "active": state.is_selected(dim.key, option),
                    "href": toggle_href(path, state, dim.key, option),
                }
                for option in dim.options
            ],
        })
    return groups
