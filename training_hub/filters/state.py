"""Generic list-filter state: free-text query plus single-choice dimensions.

The filtered list is a pure projection of (source, query, selections) and is
recomputed after every change. Items must match every active dimension and
the query to stay; relative source order is preserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from training_hub.filters.selection import (
    UNSELECTED,
    Selected,
    Selection,
    toggle,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Dimension(Generic[T]):
    """One filter axis: a key, a display label, its options and a matcher."""

    key: str
    label: str
    options: tuple[str, ...]
    matches: Callable[[T, str], bool]


def field_equals(attr: str) -> Callable[[Any, str], bool]:
    """Matcher for exact equality on an item attribute. Missing values never match."""
    def matches(item: Any, value: str) -> bool:
        return getattr(item, attr, None) == value

    return matches


class FilterState(Generic[T]):
    """Filter state for one directory view."""

    def __init__(
        self,
        source: Sequence[T],
        dimensions: Sequence[Dimension[T]],
        text_of: Callable[[T], str | None],
    ) -> None:
        self._source = source
        self._dimensions: dict[str, Dimension[T]] = {d.key: d for d in dimensions}
        self._text_of = text_of
        self._query = ""
        self._selections: dict[str, Selection] = {key: UNSELECTED for key in self._dimensions}
        self._filtered: list[T] = list(source)

    # -- read side ---------------------------------------------------------

    @property
    def source(self) -> Sequence[T]:
        return self._source

    @source.setter
    def source(self, items: Sequence[T]) -> None:
        if items is not self._source:
            self._source = items
            self._recompute()

    @property
    def dimensions(self) -> list[Dimension[T]]:
        return list(self._dimensions.values())

    @property
    def query(self) -> str:
        return self._query

    @property
    def filtered(self) -> list[T]:
        return list(self._filtered)

    def selection(self, key: str) -> Selection:
        return self._selections[key]

    def selections(self) -> dict[str, Selection]:
        return dict(self._selections)

    def is_selected(self, key: str, value: str) -> bool:
        return self._selections[key] == Selected(value)

    @property
    def is_default(self) -> bool:
        return not self._query and not any(self._selections.values())

    # -- events ------------------------------------------------------------

    def set_query(self, text: str) -> None:
        self._query = text
        self._recompute()

    def set_dimension(self, key: str, value: str) -> None:
        """Toggle `value` on dimension `key`."""
        self._selections[key] = toggle(self._selections[key], value)
        self._recompute()

    def reset(self) -> None:
        self._query = ""
        self._selections = {key: UNSELECTED for key in self._dimensions}
        self._recompute()

    def restore(self, query: str, selections: Mapping[str, Selection]) -> None:
        """Load a whole state at once (no toggling)."""
        for key in selections:
            if key not in self._dimensions:
                raise KeyError(key)
        self._query = query
        self._selections = {
            key: selections.get(key, UNSELECTED) for key in self._dimensions
        }
        self._recompute()

    # -- projection --------------------------------------------------------

    def _recompute(self) -> None:
        result = list(self._source)

        for key, dim in self._dimensions.items():
            sel = self._selections[key]
            if isinstance(sel, Selected):
                result = [item for item in result if dim.matches(item, sel.value)]

        if self._query:
            q = self._query.lower()
            result = [item for item in result if q in (self._text_of(item) or "").lower()]

        self._filtered = result
