"""Single-choice selection values for one filter dimension."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


class Unselected:
    """No value chosen for a dimension. Use the UNSELECTED singleton."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSELECTED"

    def __bool__(self) -> bool:
        return False


UNSELECTED = Unselected()


@dataclass(frozen=True)
class Selected:
    value: str


Selection = Union[Unselected, Selected]


def toggle(current: Selection, value: str) -> Selection:
    """Choosing the active value clears it; any other value replaces it."""
    if isinstance(current, Selected) and current.value == value:
        return UNSELECTED
    return Selected(value)


def selected_value(selection: Selection) -> str | None:
    return selection.value if isinstance(selection, Selected) else None
