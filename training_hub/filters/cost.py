"""Cost buckets for training plans.

Prices are free text ("$25/month", "£250", "Free"). The numeric cost is the
first run of digits anywhere in the text; text with no digits counts as 0,
so "Free" and "Contact us" both land in the lowest bucket.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, TypeVar

_DIGITS_RE = re.compile(r"[0-9]+")
_MAX_DIGITS = 18

T = TypeVar("T")


@dataclass(frozen=True)
class CostRange:
    """Half-open range [min, max). max=inf for the open-ended top bucket."""

    label: str
    min: float
    max: float = math.inf

    def contains(self, cost: float) -> bool:
        return self.min <= cost < self.max


COST_RANGES: tuple[CostRange, ...] = (
    CostRange("Under $20", 0, 20),
    CostRange("$20 - $50", 20, 50),
    CostRange("$50 - $75", 50, 75),
    CostRange("$100+", 100),
)


def parse_cost_number(price_text: str | None) -> int:
    """'$20-$50/month' -> 20, 'Free' -> 0, None -> 0."""
    if not price_text:
        return 0
    match = _DIGITS_RE.search(price_text)
    if not match:
        return 0
    # Long runs are clipped so int() stays under the digit limit; 18 digits
    # is still far above the top bucket.
    digits = match.group(0).lstrip("0")[:_MAX_DIGITS]
    return int(digits or "0")


def find_range(label: str, ranges: tuple[CostRange, ...] = COST_RANGES) -> CostRange | None:
    for r in ranges:
        if r.label == label:
            return r
    return None


def cost_range_matcher(cost_of: Callable[[T], float],
                       ranges: tuple[CostRange, ...] = COST_RANGES) -> Callable[[T, str], bool]:
    """Build a dimension matcher that keeps items whose cost falls in the chosen bucket.

    A label that names no bucket filters nothing.
    """
    def matches(item: T, label: str) -> bool:
        r = find_range(label, ranges)
        if r is None:
            return True
        return r.contains(cost_of(item))

    return matches
