"""Gym and TrainingPlan records built from Supabase rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from training_hub.config import (
    GYM_PLACEHOLDER_IMAGE,
    PLAN_DETAIL_PLACEHOLDER_IMAGE,
    PLAN_PLACEHOLDER_IMAGE,
)
from training_hub.filters.cost import parse_cost_number

logger = logging.getLogger(__name__)

TEASER_LENGTH = 80


def _opt(row: dict, key: str) -> str | None:
    value = row.get(key)
    return None if value is None else str(value)


@dataclass(frozen=True)
class Gym:
    id: str
    name: str
    address: str | None = None
    city: str | None = None
    country: str | None = None
    image_url: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Gym:
        return cls(
            id=str(row["id"]),
            name=str(row["name"]),
            address=_opt(row, "address"),
            city=_opt(row, "city"),
            country=_opt(row, "country"),
            image_url=_opt(row, "image_url"),
        )

    @property
    def location(self) -> str:
        """'City, Country' from whichever parts are present."""
        return ", ".join(p for p in (self.city, self.country) if p)

    @property
    def image(self) -> str:
        return self.image_url or GYM_PLACEHOLDER_IMAGE


@dataclass(frozen=True)
class TrainingPlan:
    id: str
    slug: str
    title: str
    main_image_url: str | None = None
    description: str | None = None
    price_text: str | None = None
    fitness_level: str | None = None
    days_per_week: str | None = None
    # Detail-page fields
    category: str | None = None
    daily_training_time: str | None = None
    sessions_per_day: str | None = None
    hours_per_week: str | None = None
    external_link: str | None = None
    coaches: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> TrainingPlan:
        coaches = row.get("coaches") or ()
        if not isinstance(coaches, (list, tuple)):
            coaches = (coaches,)
        return cls(
            id=str(row["id"]),
            slug=str(row["slug"]),
            title=str(row["title"]),
            main_image_url=_opt(row, "main_image_url"),
            description=_opt(row, "description"),
            price_text=_opt(row, "price_text"),
            fitness_level=_opt(row, "fitness_level"),
            days_per_week=_opt(row, "days_per_week"),
            category=_opt(row, "category"),
            daily_training_time=_opt(row, "daily_training_time"),
            sessions_per_day=_opt(row, "sessions_per_day"),
            hours_per_week=_opt(row, "hours_per_week"),
            external_link=_opt(row, "external_link"),
            coaches=tuple(str(c) for c in coaches),
        )

    @property
    def cost(self) -> int:
        return parse_cost_number(self.price_text)

    @property
    def teaser(self) -> str:
        if not self.description:
            return ""
        return f"{self.description[:TEASER_LENGTH]}..."

    @property
    def image(self) -> str:
        return self.main_image_url or PLAN_PLACEHOLDER_IMAGE

    @property
    def detail_image(self) -> str:
        return self.main_image_url or PLAN_DETAIL_PLACEHOLDER_IMAGE


def build_gyms(rows: Iterable[dict]) -> list[Gym]:
    """Turn rows into Gym records, skipping rows without id or name."""
    gyms = []
    for row in rows:
        if row.get("id") is None or not row.get("name"):
            logger.warning("Skipping gym row without id/name: %r", row.get("id"))
            continue
        gyms.append(Gym.from_row(row))
    return gyms


def build_plans(rows: Iterable[dict]) -> list[TrainingPlan]:
    """Turn rows into TrainingPlan records, skipping rows without id, slug or title."""
    plans = []
    for row in rows:
        if row.get("id") is None or not row.get("slug") or not row.get("title"):
            logger.warning("Skipping training plan row without id/slug/title: %r", row.get("id"))
            continue
        plans.append(TrainingPlan.from_row(row))
    return plans
