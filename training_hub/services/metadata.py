"""Page metadata: <title>, description and keywords for each page."""

from __future__ import annotations

from dataclasses import dataclass, field

from training_hub.config import SITE_URL
from training_hub.models import TrainingPlan

DESCRIPTION_LIMIT = 150


@dataclass(frozen=True)
class PageMeta:
    title: str
    description: str
    keywords: tuple[str, ...] = field(default_factory=tuple)
    canonical: str | None = None


SITE_DEFAULTS = PageMeta(
    title="Hyrox Training Hub – Gyms, Events, & Plans",
    description=(
        "Discover Hyrox gyms, events, training guides, and more. "
        "Kickstart your Hyrox journey today!"
    ),
    keywords=("hyrox", "hyrox gyms", "hyrox events", "hyrox training", "fitness"),
)

HOME = PageMeta(
    title="Hyrox Training Hub – Start Your Journey",
    description="Explore gyms, events, and training guides to level up your Hyrox performance.",
)

GYMS = PageMeta(
    title="Best Hyrox Gyms & Coaches",
    description="Locate top Hyrox-friendly gyms, trainers, and coaches near you to start training.",
)

TRAINING = PageMeta(
    title="Hyrox Training Plans",
    description="Check out top-rated Hyrox training plans from beginner to advanced levels.",
)

PLAN_NOT_FOUND = PageMeta(
    title="Plan not found",
    description="This training plan does not exist or was removed.",
)


def page_meta(meta: PageMeta, path: str = "") -> PageMeta:
    """Fill in site-wide keywords and the canonical URL."""
    return PageMeta(
        title=meta.title,
        description=meta.description,
        keywords=meta.keywords or SITE_DEFAULTS.keywords,
        canonical=f"{SITE_URL}{path}" if SITE_URL and path else None,
    )


def plan_meta(plan: TrainingPlan | None, path: str = "") -> PageMeta:
    if plan is None:
        return page_meta(PLAN_NOT_FOUND)
    description = (plan.description or "")[:DESCRIPTION_LIMIT] or "A Hyrox Training Plan"
    return page_meta(PageMeta(title=plan.title, description=description), path)
