"""Gym directory — filter options and the gym filter instance."""

from __future__ import annotations

from typing import Sequence

from training_hub.filters import Dimension, FilterState, field_equals
from training_hub.models import Gym


def collect_options(gyms: Sequence[Gym]) -> tuple[list[str], list[str]]:
    """Distinct non-empty cities and countries, each sorted ascending."""
    cities: set[str] = set()
    countries: set[str] = set()
    for gym in gyms:
        if gym.city:
            cities.add(gym.city)
        if gym.country:
            countries.add(gym.country)
    return sorted(cities), sorted(countries)


def gym_filter(gyms: Sequence[Gym], city_options: Sequence[str],
               country_options: Sequence[str]) -> FilterState[Gym]:
    """Filter state over gyms: City and Country dimensions, search on name."""
    return FilterState(
        gyms,
        [
            Dimension("city", "City", tuple(city_options), field_equals("city")),
            Dimension("country", "Country", tuple(country_options), field_equals("country")),
        ],
        text_of=lambda gym: gym.name,
    )


def build_gym_filter(gyms: Sequence[Gym]) -> FilterState[Gym]:
    cities, countries = collect_options(gyms)
    return gym_filter(gyms, cities, countries)
