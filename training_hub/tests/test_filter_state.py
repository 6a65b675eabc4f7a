"""Tests for the generic filter state: toggling, reset, conjunction, ordering."""

import pytest

from training_hub.filters import UNSELECTED, Selected, toggle
from training_hub.models import build_gyms
from training_hub.services.gym_directory import build_gym_filter
from training_hub.tests.conftest import make_gym


@pytest.fixture
def gyms():
    return build_gyms([
        make_gym(id="1", name="Iron Works", city="London", country="United Kingdom"),
        make_gym(id="2", name="Berlin Box", city="Berlin", country="Germany"),
        make_gym(id="3", name="Hackney Hyrox", city="London", country="United Kingdom"),
        make_gym(id="4", name="Munich Iron", city="Munich", country="Germany"),
        make_gym(id="5", name="Nowhere Gym", city=None, country=None),
    ])


def _ids(items):
    return [item.id for item in items]


class TestToggle:
    def test_select_from_unselected(self):
        assert toggle(UNSELECTED, "London") == Selected("London")

    def test_same_value_clears(self):
        assert toggle(Selected("London"), "London") is UNSELECTED

    def test_different_value_replaces(self):
        assert toggle(Selected("London"), "Berlin") == Selected("Berlin")

    def test_empty_string_is_a_real_value(self):
        assert toggle(UNSELECTED, "") == Selected("")
        assert Selected("") != UNSELECTED


class TestInitialState:
    def test_starts_with_full_list(self, gyms):
        state = build_gym_filter(gyms)
        assert state.filtered == gyms
        assert state.query == ""
        assert state.selection("city") is UNSELECTED
        assert state.selection("country") is UNSELECTED
        assert state.is_default

    def test_empty_source(self):
        state = build_gym_filter([])
        assert state.filtered == []
        state.set_query("iron")
        state.set_dimension("city", "London")
        assert state.filtered == []


class TestSetDimension:
    def test_city_keeps_original_order(self, gyms):
        state = build_gym_filter(gyms)
        state.set_dimension("city", "London")
        assert _ids(state.filtered) == ["1", "3"]
        assert state.is_selected("city", "London")
        assert not state.is_selected("city", "Berlin")

    def test_toggle_law(self, gyms):
        state = build_gym_filter(gyms)
        state.set_dimension("country", "Germany")
        state.set_dimension("country", "Germany")
        assert state.selection("country") is UNSELECTED
        assert state.filtered == gyms

    def test_replacing_value(self, gyms):
        state = build_gym_filter(gyms)
        state.set_dimension("city", "London")
        state.set_dimension("city", "Berlin")
        assert state.selection("city") == Selected("Berlin")
        assert _ids(state.filtered) == ["2"]

    def test_value_in_no_item_yields_nothing(self, gyms):
        state = build_gym_filter(gyms)
        state.set_dimension("city", "Paris")
        assert state.filtered == []

    def test_unknown_dimension_raises(self, gyms):
        state = build_gym_filter(gyms)
        with pytest.raises(KeyError):
            state.set_dimension("state", "Bavaria")

    def test_conjunction_is_intersection(self, gyms):
        by_city = build_gym_filter(gyms)
        by_city.set_dimension("city", "Munich")
        by_country = build_gym_filter(gyms)
        by_country.set_dimension("country", "Germany")

        both = build_gym_filter(gyms)
        both.set_dimension("city", "Munich")
        both.set_dimension("country", "Germany")

        expected = [g for g in by_city.filtered if g in by_country.filtered]
        assert both.filtered == expected
        assert _ids(both.filtered) == ["4"]

    def test_conflicting_dimensions_yield_nothing(self, gyms):
        state = build_gym_filter(gyms)
        state.set_dimension("city", "London")
        state.set_dimension("country", "Germany")
        assert state.filtered == []


class TestQuery:
    def test_case_insensitive_substring(self, gyms):
        state = build_gym_filter(gyms)
        state.set_query("IRON")
        assert _ids(state.filtered) == ["1", "4"]

    def test_query_combines_with_dimension(self, gyms):
        state = build_gym_filter(gyms)
        state.set_query("iron")
        state.set_dimension("country", "Germany")
        assert _ids(state.filtered) == ["4"]

    def test_empty_query_means_no_text_filter(self, gyms):
        state = build_gym_filter(gyms)
        state.set_query("iron")
        state.set_query("")
        assert state.filtered == gyms


class TestReset:
    def test_reset_restores_everything(self, gyms):
        state = build_gym_filter(gyms)
        state.set_query("hyrox")
        state.set_dimension("city", "London")
        state.set_dimension("country", "United Kingdom")
        state.reset()
        assert state.query == ""
        assert state.selection("city") is UNSELECTED
        assert state.selection("country") is UNSELECTED
        assert state.filtered == gyms

    def test_reset_is_idempotent(self, gyms):
        state = build_gym_filter(gyms)
        state.set_dimension("city", "Berlin")
        state.reset()
        once = (state.query, state.selections(), state.filtered)
        state.reset()
        assert (state.query, state.selections(), state.filtered) == once

    def test_london_scenario(self):
        three = build_gyms([
            make_gym(id="a", city="London"),
            make_gym(id="b", city="Berlin"),
            make_gym(id="c", city="London"),
        ])
        state = build_gym_filter(three)
        state.set_dimension("city", "London")
        assert _ids(state.filtered) == ["a", "c"]
        state.reset()
        assert _ids(state.filtered) == ["a", "b", "c"]


class TestSource:
    def test_new_source_recomputes(self, gyms):
        state = build_gym_filter(gyms)
        state.set_dimension("city", "London")
        state.source = gyms[:2]
        assert _ids(state.filtered) == ["1"]

    def test_result_is_always_a_subset(self, gyms):
        state = build_gym_filter(gyms)
        for city in ("London", "Berlin", "Munich", "Paris"):
            state.set_dimension("city", city)
            state.set_query("i")
            assert all(g in gyms for g in state.filtered)

    def test_filtered_returns_a_copy(self, gyms):
        state = build_gym_filter(gyms)
        state.filtered.clear()
        assert len(state.filtered) == len(gyms)


class TestRestore:
    def test_restore_sets_without_toggling(self, gyms):
        state = build_gym_filter(gyms)
        state.set_dimension("city", "London")
        state.restore("", {"city": Selected("London")})
        assert state.selection("city") == Selected("London")
        assert _ids(state.filtered) == ["1", "3"]

    def test_restore_rejects_unknown_keys(self, gyms):
        state = build_gym_filter(gyms)
        with pytest.raises(KeyError):
            state.restore("", {"planet": Selected("Mars")})
