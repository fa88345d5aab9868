"""Tests for the inclusive range filters."""

import itertools

import pytest
from pydantic import ValidationError

from core.scorer.filters import apply_filters, passes_filters
from core.scorer.weights import FilterRange, FilterState
from tests.fixtures.niches import make_niche


class TestFilterRange:

    def test_bounds_are_inclusive(self):
        r = FilterRange(min=2, max=6)
        assert r.contains(2)
        assert r.contains(6)
        assert not r.contains(1.99)
        assert not r.contains(6.01)

    def test_inverted_range_cannot_be_built(self):
        with pytest.raises(ValidationError):
            FilterRange(min=7, max=3)

    def test_single_point_range(self):
        assert FilterRange(min=5, max=5).contains(5)


class TestPassesFilters:

    def test_default_state_accepts_normalized_niches(self):
        assert passes_filters(make_niche(average_price=2000, demand=10, competition=1), FilterState())

    @pytest.mark.parametrize("price,demand,competition", list(itertools.product(
        [0, 99, 100, 500, 501], [3, 4, 8, 9], [1, 2, 6, 7]
    )))
    def test_matches_iff_all_three_in_range(self, price, demand, competition):
        filters = FilterState(
            price=FilterRange(min=100, max=500),
            demand=FilterRange(min=4, max=8),
            competition=FilterRange(min=2, max=6),
        )
        niche = make_niche(average_price=price, demand=demand, competition=competition)
        expected = 100 <= price <= 500 and 4 <= demand <= 8 and 2 <= competition <= 6

        assert passes_filters(niche, filters) is expected


class TestApplyFilters:

    def test_keeps_input_order(self):
        niches = [make_niche("c", demand=9), make_niche("a", demand=2), make_niche("b", demand=7)]
        filters = FilterState(demand=FilterRange(min=5, max=10))

        assert [n.name for n in apply_filters(niches, filters)] == ["c", "b"]

    def test_can_exclude_everything(self):
        filters = FilterState(price=FilterRange(min=1500, max=2000))
        assert apply_filters([make_niche(average_price=100)], filters) == []
