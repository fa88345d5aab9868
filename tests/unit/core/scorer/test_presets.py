#!/usr/bin/env python3
"""
Tests for the goal/weight selector and the filter controller.
"""

import unittest

from core.exceptions import UnknownFactorError, UnknownPresetError
from core.scorer.presets import (
    FILTER_PRESETS,
    WEIGHT_PRESETS,
    FilterController,
    FilterPresetId,
    NicheGoal,
    WeightSelector,
    clamp_weight,
    parse_goal,
)
from core.scorer.weights import FilterRange, FilterState, ScoringWeights


class TestPresetCatalog(unittest.TestCase):

    def test_every_goal_except_custom_has_weights(self):
        expected = {g for g in NicheGoal if g is not NicheGoal.CUSTOM}
        self.assertEqual(set(WEIGHT_PRESETS), expected)

    def test_balanced_matches_default_weights(self):
        self.assertEqual(WEIGHT_PRESETS[NicheGoal.BALANCED], ScoringWeights())

    def test_quick_start_punishes_competition_hardest(self):
        self.assertEqual(WEIGHT_PRESETS[NicheGoal.QUICK_START].competition, -10)

    def test_filter_presets_never_inverted(self):
        for state in FILTER_PRESETS.values():
            for category in ('price', 'demand', 'competition'):
                r = getattr(state, category)
                self.assertLessEqual(r.min, r.max)

    def test_parse_goal_rejects_unknown(self):
        with self.assertRaises(UnknownPresetError):
            parse_goal("get-rich-quick")

    def test_unknown_preset_is_a_value_error(self):
        with self.assertRaises(ValueError):
            parse_goal("nope")


class TestWeightSelector(unittest.TestCase):

    def setUp(self):
        self.selector = WeightSelector()

    def test_starts_on_balanced(self):
        self.assertEqual(self.selector.goal, NicheGoal.BALANCED)
        self.assertEqual(self.selector.weights, WEIGHT_PRESETS[NicheGoal.BALANCED])

    def test_select_overwrites_all_weights(self):
        weights = self.selector.select("high-ticket")

        self.assertEqual(self.selector.goal, NicheGoal.HIGH_TICKET)
        self.assertEqual(weights, WEIGHT_PRESETS[NicheGoal.HIGH_TICKET])

    def test_manual_edit_switches_to_custom_and_keeps_others(self):
        before = self.selector.weights
        after = self.selector.set_weight("trend", 9)

        self.assertEqual(self.selector.goal, NicheGoal.CUSTOM)
        self.assertEqual(after.trend, 9)
        self.assertEqual(after.demand, before.demand)
        self.assertEqual(after.competition, before.competition)
        self.assertEqual(after.average_price, before.average_price)
        self.assertEqual(after.scalability, before.scalability)

    def test_manual_edit_is_clamped(self):
        self.assertEqual(self.selector.set_weight("demand", 25).demand, 10)
        self.assertEqual(self.selector.set_weight("demand", -25).demand, -10)

    def test_camel_case_factor_name(self):
        self.assertEqual(self.selector.set_weight("averagePrice", 2).average_price, 2)

    def test_unknown_factor_raises(self):
        with self.assertRaises(UnknownFactorError):
            self.selector.set_weight("vibes", 3)
        self.assertEqual(self.selector.goal, NicheGoal.BALANCED)

    def test_selecting_custom_keeps_current_weights(self):
        self.selector.select("trend-hunter")
        weights = self.selector.select("custom")

        self.assertEqual(self.selector.goal, NicheGoal.CUSTOM)
        self.assertEqual(weights, WEIGHT_PRESETS[NicheGoal.TREND_HUNTER])

    def test_preset_after_custom_restores_table_values(self):
        self.selector.set_weight("demand", -3)
        self.selector.select("balanced")
        self.assertEqual(self.selector.weights, WEIGHT_PRESETS[NicheGoal.BALANCED])

    def test_replace_detects_matching_preset(self):
        self.selector.replace(ScoringWeights(demand=6, competition=-4, average_price=5, trend=7, scalability=10))
        self.assertEqual(self.selector.goal, NicheGoal.AI_HYBRID)

    def test_replace_with_unknown_vector_is_custom(self):
        self.selector.replace(ScoringWeights(demand=1, competition=1, average_price=1, trend=1, scalability=1))
        self.assertEqual(self.selector.goal, NicheGoal.CUSTOM)

    def test_clamp_weight_rounds(self):
        self.assertEqual(clamp_weight(3.6), 4)
        self.assertEqual(clamp_weight(-10.4), -10)


class TestFilterController(unittest.TestCase):

    def setUp(self):
        self.controller = FilterController()

    def test_starts_unrestricted(self):
        self.assertEqual(self.controller.preset, FilterPresetId.ALL)
        self.assertEqual(self.controller.filters, FilterState())

    def test_select_preset(self):
        filters = self.controller.select("premium")

        self.assertEqual(self.controller.preset, FilterPresetId.PREMIUM)
        self.assertEqual(filters.price, FilterRange(min=150, max=2000))

    def test_unknown_preset_raises(self):
        with self.assertRaises(UnknownPresetError):
            self.controller.select("luxury")

    def test_bound_edit_switches_to_custom(self):
        edit = self.controller.set_bound("demand", "min", 4)

        self.assertEqual(self.controller.preset, FilterPresetId.CUSTOM)
        self.assertEqual(edit.filters.demand, FilterRange(min=4, max=10))
        self.assertFalse(edit.boundary_lock)
        self.assertEqual(edit.applied, 4)

    def test_min_above_max_locks_to_max(self):
        self.controller.set_bound("competition", "max", 5)
        edit = self.controller.set_bound("competition", "min", 8)

        self.assertTrue(edit.boundary_lock)
        self.assertEqual(edit.requested, 8)
        self.assertEqual(edit.applied, 5)
        self.assertEqual(self.controller.filters.competition, FilterRange(min=5, max=5))

    def test_max_below_min_locks_to_min(self):
        self.controller.set_bound("price", "min", 300)
        edit = self.controller.set_bound("price", "max", 100)

        self.assertTrue(edit.boundary_lock)
        self.assertEqual(self.controller.filters.price, FilterRange(min=300, max=300))

    def test_value_is_clamped_into_domain(self):
        edit = self.controller.set_bound("demand", "max", 50)

        self.assertFalse(edit.boundary_lock)
        self.assertEqual(self.controller.filters.demand.max, 10)

    def test_other_categories_untouched(self):
        self.controller.select("high-growth")
        self.controller.set_bound("price", "max", 800)

        self.assertEqual(self.controller.filters.demand, FilterRange(min=6, max=10))
        self.assertEqual(self.controller.filters.competition, FilterRange(min=1, max=6))

    def test_unknown_category_or_bound_raises(self):
        with self.assertRaises(UnknownFactorError):
            self.controller.set_bound("trend", "min", 0)
        with self.assertRaises(UnknownFactorError):
            self.controller.set_bound("price", "mid", 0)

    def test_reset_returns_to_all(self):
        self.controller.set_bound("price", "min", 500)
        filters = self.controller.reset()

        self.assertEqual(self.controller.preset, FilterPresetId.ALL)
        self.assertEqual(filters, FilterState())

    def test_no_edit_sequence_produces_inverted_range(self):
        edits = [
            ("price", "min", 1900), ("price", "max", 10), ("price", "min", 2500),
            ("demand", "max", 0), ("demand", "min", 11), ("competition", "min", 7),
            ("competition", "max", 2), ("price", "max", -5),
        ]
        for category, bound, value in edits:
            self.controller.set_bound(category, bound, value)
            for name in ('price', 'demand', 'competition'):
                r = getattr(self.controller.filters, name)
                self.assertLessEqual(r.min, r.max)


if __name__ == "__main__":
    unittest.main()
