#!/usr/bin/env python3
"""
Tests for weight persistence on a throwaway SQLite database.
"""

import json
import unittest

from core.scorer.presets import WEIGHT_PRESETS, NicheGoal
from core.scorer.weights import ScoringWeights
from database.database import build_engine, build_session_factory, db_session_scope, init_db
from database.models import AppSettings
from database.repositories.weights import DEFAULT_WEIGHTS_KEY, WeightsRepository


class TestWeightsRepository(unittest.TestCase):

    def setUp(self):
        self.engine = build_engine("sqlite:///:memory:")
        init_db(self.engine)
        self.session_factory = build_session_factory(self.engine)
        self.session = self.session_factory()
        self.repo = WeightsRepository(self.session)

    def tearDown(self):
        self.session.close()
        self.engine.dispose()

    def _store_raw(self, value: str, key: str = DEFAULT_WEIGHTS_KEY):
        self.session.add(AppSettings(key=key, value=value))
        self.session.flush()

    def test_missing_key_falls_back_to_balanced(self):
        self.assertFalse(self.repo.has_weights())
        self.assertEqual(self.repo.load_weights(), WEIGHT_PRESETS[NicheGoal.BALANCED])

    def test_missing_key_uses_given_default(self):
        default = WEIGHT_PRESETS[NicheGoal.HIGH_TICKET]
        self.assertEqual(self.repo.load_weights(default=default), default)

    def test_save_then_load(self):
        weights = ScoringWeights(demand=9, competition=-2, average_price=1, trend=0, scalability=-3)
        self.repo.save_weights(weights)

        self.assertTrue(self.repo.has_weights())
        self.assertEqual(self.repo.load_weights(), weights)

    def test_stored_with_camel_case_keys(self):
        self.repo.save_weights(ScoringWeights())
        stored = json.loads(self.repo.get_raw(DEFAULT_WEIGHTS_KEY))

        self.assertIn("averagePrice", stored)
        self.assertNotIn("average_price", stored)

    def test_save_overwrites_single_row(self):
        self.repo.save_weights(ScoringWeights(demand=1))
        self.repo.save_weights(ScoringWeights(demand=2))

        rows = self.session.query(AppSettings).filter_by(key=DEFAULT_WEIGHTS_KEY).all()
        self.assertEqual(len(rows), 1)
        self.assertEqual(self.repo.load_weights().demand, 2)

    def test_keys_are_isolated(self):
        self.repo.save_weights(ScoringWeights(trend=-7), key="niche_weights_v1")
        self.assertFalse(self.repo.has_weights())
        self.assertEqual(self.repo.load_weights(key="niche_weights_v1").trend, -7)

    def test_corrupt_json_falls_back(self):
        self._store_raw("{definitely not json")
        self.assertEqual(self.repo.load_weights(), WEIGHT_PRESETS[NicheGoal.BALANCED])

    def test_out_of_range_values_fall_back(self):
        self._store_raw(json.dumps({"demand": 99, "competition": -5, "averagePrice": 4, "trend": 6, "scalability": 7}))
        self.assertEqual(self.repo.load_weights(), WEIGHT_PRESETS[NicheGoal.BALANCED])

    def test_wrong_shape_falls_back(self):
        self._store_raw(json.dumps([1, 2, 3]))
        self.assertEqual(self.repo.load_weights(), WEIGHT_PRESETS[NicheGoal.BALANCED])

    def test_partial_payload_fills_defaults(self):
        self._store_raw(json.dumps({"demand": 3}))
        weights = self.repo.load_weights()

        self.assertEqual(weights.demand, 3)
        self.assertEqual(weights.scalability, 7)

    def test_session_scope_commits(self):
        with db_session_scope(self.session_factory) as session:
            WeightsRepository(session).save_weights(ScoringWeights(demand=4))

        with db_session_scope(self.session_factory) as session:
            self.assertEqual(WeightsRepository(session).load_weights().demand, 4)


if __name__ == "__main__":
    unittest.main()
