#!/usr/bin/env python3
"""
Scoring Module - Filter, score, normalize and rank niches.

Public API:
- rank_niches: Pure ranking function
- RankingService: Memoizing wrapper that recomputes only on input change
- ScoredNiche, ScoreBreakdown: Result dataclasses
- ScoringWeights, FilterState, FilterRange: Configuration values
- WeightSelector, FilterController: Preset/custom selectors

Module layout:

- weights.py: Weight vector and filter range models
- filters.py: Inclusive range filtering
- factors.py: Weighted factor scores and display breakdown
- normalization.py: Min-max rescaling to 0-100
- presets.py: Preset catalogs and selectors
- service.py: rank_niches and RankingService
"""

from core.scorer.models import ScoreBreakdown, ScoredNiche
from core.scorer.weights import FilterRange, FilterState, ScoringWeights
from core.scorer.presets import FilterController, FilterPresetId, NicheGoal, WeightSelector
from core.scorer.service import RankingService, rank_niches

__all__ = [
    'rank_niches',
    'RankingService',
    'ScoredNiche',
    'ScoreBreakdown',
    'ScoringWeights',
    'FilterState',
    'FilterRange',
    'WeightSelector',
    'FilterController',
    'NicheGoal',
    'FilterPresetId',
]
