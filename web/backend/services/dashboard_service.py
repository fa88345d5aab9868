#!/usr/bin/env python3
"""
Dashboard service - holds the live candidate batch, weights and filters.

Every read recomputes the ranking from the current (batch, filters, weights)
tuple; RankingService skips the work when none of them changed. Scans are
tagged with a generation number so a slow, superseded scan can never replace
a newer batch. A failed scan leaves the previous batch untouched.
"""

import logging
import threading
from typing import Any, Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from core.config_loader import AppConfig
from core.exceptions import NicheScanError, UnknownFactorError, UnknownPresetError
from core.llm.interfaces import NicheSource
from core.niches.models import Niche
from core.niches.normalizer import normalize_niches
from core.scorer.models import ScoredNiche
from core.scorer.presets import FilterController, FilterEdit, WeightSelector
from core.scorer.service import RankingService
from core.scorer.weights import ScoringWeights
from database.database import db_session_scope
from database.repositories.weights import WeightsRepository
from ..exceptions import (
    InvalidPresetException,
    NicheNotFoundException,
    ScanFailedException,
)

logger = logging.getLogger(__name__)


class DashboardService:
    """Service for the ranked niche leaderboard and its controls."""

    def __init__(
        self,
        config: AppConfig,
        source: Optional[NicheSource] = None,
        session_factory: Optional[sessionmaker] = None
    ):
        self.config = config
        self._source = source
        self._session_factory = session_factory
        self._lock = threading.Lock()

        self._niches: List[Niche] = []
        self._scan_generation = 0
        self.last_error: Optional[str] = None

        self.ranking = RankingService(trend_scale=config.scoring.trend_scale)
        self.weights = WeightSelector(config.scoring.default_goal)
        self.filters = FilterController(config.scoring.default_filter_preset)

        self._load_persisted_weights()

    # Batch

    @property
    def has_batch(self) -> bool:
        return bool(self._niches)

    @property
    def candidate_count(self) -> int:
        return len(self._niches)

    def scan(self, count: Optional[int] = None) -> List[ScoredNiche]:
        """
        Fetch a fresh batch from the niche source and rank it.

        Raises:
            ScanFailedException: If the source failed; the previous batch is kept.
        """
        if self._source is None:
            raise ScanFailedException("No niche source configured")

        with self._lock:
            self._scan_generation += 1
            generation = self._scan_generation

        try:
            niches = self._source.fetch_niches(count or self.config.llm.niche_count)
        except NicheScanError as e:
            with self._lock:
                if generation == self._scan_generation:
                    self.last_error = str(e)
            logger.error(f"Scan {generation} failed: {e}")
            raise ScanFailedException(str(e)) from e

        with self._lock:
            if generation != self._scan_generation:
                logger.info(f"Discarding stale scan {generation} (latest is {self._scan_generation})")
            else:
                self._niches = niches
                self.last_error = None
                logger.info(f"Scan {generation} committed {len(niches)} niches")

        return self.ranked()

    def load_batch(self, raws: Any) -> List[ScoredNiche]:
        """Replace the batch with caller-supplied raw records."""
        niches = normalize_niches(raws)
        with self._lock:
            # Any scan still in flight is now stale
            self._scan_generation += 1
            self._niches = niches
            self.last_error = None
        return self.ranked()

    def ranked(self) -> List[ScoredNiche]:
        with self._lock:
            return self.ranking.rank(self._niches, self.filters.filters, self.weights.weights)

    def find(self, name: str) -> ScoredNiche:
        for scored in self.ranked():
            if scored.name == name:
                return scored
        raise NicheNotFoundException(f"Niche '{name}' is not in the current ranking")

    # Weights

    def select_goal(self, goal: str) -> ScoringWeights:
        with self._lock:
            weights = self._guard(self.weights.select, goal)
            self._persist_weights(weights)
        return weights

    def set_weight(self, factor: str, value: float) -> ScoringWeights:
        with self._lock:
            weights = self._guard(self.weights.set_weight, factor, value)
            self._persist_weights(weights)
        return weights

    def replace_weights(self, weights: ScoringWeights) -> ScoringWeights:
        with self._lock:
            weights = self.weights.replace(weights)
            self._persist_weights(weights)
        return weights

    # Filters

    def select_filter_preset(self, preset: str):
        with self._lock:
            return self._guard(self.filters.select, preset)

    def reset_filters(self):
        with self._lock:
            return self.filters.reset()

    def set_filter_bound(self, category: str, bound: str, value: float) -> FilterEdit:
        with self._lock:
            return self._guard(self.filters.set_bound, category, bound, value)

    # Private methods

    @staticmethod
    def _guard(fn: Callable, *args):
        try:
            return fn(*args)
        except (UnknownPresetError, UnknownFactorError) as e:
            raise InvalidPresetException(str(e)) from e

    def _load_persisted_weights(self) -> None:
        if self._session_factory is None:
            return
        key = self.config.storage.weights_key
        try:
            with db_session_scope(self._session_factory) as session:
                repo = WeightsRepository(session)
                if repo.has_weights(key):
                    self.weights.replace(repo.load_weights(key, default=self.weights.weights))
                    logger.info(f"Loaded stored weights ({self.weights.goal.value})")
        except SQLAlchemyError as e:
            logger.warning(f"Could not load weights from storage: {e}")

    def _persist_weights(self, weights: ScoringWeights) -> None:
        """Called with the lock held so stored weights follow the order edits were applied."""
        if self._session_factory is None:
            return
        try:
            with db_session_scope(self._session_factory) as session:
                WeightsRepository(session).save_weights(weights, self.config.storage.weights_key)
        except SQLAlchemyError as e:
            logger.error(f"Failed to save weights: {e}")
