import json
import logging
from typing import Optional

from pydantic import ValidationError

from core.scorer.presets import DEFAULT_GOAL, WEIGHT_PRESETS
from core.scorer.weights import ScoringWeights
from database.repositories.settings import SettingsRepository

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS_KEY = "niche_weights_v2"


class WeightsRepository(SettingsRepository):
    """Stores the weight vector under a versioned key."""

    def load_weights(
        self,
        key: str = DEFAULT_WEIGHTS_KEY,
        default: Optional[ScoringWeights] = None
    ) -> ScoringWeights:
        """Stored weights, or ``default`` (the balanced preset) when missing or corrupt."""
        fallback = default if default is not None else WEIGHT_PRESETS[DEFAULT_GOAL]
        try:
            data = self.get(key)
            if data is None:
                return fallback
            return ScoringWeights.model_validate(data)
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.warning(f"Failed to parse stored weights under '{key}', using defaults: {e}")
            return fallback

    def has_weights(self, key: str = DEFAULT_WEIGHTS_KEY) -> bool:
        return self.get_raw(key) is not None

    def save_weights(self, weights: ScoringWeights, key: str = DEFAULT_WEIGHTS_KEY) -> None:
        self.set(key, weights.model_dump(by_alias=True))
