#!/usr/bin/env python3
"""
Score Normalization - Min-max rescaling of raw scores to 0-100.

The result is a relative rank inside one computed batch; it is not comparable
across batches or weight settings.
"""

from typing import List, Sequence

import numpy as np

DEGENERATE_SCORE = 50


def min_max_to_percent(raw_scores: Sequence[float]) -> List[int]:
    """
    Rescale raw scores to integers in [0, 100].

    - max > min: round_half_up((s - min) / (max - min) * 100)
    - all equal: every score is 50

    Args:
        raw_scores: Raw weighted scores of the filtered batch

    Returns:
        Normalized scores in input order (empty for empty input)
    """
    if len(raw_scores) == 0:
        return []

    scores = np.asarray(raw_scores, dtype=float)
    lo, hi = scores.min(), scores.max()
    if not hi > lo:
        return [DEGENERATE_SCORE] * len(scores)

    scaled = (scores - lo) / (hi - lo) * 100.0
    rounded = np.clip(np.floor(scaled + 0.5), 0, 100)
    return [int(s) for s in rounded]
