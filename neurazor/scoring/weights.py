"""
Weight Checks
neurazor/scoring/weights.py

Weights for a game kind are expected to sum to 1.0 but nothing enforces it;
historical scores must stay reproducible, so weights are never normalised.
`validate_weights` only reports.
"""

import math
from typing import List, Optional

from neurazor.config import settings
from neurazor.models.configs import GameConfigBase
from neurazor.models.versions import WeightWarning
from neurazor.scoring.utils import exact_sum


def validate_weights(
    config: GameConfigBase,
    tolerance: Optional[float] = None,
) -> List[WeightWarning]:
    """
    Report weight sets that do not look normalised.

    Args:
        config: Any ScoringConfig variant
        tolerance: Allowed |Σw − 1|, defaults to settings.WEIGHT_SUM_TOLERANCE

    Returns:
        Warnings (empty when the weights sum to 1.0 and none is negative)
    """
    tol = settings.WEIGHT_SUM_TOLERANCE if tolerance is None else tolerance
    weights = config.weight_map()
    total = exact_sum(weights.values())
    warnings: List[WeightWarning] = []

    if math.isnan(total) or abs(total - 1.0) > tol:
        warnings.append(WeightWarning(
            game_kind=config.game_kind,
            total=total,
            message=f"Weights sum to {total:.4f}, expected 1.0",
        ))

    for name, weight in weights.items():
        if math.isnan(weight):
            warnings.append(WeightWarning(
                game_kind=config.game_kind,
                total=total,
                message=f"Weight for {name} is not a number",
            ))
        elif weight < 0:
            warnings.append(WeightWarning(
                game_kind=config.game_kind,
                total=total,
                message=f"Weight for {name} is negative ({weight})",
            ))

    return warnings
