# neurazor/scoring/aggregator.py
"""
Score Aggregator
-----------------
Combines weighted competencies into the final score of a game session.

Formula:
    final_score = clamp(Σ weighted_score_i, 0, 100)

The sum is correctly rounded (math.fsum), so the result does not depend on
the display order of the competencies. Weights are not normalised.
"""
import structlog
from typing import Any, Dict, Iterable, Optional

from neurazor.models.results import CompetencyScore, GameResult
from neurazor.scoring.utils import clamp, exact_sum

logger = structlog.get_logger(__name__)


def aggregate(
    game_id: str,
    game_name: str,
    competencies: Iterable[CompetencyScore],
    raw_data: Dict[str, Any],
    difficulty: Optional[str] = None,
    version_name: Optional[str] = None,
) -> GameResult:
    """
    Args:
        game_id: Game identifier, e.g. 'mental-math'.
        game_name: Display name.
        competencies: Competencies in display order.
        raw_data: Raw metrics of the session, kept verbatim on the result.
        difficulty: Optional difficulty label.
        version_name: Scoring version active when the session was scored.

    Returns:
        GameResult with a fresh session id and a UTC timestamp.
    """
    competencies = tuple(competencies)
    total = exact_sum(c.weighted_score for c in competencies)
    final_score = clamp(total)

    logger.info(
        "score_aggregated",
        game_id=game_id,
        difficulty=difficulty,
        version_name=version_name,
        weighted_scores={c.name: c.weighted_score for c in competencies},
        weighted_total=total,
        final_score=final_score,
    )

    return GameResult(
        game_id=game_id,
        game_name=game_name,
        difficulty=difficulty,
        final_score=final_score,
        competencies=competencies,
        raw_data=dict(raw_data),
        version_name=version_name,
    )
