"""
Boundary Adapters
neurazor/scoring/transformers.py

In-core results keep competencies as an ordered sequence. Across the
persistence/judging boundary they travel as a mapping

    {competency_name: {"raw": score, "weight": weight, "weighted": weighted}}

Weighted values read from the wire are ignored and recomputed.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from neurazor.models.enumerations import GameKind, GAME_IDENTITIES
from neurazor.models.results import CompetencyScore, GameResult
from neurazor.scoring.aggregator import aggregate
from neurazor.scoring.utils import clamp


def display_name(identifier: Union[GameKind, str]) -> str:
    """
    Human label for a game kind or competency name.

    >>> display_name("quantitative_aptitude")
    'Quantitative Aptitude'
    >>> display_name(GameKind.FACE_NAME_MATCH)
    'Face-Name Match'
    """
    try:
        return GAME_IDENTITIES[GameKind(identifier)][1]
    except ValueError:
        pass
    return " ".join(word.capitalize() for word in str(identifier).replace("-", "_").split("_") if word)


def competencies_to_wire(competencies: Iterable[CompetencyScore]) -> Dict[str, Dict[str, float]]:
    return {
        c.name: {"raw": c.score, "weight": c.weight, "weighted": c.weighted_score}
        for c in competencies
    }


def competencies_from_wire(mapping: Mapping[str, Mapping[str, Any]]) -> List[CompetencyScore]:
    """Mapping order becomes display order. Missing numbers default to 0."""
    return [
        CompetencyScore(
            name=name,
            score=float(data.get("raw") or 0),
            weight=float(data.get("weight") or 0),
        )
        for name, data in mapping.items()
    ]


def result_to_wire(result: GameResult) -> Dict[str, Any]:
    """Shape sent to persistence: session metadata plus a ``scores`` block."""
    return {
        "session_id": result.session_id,
        "game_id": result.game_id,
        "game_name": result.game_name,
        "difficulty": result.difficulty,
        "created_at": result.timestamp.isoformat(),
        "version_used": result.version_name,
        "scores": {
            "final_score": result.final_score,
            "competencies": competencies_to_wire(result.competencies),
            "raw_stats": dict(result.raw_data),
        },
    }


def result_from_wire(
    payload: Mapping[str, Any],
    game_kind: GameKind,
    game_name: Optional[str] = None,
) -> GameResult:
    """
    Rebuild a GameResult from a stored session payload.

    Accepts ``scores`` or ``final_scores`` blocks. The final score is taken
    as stored so that historical results are reproduced exactly, not
    re-aggregated.
    """
    game_kind = GameKind(game_kind)
    game_id, default_name = GAME_IDENTITIES[game_kind]
    scores = payload.get("scores") or payload.get("final_scores") or {}

    timestamp = payload.get("created_at") or payload.get("timestamp")
    if isinstance(timestamp, str):
        timestamp = datetime.fromisoformat(timestamp)
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)

    fields: Dict[str, Any] = {
        "game_id": payload.get("game_id") or game_id,
        "game_name": game_name or payload.get("game_name") or default_name,
        "difficulty": payload.get("difficulty"),
        "timestamp": timestamp,
        "final_score": clamp(float(scores.get("final_score") or 0)),
        "competencies": competencies_from_wire(scores.get("competencies") or {}),
        "raw_data": dict(scores.get("raw_stats") or {}),
        "version_name": payload.get("version_used"),
    }
    if payload.get("session_id"):
        fields["session_id"] = str(payload["session_id"])
    return GameResult(**fields)


def reaggregate_from_wire(
    payload: Mapping[str, Any],
    game_kind: GameKind,
) -> GameResult:
    """Recompute the final score of a stored session from its competencies."""
    game_kind = GameKind(game_kind)
    game_id, game_name = GAME_IDENTITIES[game_kind]
    scores = payload.get("scores") or payload.get("final_scores") or {}
    return aggregate(
        game_id=game_id,
        game_name=game_name,
        competencies=competencies_from_wire(scores.get("competencies") or {}),
        raw_data=dict(scores.get("raw_stats") or {}),
        difficulty=payload.get("difficulty"),
        version_name=payload.get("version_used"),
    )
