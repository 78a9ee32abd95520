"""
Judging Collaborator Contract
neurazor/services/judging.py

Free-text game kinds are scored by an external judge that returns one 0-100
score per competency. Prompt execution itself lives outside this package;
the engine only consumes the judge's output as metrics.
"""

from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

from pydantic.alias_generators import to_snake

from neurazor.models.enumerations import AI_JUDGED_KINDS, GameKind
from neurazor.models.metrics import RawMetrics
from neurazor.scoring.evaluators import METRICS_MODELS


@runtime_checkable
class Judge(Protocol):
    """External judge for free-text game kinds."""

    def judge(self, game_kind: GameKind, response_payload: Mapping[str, Any]) -> Dict[str, float]:
        """Competency name -> score (0-100). May raise; errors propagate unmodified."""
        ...


def judged_metrics(
    game_kind: GameKind,
    judge_scores: Mapping[str, float],
    extra_metrics: Optional[Mapping[str, float]] = None,
) -> RawMetrics:
    """
    Build the metrics model of a judged game kind from judge output.

    Judges answer in camelCase (``decisionMaking``) or snake_case; both are
    accepted. ``extra_metrics`` carries session values the judge does not
    produce, e.g. ``time_limit`` for Creative Uses.
    """
    game_kind = GameKind(game_kind)
    if game_kind not in AI_JUDGED_KINDS:
        raise ValueError(f"{game_kind.value} is not an AI-judged game kind")

    values = {to_snake(name): score for name, score in judge_scores.items()}
    values.update({to_snake(name): v for name, v in (extra_metrics or {}).items()})
    return METRICS_MODELS[game_kind].model_validate(values)
