"""
Scoring Service — Session Scoring Orchestrator
neurazor/services/scoring_service.py

Scores one completed game session end to end:

  1. Load the current config of the game kind (ConfigurationStore)
  2. For judged kinds, ask the Judge for per-competency scores
  3. Run the formula evaluator → GameResult
  4. Tag the result with the active scoring version (if any)
  5. Record the result with the persistence collaborator

Collaborator failures (judge, persistence) propagate unmodified; nothing is
retried and nothing is partially committed by this service.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from neurazor.core.exceptions import NoActiveVersionException
from neurazor.models.enumerations import AI_JUDGED_KINDS, GameKind
from neurazor.models.metrics import RawMetrics
from neurazor.models.results import GameResult
from neurazor.repositories.base import ScoringPersistence
from neurazor.scoring.comparison import history_summary
from neurazor.scoring.config_store import ConfigurationStore
from neurazor.scoring.evaluators import METRICS_MODELS, evaluate
from neurazor.scoring.version_registry import VersionRegistry
from neurazor.services.judging import Judge, judged_metrics

logger = logging.getLogger(__name__)


class ScoringService:
    """
    Orchestrates scoring of completed sessions.

    Reads from:
      - ConfigurationStore (current editable config per game kind)
      - VersionRegistry (active version name for tagging)
      - Judge (free-text game kinds only)

    Writes to:
      - ScoringPersistence.save_result
    """

    def __init__(
        self,
        store: ConfigurationStore,
        registry: VersionRegistry,
        persistence: ScoringPersistence,
        judge: Optional[Judge] = None,
    ):
        self.store = store
        self.registry = registry
        self.persistence = persistence
        self.judge = judge

    def score_game(
        self,
        game_kind: GameKind,
        metrics: Union[RawMetrics, Mapping[str, Any]],
        difficulty: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> GameResult:
        """Score an action game session from its raw metrics."""
        game_kind = GameKind(game_kind)
        if not isinstance(metrics, RawMetrics):
            metrics = METRICS_MODELS[game_kind].model_validate(metrics)

        config = self.store.load(game_kind)
        result = evaluate(config, metrics, difficulty).with_version(self._active_version_name(game_kind))
        self.persistence.save_result(game_kind, result, user_id)

        logger.info(
            f"Scored {game_kind.value} session {result.session_id}: "
            f"{result.final_score:.2f} (version {result.version_name or 'default'})"
        )
        return result

    def score_judged_game(
        self,
        game_kind: GameKind,
        response_payload: Mapping[str, Any],
        extra_metrics: Optional[Mapping[str, float]] = None,
        difficulty: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> GameResult:
        """
        Score a free-text session: judge the response, then evaluate.

        Args:
            game_kind: One of the AI-judged game kinds
            response_payload: The user's response, passed to the judge as is
            extra_metrics: Session values not produced by the judge (e.g. time_limit)
        """
        game_kind = GameKind(game_kind)
        if game_kind not in AI_JUDGED_KINDS:
            raise ValueError(f"{game_kind.value} is not an AI-judged game kind")
        if self.judge is None:
            raise RuntimeError("ScoringService has no Judge configured")

        judge_scores = self.judge.judge(game_kind, response_payload)
        metrics = judged_metrics(game_kind, judge_scores, extra_metrics)
        return self.score_game(game_kind, metrics, difficulty, user_id)

    def history(self, game_kind: GameKind, user_id: Optional[str] = None) -> List[GameResult]:
        return self.persistence.fetch_result_history(GameKind(game_kind), user_id)

    def history_stats(self, game_kind: GameKind, user_id: Optional[str] = None) -> Dict[str, Any]:
        summary = history_summary(self.history(game_kind, user_id))
        return summary.model_dump() if summary else {}

    def _active_version_name(self, game_kind: GameKind) -> Optional[str]:
        try:
            return self.registry.get_active(game_kind).version_name
        except NoActiveVersionException:
            return None
