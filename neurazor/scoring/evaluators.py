"""
Formula Evaluators
neurazor/scoring/evaluators.py

One pure function per game kind: (config, metrics) -> GameResult.

Each evaluator
  1. derives intermediate scores from raw metrics and config parameters,
  2. wraps every top-level competency through `make_competency`,
  3. hands the ordered competencies to `aggregate`.

Intermediate scores stay unclamped until wrapped, so a large time overrun
yields a large negative speed that the competency primitive clamps to 0.
Divisions go through `ratio` and never raise; Infinity/NaN results are
absorbed by clamping.

Common formulas:
    accuracy (binary)  = 100 if correct == total else 0
    accuracy (graded)  = 100 − percent_error
    speed              = 100 − (elapsed / allowed) × multiplier
    penalty accuracy   = raw_accuracy − penalty_count × penalty_weight
    composite          = w_a × A + w_b × B   (w_a + w_b need not be 1)
"""

from typing import Callable, Dict, List, Optional

from neurazor.models.configs import (
    CardFlipConfig,
    CreativeUsesConfig,
    DebateModeConfig,
    FaceNameMatchConfig,
    GameConfigBase,
    MentalMathConfig,
    ScenarioChallengeConfig,
    SignSudokuConfig,
    StroopTestConfig,
)
from neurazor.models.enumerations import AccuracyMode, GameKind, GAME_IDENTITIES
from neurazor.models.metrics import (
    CardFlipMetrics,
    CreativeUsesScores,
    DebateModeScores,
    FaceNameMatchMetrics,
    MentalMathMetrics,
    RawMetrics,
    ScenarioChallengeScores,
    SignSudokuMetrics,
    StroopMetrics,
)
from neurazor.models.results import CompetencyScore, GameResult
from neurazor.scoring.aggregator import aggregate
from neurazor.scoring.competency import make_competency
from neurazor.scoring.utils import ratio

# Mental Math speed is a plain percentage of the time budget
MENTAL_MATH_TIME_MULTIPLIER = 100.0


def _finish(
    game_kind: GameKind,
    competencies: List[CompetencyScore],
    metrics: RawMetrics,
    difficulty: Optional[str],
) -> GameResult:
    game_id, game_name = GAME_IDENTITIES[game_kind]
    return aggregate(
        game_id=game_id,
        game_name=game_name,
        competencies=competencies,
        raw_data=metrics.as_raw_data(),
        difficulty=difficulty,
    )


def blend(score_a: float, weight_a: float, score_b: float, weight_b: float) -> float:
    """Composite of two already-derived scores."""
    return score_a * weight_a + score_b * weight_b


def time_speed(elapsed: float, allowed: float, multiplier: float) -> float:
    """Speed = 100 − (elapsed / allowed) × multiplier, unclamped."""
    return 100 - ratio(elapsed, allowed) * multiplier


# =============================================================================
# ACTION GAMES
# =============================================================================

def evaluate_mental_math(
    config: MentalMathConfig,
    metrics: MentalMathMetrics,
    difficulty: Optional[str] = None,
) -> GameResult:
    weights = config.weights

    if config.accuracy.mode == AccuracyMode.BINARY:
        accuracy = 100.0 if metrics.correct == metrics.total else 0.0
    else:
        accuracy = 100 - metrics.percent_error

    speed = time_speed(metrics.time_taken, metrics.max_time, MENTAL_MATH_TIME_MULTIPLIER)

    quant = blend(
        accuracy, config.quantitative_aptitude.w_accuracy,
        speed, config.quantitative_aptitude.w_speed,
    )

    ops_per_second = ratio(metrics.num_operations, metrics.time_taken)
    stamina = (
        speed * config.mental_stamina.w_speed
        + ops_per_second * config.mental_stamina.ops_multiplier
    )

    competencies = [
        make_competency("accuracy", accuracy, weights.accuracy),
        make_competency("speed", speed, weights.speed),
        make_competency("quantitative_aptitude", quant, weights.quantitative_aptitude),
        make_competency("mental_stamina", stamina, weights.mental_stamina),
    ]
    return _finish(GameKind.MENTAL_MATH, competencies, metrics, difficulty)


def evaluate_stroop(
    config: StroopTestConfig,
    metrics: StroopMetrics,
    difficulty: Optional[str] = None,
) -> GameResult:
    weights = config.weights

    accuracy = ratio(metrics.correct, metrics.total) * 100
    speed = time_speed(metrics.avg_time, metrics.max_time, config.speed.time_multiplier)
    agility = blend(
        accuracy, config.cognitive_agility.w_accuracy,
        speed, config.cognitive_agility.w_speed,
    )

    competencies = [
        make_competency("cognitive_flex", metrics.cognitive_flex_score, weights.cognitive_flex),
        make_competency("cognitive_agility", agility, weights.cognitive_agility),
        make_competency("accuracy", accuracy, weights.accuracy),
        make_competency("speed", speed, weights.speed),
    ]
    return _finish(GameKind.STROOP_TEST, competencies, metrics, difficulty)


def evaluate_sign_sudoku(
    config: SignSudokuConfig,
    metrics: SignSudokuMetrics,
    difficulty: Optional[str] = None,
) -> GameResult:
    weights = config.weights

    accuracy = (
        ratio(metrics.correct, metrics.empty_cells) * 100
        - metrics.incorrect * config.accuracy.incorrect_penalty
    )
    # +1 keeps the per-answer term finite when nothing was answered yet
    speed = (
        ratio(metrics.time_left, metrics.total_time) * config.speed.time_left_weight
        + ratio(config.speed.avg_time_weight, metrics.avg_time_per_correct + 1)
    )

    competencies = [
        make_competency("accuracy", accuracy, weights.accuracy),
        make_competency("reasoning", metrics.reasoning_score, weights.reasoning),
        make_competency("attention_to_detail", metrics.attention_score, weights.attention_to_detail),
        make_competency("speed", speed, weights.speed),
        make_competency("math", metrics.math_score, weights.math),
    ]
    return _finish(GameKind.SIGN_SUDOKU, competencies, metrics, difficulty)


def evaluate_face_name_match(
    config: FaceNameMatchConfig,
    metrics: FaceNameMatchMetrics,
    difficulty: Optional[str] = None,
) -> GameResult:
    weights = config.weights

    accuracy = (
        ratio(metrics.correct + metrics.correct_new, metrics.total_attempts) * 100
        - metrics.false_positives * config.accuracy.false_positive_penalty
    )
    speed = time_speed(metrics.avg_time, metrics.max_time, config.speed.time_multiplier)

    competencies = [
        make_competency("memory", metrics.memory_score, weights.memory),
        make_competency("accuracy", accuracy, weights.accuracy),
        make_competency("speed", speed, weights.speed),
    ]
    return _finish(GameKind.FACE_NAME_MATCH, competencies, metrics, difficulty)


def evaluate_card_flip(
    config: CardFlipConfig,
    metrics: CardFlipMetrics,
    difficulty: Optional[str] = None,
) -> GameResult:
    weights = config.weights

    flip_efficiency = ratio(metrics.min_flips, metrics.actual_flips) * 100
    reasoning = blend(
        flip_efficiency, config.reasoning.w_flips,
        metrics.pattern_rec_score, config.reasoning.w_pattern_recognition,
    )

    competencies = [
        make_competency("pattern_recognition", metrics.pattern_rec_score, weights.pattern_recognition),
        make_competency("reasoning", reasoning, weights.reasoning),
        make_competency("strategy", metrics.strategy_score, weights.strategy),
        make_competency("speed", metrics.speed_score, weights.speed),
    ]
    return _finish(GameKind.CARD_FLIP, competencies, metrics, difficulty)


# =============================================================================
# AI-JUDGED GAMES
# =============================================================================

def _wrap_judged(config: GameConfigBase, scores: RawMetrics) -> List[CompetencyScore]:
    """Wrap each judge-supplied score with its configured weight, in weight order."""
    supplied = scores.as_raw_data()
    return [
        make_competency(name, supplied[name], weight)
        for name, weight in config.weight_map().items()
        if name in supplied
    ]


def evaluate_scenario_challenge(
    config: ScenarioChallengeConfig,
    scores: ScenarioChallengeScores,
    difficulty: Optional[str] = None,
) -> GameResult:
    return _finish(GameKind.SCENARIO_CHALLENGE, _wrap_judged(config, scores), scores, difficulty)


def evaluate_debate_mode(
    config: DebateModeConfig,
    scores: DebateModeScores,
    difficulty: Optional[str] = None,
) -> GameResult:
    return _finish(GameKind.DEBATE_MODE, _wrap_judged(config, scores), scores, difficulty)


def evaluate_creative_uses(
    config: CreativeUsesConfig,
    scores: CreativeUsesScores,
    difficulty: Optional[str] = None,
) -> GameResult:
    weights = config.weights

    creativity = blend(
        scores.originality, config.creativity.w_originality,
        scores.diversity, config.creativity.w_diversity,
    )
    speed = ratio(scores.valid_uses, scores.time_limit) * config.speed.multiplier

    competencies = [
        make_competency("creativity", creativity, weights.creativity),
        make_competency("speed", speed, weights.speed),
    ]
    return _finish(GameKind.CREATIVE_USES, competencies, scores, difficulty)


# =============================================================================
# DISPATCH
# =============================================================================

Evaluator = Callable[..., GameResult]

EVALUATORS: Dict[GameKind, Evaluator] = {
    GameKind.MENTAL_MATH: evaluate_mental_math,
    GameKind.STROOP_TEST: evaluate_stroop,
    GameKind.SIGN_SUDOKU: evaluate_sign_sudoku,
    GameKind.FACE_NAME_MATCH: evaluate_face_name_match,
    GameKind.CARD_FLIP: evaluate_card_flip,
    GameKind.SCENARIO_CHALLENGE: evaluate_scenario_challenge,
    GameKind.DEBATE_MODE: evaluate_debate_mode,
    GameKind.CREATIVE_USES: evaluate_creative_uses,
}

METRICS_MODELS: Dict[GameKind, type] = {
    GameKind.MENTAL_MATH: MentalMathMetrics,
    GameKind.STROOP_TEST: StroopMetrics,
    GameKind.SIGN_SUDOKU: SignSudokuMetrics,
    GameKind.FACE_NAME_MATCH: FaceNameMatchMetrics,
    GameKind.CARD_FLIP: CardFlipMetrics,
    GameKind.SCENARIO_CHALLENGE: ScenarioChallengeScores,
    GameKind.DEBATE_MODE: DebateModeScores,
    GameKind.CREATIVE_USES: CreativeUsesScores,
}


def evaluate(
    config: GameConfigBase,
    metrics: RawMetrics,
    difficulty: Optional[str] = None,
) -> GameResult:
    """
    Score one session with the evaluator matching ``config.game_kind``.

    Raises:
        TypeError: metrics model does not belong to the config's game kind
    """
    game_kind = config.game_kind
    expected = METRICS_MODELS[game_kind]
    if not isinstance(metrics, expected):
        raise TypeError(
            f"{game_kind.value} expects {expected.__name__}, got {type(metrics).__name__}"
        )
    return EVALUATORS[game_kind](config, metrics, difficulty)
