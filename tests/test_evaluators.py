# tests/test_evaluators.py
"""
Formula Evaluator Tests

Reference sessions for every game kind, scored under the built-in default
configs, plus degenerate inputs (zero time budgets, zero attempts).
"""

import math

import pytest

from neurazor.models.enumerations import AccuracyMode, GameKind
from neurazor.models.metrics import MentalMathMetrics, StroopMetrics
from neurazor.scoring.defaults import default_config
from neurazor.scoring.evaluators import (
    EVALUATORS,
    METRICS_MODELS,
    blend,
    evaluate,
    evaluate_card_flip,
    evaluate_creative_uses,
    evaluate_debate_mode,
    evaluate_face_name_match,
    evaluate_mental_math,
    evaluate_scenario_challenge,
    evaluate_sign_sudoku,
    evaluate_stroop,
    time_speed,
)


def scores_by_name(result):
    return {c.name: round(c.score, 2) for c in result.competencies}


# =============================================================================
# HELPERS
# =============================================================================

class TestHelpers:

    def test_blend(self):
        assert blend(92, 0.6, 50, 0.4) == pytest.approx(75.2)

    def test_time_speed_percentage(self):
        assert time_speed(30, 60, 100) == pytest.approx(50.0)

    def test_time_speed_overrun_is_negative(self):
        """Unclamped until wrapped as a competency."""
        assert time_speed(120, 60, 100) == pytest.approx(-100.0)

    def test_time_speed_zero_budget(self):
        assert time_speed(10, 0, 100) == -math.inf

    def test_dispatch_tables_cover_every_kind(self):
        assert set(EVALUATORS) == set(GameKind)
        assert set(METRICS_MODELS) == set(GameKind)


# =============================================================================
# MENTAL MATH
# =============================================================================

class TestMentalMath:

    def test_reference_session_graded(self, mental_math_metrics):
        """accuracy 92, speed 27.27, quant 66.11, stamina 19.89 -> 58.53"""
        result = evaluate_mental_math(default_config(GameKind.MENTAL_MATH), mental_math_metrics)

        assert scores_by_name(result) == {
            "accuracy": 92.0,
            "speed": 27.27,
            "quantitative_aptitude": 66.11,
            "mental_stamina": 19.89,
        }
        assert round(result.final_score, 2) == 58.53

    def test_competency_order(self, mental_math_metrics):
        result = evaluate_mental_math(default_config(GameKind.MENTAL_MATH), mental_math_metrics)
        assert [c.name for c in result.competencies] == [
            "accuracy", "speed", "quantitative_aptitude", "mental_stamina",
        ]

    def test_binary_accuracy_requires_all_correct(self, mental_math_metrics):
        config = default_config(GameKind.MENTAL_MATH)
        config.accuracy.mode = AccuracyMode.BINARY

        result = evaluate_mental_math(config, mental_math_metrics)

        assert result.competency("accuracy").score == 0.0
        assert round(result.final_score, 2) == 12.53

    def test_binary_accuracy_all_correct(self, mental_math_metrics):
        config = default_config(GameKind.MENTAL_MATH)
        config.accuracy.mode = AccuracyMode.BINARY
        perfect = mental_math_metrics.model_copy(update={"correct": 5})

        result = evaluate_mental_math(config, perfect)

        assert result.competency("accuracy").score == 100.0

    def test_graded_accuracy(self, mental_math_metrics):
        metrics = mental_math_metrics.model_copy(update={"percent_error": 12.5})
        result = evaluate_mental_math(default_config(GameKind.MENTAL_MATH), metrics)
        assert result.competency("accuracy").score == 87.5

    def test_zero_max_time_yields_finite_score(self, mental_math_metrics):
        metrics = mental_math_metrics.model_copy(update={"max_time": 0})

        result = evaluate_mental_math(default_config(GameKind.MENTAL_MATH), metrics)

        assert result.competency("speed").score == 0.0
        assert result.competency("quantitative_aptitude").score == 0.0
        assert result.competency("mental_stamina").score == 0.0
        assert round(result.final_score, 2) == 32.2

    def test_zero_time_taken_caps_stamina(self, mental_math_metrics):
        metrics = mental_math_metrics.model_copy(update={"time_taken": 0})

        result = evaluate_mental_math(default_config(GameKind.MENTAL_MATH), metrics)

        assert result.competency("speed").score == 100.0
        assert result.competency("mental_stamina").score == 100.0
        assert 0 <= result.final_score <= 100

    def test_identity_and_raw_data(self, mental_math_metrics):
        result = evaluate_mental_math(
            default_config(GameKind.MENTAL_MATH), mental_math_metrics, difficulty="hard"
        )
        assert result.game_id == "mental-math"
        assert result.game_name == "Mental Math Sprint"
        assert result.difficulty == "hard"
        assert result.raw_data["percent_error"] == 8
        assert result.version_name is None


# =============================================================================
# OTHER ACTION GAMES
# =============================================================================

class TestStroop:

    def test_reference_session(self, stroop_metrics):
        result = evaluate_stroop(default_config(GameKind.STROOP_TEST), stroop_metrics)

        assert scores_by_name(result) == {
            "cognitive_flex": 70.0,
            "cognitive_agility": 78.0,
            "accuracy": 90.0,
            "speed": 60.0,
        }
        assert round(result.final_score, 2) == 75.9

    def test_zero_trials(self):
        metrics = StroopMetrics(correct=0, total=0, avg_time=0, max_time=0, cognitive_flex_score=50)

        result = evaluate_stroop(default_config(GameKind.STROOP_TEST), metrics)

        assert result.competency("accuracy").score == 0.0
        assert result.competency("cognitive_agility").score == 0.0
        assert math.isfinite(result.final_score)


class TestSignSudoku:

    def test_reference_session(self, sign_sudoku_metrics):
        result = evaluate_sign_sudoku(default_config(GameKind.SIGN_SUDOKU), sign_sudoku_metrics)

        assert scores_by_name(result) == {
            "accuracy": 70.0,
            "reasoning": 80.0,
            "attention_to_detail": 75.0,
            "speed": 21.67,
            "math": 90.0,
        }
        assert round(result.final_score, 2) == 68.25

    def test_incorrect_penalty_floors_at_zero(self, sign_sudoku_metrics):
        metrics = sign_sudoku_metrics.model_copy(update={"correct": 0, "incorrect": 5})
        result = evaluate_sign_sudoku(default_config(GameKind.SIGN_SUDOKU), metrics)
        assert result.competency("accuracy").score == 0.0


class TestFaceNameMatch:

    def test_reference_session(self, face_name_metrics):
        result = evaluate_face_name_match(default_config(GameKind.FACE_NAME_MATCH), face_name_metrics)

        assert scores_by_name(result) == {"memory": 85.0, "accuracy": 65.0, "speed": 60.0}
        assert round(result.final_score, 2) == 74.0


class TestCardFlip:

    def test_reference_session(self, card_flip_metrics):
        result = evaluate_card_flip(default_config(GameKind.CARD_FLIP), card_flip_metrics)

        assert scores_by_name(result) == {
            "pattern_recognition": 80.0,
            "reasoning": 80.0,
            "strategy": 70.0,
            "speed": 60.0,
        }
        assert round(result.final_score, 2) == 75.0

    def test_no_flips(self, card_flip_metrics):
        metrics = card_flip_metrics.model_copy(update={"actual_flips": 0})
        result = evaluate_card_flip(default_config(GameKind.CARD_FLIP), metrics)
        assert result.competency("reasoning").score == 100.0


# =============================================================================
# AI-JUDGED GAMES
# =============================================================================

class TestJudgedGames:

    def test_scenario_wraps_scores_verbatim(self, scenario_scores):
        result = evaluate_scenario_challenge(default_config(GameKind.SCENARIO_CHALLENGE), scenario_scores)

        assert [c.name for c in result.competencies] == [
            "reasoning", "decision_making", "empathy", "creativity", "communication",
        ]
        assert result.competency("empathy").score == 90.0
        assert round(result.final_score, 2) == 75.75

    def test_debate(self, debate_scores):
        result = evaluate_debate_mode(default_config(GameKind.DEBATE_MODE), debate_scores)
        assert round(result.final_score, 2) == 73.5
        assert result.game_id == "debate-mode"

    def test_creative_uses(self, creative_uses_scores):
        result = evaluate_creative_uses(default_config(GameKind.CREATIVE_USES), creative_uses_scores)

        assert scores_by_name(result) == {"creativity": 72.0, "speed": 1.0}
        assert round(result.final_score, 2) == 50.7

    def test_creative_uses_zero_time_limit(self, creative_uses_scores):
        scores = creative_uses_scores.model_copy(update={"time_limit": 0})
        result = evaluate_creative_uses(default_config(GameKind.CREATIVE_USES), scores)
        assert result.competency("speed").score == 100.0

    def test_judge_scores_are_clamped(self, scenario_scores):
        scores = scenario_scores.model_copy(update={"reasoning": 140, "empathy": -5})
        result = evaluate_scenario_challenge(default_config(GameKind.SCENARIO_CHALLENGE), scores)
        assert result.competency("reasoning").score == 100.0
        assert result.competency("empathy").score == 0.0


# =============================================================================
# DISPATCH
# =============================================================================

class TestEvaluate:

    def test_dispatches_on_config_kind(self, mental_math_metrics):
        result = evaluate(default_config(GameKind.MENTAL_MATH), mental_math_metrics)
        assert round(result.final_score, 2) == 58.53

    def test_mismatched_metrics_rejected(self, stroop_metrics):
        with pytest.raises(TypeError, match="MentalMathMetrics"):
            evaluate(default_config(GameKind.MENTAL_MATH), stroop_metrics)

    def test_custom_weights_not_normalised(self, mental_math_metrics):
        config = default_config(GameKind.MENTAL_MATH)
        config.weights.accuracy = 1.0
        config.weights.speed = 0.0
        config.weights.quantitative_aptitude = 0.0
        config.weights.mental_stamina = 0.0

        result = evaluate(config, mental_math_metrics)

        assert result.final_score == pytest.approx(92.0)

    def test_weights_over_one_clamp_final(self, mental_math_metrics):
        config = default_config(GameKind.MENTAL_MATH)
        config.weights.accuracy = 2.0

        result = evaluate(config, mental_math_metrics)

        assert result.final_score == 100.0

    def test_metrics_accept_camel_case(self, mental_math_payload):
        metrics = MentalMathMetrics.model_validate(mental_math_payload)
        assert metrics.percent_error == 8
