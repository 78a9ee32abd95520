"""
Raw metrics captured for one completed game session, one model per game kind.

No range validation: out-of-range or degenerate values (zero elapsed time,
zero attempts) are absorbed downstream by clamping.
"""

from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RawMetrics(BaseModel):
    """Base for per-game raw metrics."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def as_raw_data(self) -> Dict[str, Any]:
        return self.model_dump()


class MentalMathMetrics(RawMetrics):
    correct: float
    total: float
    percent_error: float
    time_taken: float
    max_time: float
    num_operations: float


class StroopMetrics(RawMetrics):
    correct: float
    total: float
    avg_time: float
    max_time: float
    cognitive_flex_score: float     # Computed by the game from switch-cost trials


class SignSudokuMetrics(RawMetrics):
    correct: float
    incorrect: float
    empty_cells: float
    time_left: float
    total_time: float
    avg_time_per_correct: float
    reasoning_score: float
    attention_score: float
    math_score: float


class FaceNameMatchMetrics(RawMetrics):
    correct: float
    correct_new: float
    false_positives: float
    total_attempts: float
    avg_time: float
    max_time: float
    memory_score: float


class CardFlipMetrics(RawMetrics):
    min_flips: float
    actual_flips: float
    pattern_rec_score: float
    strategy_score: float
    speed_score: float


# ---------------------------------------------------------------------------
# AI-judged kinds: scores supplied by the judging collaborator (0-100)
# ---------------------------------------------------------------------------

class ScenarioChallengeScores(RawMetrics):
    reasoning: float
    decision_making: float
    empathy: float
    creativity: float
    communication: float


class DebateModeScores(RawMetrics):
    reasoning: float
    holistic_analysis: float
    cognitive_agility: float
    communication: float


class CreativeUsesScores(RawMetrics):
    originality: float              # from judge
    diversity: float                # from judge
    valid_uses: float               # from judge
    time_limit: float               # from the session


GameMetrics = Union[
    MentalMathMetrics,
    StroopMetrics,
    SignSudokuMetrics,
    FaceNameMatchMetrics,
    CardFlipMetrics,
    ScenarioChallengeScores,
    DebateModeScores,
    CreativeUsesScores,
]
