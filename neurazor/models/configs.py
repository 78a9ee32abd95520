"""
Scoring configuration models, one statically shaped variant per game kind.

ScoringConfig is a discriminated union keyed by ``game_kind``. Documents
crossing the persistence boundary use camelCase keys (``quantitativeAptitude``,
``wAccuracy``, ``aiPrompt``); both camelCase and snake_case are accepted on
input.
"""

from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic.alias_generators import to_camel

from neurazor.models.enumerations import AccuracyMode, GameKind


class ConfigModel(BaseModel):
    """Base for every node of a configuration tree."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )


class CompetencyWeights(ConfigModel):
    """
    Competency name -> weight.

    Extra numeric keys are kept so that historical documents carrying
    competencies unknown to the current schema still diff correctly.
    """

    model_config = ConfigDict(extra="allow")

    @model_validator(mode="after")
    def coerce_extra_weights(self):
        """Unknown competencies still carry numeric weights."""
        extra = self.__pydantic_extra__ or {}
        for name, weight in extra.items():
            extra[name] = float(weight)
        return self

    def as_dict(self) -> Dict[str, float]:
        return {name: float(weight) for name, weight in self.model_dump().items()}


# =============================================================================
# FORMULA PARAMETER GROUPS
# =============================================================================

class AccuracySettings(ConfigModel):
    mode: AccuracyMode = Field(..., description="binary: all-or-nothing, graded: 100 - percent error")


class BlendSettings(ConfigModel):
    """Composite = accuracy * w_accuracy + speed * w_speed (weights need not sum to 1)."""

    w_accuracy: float
    w_speed: float


class StaminaSettings(ConfigModel):
    w_speed: float
    ops_multiplier: float


class TimeMultiplierSettings(ConfigModel):
    time_multiplier: float


class IncorrectPenaltySettings(ConfigModel):
    incorrect_penalty: float


class SudokuSpeedSettings(ConfigModel):
    time_left_weight: float
    avg_time_weight: float


class FalsePositivePenaltySettings(ConfigModel):
    false_positive_penalty: float


class FlipReasoningSettings(ConfigModel):
    w_flips: float
    w_pattern_recognition: float


class CreativityBlendSettings(ConfigModel):
    w_originality: float
    w_diversity: float


class RateMultiplierSettings(ConfigModel):
    multiplier: float


# =============================================================================
# WEIGHTS PER GAME KIND
# =============================================================================

class MentalMathWeights(CompetencyWeights):
    accuracy: float
    speed: float
    quantitative_aptitude: float
    mental_stamina: float


class StroopWeights(CompetencyWeights):
    cognitive_flex: float
    cognitive_agility: float
    accuracy: float
    speed: float


class SignSudokuWeights(CompetencyWeights):
    accuracy: float
    reasoning: float
    attention_to_detail: float
    speed: float
    math: float


class FaceNameMatchWeights(CompetencyWeights):
    memory: float
    accuracy: float
    speed: float


class CardFlipWeights(CompetencyWeights):
    pattern_recognition: float
    reasoning: float
    strategy: float
    speed: float


class ScenarioChallengeWeights(CompetencyWeights):
    reasoning: float
    decision_making: float
    empathy: float
    creativity: float
    communication: float


class DebateModeWeights(CompetencyWeights):
    reasoning: float
    holistic_analysis: float
    cognitive_agility: float
    communication: float


class CreativeUsesWeights(CompetencyWeights):
    creativity: float
    speed: float


# =============================================================================
# GAME CONFIGS
# =============================================================================

class GameConfigBase(ConfigModel):
    """Shared behaviour of every ScoringConfig variant."""

    weights: CompetencyWeights

    def weight_map(self) -> Dict[str, float]:
        """Competency name -> configured weight."""
        return self.weights.as_dict()

    def to_document(self) -> Dict[str, Any]:
        """Tree-shaped document as stored by the persistence collaborator."""
        return self.model_dump(by_alias=True, mode="json")


class MentalMathConfig(GameConfigBase):
    game_kind: Literal[GameKind.MENTAL_MATH] = Field(GameKind.MENTAL_MATH, alias="game_kind")
    weights: MentalMathWeights
    accuracy: AccuracySettings
    quantitative_aptitude: BlendSettings
    mental_stamina: StaminaSettings


class StroopTestConfig(GameConfigBase):
    game_kind: Literal[GameKind.STROOP_TEST] = Field(GameKind.STROOP_TEST, alias="game_kind")
    weights: StroopWeights
    speed: TimeMultiplierSettings
    cognitive_agility: BlendSettings


class SignSudokuConfig(GameConfigBase):
    game_kind: Literal[GameKind.SIGN_SUDOKU] = Field(GameKind.SIGN_SUDOKU, alias="game_kind")
    weights: SignSudokuWeights
    accuracy: IncorrectPenaltySettings
    speed: SudokuSpeedSettings


class FaceNameMatchConfig(GameConfigBase):
    game_kind: Literal[GameKind.FACE_NAME_MATCH] = Field(GameKind.FACE_NAME_MATCH, alias="game_kind")
    weights: FaceNameMatchWeights
    accuracy: FalsePositivePenaltySettings
    speed: TimeMultiplierSettings


class CardFlipConfig(GameConfigBase):
    game_kind: Literal[GameKind.CARD_FLIP] = Field(GameKind.CARD_FLIP, alias="game_kind")
    weights: CardFlipWeights
    reasoning: FlipReasoningSettings


class ScenarioChallengeConfig(GameConfigBase):
    game_kind: Literal[GameKind.SCENARIO_CHALLENGE] = Field(GameKind.SCENARIO_CHALLENGE, alias="game_kind")
    weights: ScenarioChallengeWeights
    ai_prompt: str = ""


class DebateModeConfig(GameConfigBase):
    game_kind: Literal[GameKind.DEBATE_MODE] = Field(GameKind.DEBATE_MODE, alias="game_kind")
    weights: DebateModeWeights
    ai_prompt: str = ""


class CreativeUsesConfig(GameConfigBase):
    game_kind: Literal[GameKind.CREATIVE_USES] = Field(GameKind.CREATIVE_USES, alias="game_kind")
    weights: CreativeUsesWeights
    creativity: CreativityBlendSettings
    speed: RateMultiplierSettings
    ai_prompt: str = ""


ScoringConfig = Annotated[
    Union[
        MentalMathConfig,
        StroopTestConfig,
        SignSudokuConfig,
        FaceNameMatchConfig,
        CardFlipConfig,
        ScenarioChallengeConfig,
        DebateModeConfig,
        CreativeUsesConfig,
    ],
    Field(discriminator="game_kind"),
]

_scoring_config_adapter: TypeAdapter = TypeAdapter(ScoringConfig)


def parse_scoring_config(
    document: Mapping[str, Any],
    game_kind: Optional[GameKind] = None,
) -> GameConfigBase:
    """
    Validate a raw configuration tree into its statically shaped variant.

    Args:
        document: Config document (camelCase or snake_case keys)
        game_kind: Kind to assume when the document does not carry one

    Returns:
        The matching ScoringConfig variant
    """
    data = dict(document)
    if "game_kind" not in data and "gameKind" in data:
        data["game_kind"] = data.pop("gameKind")
    if "game_kind" not in data:
        if game_kind is None:
            raise ValueError("Config document has no game_kind and none was given")
        data["game_kind"] = game_kind
    data["game_kind"] = GameKind(data["game_kind"])
    return _scoring_config_adapter.validate_python(data)
