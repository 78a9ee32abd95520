"""
Built-in Scoring Defaults
neurazor/scoring/defaults.py

Default configuration per game kind. Used by the configuration store until a
scoring version has been saved, and by `reset`.

Weights per kind sum to 1.0:
    mental_math_sprint   accuracy .35  speed .25  quantitative_aptitude .25  mental_stamina .15
    stroop_test          cognitive_flex .30  cognitive_agility .30  accuracy .25  speed .15
    sign_sudoku          accuracy .30  reasoning .25  attention_to_detail .20  speed .15  math .10
    face_name_match      memory .50  accuracy .30  speed .20
    card_flip_challenge  pattern_recognition .35  reasoning .30  strategy .20  speed .15
    scenario_challenge   reasoning .25  decision_making .25  empathy .20  creativity .15  communication .15
    ai_debate            reasoning .30  holistic_analysis .30  cognitive_agility .25  communication .15
    creative_uses        creativity .70  speed .30
"""

from typing import Dict

from neurazor.models.configs import (
    AccuracySettings,
    BlendSettings,
    CardFlipConfig,
    CardFlipWeights,
    CreativeUsesConfig,
    CreativeUsesWeights,
    CreativityBlendSettings,
    DebateModeConfig,
    DebateModeWeights,
    FaceNameMatchConfig,
    FaceNameMatchWeights,
    FalsePositivePenaltySettings,
    FlipReasoningSettings,
    GameConfigBase,
    IncorrectPenaltySettings,
    MentalMathConfig,
    MentalMathWeights,
    RateMultiplierSettings,
    ScenarioChallengeConfig,
    ScenarioChallengeWeights,
    SignSudokuConfig,
    SignSudokuWeights,
    StaminaSettings,
    StroopTestConfig,
    StroopWeights,
    SudokuSpeedSettings,
    TimeMultiplierSettings,
)
from neurazor.models.enumerations import AccuracyMode, GameKind


SCENARIO_PROMPT = """Evaluate the user's response to this scenario on a scale of 0-100 for each competency:
- Reasoning: Logical thinking and problem-solving ability
- Decision Making: Quality of choices and considerations
- Empathy: Understanding of emotional and social factors
- Creativity: Novel and innovative approaches
- Communication: Clarity and effectiveness of expression

Return scores as JSON: { reasoning: X, decisionMaking: X, empathy: X, creativity: X, communication: X }"""

DEBATE_PROMPT = """Evaluate the user's debate performance on a scale of 0-100 for each competency:
- Reasoning: Logic, evidence, and argumentation quality
- Holistic Analysis: Ability to see multiple perspectives and implications
- Cognitive Agility: Adapting to counterarguments and thinking on feet
- Communication: Clarity, persuasiveness, and articulation

Return scores as JSON: { reasoning: X, holisticAnalysis: X, cognitiveAgility: X, communication: X }"""

CREATIVE_USES_PROMPT = """Evaluate the user's creative uses on a scale of 0-100:
- Originality: How unique and novel are the uses?
- Diversity: How varied are the categories of uses?
- Valid Uses: Count of uses that are actually valid and practical

Return scores as JSON: { originality: X, diversity: X, validUses: X }"""


DEFAULT_CONFIGS: Dict[GameKind, GameConfigBase] = {
    GameKind.MENTAL_MATH: MentalMathConfig(
        weights=MentalMathWeights(
            accuracy=0.35,
            speed=0.25,
            quantitative_aptitude=0.25,
            mental_stamina=0.15,
        ),
        accuracy=AccuracySettings(mode=AccuracyMode.GRADED),
        quantitative_aptitude=BlendSettings(w_accuracy=0.6, w_speed=0.4),
        mental_stamina=StaminaSettings(w_speed=0.5, ops_multiplier=50),
    ),
    GameKind.STROOP_TEST: StroopTestConfig(
        weights=StroopWeights(
            cognitive_flex=0.3,
            cognitive_agility=0.3,
            accuracy=0.25,
            speed=0.15,
        ),
        speed=TimeMultiplierSettings(time_multiplier=100),
        cognitive_agility=BlendSettings(w_accuracy=0.6, w_speed=0.4),
    ),
    GameKind.SIGN_SUDOKU: SignSudokuConfig(
        weights=SignSudokuWeights(
            accuracy=0.3,
            reasoning=0.25,
            attention_to_detail=0.2,
            speed=0.15,
            math=0.1,
        ),
        accuracy=IncorrectPenaltySettings(incorrect_penalty=10),
        speed=SudokuSpeedSettings(time_left_weight=50, avg_time_weight=50),
    ),
    GameKind.FACE_NAME_MATCH: FaceNameMatchConfig(
        weights=FaceNameMatchWeights(memory=0.5, accuracy=0.3, speed=0.2),
        accuracy=FalsePositivePenaltySettings(false_positive_penalty=15),
        speed=TimeMultiplierSettings(time_multiplier=100),
    ),
    GameKind.CARD_FLIP: CardFlipConfig(
        weights=CardFlipWeights(
            pattern_recognition=0.35,
            reasoning=0.3,
            strategy=0.2,
            speed=0.15,
        ),
        reasoning=FlipReasoningSettings(w_flips=0.7, w_pattern_recognition=0.3),
    ),
    GameKind.SCENARIO_CHALLENGE: ScenarioChallengeConfig(
        weights=ScenarioChallengeWeights(
            reasoning=0.25,
            decision_making=0.25,
            empathy=0.2,
            creativity=0.15,
            communication=0.15,
        ),
        ai_prompt=SCENARIO_PROMPT,
    ),
    GameKind.DEBATE_MODE: DebateModeConfig(
        weights=DebateModeWeights(
            reasoning=0.3,
            holistic_analysis=0.3,
            cognitive_agility=0.25,
            communication=0.15,
        ),
        ai_prompt=DEBATE_PROMPT,
    ),
    GameKind.CREATIVE_USES: CreativeUsesConfig(
        weights=CreativeUsesWeights(creativity=0.7, speed=0.3),
        creativity=CreativityBlendSettings(w_originality=0.6, w_diversity=0.4),
        speed=RateMultiplierSettings(multiplier=10),
        ai_prompt=CREATIVE_USES_PROMPT,
    ),
}


def default_config(game_kind: GameKind) -> GameConfigBase:
    """Fresh deep copy of the built-in configuration for a game kind."""
    return DEFAULT_CONFIGS[GameKind(game_kind)].model_copy(deep=True)
