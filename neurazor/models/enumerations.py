from enum import Enum

class GameKind(str, Enum):
    MENTAL_MATH = "mental_math_sprint"       # Arithmetic speed
    STROOP_TEST = "stroop_test"              # Color/word interference
    SIGN_SUDOKU = "sign_sudoku"              # Constraint-grid puzzle
    FACE_NAME_MATCH = "face_name_match"      # Paired-association memory
    CARD_FLIP = "card_flip_challenge"        # Sequential matching
    SCENARIO_CHALLENGE = "scenario_challenge"  # AI-judged free text
    DEBATE_MODE = "ai_debate"                # AI-judged free text
    CREATIVE_USES = "creative_uses"          # AI-judged free text

class AccuracyMode(str, Enum):
    BINARY = "binary"    # 100 when every item is correct, else 0
    GRADED = "graded"    # 100 - percent error

class VersionOrder(str, Enum):
    CREATED = "created"
    NAME = "name"


AI_JUDGED_KINDS = frozenset({
    GameKind.SCENARIO_CHALLENGE,
    GameKind.DEBATE_MODE,
    GameKind.CREATIVE_USES,
})

# game_kind -> (game_id, display name)
GAME_IDENTITIES = {
    GameKind.MENTAL_MATH: ("mental-math", "Mental Math Sprint"),
    GameKind.STROOP_TEST: ("stroop-test", "Stroop Test"),
    GameKind.SIGN_SUDOKU: ("sign-sudoku", "Sign Sudoku"),
    GameKind.FACE_NAME_MATCH: ("face-name-match", "Face-Name Match"),
    GameKind.CARD_FLIP: ("card-flip", "Card Flip Challenge"),
    GameKind.SCENARIO_CHALLENGE: ("scenario-challenge", "Scenario Challenge"),
    GameKind.DEBATE_MODE: ("debate-mode", "Debate Mode"),
    GameKind.CREATIVE_USES: ("creative-uses", "Creative Uses"),
}
