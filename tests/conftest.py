# tests/conftest.py

"""
Pytest Fixtures - Shared components and sample sessions for the scoring engine

SAMPLE SESSION REFERENCE:
- Mental Math: 4/5 correct, 8% error, 40s of 55s, 5 operations  -> final 58.53
- Stroop:      18/20 correct, 1.2s avg of 3.0s, flex 70
- Sign Sudoku: 8/10 cells, 1 incorrect, 60s of 180s left
"""

import pytest

from neurazor.core.dependencies import (
    get_comparison_engine,
    get_config_store,
    get_scoring_repository,
    get_scoring_service,
    get_version_registry,
)
from neurazor.models.metrics import (
    CardFlipMetrics,
    CreativeUsesScores,
    DebateModeScores,
    FaceNameMatchMetrics,
    MentalMathMetrics,
    ScenarioChallengeScores,
    SignSudokuMetrics,
    StroopMetrics,
)
from neurazor.repositories.memory_repository import InMemoryScoringRepository
from neurazor.scoring.comparison import ComparisonEngine
from neurazor.scoring.config_store import ConfigurationStore
from neurazor.scoring.version_registry import VersionRegistry
from neurazor.services.cache import reset_cache


# =============================================================================
# ISOLATION
# =============================================================================

@pytest.fixture(autouse=True)
def isolate_singletons():
    """Clear cached singletons so no test sees another test's state."""
    reset_cache()
    for getter in (
        get_scoring_repository,
        get_version_registry,
        get_config_store,
        get_comparison_engine,
        get_scoring_service,
    ):
        getter.cache_clear()
    yield
    reset_cache()


# =============================================================================
# COMPONENT FIXTURES
# =============================================================================

@pytest.fixture
def repository():
    """Fresh in-memory persistence backend."""
    return InMemoryScoringRepository()


@pytest.fixture
def registry(repository):
    """Version registry without a Redis cache."""
    return VersionRegistry(repository)


@pytest.fixture
def store(registry):
    return ConfigurationStore(registry)


@pytest.fixture
def engine(registry, repository):
    return ComparisonEngine(registry, repository)


# =============================================================================
# SAMPLE METRICS FIXTURES
# =============================================================================

@pytest.fixture
def mental_math_metrics():
    """Reference Mental Math session (final score 58.53 under defaults)."""
    return MentalMathMetrics(
        correct=4,
        total=5,
        percent_error=8,
        time_taken=40,
        max_time=55,
        num_operations=5,
    )


@pytest.fixture
def mental_math_payload():
    """Same session as the client sends it (camelCase keys)."""
    return {
        "correct": 4,
        "total": 5,
        "percentError": 8,
        "timeTaken": 40,
        "maxTime": 55,
        "numOperations": 5,
    }


@pytest.fixture
def stroop_metrics():
    return StroopMetrics(
        correct=18,
        total=20,
        avg_time=1.2,
        max_time=3.0,
        cognitive_flex_score=70,
    )


@pytest.fixture
def sign_sudoku_metrics():
    return SignSudokuMetrics(
        correct=8,
        incorrect=1,
        empty_cells=10,
        time_left=60,
        total_time=180,
        avg_time_per_correct=9,
        reasoning_score=80,
        attention_score=75,
        math_score=90,
    )


@pytest.fixture
def face_name_metrics():
    return FaceNameMatchMetrics(
        correct=6,
        correct_new=2,
        false_positives=1,
        total_attempts=10,
        avg_time=2.0,
        max_time=5.0,
        memory_score=85,
    )


@pytest.fixture
def card_flip_metrics():
    return CardFlipMetrics(
        min_flips=16,
        actual_flips=20,
        pattern_rec_score=80,
        strategy_score=70,
        speed_score=60,
    )


@pytest.fixture
def scenario_scores():
    return ScenarioChallengeScores(
        reasoning=80,
        decision_making=70,
        empathy=90,
        creativity=60,
        communication=75,
    )


@pytest.fixture
def debate_scores():
    return DebateModeScores(
        reasoning=80,
        holistic_analysis=70,
        cognitive_agility=60,
        communication=90,
    )


@pytest.fixture
def creative_uses_scores():
    return CreativeUsesScores(
        originality=80,
        diversity=60,
        valid_uses=12,
        time_limit=120,
    )
