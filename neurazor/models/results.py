from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from uuid import uuid4
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from neurazor.scoring.utils import clamp


class CompetencyScore(BaseModel):
    """
    One weighted competency of a game result.

    ``score`` is clamped to [0, 100] on construction; ``weighted_score`` is
    always derived from ``score`` and ``weight``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Competency name, matches the config weights key")
    score: float = Field(..., description="Competency score clamped to [0, 100]")
    weight: float = Field(..., description="Operator-assigned weight (not range checked)")

    @field_validator("score", mode="after")
    @classmethod
    def clamp_score(cls, v: float) -> float:
        return clamp(v)

    @computed_field
    @property
    def weighted_score(self) -> float:
        return self.score * self.weight


class GameResult(BaseModel):
    """
    Outcome of one completed game session. Immutable once created.
    """

    model_config = ConfigDict(frozen=True)

    session_id: str = Field(
        default_factory=lambda: str(uuid4()),
        description="Unique session identifier"
    )

    game_id: str = Field(..., description="Game identifier, e.g. 'mental-math'")

    game_name: str = Field(..., description="Display name of the game")

    difficulty: Optional[str] = Field(default=None, description="Difficulty label, e.g. 'easy'")

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Result creation timestamp (UTC)"
    )

    final_score: float = Field(..., ge=0, le=100, description="Clamped sum of weighted scores")

    competencies: Tuple[CompetencyScore, ...] = Field(
        default=(),
        description="Competencies in display order"
    )

    raw_data: Dict[str, Any] = Field(default_factory=dict, description="Raw metrics of the session")

    version_name: Optional[str] = Field(
        default=None,
        description="Scoring version active when the result was captured"
    )

    def competency(self, name: str) -> Optional[CompetencyScore]:
        """Look a competency up by name."""
        for comp in self.competencies:
            if comp.name == name:
                return comp
        return None

    def with_version(self, version_name: Optional[str]) -> "GameResult":
        """Copy of this result tagged with a scoring version."""
        return self.model_copy(update={"version_name": version_name})
