from pydantic import BaseModel, ConfigDict, Field, model_validator
from datetime import datetime, timezone
from typing import List, Optional

from neurazor.models.configs import ScoringConfig
from neurazor.models.enumerations import GameKind


class ScoringVersion(BaseModel):
    """
    Named snapshot of one game kind's configuration.
    Exactly one version per game kind is active at a time.
    """

    version_name: str = Field(..., description="Version name, e.g. 'V3'")

    game_kind: GameKind = Field(..., description="Game kind this version configures")

    description: Optional[str] = Field(default=None, description="Operator note for the change")

    config: ScoringConfig = Field(..., description="Configuration snapshot")

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Version creation timestamp (UTC)"
    )

    created_by: str = Field(..., description="Actor who saved the version")

    is_active: bool = Field(default=False, description="Whether new sessions use this version")

    @model_validator(mode="before")
    @classmethod
    def inject_config_kind(cls, data):
        """Stored config documents may omit the discriminator; take it from the version."""
        if isinstance(data, dict):
            config = data.get("config")
            if isinstance(config, dict):
                config = dict(config)
                if "game_kind" not in config:
                    config["game_kind"] = config.pop("gameKind", data.get("game_kind"))
                if config["game_kind"] is not None:
                    config["game_kind"] = GameKind(config["game_kind"])
                data = {**data, "config": config}
        return data

    @model_validator(mode="after")
    def validate_config_kind(self):
        """Ensure the snapshot belongs to the version's game kind."""
        if self.config.game_kind != self.game_kind:
            raise ValueError(
                f"config is for {self.config.game_kind.value}, version is for {self.game_kind.value}"
            )
        return self

    def weight_map(self):
        return self.config.weight_map()


class VersionChange(BaseModel):
    """A competency weight that differs between two versions."""

    model_config = ConfigDict(frozen=True)

    competency: str
    old_weight: float
    new_weight: float
    diff: float


class CompetencyImpact(BaseModel):
    """Weighted-score movement of one changed competency between two sessions."""

    model_config = ConfigDict(frozen=True)

    competency: str
    impact: float
    change: float


class ImpactReport(BaseModel):
    total_diff: float
    per_competency_impact: List[CompetencyImpact] = Field(default_factory=list)


class VersionComparison(BaseModel):
    """Weight changes and score impact across the sessions selected for comparison."""

    game_kind: GameKind
    session_ids: List[str]
    versions: List[str]
    changes: List[VersionChange]
    impact: ImpactReport


class HistorySummary(BaseModel):
    best: float
    latest: float
    average: float
    total: int


class WeightWarning(BaseModel):
    """Non-blocking notice about a weight set (never enforced)."""

    game_kind: GameKind
    total: float
    message: str
