"""
Configuration Store
neurazor/scoring/config_store.py

Holds the single editable ScoringConfig per game kind. The slot starts as a
copy of the active version's config (or the built-in default when nothing
has been saved) and is replaced wholesale by `update`; the last writer wins.
Saving a version is a separate, explicit step.

Each slot remembers which active version it was taken from. When the active
version changes underneath the store (a rollback, or a save made directly on
the registry) the slot is discarded and re-read on the next `load`.
"""

import structlog
from typing import Dict, List, Optional

from neurazor.core.exceptions import ConfigKindMismatchException, NoActiveVersionException
from neurazor.models.configs import GameConfigBase
from neurazor.models.enumerations import GameKind
from neurazor.models.versions import ScoringVersion, WeightWarning
from neurazor.scoring.defaults import default_config
from neurazor.scoring.version_registry import VersionRegistry
from neurazor.scoring.weights import validate_weights

logger = structlog.get_logger(__name__)


class ConfigurationStore:
    """Current, editable scoring configuration per game kind."""

    def __init__(self, registry: Optional[VersionRegistry] = None):
        self.registry = registry
        self._current: Dict[GameKind, GameConfigBase] = {}
        # game kind -> name of the active version the slot belongs to
        self._loaded_from: Dict[GameKind, Optional[str]] = {}

    def load(self, game_kind: GameKind) -> GameConfigBase:
        """
        Current config of a game kind.

        Returns the in-memory slot while the active version is unchanged,
        otherwise the config of the active version, otherwise the built-in
        default. The caller receives a copy; edits only take effect through
        `update`.
        """
        game_kind = GameKind(game_kind)
        active = self._active_version(game_kind)
        active_name = active.version_name if active else None

        if game_kind in self._current and self._loaded_from.get(game_kind) != active_name:
            logger.info(
                "scoring_config_active_version_changed",
                game_kind=game_kind.value,
                loaded_from=self._loaded_from.get(game_kind),
                active_version=active_name,
            )
            self._current.pop(game_kind)

        if game_kind not in self._current:
            if active is None:
                logger.info("scoring_config_default_used", game_kind=game_kind.value)
                self._current[game_kind] = default_config(game_kind)
            else:
                self._current[game_kind] = active.config.model_copy(deep=True)
            self._loaded_from[game_kind] = active_name

        return self._current[game_kind].model_copy(deep=True)

    def loaded_from(self, game_kind: GameKind) -> Optional[str]:
        """Name of the active version the current slot belongs to (None for defaults)."""
        game_kind = GameKind(game_kind)
        self.load(game_kind)
        return self._loaded_from.get(game_kind)

    def update(self, game_kind: GameKind, new_config: GameConfigBase) -> GameConfigBase:
        """
        Replace the current config. Does not create a scoring version.

        Raises:
            ConfigKindMismatchException: ``new_config`` is for another game kind
        """
        game_kind = GameKind(game_kind)
        if new_config.game_kind != game_kind:
            raise ConfigKindMismatchException(game_kind.value, new_config.game_kind.value)

        self._set_slot(game_kind, new_config.model_copy(deep=True))
        logger.info("scoring_config_updated", game_kind=game_kind.value, weights=new_config.weight_map())
        return self.load(game_kind)

    def reset(self, game_kind: GameKind) -> GameConfigBase:
        """Restore the built-in default. Saved versions are left untouched."""
        game_kind = GameKind(game_kind)
        self._set_slot(game_kind, default_config(game_kind))
        logger.info("scoring_config_reset", game_kind=game_kind.value)
        return self.load(game_kind)

    def refresh(self, game_kind: GameKind) -> GameConfigBase:
        """Drop in-memory edits and re-read the active version."""
        game_kind = GameKind(game_kind)
        self._current.pop(game_kind, None)
        self._loaded_from.pop(game_kind, None)
        return self.load(game_kind)

    def save(
        self,
        game_kind: GameKind,
        description: Optional[str] = None,
        actor_id: Optional[str] = None,
    ) -> ScoringVersion:
        """
        Persist the current config as a new active version.

        If persistence fails the in-memory config is kept as is; call `save`
        again to retry.
        """
        if self.registry is None:
            raise RuntimeError("ConfigurationStore has no VersionRegistry to save to")
        game_kind = GameKind(game_kind)
        version = self.registry.save(game_kind, self.load(game_kind), description, actor_id)
        self._loaded_from[game_kind] = version.version_name
        return version

    def warnings(self, game_kind: GameKind) -> List[WeightWarning]:
        return validate_weights(self.load(game_kind))

    def _set_slot(self, game_kind: GameKind, config: GameConfigBase) -> None:
        active = self._active_version(game_kind)
        self._current[game_kind] = config
        self._loaded_from[game_kind] = active.version_name if active else None

    def _active_version(self, game_kind: GameKind) -> Optional[ScoringVersion]:
        if self.registry is None:
            return None
        try:
            return self.registry.get_active(game_kind)
        except NoActiveVersionException:
            return None
