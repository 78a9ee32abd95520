"""
Version Registry
neurazor/scoring/version_registry.py

Append-only history of saved scoring configurations per game kind, with a
single active marker. Storage is delegated to a ScoringPersistence
collaborator; the registry checks the "exactly one active version" invariant
on every read of the active marker and after every write.

Failures raised by the collaborator propagate unmodified; nothing is retried.
"""

import structlog
from typing import Callable, List, Optional

from neurazor.config import settings
from neurazor.core.exceptions import (
    ActiveVersionInvariantException,
    NoActiveVersionException,
    VersionNotFoundException,
)
from neurazor.models.configs import GameConfigBase
from neurazor.models.enumerations import GameKind, VersionOrder
from neurazor.models.versions import ScoringVersion
from neurazor.repositories.base import ScoringPersistence
from neurazor.services.cache import TTL_ACTIVE_VERSION, active_version_key
from neurazor.services.redis_cache import RedisCache

logger = structlog.get_logger(__name__)


class VersionRegistry:
    """Saved scoring versions per game kind."""

    def __init__(
        self,
        persistence: ScoringPersistence,
        cache: Optional[RedisCache] = None,
        cache_ttl: int = TTL_ACTIVE_VERSION,
    ):
        self.persistence = persistence
        self.cache = cache
        self.cache_ttl = cache_ttl

    # ------------------------------------------------------------------
    # writes
    # ------------------------------------------------------------------

    def save(
        self,
        game_kind: GameKind,
        config: GameConfigBase,
        description: Optional[str] = None,
        actor_id: Optional[str] = None,
    ) -> ScoringVersion:
        """
        Append a new version for ``game_kind`` and make it the active one.

        Args:
            game_kind: Game kind the config belongs to
            config: Configuration snapshot to store
            description: Operator note
            actor_id: Who saved it, defaults to settings.DEFAULT_ACTOR_ID

        Returns:
            The new, active ScoringVersion
        """
        game_kind = GameKind(game_kind)
        version = self.persistence.save_version(
            game_kind,
            config,
            description,
            actor_id or settings.DEFAULT_ACTOR_ID,
        )
        self._invalidate(game_kind)
        self._require_single_active(game_kind, self.persistence.list_versions(game_kind))

        logger.info(
            "scoring_version_saved",
            game_kind=game_kind.value,
            version_name=version.version_name,
            created_by=version.created_by,
            weights=config.weight_map(),
        )
        return version

    def set_active(self, game_kind: GameKind, version_name: str) -> ScoringVersion:
        """
        Make an existing version the active one (rollback). Its config is
        not touched.

        Raises:
            VersionNotFoundException: ``version_name`` unknown for ``game_kind``
        """
        game_kind = GameKind(game_kind)
        versions = self.persistence.list_versions(game_kind)
        if not any(v.version_name == version_name for v in versions):
            raise VersionNotFoundException(game_kind.value, version_name)

        activated = self.persistence.set_active_version(game_kind, version_name)
        self._invalidate(game_kind)
        self._require_single_active(game_kind, self.persistence.list_versions(game_kind))

        logger.info("scoring_version_activated", game_kind=game_kind.value, version_name=version_name)
        return activated

    # ------------------------------------------------------------------
    # reads
    # ------------------------------------------------------------------

    def list_versions(
        self,
        game_kind: GameKind,
        order: VersionOrder = VersionOrder.CREATED,
        name_order: Optional[Callable[[List[str]], List[str]]] = None,
    ) -> List[ScoringVersion]:
        """
        Versions of a game kind.

        Args:
            order: CREATED (insertion order, default) or NAME
            name_order: Ordering policy for NAME, defaults to lexical

        Returns:
            List of ScoringVersion
        """
        versions = self.persistence.list_versions(GameKind(game_kind))
        if VersionOrder(order) == VersionOrder.NAME:
            if name_order is None:
                return sorted(versions, key=lambda v: v.version_name)
            by_name = {v.version_name: v for v in versions}
            return [by_name[name] for name in name_order(list(by_name))]
        return versions

    def get_version(self, game_kind: GameKind, version_name: str) -> ScoringVersion:
        game_kind = GameKind(game_kind)
        for version in self.persistence.list_versions(game_kind):
            if version.version_name == version_name:
                return version
        raise VersionNotFoundException(game_kind.value, version_name)

    def get_active(self, game_kind: GameKind) -> ScoringVersion:
        """
        The active version of a game kind.

        Raises:
            NoActiveVersionException: nothing saved yet for ``game_kind``
            ActiveVersionInvariantException: zero or several active versions
        """
        game_kind = GameKind(game_kind)
        cached = self._cache_get(game_kind)
        if cached is not None:
            return cached

        versions = self.persistence.list_versions(game_kind)
        if not versions:
            raise NoActiveVersionException(game_kind.value)
        active = self._require_single_active(game_kind, versions)

        self._cache_set(game_kind, active)
        return active

    def get_active_config(self, game_kind: GameKind) -> GameConfigBase:
        return self.get_active(game_kind).config.model_copy(deep=True)

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    def _require_single_active(
        self,
        game_kind: GameKind,
        versions: List[ScoringVersion],
    ) -> ScoringVersion:
        active = [v for v in versions if v.is_active]
        if len(active) != 1:
            logger.error(
                "active_version_invariant_violated",
                game_kind=game_kind.value,
                active_versions=[v.version_name for v in active],
            )
            raise ActiveVersionInvariantException(game_kind.value, len(active))
        return active[0]

    def _cache_get(self, game_kind: GameKind) -> Optional[ScoringVersion]:
        if self.cache is None:
            return None
        try:
            return self.cache.get(active_version_key(game_kind), ScoringVersion)
        except Exception as e:
            logger.warning("active_version_cache_read_failed", game_kind=game_kind.value, error=str(e))
            return None

    def _cache_set(self, game_kind: GameKind, version: ScoringVersion) -> None:
        if self.cache is None:
            return
        try:
            self.cache.set(active_version_key(game_kind), version, self.cache_ttl)
        except Exception as e:
            logger.warning("active_version_cache_write_failed", game_kind=game_kind.value, error=str(e))

    def _invalidate(self, game_kind: GameKind) -> None:
        if self.cache is None:
            return
        try:
            self.cache.delete(active_version_key(game_kind))
        except Exception as e:
            logger.warning("active_version_cache_invalidation_failed", game_kind=game_kind.value, error=str(e))
