"""
In-Memory Scoring Repository - NeuRazor Scoring Engine
neurazor/repositories/memory_repository.py

Process-local ScoringPersistence backend. Versions are append-only; the
active-marker flip happens under a lock so no reader ever sees zero or two
active versions for a game kind.
"""

import logging
import threading
from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from neurazor.core.exceptions import NoActiveVersionException, VersionNotFoundException
from neurazor.models.configs import GameConfigBase
from neurazor.models.enumerations import GameKind
from neurazor.models.results import GameResult
from neurazor.models.versions import ScoringVersion
from neurazor.repositories.base import BaseScoringRepository

logger = logging.getLogger(__name__)


class InMemoryScoringRepository(BaseScoringRepository):
    """Repository for scoring versions and session results held in memory."""

    def __init__(self):
        self._lock = threading.RLock()
        self._versions: Dict[GameKind, List[ScoringVersion]] = defaultdict(list)
        self._results: Dict[GameKind, List[Tuple[Optional[str], GameResult]]] = defaultdict(list)

    # =====================================================================
    # scoring versions
    # =====================================================================

    def fetch_active_config(self, game_kind: GameKind) -> GameConfigBase:
        game_kind = GameKind(game_kind)
        with self._lock:
            for version in self._versions[game_kind]:
                if version.is_active:
                    return version.config.model_copy(deep=True)
        raise NoActiveVersionException(game_kind.value)

    def save_version(
        self,
        game_kind: GameKind,
        config: GameConfigBase,
        description: Optional[str],
        actor_id: str,
    ) -> ScoringVersion:
        game_kind = GameKind(game_kind)
        with self._lock:
            versions = self._versions[game_kind]
            version = ScoringVersion(
                version_name=self.next_version_name(v.version_name for v in versions),
                game_kind=game_kind,
                description=description,
                config=config.model_copy(deep=True),
                created_at=datetime.now(timezone.utc),
                created_by=actor_id,
                is_active=True,
            )
            self._versions[game_kind] = [
                v.model_copy(update={"is_active": False}) for v in versions
            ] + [version]

        logger.info(f"Saved scoring version {version.version_name} for {game_kind.value}")
        return version.model_copy(deep=True)

    def list_versions(self, game_kind: GameKind) -> List[ScoringVersion]:
        with self._lock:
            return [v.model_copy(deep=True) for v in self._versions[GameKind(game_kind)]]

    def set_active_version(self, game_kind: GameKind, version_name: str) -> ScoringVersion:
        game_kind = GameKind(game_kind)
        with self._lock:
            versions = self._versions[game_kind]
            if not any(v.version_name == version_name for v in versions):
                raise VersionNotFoundException(game_kind.value, version_name)
            self._versions[game_kind] = [
                v.model_copy(update={"is_active": v.version_name == version_name})
                for v in versions
            ]
            activated = next(v for v in self._versions[game_kind] if v.is_active)

        logger.info(f"Activated scoring version {version_name} for {game_kind.value}")
        return activated.model_copy(deep=True)

    # =====================================================================
    # session results
    # =====================================================================

    def save_result(
        self,
        game_kind: GameKind,
        result: GameResult,
        user_id: Optional[str] = None,
    ) -> GameResult:
        with self._lock:
            self._results[GameKind(game_kind)].append((user_id, result))
        return result

    def fetch_result_history(
        self,
        game_kind: GameKind,
        user_id: Optional[str] = None,
    ) -> List[GameResult]:
        with self._lock:
            rows = list(self._results[GameKind(game_kind)])
        results = [r for uid, r in rows if user_id is None or uid == user_id]
        return sorted(results, key=lambda r: r.timestamp, reverse=True)

    def clear(self) -> None:
        """Drop every stored version and result."""
        with self._lock:
            self._versions.clear()
            self._results.clear()
