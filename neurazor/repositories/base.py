"""
Base Repository - NeuRazor Scoring Engine
neurazor/repositories/base.py

Contract of the persistence collaborator consumed by the version registry
and the scoring service, plus shared helpers for implementations.

Any method may fail with a transport/storage error of the backend; the core
lets it propagate unmodified and never retries.
"""

import re
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from neurazor.config import settings
from neurazor.models.configs import GameConfigBase
from neurazor.models.enumerations import GameKind
from neurazor.models.results import GameResult
from neurazor.models.versions import ScoringVersion


class ScoringPersistence(ABC):
    """Storage of scoring versions and completed sessions."""

    @abstractmethod
    def fetch_active_config(self, game_kind: GameKind) -> GameConfigBase:
        """Config of the active version. Raises NoActiveVersionException if none."""

    @abstractmethod
    def save_version(
        self,
        game_kind: GameKind,
        config: GameConfigBase,
        description: Optional[str],
        actor_id: str,
    ) -> ScoringVersion:
        """
        Append a new version and make it the only active one.

        The deactivation of the previous version and the activation of the
        new one must be observed as a single transition.
        """

    @abstractmethod
    def list_versions(self, game_kind: GameKind) -> List[ScoringVersion]:
        """All versions of a game kind, creation time ascending."""

    @abstractmethod
    def set_active_version(self, game_kind: GameKind, version_name: str) -> ScoringVersion:
        """Flip the active marker. Raises VersionNotFoundException for unknown names."""

    @abstractmethod
    def fetch_result_history(
        self,
        game_kind: GameKind,
        user_id: Optional[str] = None,
    ) -> List[GameResult]:
        """Completed sessions, most recent first, tagged with their scoring version."""

    @abstractmethod
    def save_result(
        self,
        game_kind: GameKind,
        result: GameResult,
        user_id: Optional[str] = None,
    ) -> GameResult:
        """Record a completed session."""


class BaseScoringRepository(ScoringPersistence):
    """Helpers shared by ScoringPersistence implementations."""

    def next_version_name(self, existing: Iterable[str], prefix: Optional[str] = None) -> str:
        """
        Next sequential version name for a game kind.

        Formula: prefix + (max numeric suffix among existing names + 1)
        e.g. ["V1", "V2", "V10"] -> "V11"
        """
        prefix = prefix or settings.VERSION_NAME_PREFIX
        pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
        highest = 0
        for name in existing:
            match = pattern.match(name)
            if match:
                highest = max(highest, int(match.group(1)))
        return f"{prefix}{highest + 1}"
