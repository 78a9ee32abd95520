"""
Dependencies - NeuRazor Scoring Engine
neurazor/core/dependencies.py

Cached wiring of the scoring engine components.
"""

from functools import lru_cache

from neurazor.repositories.memory_repository import InMemoryScoringRepository
from neurazor.scoring.comparison import ComparisonEngine
from neurazor.scoring.config_store import ConfigurationStore
from neurazor.scoring.version_registry import VersionRegistry
from neurazor.services.cache import get_cache
from neurazor.services.scoring_service import ScoringService


@lru_cache()
def get_scoring_repository() -> InMemoryScoringRepository:
    """Get cached InMemoryScoringRepository instance."""
    return InMemoryScoringRepository()


@lru_cache()
def get_version_registry() -> VersionRegistry:
    """Get cached VersionRegistry instance (Redis-cached when available)."""
    return VersionRegistry(get_scoring_repository(), cache=get_cache())


@lru_cache()
def get_config_store() -> ConfigurationStore:
    """Get cached ConfigurationStore instance."""
    return ConfigurationStore(get_version_registry())


@lru_cache()
def get_comparison_engine() -> ComparisonEngine:
    """Get cached ComparisonEngine instance."""
    return ComparisonEngine(get_version_registry(), get_scoring_repository())


@lru_cache()
def get_scoring_service() -> ScoringService:
    """Get cached ScoringService instance (no judge configured)."""
    return ScoringService(get_config_store(), get_version_registry(), get_scoring_repository())
